"""
Error Fold Service.

Folds one field's validation outcome into the error map being built for a
validation pass. The map is updated in place, field by field, so clearing one
field's error can never discard an error recorded for another field earlier
in the same pass.
"""

from typing import Dict, Set
import logging

from formstate.core.outcome import Valid, Invalid
from .outcome_service_abc import OutcomeServiceABC

logger = logging.getLogger(__name__)


class ErrorFoldService(OutcomeServiceABC):
    """
    Outcome dispatch into a working error map.

    Examples:
        service = ErrorFoldService()
        errors, failed = {}, set()
        service.fold(Invalid("Required"), "email", errors, failed)
        service.fold(VALID, "age", errors, failed)
        # errors == {"email": "Required"}, failed == {"email"}
    """

    def _get_handler_prefix(self) -> str:
        return '_fold_'

    def fold(self, outcome, name: str, errors: Dict[str, str], failed: Set[str]) -> None:
        """Apply ``outcome`` for field ``name`` to ``errors`` and ``failed``."""
        self.dispatch(outcome, name, errors, failed)

    def _fold_Valid(self, outcome: Valid, name: str, errors: Dict[str, str], failed: Set[str]) -> None:
        if errors.pop(name, None) is not None:
            logger.debug(f"[ErrorFold] {name}: cleared previous error")

    def _fold_Invalid(self, outcome: Invalid, name: str, errors: Dict[str, str], failed: Set[str]) -> None:
        errors[name] = outcome.message
        failed.add(name)
        logger.debug(f"[ErrorFold] {name}: {outcome.message!r}")
