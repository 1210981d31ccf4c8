"""
Pure validation pass.

run_validation() evaluates every declared field once and returns a complete
new error map. It takes the previous error map only as the starting point to
overwrite; neither input is mutated.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Optional
import logging

from formstate.core.exceptions import InvalidOutcomeError
from formstate.core.outcome import (
    VALID,
    Errors,
    FieldDescriptor,
    Invalid,
    Valid,
    ValidationOutcome,
    ValidationRegistry,
    Validator,
    Values,
    error_map,
)
from formstate.services.error_fold_service import ErrorFoldService

logger = logging.getLogger(__name__)

_fold_service = ErrorFoldService()


@dataclass(frozen=True)
class ValidationPass:
    """Result of one validation pass over all declared fields."""
    ok: bool
    errors: Mapping[str, str]
    failed: tuple = field(default_factory=tuple)

    def __bool__(self) -> bool:
        return self.ok


def evaluate(validator: Optional[Validator], value: Any, catch_exceptions: bool = True) -> ValidationOutcome:
    """Run one validator and normalize its signal to Valid or Invalid.

    None (no validator, or a validator returning None) counts as Valid. When
    ``catch_exceptions`` is set, a raising validator yields Invalid(str(exc))
    and any other return value yields Invalid as well.
    """
    if validator is None:
        return VALID

    try:
        result = validator(value)
    except Exception as e:
        if not catch_exceptions:
            raise
        logger.debug(f"Validator raised {type(e).__name__}: {e}")
        return Invalid(str(e))

    if result is None:
        return VALID
    if isinstance(result, (Valid, Invalid)):
        return result
    message = (
        f"Validator {getattr(validator, '__name__', validator)!r} returned "
        f"{type(result).__name__}; expected Valid, Invalid or None"
    )
    if not catch_exceptions:
        raise InvalidOutcomeError(message)
    logger.warning(message)
    return Invalid(message)


def run_validation(
    values: Values,
    registry: ValidationRegistry,
    fields: Iterable[FieldDescriptor],
    previous_errors: Optional[Errors] = None,
    catch_exceptions: bool = True,
) -> ValidationPass:
    """Evaluate every field in ``fields`` order and fold outcomes into one error map."""
    fields = tuple(fields)
    names = {descriptor.name for descriptor in fields}

    errors = {name: message for name, message in error_map(previous_errors or {}).items()
              if name in names}
    failed: set = set()

    for descriptor in fields:
        name = descriptor.name
        outcome = evaluate(registry.get(name), values.get(name), catch_exceptions)
        _fold_service.fold(outcome, name, errors, failed)

    ordered_failed = tuple(d.name for d in fields if d.name in failed)
    if ordered_failed:
        logger.debug(f"Validation pass failed for {list(ordered_failed)}")
    return ValidationPass(
        ok=not ordered_failed,
        errors=MappingProxyType(errors),
        failed=ordered_failed,
    )
