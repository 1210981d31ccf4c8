"""
Value Collection Service.

Builds the data handed to the submit observer. Optional text fields left
blank are omitted rather than submitted as empty strings.
"""

from typing import Any, Dict, Iterable
import logging

from formstate.core.outcome import FieldDescriptor, Values

logger = logging.getLogger(__name__)

EMPTY = ""


class ValueCollectionService:
    """
    Service for collecting submit data from form values.

    Examples:
        ValueCollectionService.collect_submission(
            {"email": "a@b.com", "nickname": ""}, fields
        )
        # -> {"email": "a@b.com"}
    """

    @staticmethod
    def is_empty(value: Any) -> bool:
        """Only the empty string counts as empty. None, False, 0 and "  " are kept."""
        return isinstance(value, str) and value == EMPTY

    @staticmethod
    def collect_submission(
        values: Values,
        fields: Iterable[FieldDescriptor],
        omit_empty: bool = True,
    ) -> Dict[str, Any]:
        """Return a new dict of field values in field order, omitting empty strings."""
        collected: Dict[str, Any] = {}
        for descriptor in fields:
            name = descriptor.name
            value = values[name]
            if omit_empty and ValueCollectionService.is_empty(value):
                logger.debug(f"[ValueCollection] {name}: empty, omitted from submission")
                continue
            collected[name] = value
        return collected

    @staticmethod
    def changed_fields(values: Values, initial: Values) -> Dict[str, Any]:
        """Return the fields whose current value differs from ``initial``."""
        return {name: value for name, value in values.items() if initial.get(name) != value}
