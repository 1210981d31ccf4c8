"""
Validation outcome types and form data aliases.

A validator maps a single field value to one of two outcomes:
- Valid: the field has no error
- Invalid(message): the field failed with a user-facing message

Outcomes are plain values, so the engine switches on them instead of
catching exceptions.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Mapping, Optional, Union


@dataclass(frozen=True)
class Valid:
    """Outcome signalling that a field passed validation."""

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True)
class Invalid:
    """Outcome signalling that a field failed validation."""
    message: str

    def __bool__(self) -> bool:
        return False


VALID = Valid()

ValidationOutcome = Union[Valid, Invalid]
Validator = Callable[[Any], Optional[ValidationOutcome]]

Values = Mapping[str, Any]
Errors = Mapping[str, Optional[str]]
ValidationRegistry = Mapping[str, Validator]


@dataclass(frozen=True)
class FieldDescriptor:
    """One declared form field. Order of descriptors is the iteration order."""
    name: str
    label: Optional[str] = None

    @property
    def display_name(self) -> str:
        return self.label or self.name


def descriptors_from_names(names) -> tuple:
    """Build descriptors from plain field names, preserving order."""
    return tuple(FieldDescriptor(name) for name in names)


def error_map(errors: Errors) -> Dict[str, str]:
    """Normalize an error mapping: drop cleared (None) entries."""
    return {name: message for name, message in errors.items() if message is not None}
