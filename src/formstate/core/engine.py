"""
Form state and validation engine.

FormEngine owns the values and errors of one form session. A Renderer seeds
it with initial data, validators and observers, forwards input events to
commit_change / set_field / revalidate / submit, and reads snapshot() back
for display.

Usage:
    engine = FormEngine(
        {"email": "", "nickname": "", "subscribed": False},
        validations={"email": lambda v: Valid() if v else Invalid("Email is required")},
        on_submit=save,
    )
    engine.commit_change("email", "a@b.com")
    engine.set_field("subscribed", True)
    if engine.submit():
        ...
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional, Sequence, Union

from formstate.core.exceptions import UnknownFieldError
from formstate.core.outcome import (
    FieldDescriptor,
    ValidationRegistry,
    Values,
    descriptors_from_names,
)
from formstate.core.validation import ValidationPass, run_validation
from formstate.protocols.form_config import FormStateConfig, get_form_config
from formstate.services.field_change_dispatcher import FieldChangeDispatcher, FieldChangeEvent
from formstate.services.value_collection_service import ValueCollectionService

logger = logging.getLogger(__name__)


def _noop(_values: Values) -> None:
    pass


@dataclass(frozen=True)
class FormSnapshot:
    """Read-only view of engine state for one render cycle."""
    values: Mapping[str, Any]
    errors: Mapping[str, str]

    def error_for(self, name: str) -> Optional[str]:
        return self.errors.get(name)


@dataclass(frozen=True)
class FormHandlers:
    """Callables a Renderer binds to concrete input widgets."""
    commit_change: Callable[[str, Any], None]
    set_field: Callable[[str, bool], None]
    revalidate: Callable[[], bool]
    submit: Callable[[], 'SubmitOutcome']


@dataclass(frozen=True)
class SubmitOutcome:
    """Result of submit(). Truthy iff the submit observer was invoked."""
    submitted: bool
    data: Optional[Mapping[str, Any]]
    errors: Mapping[str, str]

    def __bool__(self) -> bool:
        return self.submitted


class FormEngine:
    """State and validation for one form session."""

    def __init__(
        self,
        initial_data: Values,
        validations: Optional[ValidationRegistry] = None,
        on_submit: Optional[Callable[[Dict[str, Any]], None]] = None,
        on_change: Optional[Callable[[Values], None]] = None,
        fields: Optional[Sequence[Union[FieldDescriptor, str]]] = None,
        config: Optional[FormStateConfig] = None,
    ):
        self._fields = self._resolve_fields(initial_data, fields)
        self._field_names = frozenset(d.name for d in self._fields)

        missing = [d.name for d in self._fields if d.name not in initial_data]
        extra = [name for name in initial_data if name not in self._field_names]
        if missing or extra:
            raise ValueError(
                f"initial_data must cover exactly the declared fields "
                f"(missing: {missing}, undeclared: {extra})"
            )

        self._validations: Dict[str, Any] = dict(validations or {})
        for name in self._validations:
            self.require_field(name)

        self._config = config
        self._on_submit = on_submit or _noop
        self._on_change = on_change or _noop
        self._initial: Dict[str, Any] = {d.name: initial_data[d.name] for d in self._fields}
        self._values: Dict[str, Any] = dict(self._initial)
        self._errors: Dict[str, str] = {}
        self._dispatch_depth = 0
        self._dispatcher = FieldChangeDispatcher.instance()

        if not self._fields:
            logger.warning("FormEngine created with no fields")
        logger.debug(f"FormEngine created: fields={[d.name for d in self._fields]}, "
                     f"validated={sorted(self._validations)}")

    @staticmethod
    def _resolve_fields(initial_data: Values, fields) -> tuple:
        if fields is None:
            return descriptors_from_names(initial_data.keys())

        resolved = tuple(f if isinstance(f, FieldDescriptor) else FieldDescriptor(f) for f in fields)
        seen = set()
        for descriptor in resolved:
            if descriptor.name in seen:
                raise ValueError(f"Duplicate field name {descriptor.name!r}")
            seen.add(descriptor.name)
        return resolved

    # ========== STATE ACCESS ==========

    @property
    def config(self) -> FormStateConfig:
        return self._config if self._config is not None else get_form_config()

    @property
    def fields(self) -> tuple:
        return self._fields

    @property
    def values(self) -> Mapping[str, Any]:
        return MappingProxyType(self._values)

    @property
    def errors(self) -> Mapping[str, str]:
        return MappingProxyType(self._errors)

    def snapshot(self) -> FormSnapshot:
        """Read-only {values, errors} for the Renderer."""
        return FormSnapshot(values=MappingProxyType(self._values),
                            errors=MappingProxyType(self._errors))

    def handlers(self) -> FormHandlers:
        return FormHandlers(
            commit_change=self.commit_change,
            set_field=self.set_field,
            revalidate=self.revalidate,
            submit=self.submit,
        )

    def require_field(self, name: str) -> None:
        """Raise UnknownFieldError unless ``name`` was declared at construction."""
        if name not in self._field_names:
            raise UnknownFieldError(name, (d.name for d in self._fields))

    def is_dirty(self) -> bool:
        return bool(ValueCollectionService.changed_fields(self._values, self._initial))

    # ========== OPERATIONS ==========

    def commit_change(self, name: str, new_value: Any) -> None:
        """Replace one field's value and notify the change observer with the result."""
        self._dispatcher.dispatch(FieldChangeEvent(name, new_value, self))

    def set_field(self, name: str, bool_value: bool) -> None:
        """Merge a toggle value without validation or change notification."""
        self._dispatcher.dispatch(FieldChangeEvent(name, bool_value, self, notify=False))

    def validate(self, values: Optional[Values] = None) -> bool:
        """Run one validation pass, commit the resulting error map, return pass/fail."""
        result = self._run_pass(self._values if values is None else values)
        return result.ok

    def revalidate(self) -> bool:
        """Blur entry point: validate the current values."""
        return self.validate(self._values)

    def submit(self) -> SubmitOutcome:
        """Validate and, if every field passes, hand filtered values to the submit observer."""
        result = self._run_pass(self._values)
        if not result.ok:
            logger.info(f"Submit blocked by {len(result.failed)} invalid field(s): {list(result.failed)}")
            return SubmitOutcome(submitted=False, data=None, errors=self.errors)

        data = ValueCollectionService.collect_submission(
            self._values, self._fields, omit_empty=self.config.omit_empty_on_submit
        )
        logger.info(f"Submitting {len(data)} field(s)")
        self._on_submit(data)
        return SubmitOutcome(submitted=True, data=MappingProxyType(dict(data)), errors=self.errors)

    def reset(self) -> None:
        """Restore construction-time values and clear all errors."""
        self._values = dict(self._initial)
        self._errors = {}
        logger.debug("FormEngine reset to initial data")

    # ========== INTERNALS ==========

    def _run_pass(self, values: Values) -> ValidationPass:
        result = run_validation(
            values,
            self._validations,
            self._fields,
            previous_errors=self._errors,
            catch_exceptions=self.config.catch_validator_exceptions,
        )
        self._errors = dict(result.errors)
        return result
