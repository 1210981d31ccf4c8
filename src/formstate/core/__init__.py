"""
Form state and validation core.

Pure Python, no Qt imports: outcome types, the validation pass and FormEngine.
DebounceTimer is Qt-based and only imported on demand.
"""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .engine import FormEngine, FormSnapshot, FormHandlers, SubmitOutcome
    from .validation import ValidationPass, run_validation, evaluate
    from .outcome import Valid, Invalid, VALID, FieldDescriptor
    from .debounce_timer import DebounceTimer

_EXPORTS = {
    "FormEngine": ("formstate.core.engine", "FormEngine"),
    "FormSnapshot": ("formstate.core.engine", "FormSnapshot"),
    "FormHandlers": ("formstate.core.engine", "FormHandlers"),
    "SubmitOutcome": ("formstate.core.engine", "SubmitOutcome"),
    "ValidationPass": ("formstate.core.validation", "ValidationPass"),
    "run_validation": ("formstate.core.validation", "run_validation"),
    "evaluate": ("formstate.core.validation", "evaluate"),
    "Valid": ("formstate.core.outcome", "Valid"),
    "Invalid": ("formstate.core.outcome", "Invalid"),
    "VALID": ("formstate.core.outcome", "VALID"),
    "FieldDescriptor": ("formstate.core.outcome", "FieldDescriptor"),
    "FormStateError": ("formstate.core.exceptions", "FormStateError"),
    "UnknownFieldError": ("formstate.core.exceptions", "UnknownFieldError"),
    "InvalidOutcomeError": ("formstate.core.exceptions", "InvalidOutcomeError"),
    "DispatchDepthError": ("formstate.core.exceptions", "DispatchDepthError"),
    "DebounceTimer": ("formstate.core.debounce_timer", "DebounceTimer"),
}


def __getattr__(name: str):
    if name in _EXPORTS:
        module_name, attr = _EXPORTS[name]
        module = importlib.import_module(module_name)
        value = getattr(module, attr)
        globals()[name] = value
        return value
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = list(_EXPORTS.keys())
