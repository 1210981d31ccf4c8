"""
Service layer for form engines.

Outcome dispatch, change dispatch and value collection are pure Python.
SignalService needs PyQt6 and is imported on demand.
"""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .outcome_service_abc import OutcomeServiceABC
    from .error_fold_service import ErrorFoldService
    from .field_change_dispatcher import FieldChangeDispatcher, FieldChangeEvent
    from .value_collection_service import ValueCollectionService
    from .signal_service import SignalService

_EXPORTS = {
    "OutcomeServiceABC": ("formstate.services.outcome_service_abc", "OutcomeServiceABC"),
    "ErrorFoldService": ("formstate.services.error_fold_service", "ErrorFoldService"),
    "FieldChangeDispatcher": ("formstate.services.field_change_dispatcher", "FieldChangeDispatcher"),
    "FieldChangeEvent": ("formstate.services.field_change_dispatcher", "FieldChangeEvent"),
    "ValueCollectionService": ("formstate.services.value_collection_service", "ValueCollectionService"),
    "SignalService": ("formstate.services.signal_service", "SignalService"),
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
