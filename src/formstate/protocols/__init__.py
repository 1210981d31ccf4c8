"""
Configuration and widget protocol definitions.

ABC-based widget contracts for Renderers, plus the global FormStateConfig.
Qt adapters are imported on demand so the engine never requires PyQt6.
"""

from __future__ import annotations

import importlib

from .widget_protocols import (
    ValueGettable,
    ValueSettable,
    ChangeSignalEmitter,
    BlurSignalEmitter,
    ErrorDisplayCapable,
    BooleanValued,
)
from .form_config import FormStateConfig, set_form_config, get_form_config

_ADAPTERS = {
    "LineEditAdapter",
    "CheckBoxAdapter",
    "ComboBoxAdapter",
    "PyQtWidgetMeta",
}


def __getattr__(name: str):
    if name in _ADAPTERS:
        module = importlib.import_module("formstate.protocols.widget_adapters")
        value = getattr(module, name)
        globals()[name] = value
        return value
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "ValueGettable",
    "ValueSettable",
    "ChangeSignalEmitter",
    "BlurSignalEmitter",
    "ErrorDisplayCapable",
    "BooleanValued",
    "FormStateConfig",
    "set_form_config",
    "get_form_config",
    *sorted(_ADAPTERS),
]
