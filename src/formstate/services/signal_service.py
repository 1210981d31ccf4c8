"""
Signal Service.

Context managers for widget signal blocking, used when a Renderer pushes
engine state back into widgets so the refresh does not loop back into
commit_change.
"""

from contextlib import contextmanager
from typing import Any, Callable, Optional
from PyQt6.QtWidgets import QWidget
import logging

from formstate.protocols.widget_protocols import ValueSettable

logger = logging.getLogger(__name__)


class SignalService:
    """
    Signal blocking helpers.

    Examples:
        with SignalService.block_signals(line_edit, checkbox):
            line_edit.set_value("x")
            checkbox.set_value(True)

        SignalService.update_widget_value(line_edit, "x")
    """

    @staticmethod
    @contextmanager
    def block_signals(*widgets: QWidget):
        """Block signals on every widget; always unblocks, even on error."""
        previous = []
        for widget in widgets:
            if widget is not None:
                previous.append((widget, widget.blockSignals(True)))
                logger.debug(f"Blocked signals on {type(widget).__name__}")

        try:
            yield
        finally:
            for widget, was_blocked in previous:
                widget.blockSignals(was_blocked)

    @staticmethod
    def update_widget_value(widget: QWidget, value: Any, setter: Optional[Callable] = None) -> None:
        """Update widget value with signals blocked."""
        with SignalService.block_signals(widget):
            if setter:
                setter(widget, value)
            elif isinstance(widget, ValueSettable):
                widget.set_value(value)
            else:
                raise ValueError(
                    f"Cannot set value on {type(widget).__name__}: "
                    f"not ValueSettable and no setter given"
                )
