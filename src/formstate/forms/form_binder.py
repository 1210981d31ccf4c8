"""
Qt Renderer for FormEngine.

FormBinder wires adapter widgets to an engine's handlers:
- change signal → commit_change (set_field for BooleanValued widgets)
- blur signal → revalidate
- submit button → submit

After every engine call it pushes the snapshot back into the widgets
(values with signals blocked, errors through set_error).
"""

import logging
from typing import Dict, Optional

from PyQt6.QtCore import QObject, pyqtSignal
from PyQt6.QtWidgets import QAbstractButton, QWidget

from formstate.core.debounce_timer import DebounceTimer
from formstate.core.engine import FormEngine, SubmitOutcome
from formstate.protocols.widget_protocols import (
    BlurSignalEmitter,
    BooleanValued,
    ChangeSignalEmitter,
    ErrorDisplayCapable,
    ValueGettable,
    ValueSettable,
)
from formstate.services.signal_service import SignalService

logger = logging.getLogger(__name__)


class FormBinder(QObject):
    """Binds Qt widgets to one FormEngine for the lifetime of a form session."""

    validated = pyqtSignal(bool)
    submit_finished = pyqtSignal(bool)

    def __init__(self, engine: FormEngine, parent: Optional[QObject] = None):
        super().__init__(parent)
        self.engine = engine
        self.widgets: Dict[str, QWidget] = {}
        self._handlers = engine.handlers()
        self._debounce: Optional[DebounceTimer] = None

        delay = engine.config.revalidate_debounce_ms
        if delay is not None:
            self._debounce = DebounceTimer(delay_ms=delay, handler=self.revalidate)

    def bind_field(self, name: str, widget: QWidget) -> QWidget:
        """Bind one widget to field ``name`` and show the field's current value."""
        self.engine.require_field(name)
        if not (isinstance(widget, ValueGettable) and isinstance(widget, ChangeSignalEmitter)):
            raise TypeError(
                f"{type(widget).__name__} must implement ValueGettable and ChangeSignalEmitter"
            )
        if name in self.widgets:
            raise ValueError(f"Field {name!r} is already bound")

        self.widgets[name] = widget

        if isinstance(widget, BooleanValued):
            widget.connect_change_signal(lambda value, n=name: self._on_toggle(n, value))
        else:
            widget.connect_change_signal(lambda value, n=name: self._on_change(n, value))

        if isinstance(widget, BlurSignalEmitter):
            widget.connect_blur_signal(self.revalidate)

        if isinstance(widget, ValueSettable):
            SignalService.update_widget_value(widget, self.engine.values[name])

        logger.debug(f"Bound {type(widget).__name__} to field {name!r}")
        return widget

    def bind_submit(self, button: QAbstractButton) -> None:
        button.clicked.connect(lambda _checked=False: self.submit())

    # ========== EVENT HANDLERS ==========

    def _on_change(self, name: str, value) -> None:
        self._handlers.commit_change(name, value)
        if self._debounce is not None:
            self._debounce.trigger()

    def _on_toggle(self, name: str, value) -> None:
        self._handlers.set_field(name, bool(value))

    def revalidate(self) -> bool:
        if self._debounce is not None:
            self._debounce.cancel()
        ok = self._handlers.revalidate()
        self.refresh()
        self.validated.emit(ok)
        return ok

    def submit(self) -> SubmitOutcome:
        if self._debounce is not None:
            self._debounce.cancel()
        outcome = self._handlers.submit()
        self.refresh()
        self.submit_finished.emit(outcome.submitted)
        return outcome

    # ========== RENDER ==========

    def refresh(self) -> None:
        """Push the engine snapshot into every bound widget."""
        snapshot = self.engine.snapshot()
        style = self.engine.config.error_style
        for name, widget in self.widgets.items():
            if isinstance(widget, ValueSettable) and isinstance(widget, ValueGettable):
                if widget.get_value() != snapshot.values[name]:
                    SignalService.update_widget_value(widget, snapshot.values[name])
            if isinstance(widget, ErrorDisplayCapable):
                widget.set_error(snapshot.error_for(name), style)
