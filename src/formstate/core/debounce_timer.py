"""Reusable trailing debounce timer."""

from typing import Callable, Optional
from PyQt6.QtCore import QTimer


class DebounceTimer:
    """
    Trailing debounce timer.

    Restarts on each trigger. Handler fires only after delay_ms of inactivity.

    Usage:
        self._debounce = DebounceTimer(delay_ms=300, handler=engine.revalidate)

        def on_text_edited(self, text):
            self._debounce.trigger()
    """

    def __init__(self, delay_ms: int, handler: Callable[[], object]):
        self._delay_ms = delay_ms
        self._handler = handler
        self._timer: Optional[QTimer] = None

    @property
    def pending(self) -> bool:
        return self._timer is not None and self._timer.isActive()

    def trigger(self):
        """Restart the countdown."""
        if self._timer is None:
            self._timer = QTimer()
            self._timer.setSingleShot(True)
            self._timer.timeout.connect(self._fire)
        self._timer.start(self._delay_ms)

    def cancel(self):
        """Cancel pending trigger."""
        if self._timer is not None:
            self._timer.stop()

    def force(self):
        """Cancel timer and fire handler immediately."""
        self.cancel()
        self._fire()

    def _fire(self):
        self._handler()
