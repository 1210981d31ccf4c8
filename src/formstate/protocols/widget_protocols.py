"""
Widget ABC contracts for Renderers that drive a FormEngine.

Defines explicit contracts a widget must implement to be bound to an engine,
instead of duck typing on Qt signal and accessor names.

Design Philosophy:
- Explicit inheritance over duck typing
- Fail-loud over fail-silent
- Multiple inheritance for composable capabilities
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional


class ValueGettable(ABC):
    """
    ABC for widgets that can return a value.

    All input widgets must implement this to feed commit_change/set_field.
    """

    @abstractmethod
    def get_value(self) -> Any:
        """
        Get the current value from the widget.

        Returns:
            The widget's current value. Text widgets return "" when blank.
        """
        pass


class ValueSettable(ABC):
    """ABC for widgets that can display a value from an engine snapshot."""

    @abstractmethod
    def set_value(self, value: Any) -> None:
        pass


class ChangeSignalEmitter(ABC):
    """
    ABC for widgets that emit change signals.

    Hides the signal name (textChanged vs stateChanged vs currentIndexChanged).
    """

    @abstractmethod
    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """
        Connect callback to widget's change signal.

        Args:
            callback: Function to call when widget value changes.
                     Signature: callback(new_value: Any) -> None
        """
        pass

    @abstractmethod
    def disconnect_change_signal(self) -> None:
        """Disconnect every callback connected through connect_change_signal."""
        pass


class BlurSignalEmitter(ABC):
    """ABC for widgets that report losing focus (or finishing an edit)."""

    @abstractmethod
    def connect_blur_signal(self, callback: Callable[[], None]) -> None:
        pass


class ErrorDisplayCapable(ABC):
    """
    ABC for widgets that can display a field error.

    set_error(None) clears any displayed error.
    """

    @abstractmethod
    def set_error(self, message: Optional[str], style: str = "") -> None:
        pass


class BooleanValued(ABC):
    """
    Marker ABC for toggle widgets.

    Renderers forward their changes through set_field, which skips validation.
    """
