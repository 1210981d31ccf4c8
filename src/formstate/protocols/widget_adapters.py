"""
Widget adapters that wrap Qt widgets to implement the binding ABCs.

Normalizes Qt's inconsistent APIs:
- QLineEdit.text() vs QCheckBox.isChecked() vs QComboBox.currentData()
- textChanged vs stateChanged vs currentIndexChanged
- editingFinished as the blur signal for text input

All adapters implement a consistent interface via ABCs:
- get_value() / set_value()
- connect_change_signal() / connect_blur_signal()
- set_error()
"""

from typing import Any, Callable, Optional
from enum import Enum
from abc import ABCMeta

from PyQt6.QtWidgets import QLineEdit, QComboBox, QCheckBox
from PyQt6.QtCore import QObject

from .widget_protocols import (
    ValueGettable, ValueSettable, ChangeSignalEmitter,
    BlurSignalEmitter, ErrorDisplayCapable, BooleanValued,
)

# Order matters: Qt's metaclass first, ABCMeta for the abstract contracts
_QtMetaclass = type(QObject)


class PyQtWidgetMeta(_QtMetaclass, ABCMeta):
    """Metaclass for PyQt widgets that need ABC support."""
    pass


class _ErrorDisplayMixin:
    """Shared set_error(): stylesheet plus tooltip carrying the message."""

    def set_error(self, message: Optional[str], style: str = "") -> None:
        if message is None:
            self.setStyleSheet("")
            self.setToolTip("")
        else:
            self.setStyleSheet(style)
            self.setToolTip(message)
        self._error_message = message

    def error_message(self) -> Optional[str]:
        return getattr(self, "_error_message", None)


class LineEditAdapter(_ErrorDisplayMixin, QLineEdit, ValueGettable, ValueSettable,
                      ChangeSignalEmitter, BlurSignalEmitter, ErrorDisplayCapable,
                      metaclass=PyQtWidgetMeta):
    """
    Adapter for QLineEdit.

    - .text() → .get_value() ("" stays "", so blank optional fields are omitted on submit)
    - .textEdited → .connect_change_signal() (user edits only, not set_value())
    - .editingFinished → .connect_blur_signal()
    """

    def get_value(self) -> Any:
        return self.text()

    def set_value(self, value: Any) -> None:
        self.setText("" if value is None else str(value))

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        self.textEdited.connect(lambda text: callback(text))

    def disconnect_change_signal(self) -> None:
        try:
            self.textEdited.disconnect()
        except TypeError:
            # Signal not connected - ignore
            pass

    def connect_blur_signal(self, callback: Callable[[], None]) -> None:
        self.editingFinished.connect(lambda: callback())


class CheckBoxAdapter(_ErrorDisplayMixin, QCheckBox, ValueGettable, ValueSettable,
                      ChangeSignalEmitter, ErrorDisplayCapable, BooleanValued,
                      metaclass=PyQtWidgetMeta):
    """
    Adapter for QCheckBox.

    Returns bool values, treats None as False.
    """

    def get_value(self) -> Any:
        return self.isChecked()

    def set_value(self, value: Any) -> None:
        self.setChecked(bool(value) if value is not None else False)

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        self.toggled.connect(lambda checked: callback(bool(checked)))

    def disconnect_change_signal(self) -> None:
        try:
            self.toggled.disconnect()
        except TypeError:
            pass


class ComboBoxAdapter(_ErrorDisplayMixin, QComboBox, ValueGettable, ValueSettable,
                      ChangeSignalEmitter, ErrorDisplayCapable,
                      metaclass=PyQtWidgetMeta):
    """
    Adapter for QComboBox.

    Stores actual values in itemData, not just display text.
    """

    def get_value(self) -> Any:
        if self.currentIndex() < 0:
            return ""
        return self.itemData(self.currentIndex())

    def set_value(self, value: Any) -> None:
        for i in range(self.count()):
            if self.itemData(i) == value:
                self.setCurrentIndex(i)
                return
        # Value not found - clear selection
        self.setCurrentIndex(-1)

    def populate_enum(self, enum_type: type) -> None:
        """Populate combobox with enum members as item data."""
        if not isinstance(enum_type, type) or not issubclass(enum_type, Enum):
            raise TypeError(f"{enum_type} is not an Enum type")

        self.clear()
        for enum_value in enum_type:
            self.addItem(enum_value.name, enum_value)

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        self.activated.connect(lambda _index: callback(self.get_value()))

    def disconnect_change_signal(self) -> None:
        try:
            self.activated.disconnect()
        except TypeError:
            pass
