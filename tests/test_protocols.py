"""Tests for widget protocols and adapters."""

import pytest


def test_line_edit_adapter(qapp):
    """LineEditAdapter implements the binding protocols."""
    from formstate.protocols import (
        LineEditAdapter, ValueGettable, ValueSettable, ChangeSignalEmitter, BlurSignalEmitter,
    )

    adapter = LineEditAdapter()
    assert isinstance(adapter, ValueGettable)
    assert isinstance(adapter, ValueSettable)
    assert isinstance(adapter, ChangeSignalEmitter)
    assert isinstance(adapter, BlurSignalEmitter)

    assert adapter.get_value() == ""
    adapter.set_value("test")
    assert adapter.get_value() == "test"
    adapter.set_value(None)
    assert adapter.get_value() == ""


def test_line_edit_adapter_change_signal(qapp):
    from formstate.protocols import LineEditAdapter

    adapter = LineEditAdapter()
    received = []
    adapter.connect_change_signal(received.append)

    adapter.textEdited.emit("typed")
    adapter.set_value("programmatic")

    assert received == ["typed"]

    adapter.disconnect_change_signal()
    adapter.textEdited.emit("ignored")
    assert received == ["typed"]


def test_check_box_adapter(qapp):
    from formstate.protocols import CheckBoxAdapter, BooleanValued

    adapter = CheckBoxAdapter()
    assert isinstance(adapter, BooleanValued)

    received = []
    adapter.connect_change_signal(received.append)
    adapter.set_value(True)

    assert adapter.get_value() is True
    assert received == [True]

    adapter.set_value(None)
    assert adapter.get_value() is False


def test_combo_box_adapter_enum(qapp):
    from enum import Enum
    from formstate.protocols import ComboBoxAdapter

    class Color(Enum):
        RED = 1
        BLUE = 2

    adapter = ComboBoxAdapter()
    adapter.populate_enum(Color)
    adapter.set_value(Color.BLUE)
    assert adapter.get_value() is Color.BLUE

    adapter.set_value("missing")
    assert adapter.get_value() == ""

    with pytest.raises(TypeError):
        adapter.populate_enum(int)


def test_set_error_round_trip(qapp):
    from formstate.protocols import LineEditAdapter

    adapter = LineEditAdapter()
    adapter.set_error("Required", "border: 1px solid red;")
    assert adapter.error_message() == "Required"
    assert adapter.toolTip() == "Required"

    adapter.set_error(None)
    assert adapter.error_message() is None
    assert adapter.styleSheet() == ""


def test_form_config_defaults():
    from formstate.protocols import FormStateConfig, get_form_config, set_form_config

    assert get_form_config() == FormStateConfig()

    custom = FormStateConfig(max_dispatch_depth=2)
    set_form_config(custom)
    assert get_form_config() is custom
