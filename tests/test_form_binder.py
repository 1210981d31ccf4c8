"""Tests for the Qt Renderer binding."""

import pytest


@pytest.fixture
def signup_form(qapp, required):
    from formstate import FormEngine
    from formstate.forms import FormBinder
    from formstate.protocols import LineEditAdapter, CheckBoxAdapter

    submitted = []
    engine = FormEngine(
        {"email": "", "nickname": "", "subscribed": False},
        {"email": required},
        on_submit=submitted.append,
    )
    binder = FormBinder(engine)
    widgets = {
        "email": binder.bind_field("email", LineEditAdapter()),
        "nickname": binder.bind_field("nickname", LineEditAdapter()),
        "subscribed": binder.bind_field("subscribed", CheckBoxAdapter()),
    }
    return engine, binder, widgets, submitted


def test_typing_commits_change(signup_form):
    engine, binder, widgets, _ = signup_form

    widgets["email"].textEdited.emit("a@b.com")

    assert engine.values["email"] == "a@b.com"
    assert dict(engine.errors) == {}


def test_checkbox_uses_set_field(signup_form):
    engine, binder, widgets, _ = signup_form

    widgets["subscribed"].setChecked(True)

    assert engine.values["subscribed"] is True
    assert "subscribed" not in engine.errors


def test_blur_revalidates_and_shows_errors(signup_form):
    engine, binder, widgets, _ = signup_form
    results = []
    binder.validated.connect(results.append)

    widgets["email"].editingFinished.emit()

    assert results == [False]
    assert widgets["email"].error_message() == "This field is required"
    assert widgets["nickname"].error_message() is None


def test_submit_button(signup_form):
    from PyQt6.QtWidgets import QPushButton

    engine, binder, widgets, submitted = signup_form
    button = QPushButton("Submit")
    binder.bind_submit(button)
    finished = []
    binder.submit_finished.connect(finished.append)

    button.click()
    assert submitted == []
    assert finished == [False]

    widgets["email"].textEdited.emit("a@b.com")
    widgets["subscribed"].setChecked(True)
    button.click()

    assert submitted == [{"email": "a@b.com", "subscribed": True}]
    assert finished == [False, True]
    assert widgets["email"].error_message() is None


def test_refresh_pushes_values_without_committing(signup_form):
    engine, binder, widgets, _ = signup_form
    received = []
    engine._on_change = received.append

    engine.set_field("subscribed", True)
    engine.validate({"email": "", "nickname": "", "subscribed": True})
    binder.refresh()

    assert widgets["subscribed"].get_value() is True
    assert received == []


def test_bind_field_rejects_bad_bindings(signup_form):
    from PyQt6.QtWidgets import QLabel
    from formstate import UnknownFieldError
    from formstate.protocols import LineEditAdapter

    engine, binder, widgets, _ = signup_form

    with pytest.raises(UnknownFieldError):
        binder.bind_field("missing", LineEditAdapter())
    with pytest.raises(ValueError):
        binder.bind_field("email", LineEditAdapter())
    with pytest.raises(TypeError):
        binder.bind_field("nickname", QLabel())


def test_debounced_revalidation(qapp, required):
    from formstate import FormEngine, FormStateConfig
    from formstate.forms import FormBinder
    from formstate.protocols import LineEditAdapter

    engine = FormEngine(
        {"email": "x"},
        {"email": required},
        config=FormStateConfig(revalidate_debounce_ms=10_000),
    )
    binder = FormBinder(engine)
    widget = binder.bind_field("email", LineEditAdapter())

    widget.textEdited.emit("")
    assert binder._debounce.pending
    assert dict(engine.errors) == {}

    binder._debounce.force()
    assert engine.errors["email"] == "This field is required"
