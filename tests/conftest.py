"""pytest configuration and fixtures for formstate tests."""

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication instance for tests."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
    # Don't quit - may cause issues with other tests


@pytest.fixture(autouse=True)
def reset_form_config():
    """Restore the default global config after each test."""
    from formstate.protocols import set_form_config

    yield
    set_form_config(None)


@pytest.fixture
def always_fails():
    from formstate import Invalid

    def validator(value):
        return Invalid("always fails")
    return validator


@pytest.fixture
def required():
    from formstate import Invalid, VALID

    def validator(value):
        return VALID if value not in ("", None) else Invalid("This field is required")
    return validator
