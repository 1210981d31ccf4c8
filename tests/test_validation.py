"""Tests for the pure validation pass and outcome dispatch."""

import pytest


def test_run_validation_folds_all_outcomes():
    from formstate import run_validation, Invalid, VALID
    from formstate.core.outcome import descriptors_from_names

    result = run_validation(
        {"a": "", "b": "", "c": "x"},
        {"a": lambda v: Invalid("a bad"), "b": lambda v: Invalid("b bad"), "c": lambda v: VALID},
        descriptors_from_names(["a", "b", "c"]),
        previous_errors={"c": "old"},
    )

    assert not result
    assert dict(result.errors) == {"a": "a bad", "b": "b bad"}
    assert result.failed == ("a", "b")


def test_run_validation_does_not_mutate_inputs():
    from formstate import run_validation, Invalid
    from formstate.core.outcome import descriptors_from_names

    previous = {"a": "old", "b": None}
    values = {"a": "", "b": ""}
    run_validation(values, {"b": lambda v: Invalid("new")}, descriptors_from_names(values), previous)

    assert previous == {"a": "old", "b": None}
    assert values == {"a": "", "b": ""}


def test_run_validation_drops_undeclared_previous_errors():
    from formstate import run_validation
    from formstate.core.outcome import descriptors_from_names

    result = run_validation({"a": 1}, {}, descriptors_from_names(["a"]), {"ghost": "x"})
    assert result.ok
    assert dict(result.errors) == {}


def test_evaluate_normalizes_signals():
    from formstate import Invalid, Valid, VALID
    from formstate.core.validation import evaluate

    assert evaluate(None, "x") == VALID
    assert evaluate(lambda v: None, "x") == VALID
    assert evaluate(lambda v: Valid(), "x") == VALID
    assert evaluate(lambda v: Invalid("no"), "x") == Invalid("no")


def test_evaluate_converts_exceptions():
    from formstate import Invalid
    from formstate.core.validation import evaluate

    def raises(value):
        raise ValueError("Must be a number")

    assert evaluate(raises, "x") == Invalid("Must be a number")
    with pytest.raises(ValueError):
        evaluate(raises, "x", catch_exceptions=False)


def test_evaluate_converts_unknown_return_types(caplog):
    import logging
    from formstate import Invalid
    from formstate.core.validation import evaluate

    with caplog.at_level(logging.WARNING, logger="formstate.core.validation"):
        outcome = evaluate(lambda v: False, "x")

    assert isinstance(outcome, Invalid)
    assert "returned bool" in outcome.message
    assert any("returned bool" in record.message for record in caplog.records)
    assert isinstance(evaluate(lambda v: "error text", "x"), Invalid)


def test_evaluate_raises_on_unknown_return_types_when_not_catching():
    from formstate import InvalidOutcomeError
    from formstate.core.validation import evaluate

    with pytest.raises(InvalidOutcomeError):
        evaluate(lambda v: False, "x", catch_exceptions=False)
    with pytest.raises(TypeError):
        evaluate(lambda v: "error text", "x", catch_exceptions=False)


def test_outcomes_truthiness():
    from formstate import Invalid, VALID

    assert VALID
    assert not Invalid("x")


def test_error_fold_service_dispatch():
    from formstate import Invalid, VALID
    from formstate.services import ErrorFoldService

    service = ErrorFoldService()
    errors, failed = {"b": "stale"}, set()

    service.fold(Invalid("Required"), "a", errors, failed)
    service.fold(VALID, "b", errors, failed)

    assert errors == {"a": "Required"}
    assert failed == {"a"}
    assert sorted(service.get_supported_types()) == ["Invalid", "Valid"]


def test_error_fold_service_rejects_unknown_outcome():
    from formstate.services import ErrorFoldService

    with pytest.raises(ValueError):
        ErrorFoldService().fold(object(), "a", {}, set())
