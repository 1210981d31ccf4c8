"""
formstate: render-agnostic form state and validation engine.

FormEngine owns a fixed set of named field values, runs caller-supplied
validators on demand, accumulates per-field errors and gates submission.

Architecture:
- Core: FormEngine, the pure validation pass and Valid/Invalid outcomes (no Qt)
- Protocols: FormStateConfig and widget ABCs; PyQt6 adapters on demand
- Services: outcome dispatch, change dispatch, submit value collection
- Forms: FormBinder, a PyQt6 Renderer bound to a FormEngine
"""

__version__ = "0.1.0"

from formstate.core.engine import FormEngine, FormSnapshot, FormHandlers, SubmitOutcome
from formstate.core.exceptions import (
    FormStateError,
    UnknownFieldError,
    InvalidOutcomeError,
    DispatchDepthError,
)
from formstate.core.outcome import Valid, Invalid, VALID, FieldDescriptor
from formstate.core.validation import ValidationPass, run_validation
from formstate.protocols.form_config import FormStateConfig, set_form_config, get_form_config

__all__ = [
    "__version__",
    "FormEngine",
    "FormSnapshot",
    "FormHandlers",
    "SubmitOutcome",
    "FormStateError",
    "UnknownFieldError",
    "InvalidOutcomeError",
    "DispatchDepthError",
    "Valid",
    "Invalid",
    "VALID",
    "FieldDescriptor",
    "ValidationPass",
    "run_validation",
    "FormStateConfig",
    "set_form_config",
    "get_form_config",
]
