"""Base configuration class for form state engines.

Provides hooks for applications to customize validation and submit behavior.
"""

from typing import Optional
from dataclasses import dataclass


@dataclass
class FormStateConfig:
    """Base configuration for form engine behavior.

    Applications can subclass this to provide custom configuration.

    Attributes:
        omit_empty_on_submit: Drop fields whose value is "" from submitted data
        catch_validator_exceptions: Convert exceptions raised by validators to Invalid
        max_dispatch_depth: Maximum nesting of commit_change calls made from change observers
        debug_dispatch: Verbose change dispatch tracing
        revalidate_debounce_ms: If set, Qt binders revalidate after this much typing inactivity
        error_style: Stylesheet applied by Qt binders to widgets with an error
    """

    omit_empty_on_submit: bool = True
    catch_validator_exceptions: bool = True
    max_dispatch_depth: int = 8
    debug_dispatch: bool = False
    revalidate_debounce_ms: Optional[int] = None
    error_style: str = "border: 1px solid #d9534f;"


# Global config instance (set by application)
_form_config: Optional[FormStateConfig] = None


def set_form_config(config: Optional[FormStateConfig]) -> None:
    """Set the global form state configuration.

    Args:
        config: FormStateConfig instance, or None to restore defaults
    """
    global _form_config
    _form_config = config


def get_form_config() -> FormStateConfig:
    """Get the current form state configuration.

    Returns:
        Current FormStateConfig or default if not set
    """
    if _form_config is None:
        return FormStateConfig()
    return _form_config
