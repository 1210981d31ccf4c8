"""Engine exceptions. Field validation failures are not exceptions."""


class FormStateError(Exception):
    """Base class for engine programming errors."""


class UnknownFieldError(FormStateError, KeyError):
    """Raised when an operation names a field that was not declared at construction."""

    def __init__(self, name: str, known=()):
        self.name = name
        self.known = tuple(known)
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown field {self.name!r}. Known fields: {list(self.known)}"


class InvalidOutcomeError(FormStateError, TypeError):
    """Raised when a validator returns something other than Valid, Invalid or None."""


class DispatchDepthError(FormStateError, RuntimeError):
    """Raised when change observers re-enter commit_change too deeply."""
