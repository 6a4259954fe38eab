from __future__ import annotations


class GuardConfigError(ValueError):
    """Raised when a guard definition is malformed.

    Always raised while the guard is being built, never when it is applied.
    """


class GuardRejectedError(TypeError):
    """Raised by ``expect`` and boundary helpers when a value fails a guard."""

    def __init__(self, *, guard_name: str, value_type: str, context: str = "") -> None:
        message = f"expected {guard_name}, got value of type {value_type}"
        if context:
            message = f"{context}: {message}"
        super().__init__(message)
        self.guard_name = guard_name
        self.value_type = value_type
        self.context = context
