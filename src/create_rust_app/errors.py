from __future__ import annotations


class ScaffoldError(RuntimeError):
    """Base class for every failure that aborts an invocation."""

    hint: str | None = None


class ValidationError(ScaffoldError):
    def __init__(self, message: str, *, suggestion: str | None = None) -> None:
        super().__init__(message)
        self.suggestion = suggestion
        if suggestion is not None:
            self.hint = suggestion


class ConfigurationError(ScaffoldError):
    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConflictError(ScaffoldError):
    pass


class ScaffoldIOError(ScaffoldError):
    pass
