"""Domain error types."""


class ValidationError(ValueError):
    """Raised when a write payload fails boundary validation.

    Attributes:
        field: Name of the offending input field.
        message: Human readable reason.
    """

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


class LedgerStorageError(RuntimeError):
    """Raised when the persistence collaborator fails."""


__all__ = ["ValidationError", "LedgerStorageError"]
