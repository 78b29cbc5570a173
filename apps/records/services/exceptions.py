"""Domain-specific exceptions for records services."""


class RecordServiceError(Exception):
    """Base exception for records services."""
    pass


class RecordNotFoundError(RecordServiceError):
    """Raised when a daily record does not exist."""

    def __init__(self, message='Record not found'):
        super().__init__(message)


class RecordValidationError(RecordServiceError):
    """
    Raised when record input breaks the store's rules.

    Carries a ``details`` mapping of field name to a list of messages,
    shaped like DRF serializer errors so views can return it as-is.
    """

    def __init__(self, message='Invalid record data', details=None):
        super().__init__(message)
        self.details = details or {}
