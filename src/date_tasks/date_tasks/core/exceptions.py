class DomainError(Exception):
    """Base exception for date task rule violations."""


class ValidationError(DomainError):
    """Raised when input data or configuration is invalid."""
