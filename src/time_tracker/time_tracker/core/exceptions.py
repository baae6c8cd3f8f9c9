class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class DeliveryError(DomainError):
    """Raised when the report email or its PDF attachment cannot be produced."""
