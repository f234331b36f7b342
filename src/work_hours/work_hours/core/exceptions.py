class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class InvalidRangeError(ValidationError):
    """Raised when clock-out is not after clock-in."""


class AuthError(DomainError):
    """Raised when login credentials are invalid."""


class DuplicateUserError(DomainError):
    """Raised when registering a username that already exists."""


class StorageError(DomainError):
    """Raised by storage backends when persisted data cannot be read or written."""
