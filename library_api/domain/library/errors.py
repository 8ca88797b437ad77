"""
Domain-specific errors for the library bounded context.

All errors raised from the domain and application layers are defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""


class LibraryDomainError(Exception):
    """Base error for all library domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class ValidationError(LibraryDomainError):
    """Raised when input is malformed or semantically invalid.

    Covers bad identifiers, invalid email addresses and references
    to categories that do not exist.
    """


class NotFoundError(LibraryDomainError):
    """Raised when the requested entity does not exist."""


class ConflictError(LibraryDomainError):
    """Raised when an operation would break a uniqueness or referential constraint."""


class UnauthorizedError(LibraryDomainError):
    """Raised when a credential or bearer token check fails."""
