"""Base error hierarchy shared by every module.

Module-specific errors subclass one of the kinds below; the HTTP layer maps
each kind to a status code in ``interfaces.http.errors``.
"""


class ExchangeOfficeError(Exception):
    """Base class for all domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(ExchangeOfficeError):
    """Raised when input is well-formed but violates a business rule."""


class AuthenticationError(ExchangeOfficeError):
    """Raised when a bearer token is missing, invalid or expired."""

    def __init__(self, message: str, *, missing: bool = False) -> None:
        super().__init__(message)
        self.missing = missing


class NotFoundError(ExchangeOfficeError):
    """Raised when a client, account or recipient does not exist."""


class ConflictError(ExchangeOfficeError):
    """Raised when a concurrent request modified the same rows."""


__all__ = [
    "ExchangeOfficeError",
    "ValidationError",
    "AuthenticationError",
    "NotFoundError",
    "ConflictError",
]
