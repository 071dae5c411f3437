"""Account domain specific exceptions."""

from exchange_office.core.exceptions import ConflictError, NotFoundError


class AccountNotFoundError(NotFoundError):
    """Raised when a client holds no account in the requested currency."""

    def __init__(self, client_id: str, currency: str, message: str = "Account not found") -> None:
        super().__init__(message)
        self.client_id = client_id
        self.currency = currency


class ConcurrentUpdateError(ConflictError):
    """Raised when an account row changed between read and write."""

    def __init__(self, message: str = "Account was modified by another request, please retry") -> None:
        super().__init__(message)
