"""Client domain specific exceptions."""

from exchange_office.core.exceptions import NotFoundError, ValidationError


class ClientAlreadyExistsError(ValidationError):
    """Raised when attempting to create a client with a duplicate username."""

    def __init__(self, username: str) -> None:
        super().__init__(f"Username already exists: {username}")
        self.username = username


class ClientNotFoundError(NotFoundError):
    """Raised when the requested client cannot be found."""

    def __init__(self, message: str = "Client not found") -> None:
        super().__init__(message)
