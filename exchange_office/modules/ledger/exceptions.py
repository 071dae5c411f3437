"""Ledger operation errors."""

from decimal import Decimal

from exchange_office.core.exceptions import ExchangeOfficeError, NotFoundError, ValidationError


class InsufficientBalanceError(ExchangeOfficeError):
    """Raised when an account cannot cover the requested amount."""

    def __init__(self, currency: str, available: Decimal, required: Decimal) -> None:
        super().__init__("Insufficient balance")
        self.currency = currency
        self.available = available
        self.required = required


class SameCurrencyExchangeError(ValidationError):
    def __init__(self) -> None:
        super().__init__("Cannot exchange same currency")


class InvalidAmountError(ValidationError):
    def __init__(self, message: str = "Amount must be positive") -> None:
        super().__init__(message)


class UnsupportedCurrencyError(ValidationError):
    def __init__(self, currency: str) -> None:
        super().__init__(f"Unsupported currency: {currency}")
        self.currency = currency


class RecipientNotFoundError(NotFoundError):
    def __init__(self, username: str) -> None:
        super().__init__("Recipient not found")
        self.username = username


class InvalidRecipientError(ValidationError):
    """Raised when a client tries to transfer to itself."""

    def __init__(self) -> None:
        super().__init__("Cannot transfer to yourself")
