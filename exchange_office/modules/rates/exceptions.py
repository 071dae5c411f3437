"""Exchange rate errors."""

from exchange_office.core.exceptions import ExchangeOfficeError, NotFoundError


class RateUnavailableError(NotFoundError):
    """Raised when neither direction of a currency pair has a stored rate."""

    def __init__(self, base_currency: str, target_currency: str) -> None:
        super().__init__(f"Exchange rate not found for {base_currency}/{target_currency}")
        self.base_currency = base_currency
        self.target_currency = target_currency


class RateProviderError(ExchangeOfficeError):
    """Raised when an external rate source cannot deliver rates."""

    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"{source}: {reason}")
        self.source = source
        self.reason = reason
