"""HTTP clients for third-party exchange rate APIs."""

from .fixer import FixerClient
from .free_currency import FreeCurrencyApiClient

__all__ = ["FixerClient", "FreeCurrencyApiClient"]
