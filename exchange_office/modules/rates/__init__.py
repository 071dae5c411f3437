"""Exchange rate domain exports"""

from .exceptions import RateProviderError, RateUnavailableError
from .models import ExchangeRate, RateTable
from .provider import RateProvider, RateSource
from .refresher import RateRefresher
from .service import DEFAULT_RATES, RateService

__all__ = [
    "DEFAULT_RATES",
    "ExchangeRate",
    "RateTable",
    "RateProvider",
    "RateSource",
    "RateRefresher",
    "RateService",
    "RateProviderError",
    "RateUnavailableError",
]
