"""Simple dependency container for wiring core services."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache
from typing import Optional

from exchange_office.core.config import Settings, get_settings
from exchange_office.core.money import SUPPORTED_CURRENCIES
from exchange_office.infrastructure.database.session import get_engine, get_session_factory
from exchange_office.infrastructure.rates import FixerClient, FreeCurrencyApiClient
from exchange_office.modules.rates import RateProvider, RateRefresher, RateSource


def build_rate_provider(settings: Settings) -> RateProvider:
    """Configured sources in fallback order; sources without an API key are skipped."""
    rates = settings.rates
    sources: list[RateSource] = []
    if rates.free_currency_api_key:
        sources.append(
            FreeCurrencyApiClient(
                rates.free_currency_api_key,
                base_url=rates.free_currency_base_url,
                timeout=rates.request_timeout,
            )
        )
    if rates.fixer_api_key:
        sources.append(
            FixerClient(
                rates.fixer_api_key,
                base_url=rates.fixer_base_url,
                timeout=rates.request_timeout,
            )
        )
    return RateProvider(sources, SUPPORTED_CURRENCIES)


@dataclass(slots=True)
class ApplicationContainer:
    settings: Settings
    rate_refresher: Optional[RateRefresher] = field(default=None)

    def init_infrastructure(self) -> None:
        """Ensure infrastructure singletons (database engine, refresher) are initialised."""
        get_engine()
        if self.rate_refresher is None:
            self.rate_refresher = RateRefresher(
                provider=build_rate_provider(self.settings),
                session_factory=get_session_factory(),
                interval=self.settings.rates.refresh_interval_seconds,
            )


@lru_cache()
def get_container() -> ApplicationContainer:
    container = ApplicationContainer(settings=get_settings())
    container.init_infrastructure()
    return container


__all__ = ["ApplicationContainer", "build_rate_provider", "get_container"]
