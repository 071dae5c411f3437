"""Fetching rates from external sources with ordered fallback."""

from __future__ import annotations

import logging
from typing import Protocol, Sequence

from .exceptions import RateProviderError
from .models import RateTable

logger = logging.getLogger(__name__)


class RateSource(Protocol):
    name: str

    async def fetch_rates(self, currencies: Sequence[str]) -> RateTable:
        ...


class RateProvider:
    """Asks each source in turn and returns the first complete answer."""

    def __init__(self, sources: Sequence[RateSource], currencies: Sequence[str]) -> None:
        self._sources = list(sources)
        self._currencies = tuple(currencies)

    @property
    def sources(self) -> list[RateSource]:
        return list(self._sources)

    async def fetch_latest(self) -> tuple[str, RateTable]:
        """Return ``(source name, rates)`` from the first source that succeeds."""
        failures: list[str] = []
        for source in self._sources:
            try:
                rates = await source.fetch_rates(self._currencies)
            except RateProviderError as exc:
                logger.warning("Rate source %s failed: %s", source.name, exc.reason)
                failures.append(source.name)
                continue
            except Exception:  # pylint: disable=broad-except
                logger.exception("Rate source %s failed unexpectedly", source.name)
                failures.append(source.name)
                continue
            if not rates:
                logger.warning("Rate source %s returned no rates", source.name)
                failures.append(source.name)
                continue
            return source.name, rates
        raise RateProviderError("all", f"no source delivered rates (tried: {', '.join(failures) or 'none'})")
