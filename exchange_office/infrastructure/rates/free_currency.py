"""FreeCurrencyAPI client (https://freecurrencyapi.com)."""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

import httpx

from exchange_office.infrastructure.rates.quotes import parse_quote
from exchange_office.modules.rates.exceptions import RateProviderError
from exchange_office.modules.rates.models import RateTable

logger = logging.getLogger(__name__)


class FreeCurrencyApiClient:
    name = "FreeCurrencyAPI"

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://api.freecurrencyapi.com",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    async def fetch_rates(self, currencies: Sequence[str]) -> RateTable:
        """One request per base currency, quoting every other supported currency."""
        rates: RateTable = {}
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            for base in currencies:
                targets = [code for code in currencies if code != base]
                data = await self._get_latest(client, base, targets)
                for target in targets:
                    rates[(base, target)] = parse_quote(self.name, f"{base}{target}", data.get(target))
        return rates

    async def _get_latest(self, client: httpx.AsyncClient, base: str, targets: Sequence[str]) -> dict[str, Any]:
        params = {
            "apikey": self.api_key,
            "base_currency": base,
            "currencies": ",".join(targets),
        }
        try:
            resp = await client.get(f"{self.base_url}/v1/latest", params=params)
            resp.raise_for_status()
            payload = resp.json() or {}
        except (httpx.HTTPError, ValueError) as exc:
            raise RateProviderError(self.name, f"request failed: {exc}") from exc

        data = payload.get("data")
        if not isinstance(data, dict):
            raise RateProviderError(self.name, "response has no data section")
        logger.debug("%s returned %d quotes for %s", self.name, len(data), base)
        return data
