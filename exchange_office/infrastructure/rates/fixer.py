"""Fixer.io client (https://fixer.io).

The free plan only quotes against a single base (EUR), so every ordered pair
is derived as a cross rate ``rate[target] / rate[base]``.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Optional, Sequence

import httpx

from exchange_office.infrastructure.rates.quotes import parse_quote
from exchange_office.modules.rates.exceptions import RateProviderError
from exchange_office.modules.rates.models import RateTable


class FixerClient:
    name = "Fixer.io"

    def __init__(
        self,
        api_key: str,
        base_url: str = "http://data.fixer.io",
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    async def fetch_rates(self, currencies: Sequence[str]) -> RateTable:
        params = {"access_key": self.api_key, "symbols": ",".join(currencies)}
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                resp = await client.get(f"{self.base_url}/api/latest", params=params)
                resp.raise_for_status()
                payload = resp.json() or {}
        except (httpx.HTTPError, ValueError) as exc:
            raise RateProviderError(self.name, f"request failed: {exc}") from exc

        if not payload.get("success", False):
            error = payload.get("error") or {}
            raise RateProviderError(self.name, f"API error: {error.get('type', 'unknown')}")

        quoted = payload.get("rates")
        if not isinstance(quoted, dict):
            raise RateProviderError(self.name, "response has no rates section")
        base_rates: dict[str, Decimal] = {}
        for code in currencies:
            base_rates[code] = parse_quote(self.name, f"EUR{code}", quoted.get(code))

        return {
            (base, target): base_rates[target] / base_rates[base]
            for base in currencies
            for target in currencies
            if base != target
        }
