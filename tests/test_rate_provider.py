"""
Tests for the external rate sources, the fallback provider and the refresher.

HTTP traffic is served by ``httpx.MockTransport``; nothing leaves the process.
"""

import asyncio
from decimal import Decimal

import httpx
import pytest

from exchange_office.core.money import SUPPORTED_CURRENCIES
from exchange_office.infrastructure.rates import FixerClient, FreeCurrencyApiClient
from exchange_office.modules.rates import RateProvider, RateProviderError, RateRefresher, RateService

# EUR based quotes, as returned by the Fixer free plan
FIXER_QUOTES = {"USD": 1.08, "SAR": 4.05, "YER": 270.0}

FREE_CURRENCY_QUOTES = {
    "USD": {"SAR": 3.75, "YER": 250.5},
    "SAR": {"USD": 0.266667, "YER": 66.8},
    "YER": {"USD": 0.003992, "SAR": 0.014970},
}


def free_currency_handler(request: httpx.Request) -> httpx.Response:
    assert request.url.path == "/v1/latest"
    assert request.url.params["apikey"] == "fc-key"
    base = request.url.params["base_currency"]
    wanted = request.url.params["currencies"].split(",")
    return httpx.Response(200, json={"data": {code: FREE_CURRENCY_QUOTES[base][code] for code in wanted}})


def fixer_handler(request: httpx.Request) -> httpx.Response:
    assert request.url.path == "/api/latest"
    assert request.url.params["access_key"] == "fixer-key"
    return httpx.Response(200, json={"success": True, "base": "EUR", "rates": FIXER_QUOTES})


def failing_handler(request: httpx.Request) -> httpx.Response:
    return httpx.Response(503, json={"message": "unavailable"})


def free_currency(handler=free_currency_handler) -> FreeCurrencyApiClient:
    return FreeCurrencyApiClient("fc-key", base_url="https://fc.test", transport=httpx.MockTransport(handler))


def fixer(handler=fixer_handler) -> FixerClient:
    return FixerClient("fixer-key", base_url="https://fixer.test", transport=httpx.MockTransport(handler))


class TestFreeCurrencyApiClient:
    """Tests for FreeCurrencyApiClient.fetch_rates."""

    def test_quotes_every_ordered_pair(self) -> None:
        rates = asyncio.run(free_currency().fetch_rates(SUPPORTED_CURRENCIES))

        assert len(rates) == 6
        assert rates[("USD", "SAR")] == Decimal("3.75")
        assert rates[("SAR", "YER")] == Decimal("66.8")

    def test_http_error_becomes_provider_error(self) -> None:
        with pytest.raises(RateProviderError) as excinfo:
            asyncio.run(free_currency(failing_handler).fetch_rates(SUPPORTED_CURRENCIES))

        assert excinfo.value.source == "FreeCurrencyAPI"

    def test_missing_quote_rejected(self) -> None:
        def partial(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"data": {"SAR": 3.75}})

        with pytest.raises(RateProviderError):
            asyncio.run(free_currency(partial).fetch_rates(SUPPORTED_CURRENCIES))


class TestFixerClient:
    """Tests for FixerClient.fetch_rates."""

    def test_cross_rates(self) -> None:
        """Every pair is derived from the EUR quotes."""
        rates = asyncio.run(fixer().fetch_rates(SUPPORTED_CURRENCIES))

        assert len(rates) == 6
        assert rates[("USD", "SAR")] == Decimal("4.05") / Decimal("1.08")
        assert rates[("YER", "USD")] == Decimal("1.08") / Decimal("270.0")

    def test_unsuccessful_payload_rejected(self) -> None:
        def denied(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"success": False, "error": {"type": "invalid_access_key"}})

        with pytest.raises(RateProviderError) as excinfo:
            asyncio.run(fixer(denied).fetch_rates(SUPPORTED_CURRENCIES))

        assert "invalid_access_key" in excinfo.value.reason


class TestRateProvider:
    """Tests for ordered fallback between sources."""

    def test_first_source_wins(self) -> None:
        provider = RateProvider([free_currency(), fixer()], SUPPORTED_CURRENCIES)

        source, rates = asyncio.run(provider.fetch_latest())

        assert source == "FreeCurrencyAPI"
        assert rates[("USD", "YER")] == Decimal("250.5")

    def test_falls_back_to_fixer(self) -> None:
        provider = RateProvider([free_currency(failing_handler), fixer()], SUPPORTED_CURRENCIES)

        source, rates = asyncio.run(provider.fetch_latest())

        assert source == "Fixer.io"
        assert len(rates) == 6

    def test_all_sources_failing(self) -> None:
        provider = RateProvider([free_currency(failing_handler), fixer(failing_handler)], SUPPORTED_CURRENCIES)

        with pytest.raises(RateProviderError) as excinfo:
            asyncio.run(provider.fetch_latest())

        assert "FreeCurrencyAPI" in excinfo.value.reason
        assert "Fixer.io" in excinfo.value.reason


class TestRateRefresher:
    """Tests for RateRefresher.refresh_once."""

    def test_refresh_stores_rates(self, run, session_factory) -> None:
        refresher = RateRefresher(RateProvider([free_currency()], SUPPORTED_CURRENCIES), session_factory, 60)

        assert asyncio.run(refresher.refresh_once()) == 6
        assert run(lambda s: RateService.with_session(s).resolve_rate("USD", "YER")) == Decimal("250.500000")

    def test_failed_refresh_keeps_stored_rates(self, run, session_factory) -> None:
        run(lambda s: RateService.with_session(s).initialize_defaults())
        refresher = RateRefresher(RateProvider([fixer(failing_handler)], SUPPORTED_CURRENCIES), session_factory, 60)

        assert asyncio.run(refresher.refresh_once()) == 0
        assert run(lambda s: RateService.with_session(s).resolve_rate("USD", "SAR")) == Decimal("3.75")

    def test_start_without_sources_is_a_no_op(self, session_factory) -> None:
        refresher = RateRefresher(RateProvider([], SUPPORTED_CURRENCIES), session_factory, 60)

        refresher.start()

        assert refresher.running is False


def free_currency_quoting(sar_quote) -> FreeCurrencyApiClient:
    """FreeCurrencyAPI mock whose USD/SAR quote is replaced by ``sar_quote``."""

    def handler(request: httpx.Request) -> httpx.Response:
        response = free_currency_handler(request)
        data = response.json()["data"]
        if request.url.params["base_currency"] == "USD":
            data["SAR"] = sar_quote
        return httpx.Response(200, json={"data": data})

    return free_currency(handler)


class TestUnusableQuotes:
    """Quotes that are not finite positive numbers fail the source."""

    @pytest.mark.parametrize("quote", ["n/a", 0, -3.75, "NaN", "Infinity", {"value": 3.75}, True])
    def test_free_currency_rejects(self, quote) -> None:
        with pytest.raises(RateProviderError) as excinfo:
            asyncio.run(free_currency_quoting(quote).fetch_rates(SUPPORTED_CURRENCIES))

        assert "USDSAR" in excinfo.value.reason

    @pytest.mark.parametrize("quote", ["n/a", 0, -1.08])
    def test_fixer_rejects(self, quote) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"success": True, "rates": {**FIXER_QUOTES, "USD": quote}})

        with pytest.raises(RateProviderError):
            asyncio.run(fixer(handler).fetch_rates(SUPPORTED_CURRENCIES))

    def test_malformed_quote_falls_back_to_fixer(self) -> None:
        provider = RateProvider([free_currency_quoting("n/a"), fixer()], SUPPORTED_CURRENCIES)

        source, rates = asyncio.run(provider.fetch_latest())

        assert source == "Fixer.io"
        assert rates[("USD", "SAR")] == Decimal("4.05") / Decimal("1.08")

    def test_unexpected_source_error_falls_back(self) -> None:
        class BrokenSource:
            name = "broken"

            async def fetch_rates(self, currencies):
                raise RuntimeError("boom")

        source, _ = asyncio.run(RateProvider([BrokenSource(), fixer()], SUPPORTED_CURRENCIES).fetch_latest())

        assert source == "Fixer.io"

    @pytest.mark.parametrize("quote", ["n/a", 0])
    def test_refresh_keeps_stored_rate(self, run, session_factory, quote) -> None:
        """A bad quote never replaces the stored USD/SAR rate."""
        run(lambda s: RateService.with_session(s).initialize_defaults())
        provider = RateProvider([free_currency_quoting(quote)], SUPPORTED_CURRENCIES)

        assert asyncio.run(RateRefresher(provider, session_factory, 60).refresh_once()) == 0
        assert run(lambda s: RateService.with_session(s).resolve_rate("USD", "SAR")) == Decimal("3.75")


class TestRefreshLoop:
    def test_loop_survives_unexpected_error(self, session_factory) -> None:
        """An exception from one refresh does not stop later refreshes."""
        calls = []

        class FlakyRefresher(RateRefresher):
            async def refresh_once(self) -> int:
                calls.append(len(calls))
                if len(calls) == 1:
                    raise RuntimeError("database went away")
                return 0

        async def scenario() -> None:
            refresher = FlakyRefresher(RateProvider([fixer()], SUPPORTED_CURRENCIES), session_factory, 0.01)
            task = asyncio.create_task(refresher._run())
            while len(calls) < 2:
                await asyncio.sleep(0.01)
            task.cancel()
            with pytest.raises(asyncio.CancelledError):
                await task

        asyncio.run(asyncio.wait_for(scenario(), timeout=5))

        assert len(calls) >= 2
