"""
Tests for the client seeding script's argument parsing.
"""

import argparse
from decimal import Decimal

import pytest

from init_client import parse_balance


class TestParseBalance:
    def test_currency_and_amount(self) -> None:
        assert parse_balance("usd=500") == ("USD", Decimal("500.00"))

    def test_amount_is_rounded_to_cents(self) -> None:
        assert parse_balance("SAR=10.005") == ("SAR", Decimal("10.01"))

    @pytest.mark.parametrize("raw", ["EUR=10", "USD=abc", "USD=-1", "USD=NaN", "SAR=sNaN", "YER=Infinity"])
    def test_rejected(self, raw) -> None:
        with pytest.raises(argparse.ArgumentTypeError):
            parse_balance(raw)
