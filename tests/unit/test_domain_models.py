"""Unit tests for domain models."""

import pytest

from stockboard.domain.models import CachedQuote, Currency, Holding, QuoteMode

from tests.conftest import make_quote


class TestQuoteMode:
    """Test mode selection from credentials."""

    def test_real_key_is_live(self):
        assert QuoteMode.from_credential("ABCD1234") == QuoteMode.LIVE

    @pytest.mark.parametrize("key", [None, "", "  ", "DEMO", "demo", "YOUR_API_KEY_HERE"])
    def test_demo_keys_are_synthetic(self, key):
        assert QuoteMode.from_credential(key) == QuoteMode.SYNTHETIC


class TestHolding:
    """Test Holding model instantiation."""

    def test_currency_string_coerced(self):
        holding = Holding(id="h1", symbol="7203.T", quantity=100, currency="JPY")

        assert holding.currency == Currency.JPY

    def test_defaults(self):
        holding = Holding(id="h1", symbol="AAPL", quantity=1)

        assert holding.currency == Currency.USD
        assert holding.user_sector is None

    def test_unsupported_currency_rejected(self):
        with pytest.raises(ValueError):
            Holding(id="h1", symbol="SAP", quantity=1, currency="EUR")


class TestCachedQuote:
    """Test cache entry helpers."""

    def test_from_quote_keeps_values(self):
        cached = CachedQuote.from_quote(make_quote("msft", price=410.2), fetched_at_ms=1000)

        assert cached.symbol == "MSFT"
        assert cached.price == 410.2
        assert cached.fetched_at_ms == 1000
        assert cached.sector == "Unknown"

    def test_age(self):
        cached = CachedQuote.from_quote(make_quote(), fetched_at_ms=1000)

        assert cached.age_ms(4600) == 3600
