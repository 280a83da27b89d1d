# backend-services/finlearn-api/tests/unit/test_stock_catalog.py
"""
Unit tests for the stock catalog builders and the synthetic price history.
"""
from datetime import date

import pytest

from catalog.price_history import generate_price_history
from catalog.stocks import (
    POPULAR_SYMBOLS,
    build_stock_catalog,
    market_cap_label,
)

AS_OF = date(2026, 1, 15)

# ============================================================================
# TEST: Price history
# ============================================================================

class TestPriceHistory:

    def test_length_and_last_date(self):
        history = generate_price_history("AAPL", 231.34, days=30, as_of=AS_OF)
        assert len(history) == 31
        assert history[-1]["date"] == "2026-01-15"
        assert history[0]["date"] == "2025-12-16"

    def test_same_symbol_is_deterministic(self):
        first = generate_price_history("AAPL", 231.34, days=60, as_of=AS_OF)
        second = generate_price_history("aapl", 231.34, days=60, as_of=AS_OF)
        assert first == second

    def test_different_symbols_differ(self):
        a = generate_price_history("AAPL", 100.0, days=30, as_of=AS_OF)
        b = generate_price_history("MSFT", 100.0, days=30, as_of=AS_OF)
        assert [p["close"] for p in a] != [p["close"] for p in b]

    def test_bars_are_consistent(self):
        for bar in generate_price_history("TSLA", 248.42, days=120, volatility=0.045, as_of=AS_OF):
            assert bar["high"] >= max(bar["open"], bar["close"])
            assert bar["low"] <= min(bar["open"], bar["close"])
            assert bar["close"] >= 1.0
            assert isinstance(bar["volume"], int)
            assert 50_000_000 <= bar["volume"] < 150_000_000

    def test_opens_chain_to_previous_close(self):
        history = generate_price_history("AMZN", 186.21, days=10, as_of=AS_OF)
        for prev, cur in zip(history, history[1:]):
            assert cur["open"] == prev["close"]

    @pytest.mark.parametrize("kwargs", [{"days": -1}, {"base_price": 0}])
    def test_invalid_arguments(self, kwargs):
        params = {"symbol": "AAPL", "base_price": 100.0, "days": 5, "as_of": AS_OF}
        params.update(kwargs)
        with pytest.raises(ValueError):
            generate_price_history(**params)

# ============================================================================
# TEST: Market cap label
# ============================================================================

@pytest.mark.parametrize("cap, bucket", [
    (3_450_000_000_000, "Mega Cap"),
    (200e9, "Mega Cap"),
    (50e9, "Large Cap"),
    (5e9, "Mid Cap"),
    (500e6, "Small Cap"),
    (100e6, "Micro Cap"),
])
def test_market_cap_label(cap, bucket):
    assert bucket in market_cap_label(cap)

# ============================================================================
# TEST: Stock catalog
# ============================================================================

class TestStockCatalog:

    def test_catalog_keys_are_uppercase_symbols(self, stock_catalog):
        for symbol, record in stock_catalog.items():
            assert symbol == symbol.upper() == record.symbol == record.profile.symbol

    def test_popular_symbols_are_in_catalog(self, stock_catalog):
        assert set(POPULAR_SYMBOLS) <= set(stock_catalog)

    def test_catalog_is_read_only(self, stock_catalog):
        with pytest.raises(TypeError):
            stock_catalog["ZZZZ"] = stock_catalog["AAPL"]

    def test_market_cap_label_is_derived(self, stock_catalog):
        assert "Mega Cap" in stock_catalog["AAPL"].profile.marketCapLabel
        assert stock_catalog["TSLA"].profile.marketCapLabel == market_cap_label(800_000_000_000)

    def test_history_ends_at_current_price_date(self, stock_catalog):
        history = stock_catalog["MSFT"].price.history
        assert len(history) == 31
        assert history[-1].date == AS_OF.isoformat()

    def test_full_statements_for_apple(self, stock_catalog):
        financials = stock_catalog["AAPL"].financials
        assert financials.incomeStatement.revenue == 383_285_000_000
        assert financials.balanceSheet.totalEquity == 62_146_000_000
        assert financials.cashFlow.investing == -7_077_000_000

    @pytest.mark.parametrize("symbol", ["GOOGL", "MSFT", "TSLA", "AMZN"])
    def test_missing_statements_are_none_not_zero(self, stock_catalog, symbol):
        record = stock_catalog[symbol]
        assert record.financials.incomeStatement is None
        assert record.financials.balanceSheet is None
        assert record.financials.cashFlow is None
        assert record.news == []
        assert record.keyMetrics.revenueHistory == []
        # headline metrics are still present
        assert record.keyMetrics.revenue > 0

    def test_derived_stocks_keep_their_own_profile(self, stock_catalog):
        tsla = stock_catalog["TSLA"]
        assert tsla.profile.name == "Tesla, Inc."
        assert tsla.profile.sector == "ยานยนต์"
        assert tsla.price.current == 248.42
        # untouched fields come from the shared template
        assert tsla.price.volume == stock_catalog["AAPL"].price.volume
        assert tsla.competitors == []

    def test_derived_tips_keep_related_lessons(self, stock_catalog):
        assert stock_catalog["GOOGL"].beginnerTips.relatedLessons == stock_catalog["AAPL"].beginnerTips.relatedLessons
        assert stock_catalog["GOOGL"].beginnerTips.goodFor != stock_catalog["AAPL"].beginnerTips.goodFor

    def test_building_twice_gives_equal_catalogs(self, stock_catalog):
        again = build_stock_catalog(as_of=AS_OF, history_days=30)
        assert dict(again) == dict(stock_catalog)


if __name__ == "__main__":
    pytest.main([__file__, "-v", "--tb=short"])
