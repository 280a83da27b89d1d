# backend-services/finlearn-api/tests/routes/test_stock_routes.py
"""
Route tests for /api/stocks/*: symbol lookup, search, popular cards and the
S&P 500 listing, including their failure bodies.
"""
from unittest.mock import patch

import pytest

# ============================================================================
# TEST: GET /api/stocks/<symbol>
# ============================================================================

class TestGetStock:

    def test_known_symbol(self, client):
        response = client.get('/api/stocks/AAPL')
        assert response.status_code == 200
        data = response.json
        assert data["symbol"] == "AAPL"
        assert data["profile"]["name"] == "Apple Inc."
        assert data["price"]["current"] == 231.34
        assert len(data["price"]["history"]) == 366
        assert data["financials"]["incomeStatement"]["revenue"] == 383_285_000_000

    def test_lookup_is_case_insensitive(self, client):
        upper = client.get('/api/stocks/MSFT').json
        lower = client.get('/api/stocks/msft').json
        assert upper == lower

    @pytest.mark.parametrize("raw, canonical", [("zzzz", "ZZZZ"), ("NOPE", "NOPE")])
    def test_unknown_symbol_is_404(self, client, raw, canonical):
        response = client.get(f'/api/stocks/{raw}')
        assert response.status_code == 404
        assert response.json == {"error": f"Stock {canonical} not found"}

    def test_missing_statements_are_null(self, client):
        data = client.get('/api/stocks/GOOGL').json
        assert data["financials"] == {
            "incomeStatement": None,
            "balanceSheet": None,
            "cashFlow": None,
        }
        assert data["news"] == []

    def test_service_failure_is_500(self, client):
        with patch('app.stock_service') as mock_service:
            mock_service.get_by_symbol.side_effect = RuntimeError("catalog unavailable")
            response = client.get('/api/stocks/AAPL')
        assert response.status_code == 500
        assert response.json == {"error": "Failed to get stock data"}

# ============================================================================
# TEST: GET /api/stocks/search
# ============================================================================

class TestSearch:

    def test_search_by_name(self, client):
        response = client.get('/api/stocks/search?q=apple')
        assert response.status_code == 200
        assert response.json == [{
            "symbol": "AAPL",
            "name": "Apple Inc.",
            "sector": "เทคโนโลยี",
            "exchange": "NASDAQ",
            "logo": "https://logo.clearbit.com/apple.com",
        }]

    def test_search_only_entries_have_null_logo(self, client):
        data = client.get('/api/stocks/search?q=JPM').json
        assert [e["symbol"] for e in data] == ["JPM"]
        assert data[0]["logo"] is None

    @pytest.mark.parametrize("url", ['/api/stocks/search', '/api/stocks/search?q='])
    def test_empty_query_short_circuits(self, client, url):
        with patch('app.stock_service') as mock_service:
            response = client.get(url)
        assert response.status_code == 200
        assert response.json == []
        mock_service.search.assert_not_called()

    def test_no_match_is_empty_list(self, client):
        response = client.get('/api/stocks/search?q=doesnotexist')
        assert response.status_code == 200
        assert response.json == []

    def test_search_failure_is_500(self, client):
        with patch('app.stock_service') as mock_service:
            mock_service.search.side_effect = RuntimeError("index broken")
            response = client.get('/api/stocks/search?q=apple')
        assert response.status_code == 500
        assert response.json == {"error": "Failed to search stocks"}

# ============================================================================
# TEST: GET /api/stocks/popular
# ============================================================================

class TestPopular:

    def test_popular_cards(self, client, test_constants):
        response = client.get('/api/stocks/popular')
        assert response.status_code == 200
        cards = response.json
        assert [c["symbol"] for c in cards] == test_constants["POPULAR"]
        for card in cards:
            assert set(card) == test_constants["CARD_KEYS"]

    def test_card_values_come_from_record(self, client):
        cards = {c["symbol"]: c for c in client.get('/api/stocks/popular').json}
        record = client.get('/api/stocks/TSLA').json
        assert cards["TSLA"]["price"] == record["price"]["current"]
        assert cards["TSLA"]["overallScore"] == record["scores"]["overall"]
        assert cards["TSLA"]["sector"] == "ยานยนต์"

    def test_popular_failure_is_500(self, client):
        with patch('app.stock_service') as mock_service:
            mock_service.get_popular.side_effect = RuntimeError("boom")
            response = client.get('/api/stocks/popular')
        assert response.status_code == 500
        assert response.json == {"error": "Failed to get popular stocks"}

# ============================================================================
# TEST: GET /api/stocks/sp500
# ============================================================================

class TestSp500:

    def test_default_listing(self, client, test_constants):
        data = client.get('/api/stocks/sp500').json
        assert data["page"] == 1
        assert data["limit"] == 50
        assert data["total"] == test_constants["SP500_COUNT"]
        assert len(data["stocks"]) == test_constants["SP500_COUNT"]
        assert set(data["stocks"][0]) == {"symbol", "name", "sector", "exchange"}

    def test_paging(self, client):
        first = client.get('/api/stocks/sp500?page=1&limit=10').json
        second = client.get('/api/stocks/sp500?page=2&limit=10').json
        assert len(first["stocks"]) == len(second["stocks"]) == 10
        assert first["stocks"][-1]["symbol"] < second["stocks"][0]["symbol"]

    def test_limit_is_clamped(self, client, test_constants):
        data = client.get('/api/stocks/sp500?limit=500').json
        assert data["limit"] == test_constants["SP500_MAX_LIMIT"]

    def test_page_below_one_is_clamped(self, client):
        assert client.get('/api/stocks/sp500?page=0').json["page"] == 1

    def test_non_numeric_params_use_defaults(self, client):
        response = client.get('/api/stocks/sp500?page=x&limit=abc')
        assert response.status_code == 200
        assert response.json["page"] == 1
        assert response.json["limit"] == 50

    def test_sector_filter_is_case_insensitive(self, client):
        data = client.get('/api/stocks/sp500?sector=financials').json
        assert data["total"] == 6
        assert {s["sector"] for s in data["stocks"]} == {"Financials"}
        assert len(data["sectors"]) == 11

    def test_page_past_end(self, client, test_constants):
        data = client.get('/api/stocks/sp500?page=99').json
        assert data["stocks"] == []
        assert data["total"] == test_constants["SP500_COUNT"]

    def test_listing_failure_is_500(self, client):
        with patch('app.sp500_directory') as mock_directory:
            mock_directory.list_page.side_effect = RuntimeError("frame missing")
            response = client.get('/api/stocks/sp500')
        assert response.status_code == 500
        assert response.json == {"error": "Failed to get S&P 500 stocks"}


if __name__ == "__main__":
    pytest.main([__file__, "-v", "--tb=short"])
