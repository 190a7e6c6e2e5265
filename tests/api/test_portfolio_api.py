"""
API tests for the portfolio summary endpoint.

Tests cover:
- Valuation in the configured and overridden base currency
- Failing holdings zeroed without failing the request
- Sector allocation
- Validation errors (422)
"""

import pytest
from fastapi.testclient import TestClient

from stockboard.core.exceptions import UpstreamError

from tests.conftest import make_quote


# =============================================================================
# SUMMARY TESTS
# =============================================================================


class TestPortfolioSummaryAPI:
    """Tests for POST /api/portfolio/summary."""

    def test_summary_in_configured_base(self, client: TestClient):
        """
        GIVEN 10 AAPL held in USD and a server base currency of JPY at 150
        WHEN I POST /api/portfolio/summary
        THEN the line and totals are valued in JPY
        """
        response = client.post("/api/portfolio/summary", json={
            "holdings": [{"id": "h1", "symbol": "AAPL", "quantity": 10}],
        })

        assert response.status_code == 200
        data = response.json()
        assert data["base_currency"] == "JPY"
        assert data["is_mock"] is False
        line = data["lines"][0]
        assert line["holding_id"] == "h1"
        assert line["native_value"] == pytest.approx(2305.0)
        assert line["base_value"] == pytest.approx(345750.0)
        assert line["day_change_base"] == pytest.approx(4275.0)
        assert data["summary"]["total_value_base"] == pytest.approx(345750.0)

    def test_override_base_currency_and_rate(self, client: TestClient):
        response = client.post("/api/portfolio/summary", json={
            "holdings": [{"symbol": "7203.T", "quantity": 100, "currency": "JPY"}],
            "base_currency": "USD",
            "usd_jpy_rate": 125,
        })

        assert response.status_code == 200
        data = response.json()
        assert data["base_currency"] == "USD"
        # default upstream quote is 230.50 JPY -> 23050 / 125
        assert data["lines"][0]["base_value"] == pytest.approx(184.4)

    def test_failing_holding_zeroed(self, client: TestClient, upstream):
        """
        GIVEN three holdings where one symbol's upstream fetch fails
        WHEN I POST /api/portfolio/summary
        THEN the response is 200 with the failing line zeroed and an error message
        """
        upstream.script["BAD"] = UpstreamError("BAD", "connection reset")
        upstream.script["MSFT"] = make_quote("MSFT", price=400.0, previous_close=400.0)

        response = client.post("/api/portfolio/summary", json={
            "holdings": [
                {"id": "a", "symbol": "AAPL", "quantity": 1},
                {"id": "b", "symbol": "BAD", "quantity": 5},
                {"id": "c", "symbol": "MSFT", "quantity": 1},
            ],
            "base_currency": "USD",
        })

        assert response.status_code == 200
        lines = {line["holding_id"]: line for line in response.json()["lines"]}
        assert lines["b"]["base_value"] == 0
        assert lines["b"]["current_price"] == 0
        assert "connection reset" in lines["b"]["error"]
        assert lines["a"]["error"] is None
        assert response.json()["summary"]["total_value_base"] == pytest.approx(630.50)

    def test_sector_allocation(self, client: TestClient):
        response = client.post("/api/portfolio/summary", json={
            "holdings": [
                {"symbol": "AAPL", "quantity": 1, "user_sector": "Technology"},
                {"symbol": "MSFT", "quantity": 1, "user_sector": "Technology"},
                {"symbol": "JPM", "quantity": 1, "user_sector": "Financial"},
            ],
            "base_currency": "USD",
        })

        sectors = {s["name"]: s["value"] for s in response.json()["sectors"]}
        assert sectors == {
            "Technology": pytest.approx(461.0),
            "Financial": pytest.approx(230.5),
        }

    def test_empty_holdings(self, client: TestClient):
        response = client.post("/api/portfolio/summary", json={"holdings": []})

        assert response.status_code == 200
        data = response.json()
        assert data["lines"] == []
        assert data["summary"]["portfolio_day_change_percent"] == 0
        assert data["sectors"] == []

    def test_synthetic_mode(self, client: TestClient, upstream):
        response = client.post("/api/portfolio/summary", json={
            "holdings": [{"symbol": "SPY", "quantity": 2}],
            "mode": "synthetic",
        })

        assert response.status_code == 200
        data = response.json()
        assert data["is_mock"] is True
        assert data["lines"][0]["sector"] == "Index"
        assert upstream.calls == []


# =============================================================================
# VALIDATION TESTS
# =============================================================================


class TestPortfolioValidationAPI:
    """Tests for request validation."""

    @pytest.mark.parametrize("quantity", [0, -3])
    def test_non_positive_quantity_is_422(self, client: TestClient, quantity):
        response = client.post("/api/portfolio/summary", json={
            "holdings": [{"symbol": "AAPL", "quantity": quantity}],
        })

        assert response.status_code == 422

    def test_unsupported_currency_is_422(self, client: TestClient):
        response = client.post("/api/portfolio/summary", json={
            "holdings": [{"symbol": "AAPL", "quantity": 1, "currency": "EUR"}],
        })

        assert response.status_code == 422

    def test_non_positive_rate_is_422(self, client: TestClient):
        response = client.post("/api/portfolio/summary", json={
            "holdings": [],
            "usd_jpy_rate": 0,
        })

        assert response.status_code == 422

    def test_empty_symbol_is_422(self, client: TestClient):
        response = client.post("/api/portfolio/summary", json={
            "holdings": [{"symbol": "", "quantity": 1}],
        })

        assert response.status_code == 422
