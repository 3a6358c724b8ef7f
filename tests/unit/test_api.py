"""
Unit Tests for the HTTP Endpoints

Exercises the FastAPI app with TestClient and in-memory adapters, so no
request ever leaves the process.

Run with:
    pytest tests/unit/test_api.py -v
"""

import pytest
from fastapi.testclient import TestClient

from app import main as main_module
from app.descriptor import DESCRIPTOR
from app.main import app
from core.exceptions import UpstreamError
from core.exchange_manager import ExchangeManager
from core.schemas import Quote


SCANNER_URL = "/functions/cryptoArbitrageScanner"


# ============================================
# Fixtures
# ============================================

@pytest.fixture
def adapters(make_exchange):
    return {
        "binance": make_exchange("binance", quote=Quote(bid=60000, ask=60050)),
        "kraken": make_exchange("kraken", quote=Quote(bid=60100, ask=60040)),
        "bitstamp": make_exchange("bitstamp", error=UpstreamError("HTTP 500 from bitstamp")),
    }


@pytest.fixture
def client(adapters, monkeypatch):
    """TestClient with the global manager swapped for fake adapters (lifespan not run)"""
    monkeypatch.setattr(main_module, "manager", ExchangeManager(exchanges=adapters.values()))
    return TestClient(app)


def total_calls(adapters):
    return sum(len(a.calls) for a in adapters.values())


# ============================================
# Descriptor
# ============================================

class TestDescriptor:

    def test_get_returns_static_descriptor(self, client):
        response = client.get(SCANNER_URL)

        assert response.status_code == 200
        assert response.json() == DESCRIPTOR
        assert response.json()["input"]["required"] == ["symbol", "exchanges"]

    def test_get_makes_no_upstream_calls(self, client, adapters):
        client.get(SCANNER_URL)

        assert total_calls(adapters) == 0


# ============================================
# Scanner Invocation
# ============================================

class TestRunScanner:

    def test_reports_best_buy_and_sell(self, client):
        response = client.post(SCANNER_URL, json={
            "input": {"symbol": "BTC/USD", "exchanges": ["binance", "kraken"]}
        })

        assert response.status_code == 200
        assert response.json() == {
            "output": {
                "prices": {
                    "binance": {"bid": 60000.0, "ask": 60050.0},
                    "kraken": {"bid": 60100.0, "ask": 60040.0},
                },
                "bestBuy": "kraken",
                "bestSell": "kraken",
            }
        }

    def test_failed_exchange_gets_error_slot(self, client):
        response = client.post(SCANNER_URL, json={
            "input": {"symbol": "BTC/USD", "exchanges": ["bitstamp", "binance"]}
        })

        output = response.json()["output"]
        assert response.status_code == 200
        assert output["prices"]["bitstamp"] == {"error": "HTTP 500 from bitstamp"}
        assert output["bestBuy"] == "binance"
        assert output["bestSell"] == "binance"

    def test_unsupported_exchange(self, client):
        response = client.post(SCANNER_URL, json={"input": {"symbol": "BTC/USD", "exchanges": ["X"]}})

        assert response.status_code == 200
        assert response.json() == {
            "output": {
                "prices": {"X": {"error": "Unsupported exchange: X"}},
                "bestBuy": None,
                "bestSell": None,
            }
        }

    def test_soft_failed_quote_serializes_nulls(self, client, adapters):
        adapters["kraken"].quote = Quote()

        response = client.post(SCANNER_URL, json={"input": {"symbol": "FOO/USD", "exchanges": ["kraken"]}})

        assert response.json()["output"] == {
            "prices": {"kraken": {"bid": None, "ask": None}},
            "bestBuy": None,
            "bestSell": None,
        }

    def test_nan_quote_listed_first_is_not_picked(self, client, adapters):
        adapters["binance"].quote = Quote(bid=float("nan"), ask=float("nan"))

        response = client.post(SCANNER_URL, json={
            "input": {"symbol": "BTC/USD", "exchanges": ["binance", "kraken"]}
        })

        output = response.json()["output"]
        assert output["bestBuy"] == "kraken"
        assert output["bestSell"] == "kraken"

    def test_empty_exchange_list(self, client):
        response = client.post(SCANNER_URL, json={"input": {"symbol": "BTC/USD", "exchanges": []}})

        assert response.status_code == 200
        assert response.json() == {"output": {"prices": {}, "bestBuy": None, "bestSell": None}}

    def test_duplicate_exchanges_collapse(self, client, adapters):
        response = client.post(SCANNER_URL, json={
            "input": {"symbol": "BTC/USD", "exchanges": ["kraken", "kraken"]}
        })

        assert list(response.json()["output"]["prices"]) == ["kraken"]
        assert len(adapters["kraken"].calls) == 1


# ============================================
# Request Validation
# ============================================

class TestRequestValidation:
    """Malformed bodies answer 400 and never reach an exchange"""

    @pytest.mark.parametrize("body", [
        {"input": {"exchanges": ["binance"]}},
        {"input": {"symbol": "", "exchanges": ["binance"]}},
        {"input": {"symbol": "   ", "exchanges": ["binance"]}},
        {"input": {"symbol": "BTC/USD"}},
        {"input": {"symbol": "BTC/USD", "exchanges": "binance"}},
        {"input": {"symbol": "BTC/USD", "exchanges": {"binance": True}}},
        {"input": {"symbol": "BTC/USD", "exchanges": [1, 2]}},
        {"input": {"symbol": 42, "exchanges": ["binance"]}},
        {"input": {"symbol": "BTCUSD", "exchanges": ["binance"]}},
        {"input": {"symbol": "BTC/USD/EUR", "exchanges": ["binance"]}},
        {"symbol": "BTC/USD", "exchanges": ["binance"]},
        {"input": "BTC/USD"},
        ["BTC/USD"],
    ])
    def test_bad_body_is_rejected(self, client, adapters, body):
        response = client.post(SCANNER_URL, json=body)

        assert response.status_code == 400
        assert isinstance(response.json()["error"], str)
        assert total_calls(adapters) == 0

    def test_invalid_json_is_rejected(self, client, adapters):
        response = client.post(
            SCANNER_URL,
            content=b"{not json",
            headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400
        assert "JSON" in response.json()["error"]
        assert total_calls(adapters) == 0

    def test_missing_body_is_rejected(self, client):
        response = client.post(SCANNER_URL)

        assert response.status_code == 400


# ============================================
# System Endpoints
# ============================================

class TestSystemEndpoints:

    def test_root_lists_exchanges(self, client):
        body = client.get("/").json()

        assert body["status"] == "operational"
        assert body["exchanges"] == ["binance", "kraken", "bitstamp"]

    def test_exchanges_lists_aliases(self, client, adapters):
        adapters["kraken"].base_aliases = {"BTC": "XBT"}

        body = client.get("/exchanges").json()

        assert {"name": "kraken", "aliases": {"BTC": "XBT"}} in body["exchanges"]

    def test_health_all_up(self, client):
        body = client.get("/health").json()

        assert body == {"status": "healthy", "exchanges": {"binance": True, "kraken": True, "bitstamp": True}}

    def test_health_degraded(self, client, adapters):
        adapters["bitstamp"].healthy = False

        body = client.get("/health").json()

        assert body["status"] == "degraded"
        assert body["exchanges"]["bitstamp"] is False
