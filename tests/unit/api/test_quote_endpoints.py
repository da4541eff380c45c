"""Tests for the quoting API endpoints."""

from unittest.mock import MagicMock

from fastapi.testclient import TestClient

from amm_quote import __version__
from amm_quote.api import endpoints
from amm_quote.api.endpoints import get_validator
from amm_quote.api.main import MAX_REQUEST_SIZE, app
from amm_quote.validation import TradeValidator
from tests.helpers import BUY_ONE_SOCKS_WITH_ETH, ONE


def make_payload(amount: str = "1", **context: object) -> dict:
    """Create a quote request for SOCKS paid with ETH."""
    ctx = {
        "target_asset": "SOCKS",
        "selected_asset": "ETH",
        "balances": {"ETH": str(100 * ONE), "SOCKS": str(10 * ONE)},
        "allowances": {"SOCKS": str(10 * ONE)},
        "reserves": {
            "SOCKS": {"reserve_reference": str(1000 * ONE), "reserve_token": str(50 * ONE)},
            "DAI": {"reserve_reference": str(100 * ONE), "reserve_token": str(20_000 * ONE)},
        },
    }
    ctx.update(context)
    return {"amount": amount, "context": ctx}


class TestQuoteBuy:
    def test_valid_buy(self, client):
        response = client.post("/quote/buy", json=make_payload())

        assert response.status_code == 200
        data = response.json()
        assert data["direction"] == "buy"
        assert data["inputAmount"] == str(BUY_ONE_SOCKS_WITH_ETH)
        assert data["outputAmount"] == str(ONE)
        assert int(data["maximumInput"]) > BUY_ONE_SOCKS_WITH_ETH
        assert data["error"] is None
        assert data["errors"] == []

    def test_insufficient_gas(self, client):
        payload = make_payload(balances={"ETH": str(5 * 10**15)})

        data = client.post("/quote/buy", json=payload).json()

        assert data["error"] == "insufficient_eth_gas"
        assert data["errors"] == ["insufficient_eth_gas", "insufficient_selected_token_balance"]
        assert data["inputAmount"] == str(BUY_ONE_SOCKS_WITH_ETH)

    def test_invalid_amount(self, client):
        data = client.post("/quote/buy", json=make_payload("abc")).json()
        assert data["error"] == "invalid_amount"
        assert data["inputAmount"] is None

    def test_invalid_trade(self, client):
        data = client.post("/quote/buy", json=make_payload("50")).json()
        assert data["error"] == "invalid_trade"
        assert data["outputAmount"] is None


class TestQuoteSell:
    def test_valid_sell(self, client):
        data = client.post("/quote/sell", json=make_payload()).json()
        assert data["direction"] == "sell"
        assert data["inputAmount"] == str(ONE)
        assert int(data["minimumOutput"]) < int(data["outputAmount"])
        assert data["maximumInput"] is None

    def test_insufficient_balance(self, client):
        payload = make_payload(balances={"ETH": str(ONE), "SOCKS": str(ONE // 2)})
        data = client.post("/quote/sell", json=payload).json()
        assert data["errors"] == ["insufficient_selected_token_balance"]
        assert data["outputAmount"] is not None


class TestRequestValidation:
    def test_missing_amount(self, client):
        response = client.post("/quote/buy", json={"context": {}})
        assert response.status_code == 422

    def test_target_is_reference(self, client):
        response = client.post("/quote/buy", json=make_payload(target_asset="ETH"))
        assert response.status_code == 422

    def test_negative_reserve(self, client):
        payload = make_payload(reserves={"SOCKS": {"reserve_reference": "-1", "reserve_token": "1"}})
        assert client.post("/quote/sell", json=payload).status_code == 422

    def test_duplicate_balance_keys(self, client):
        payload = make_payload(balances={"eth": "0", "ETH": str(100 * ONE)})
        assert client.post("/quote/buy", json=payload).status_code == 422

    def test_request_too_large(self, client):
        response = client.post(
            "/quote/buy",
            content=b"x" * (MAX_REQUEST_SIZE + 1),
            headers={"content-type": "application/json"},
        )
        assert response.status_code == 413


class TestValidatorFailures:
    def test_exception_becomes_invalid_trade(self):
        """A validator bug is reported as invalid_trade, not a 500."""
        broken = MagicMock(spec=TradeValidator)
        broken.validate_buy.side_effect = RuntimeError("boom")
        app.dependency_overrides[get_validator] = lambda: broken
        try:
            response = TestClient(app).post("/quote/buy", json=make_payload())
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 200
        assert response.json()["error"] == "invalid_trade"

    def test_default_validator_from_environment(self, monkeypatch):
        monkeypatch.setenv("AMM_QUOTE_SLIPPAGE_BPS", "0")
        monkeypatch.setattr(endpoints, "_default_validator", None)

        data = TestClient(app).post("/quote/buy", json=make_payload()).json()

        assert data["maximumInput"] == data["inputAmount"]
        assert get_validator().config.slippage_bps == 0


class TestRateUsd:
    def test_rate(self, client):
        payload = make_payload()["context"]
        response = client.post("/rate/usd", json={"asset": "socks", "reserves": payload["reserves"]})

        assert response.status_code == 200
        assert response.json() == {"asset": "SOCKS", "rate": str(4000 * ONE), "available": True}

    def test_unavailable(self, client):
        response = client.post("/rate/usd", json={"asset": "SOCKS", "reserves": {}})
        assert response.json() == {"asset": "SOCKS", "rate": None, "available": False}


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "version": __version__}
