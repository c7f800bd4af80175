"""Tests for the Tradier REST client (HTTP session mocked)."""

from unittest.mock import MagicMock

import pytest
import requests

from symbolmap.errors import LookupFailedError
from symbolmap.providers.tradier import TradierClient


def _response(status_code=200, payload=None, text=""):
    resp = MagicMock()
    resp.status_code = status_code
    resp.json.return_value = payload
    resp.text = text
    return resp


def _client(resp=None, environment="live"):
    session = MagicMock()
    session.headers = {}
    if resp is not None:
        session.get.return_value = resp
    return TradierClient(access_token="token", environment=environment, session=session), session


class TestInit:
    def test_headers(self):
        _, session = _client()
        assert session.headers["Authorization"] == "Bearer token"
        assert session.headers["Accept"] == "application/json"

    def test_token_from_env(self, monkeypatch):
        monkeypatch.setenv("TRADIER_ACCESS_TOKEN", "env-token")
        client = TradierClient(session=MagicMock(headers={}))
        assert client.access_token == "env-token"

    def test_missing_token(self, monkeypatch):
        monkeypatch.delenv("TRADIER_ACCESS_TOKEN", raising=False)
        with pytest.raises(LookupFailedError):
            TradierClient(session=MagicMock(headers={}))

    def test_invalid_environment(self):
        with pytest.raises(ValueError):
            TradierClient(access_token="token", environment="staging", session=MagicMock(headers={}))

    def test_paper_uses_sandbox(self):
        client, _ = _client(environment="paper")
        assert client.base_url == "https://sandbox.tradier.com"

    def test_capabilities(self):
        client, _ = _client()
        assert client.capabilities() == {"options_lookup", "quotes"}


class TestListOptions:
    def test_flattens_roots(self):
        payload = {"symbols": [
            {"rootSymbol": "SPX", "options": ["SPX250718P05000000"]},
            {"rootSymbol": "SPXW", "options": ["SPXW250725C05900000", "SPXW250725P05900000"]},
        ]}
        client, session = _client(_response(payload=payload))
        assert client.list_options("SPX") == [
            "SPX250718P05000000", "SPXW250725C05900000", "SPXW250725P05900000",
        ]
        session.get.assert_called_once_with(
            "https://api.tradier.com/v1/markets/options/lookup",
            params={"underlying": "SPX"},
            timeout=30.0,
        )

    def test_single_root_object(self):
        payload = {"symbols": {"rootSymbol": "SPY", "options": "SPY250725C00600000"}}
        client, _ = _client(_response(payload=payload))
        assert client.list_options("SPY") == ["SPY250725C00600000"]

    def test_null_symbols(self):
        client, _ = _client(_response(payload={"symbols": None}))
        assert client.list_options("EURUSD") == []


class TestQuoteUnderlying:
    def test_returns_underlying(self):
        payload = {"quotes": {"quote": {"symbol": "BRKB250620C00190000", "underlying": "BRK/B"}}}
        client, session = _client(_response(payload=payload))
        assert client.quote_underlying("BRKB250620C00190000") == "BRK/B"
        assert session.get.call_args.kwargs["params"] == {"symbols": "BRKB250620C00190000"}

    def test_quote_list(self):
        payload = {"quotes": {"quote": [{"symbol": "X", "underlying": "BF/B"}]}}
        client, _ = _client(_response(payload=payload))
        assert client.quote_underlying("X") == "BF/B"

    def test_unmatched(self):
        payload = {"quotes": {"unmatched_symbols": {"symbol": "NOPE"}}}
        client, _ = _client(_response(payload=payload))
        assert client.quote_underlying("NOPE") is None


class TestErrors:
    @pytest.mark.parametrize("status,retryable", [(429, True), (500, True), (503, True), (401, False)])
    def test_http_status(self, status, retryable):
        client, _ = _client(_response(status_code=status, text="nope"))
        with pytest.raises(LookupFailedError) as exc_info:
            client.list_options("SPY")
        assert exc_info.value.retryable is retryable

    @pytest.mark.parametrize("exc", [requests.Timeout("slow"), requests.ConnectionError("down")])
    def test_transport_retryable(self, exc):
        client, session = _client()
        session.get.side_effect = exc
        with pytest.raises(LookupFailedError) as exc_info:
            client.list_options("SPY")
        assert exc_info.value.retryable
        assert exc_info.value.__cause__ is exc

    def test_other_request_error_not_retryable(self):
        client, session = _client()
        session.get.side_effect = requests.RequestException("bad")
        with pytest.raises(LookupFailedError) as exc_info:
            client.quote_underlying("SPY")
        assert not exc_info.value.retryable

    def test_invalid_json(self):
        resp = _response()
        resp.json.side_effect = ValueError("not json")
        client, _ = _client(resp)
        with pytest.raises(LookupFailedError):
            client.list_options("SPY")
