"""Tradier REST client for option listings and underlying quotes.

Only the two market-data endpoints symbol mapping needs are wrapped:

* ``GET /v1/markets/options/lookup?underlying=SPY``
* ``GET /v1/markets/quotes?symbols=BRKB250620C00190000``

Retries and rate limiting are left to the caller.
"""

from __future__ import annotations

import logging
import os
from typing import Any

import requests

from symbolmap.errors import LookupFailedError
from symbolmap.providers.base import BaseBrokerageClient

logger = logging.getLogger(__name__)

BASE_URLS: dict[str, str] = {
    "live": "https://api.tradier.com",
    "paper": "https://sandbox.tradier.com",
}


def _as_list(value: Any) -> list[Any]:
    """Tradier returns a bare object instead of a one-element list."""
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


class TradierClient(BaseBrokerageClient):
    """Fetch option listings and quotes from the Tradier API.

    Capabilities: options_lookup, quotes.
    """

    def __init__(
        self,
        access_token: str | None = None,
        environment: str = "live",
        timeout: float = 30.0,
        session: requests.Session | None = None,
    ) -> None:
        self.access_token = access_token or os.getenv("TRADIER_ACCESS_TOKEN")
        if not self.access_token:
            raise LookupFailedError(
                "Tradier access token required. Set TRADIER_ACCESS_TOKEN env var or pass access_token.",
            )
        if environment not in BASE_URLS:
            raise ValueError(
                f"Invalid Tradier environment: {environment}. Valid: {list(BASE_URLS)}"
            )

        self.base_url = BASE_URLS[environment]
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({
            "Authorization": f"Bearer {self.access_token}",
            "Accept": "application/json",
        })

    def capabilities(self) -> set[str]:
        return {"options_lookup", "quotes"}

    # ----------------------------------------------------------- options

    def list_options(self, root: str) -> list[str]:
        data = self._get("/v1/markets/options/lookup", {"underlying": root})
        tickers: list[str] = []
        for entry in _as_list(data.get("symbols")):
            tickers.extend(_as_list(entry.get("options")))
        logger.debug("Tradier options lookup %s returned %d ticker(s)", root, len(tickers))
        return tickers

    # ------------------------------------------------------------ quotes

    def quote_underlying(self, ticker: str) -> str | None:
        data = self._get("/v1/markets/quotes", {"symbols": ticker})
        quotes = data.get("quotes") or {}
        for quote in _as_list(quotes.get("quote")):
            underlying = quote.get("underlying")
            if underlying:
                return str(underlying)
        return None

    # ---------------------------------------------------------- internal

    def _get(self, path: str, params: dict[str, str]) -> dict[str, Any]:
        url = f"{self.base_url}{path}"
        try:
            resp = self.session.get(url, params=params, timeout=self.timeout)
        except (requests.Timeout, requests.ConnectionError) as exc:
            raise LookupFailedError(
                f"Tradier request {path} failed: {exc}",
                retryable=True,
            ) from exc
        except requests.RequestException as exc:
            raise LookupFailedError(f"Tradier request {path} failed: {exc}") from exc

        if resp.status_code != 200:
            retryable = resp.status_code == 429 or resp.status_code >= 500
            raise LookupFailedError(
                f"Tradier {path} returned HTTP {resp.status_code}: {resp.text[:200]}",
                retryable=retryable,
            )

        try:
            payload = resp.json()
        except ValueError as exc:
            raise LookupFailedError(f"Tradier {path} returned invalid JSON") from exc
        return payload if isinstance(payload, dict) else {}
