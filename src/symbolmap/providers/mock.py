"""Mock brokerage client for testing and CI — no API keys required."""

from __future__ import annotations

from symbolmap.providers.base import BaseBrokerageClient


class MockBrokerageClient(BaseBrokerageClient):
    """In-memory client returning pre-loaded listings and underlyings.

    Every call is recorded in ``option_requests`` / ``quote_requests`` so
    tests can assert how often the network would have been hit.
    """

    def __init__(self) -> None:
        self._options: dict[str, list[str]] = {}
        self._underlyings: dict[str, str | None] = {}
        self._error: Exception | None = None
        self.option_requests: list[str] = []
        self.quote_requests: list[str] = []

    # --- Pre-load helpers ---

    def set_options(self, root: str, tickers: list[str]) -> None:
        self._options[root] = list(tickers)

    def set_underlying(self, ticker: str, underlying: str | None) -> None:
        self._underlyings[ticker] = underlying

    def set_error(self, error: Exception | None) -> None:
        """Make ``list_options`` raise ``error`` (None to clear)."""
        self._error = error

    # --- Client implementation ---

    def list_options(self, root: str) -> list[str]:
        self.option_requests.append(root)
        if self._error is not None:
            raise self._error
        return list(self._options.get(root, []))

    def quote_underlying(self, ticker: str) -> str | None:
        self.quote_requests.append(ticker)
        return self._underlyings.get(ticker)

    def capabilities(self) -> set[str]:
        return {"options_lookup", "quotes"}
