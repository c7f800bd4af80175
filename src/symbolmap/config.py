"""Symbol mapping configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class BrokerageProviderType(Enum):
    """Supported brokerage client backends."""

    TRADIER = "tradier"
    MOCK = "mock"


@dataclass
class SymbolMapConfig:
    """Configuration for an OptionsUniverseResolver.

    Attributes:
        provider: Brokerage client backend answering listing/quote calls.
        market: Market code stamped on every decoded symbol.
        reference_timezone: IANA zone whose calendar date defines "today"
            when dropping expired contracts.
        extra_index_tickers: Index roots added to the curated index list.
        tradier_access_token: Tradier API bearer token.
        tradier_environment: "live" or "paper" (sandbox).
        tradier_timeout_seconds: Per-request HTTP timeout.
    """

    provider: BrokerageProviderType = BrokerageProviderType.TRADIER
    market: str = "usa"
    reference_timezone: str = "America/New_York"
    extra_index_tickers: list[str] = field(default_factory=list)

    tradier_access_token: str | None = None
    tradier_environment: str = "live"
    tradier_timeout_seconds: float = 30.0
