"""symbolmap — Tradier ticker <-> venue-neutral Symbol mapping.

Ticker codec (equities, indices, options, index options), underlying
resolution cache for punctuation-stripped option roots, and an options
universe resolver that lists live contracts for an underlying.

Quick start::

    from symbolmap import SecurityType, Symbol, create_resolver_from_env
    resolver = create_resolver_from_env()
    contracts = resolver.lookup_symbols(Symbol.create("SPY", SecurityType.OPTION))
"""

from __future__ import annotations

import logging
import os

from symbolmap.cache import UnderlyingCache
from symbolmap.calendar import exchange_today
from symbolmap.codec import SUPPORTED_SECURITY_TYPES, TickerCodec, decode, encode
from symbolmap.config import BrokerageProviderType, SymbolMapConfig
from symbolmap.enums import OptionRight, OptionStyle, SecurityType, default_option_style
from symbolmap.errors import (
    InvalidStrikeError,
    LookupFailedError,
    SymbologyError,
    SymbologyErrorCode,
    UnparseableTickerError,
    UnsupportedSecurityError,
)
from symbolmap.indices import AVAILABLE_INDEX_TICKERS, INDEX_OPTION_ROOTS, IndexClassifier
from symbolmap.models.symbol import Symbol
from symbolmap.providers import create_provider
from symbolmap.providers.base import BaseBrokerageClient
from symbolmap.resolver import OptionsUniverseResolver

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Resolver
    "OptionsUniverseResolver",
    "build_resolver",
    "create_resolver_from_env",
    # Codec
    "TickerCodec",
    "encode",
    "decode",
    "SUPPORTED_SECURITY_TYPES",
    "UnderlyingCache",
    "IndexClassifier",
    "AVAILABLE_INDEX_TICKERS",
    "INDEX_OPTION_ROOTS",
    "exchange_today",
    # Providers
    "BaseBrokerageClient",
    "create_provider",
    # Config
    "SymbolMapConfig",
    "BrokerageProviderType",
    # Errors
    "SymbologyError",
    "SymbologyErrorCode",
    "UnsupportedSecurityError",
    "InvalidStrikeError",
    "UnparseableTickerError",
    "LookupFailedError",
    # Models
    "Symbol",
    "SecurityType",
    "OptionRight",
    "OptionStyle",
    "default_option_style",
]


def build_resolver(config: SymbolMapConfig) -> OptionsUniverseResolver:
    """Wire client, index classifier, cache and codec from a config."""
    kwargs: dict[str, object] = {}
    if config.provider is BrokerageProviderType.TRADIER:
        kwargs["access_token"] = config.tradier_access_token
        kwargs["environment"] = config.tradier_environment
        kwargs["timeout"] = config.tradier_timeout_seconds
    client = create_provider(config.provider, **kwargs)

    classifier = IndexClassifier().with_tickers(config.extra_index_tickers)
    return OptionsUniverseResolver(
        client,
        index_classifier=classifier,
        market=config.market,
        reference_timezone=config.reference_timezone,
    )


def create_resolver_from_env() -> OptionsUniverseResolver:
    """Zero-config factory — reads provider and credentials from env vars.

    Environment variables:
        SYMBOLMAP_PROVIDER: "tradier" or "mock" (default: "tradier").
        SYMBOLMAP_TIMEZONE: Reference timezone for expiry filtering
            (default: "America/New_York").
        SYMBOLMAP_EXTRA_INDEX_TICKERS: Comma-separated extra index roots.
        TRADIER_ACCESS_TOKEN: Tradier API token.
        TRADIER_ENVIRONMENT: "live" or "paper" (default: "live").
        TRADIER_TIMEOUT: HTTP timeout in seconds (default: 30).
    """
    extra = os.getenv("SYMBOLMAP_EXTRA_INDEX_TICKERS", "")
    config = SymbolMapConfig(
        provider=BrokerageProviderType(os.getenv("SYMBOLMAP_PROVIDER", "tradier").strip()),
        reference_timezone=os.getenv("SYMBOLMAP_TIMEZONE", "America/New_York"),
        extra_index_tickers=[t.strip() for t in extra.split(",") if t.strip()],
        tradier_access_token=os.getenv("TRADIER_ACCESS_TOKEN"),
        tradier_environment=os.getenv("TRADIER_ENVIRONMENT", "live"),
        tradier_timeout_seconds=float(os.getenv("TRADIER_TIMEOUT", "30")),
    )
    return build_resolver(config)
