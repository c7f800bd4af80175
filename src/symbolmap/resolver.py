"""OptionsUniverseResolver: lists the option contracts available for a symbol."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import date, datetime

from symbolmap.cache import UnderlyingCache
from symbolmap.calendar import DEFAULT_TIMEZONE, exchange_today
from symbolmap.codec import TickerCodec
from symbolmap.errors import LookupFailedError, SymbologyError
from symbolmap.indices import IndexClassifier
from symbolmap.models.symbol import Symbol
from symbolmap.providers.base import BaseBrokerageClient

logger = logging.getLogger(__name__)


class OptionsUniverseResolver:
    """Lookup key -> brokerage listing -> decode -> expiry filter.

    The resolver owns its UnderlyingCache (one per resolver unless a shared
    one is injected) and never builds a transport of its own: the brokerage
    client is passed in. An injected codec brings its own cache; passing a
    different ``underlying_cache`` alongside it is an error. The client's
    quote capability is only wired when it advertises ``quotes``.

    Usage::

        resolver = OptionsUniverseResolver(client)
        contracts = resolver.lookup_symbols(Symbol.create("SPY", SecurityType.OPTION))
    """

    def __init__(
        self,
        client: BaseBrokerageClient,
        *,
        codec: TickerCodec | None = None,
        underlying_cache: UnderlyingCache | None = None,
        index_classifier: IndexClassifier | None = None,
        market: str = "usa",
        reference_timezone: str = DEFAULT_TIMEZONE,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self.client = client
        if codec is not None:
            if codec.underlying_cache is None:
                codec.underlying_cache = (
                    underlying_cache if underlying_cache is not None else UnderlyingCache()
                )
            elif underlying_cache is not None and underlying_cache is not codec.underlying_cache:
                raise ValueError("underlying_cache conflicts with the injected codec's cache")
            self.underlying_cache = codec.underlying_cache
            self.codec = codec
        else:
            self.underlying_cache = (
                underlying_cache if underlying_cache is not None else UnderlyingCache()
            )
            quote = client.quote_underlying if "quotes" in client.capabilities() else None
            self.codec = TickerCodec(
                market=market,
                index_classifier=index_classifier,
                underlying_cache=self.underlying_cache,
                quote_underlying=quote,
            )
        self.reference_timezone = reference_timezone
        self._clock = clock

    def today(self) -> date:
        """Current calendar date in the reference timezone."""
        now = self._clock() if self._clock is not None else None
        return exchange_today(self.reference_timezone, now)

    def lookup_symbols(self, symbol: Symbol, include_expired: bool = False) -> list[Symbol]:
        """Return the option contracts listed for ``symbol``.

        ``symbol`` may be an equity, an index or a canonical option (its
        underlying is looked up). Security types Tradier cannot list
        (forex, crypto, ...) yield an empty list.

        Raises:
            LookupFailedError: The listing call failed; no partial result.
        """
        underlying = symbol.underlying
        lookup_name = underlying.value if underlying is not None else symbol.value
        underlying_type = underlying.security_type if underlying is not None else symbol.security_type

        if not self.codec.supports(underlying_type):
            logger.info(
                "Symbol lookup not supported for %s (%s)", lookup_name, underlying_type.value,
            )
            return []

        logger.info("Requesting symbol list for %s ...", lookup_name)

        brokerage_name = self.codec.encode(
            Symbol.create(lookup_name, underlying_type, symbol.market)
        )
        tickers = self._list_options(brokerage_name)

        # Roots whose quote came back empty or failed during this call
        unresolved: dict[str, LookupFailedError | None] = {}
        symbols: list[Symbol] = []
        for ticker in tickers:
            try:
                symbols.append(self.codec.decode(ticker, unresolved=unresolved))
            except SymbologyError as exc:
                logger.warning("Failed to convert symbol %s: %s", ticker, exc)

        if not include_expired:
            today = self.today()
            removed = [s for s in symbols if s.expiry is not None and s.expiry < today]
            if removed:
                symbols = [s for s in symbols if s.expiry is None or s.expiry >= today]
                logger.info(
                    "Removed contract(s) for having expiry in the past: %s",
                    ",".join(s.value for s in removed),
                )

        logger.info("Returning %d contract(s) for %s", len(symbols), lookup_name)
        return symbols

    def can_perform_selection(self) -> bool:
        """Selection is always allowed; no connectivity gating here."""
        return True

    def _list_options(self, brokerage_name: str) -> list[str]:
        try:
            return list(self.client.list_options(brokerage_name) or [])
        except LookupFailedError:
            raise
        except Exception as exc:
            raise LookupFailedError(
                f"Options lookup for {brokerage_name} failed: {exc}",
                retryable=True,
            ) from exc
