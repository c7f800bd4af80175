"""Symbol <-> Tradier ticker codec.

Brokerage tickers come in two shapes:

* simple: ``AAPL``, ``SPX``, ``BRK/B`` (``/`` where canonical tickers use ``.``)
* option: ``ROOT`` + ``YYMMDD`` + ``C|P`` + 8-digit strike x1000, no padding,
  no dots, e.g. ``SPXW250725C05900000``

A ticker longer than 15 characters is an option; nothing else marks it.
Option encoding is lossy: ``BRK.B`` and ``BRKB`` options share one wire
form. Decoding an equity option therefore needs an underlying hint or a
successful cache/quote resolution to be exact; without either the stripped
root is used as the underlying (best effort).
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from symbolmap.cache import UnderlyingCache
from symbolmap.enums import SecurityType, default_option_style
from symbolmap.errors import (
    LookupFailedError,
    SymbologyError,
    UnparseableTickerError,
    UnsupportedSecurityError,
)
from symbolmap.indices import IndexClassifier, index_for_option_root
from symbolmap.models.symbol import DEFAULT_MARKET, Symbol
from symbolmap.osi import (
    OSI_ROOT_WIDTH,
    OSI_SUFFIX_LENGTH,
    format_osi,
    parse_osi,
    parse_suffix,
)
from symbolmap.tickers import (
    compact_option_ticker,
    to_brokerage_ticker,
    to_canonical_ticker,
)

logger = logging.getLogger(__name__)

SUPPORTED_SECURITY_TYPES: frozenset[SecurityType] = frozenset({
    SecurityType.EQUITY,
    SecurityType.INDEX,
    SecurityType.OPTION,
    SecurityType.INDEX_OPTION,
})


class TickerCodec:
    """Converts Symbols to Tradier tickers and back.

    Args:
        market: Market code for decoded symbols.
        index_classifier: Decides which roots are cash indices.
        underlying_cache: Memo of option root -> true underlying.
        quote_underlying: Capability returning the underlying ticker
            (brokerage form) for a full option ticker. Only called on a
            cache miss.
    """

    def __init__(
        self,
        market: str = DEFAULT_MARKET,
        index_classifier: IndexClassifier | None = None,
        underlying_cache: UnderlyingCache | None = None,
        quote_underlying: Callable[[str], str | None] | None = None,
    ) -> None:
        self.market = market
        self.index_classifier = index_classifier or IndexClassifier()
        self.underlying_cache = underlying_cache
        self.quote_underlying = quote_underlying

    @staticmethod
    def supports(security_type: SecurityType) -> bool:
        return security_type in SUPPORTED_SECURITY_TYPES

    def classify(self, ticker: str) -> SecurityType:
        """Infer the security type of a brokerage ticker from its shape."""
        if len(ticker) > OSI_SUFFIX_LENGTH:
            root = ticker[:-OSI_SUFFIX_LENGTH]
            if self.index_classifier.is_index(root):
                return SecurityType.INDEX_OPTION
            return SecurityType.OPTION
        if self.index_classifier.is_index(ticker):
            return SecurityType.INDEX
        return SecurityType.EQUITY

    # ------------------------------------------------------------- encode

    def encode(self, symbol: Symbol) -> str:
        """Return the Tradier ticker for ``symbol``.

        Raises:
            UnsupportedSecurityError: Unmapped security type or a canonical
                (chain-level) option.
            InvalidStrikeError: Strike not representable as 8 digits x1000.
        """
        security_type = symbol.security_type
        if security_type in (SecurityType.EQUITY, SecurityType.INDEX):
            return to_brokerage_ticker(symbol.value)

        if security_type.is_option:
            if symbol.is_canonical or symbol.right is None:
                raise UnsupportedSecurityError(
                    f"Canonical option {symbol.value} has no brokerage ticker"
                )
            osi = format_osi(symbol.option_root, symbol.expiry, symbol.right, symbol.strike)
            return compact_option_ticker(osi)

        raise UnsupportedSecurityError(
            f"Security type {security_type.value} is not supported by Tradier: {symbol.value}"
        )

    # ------------------------------------------------------------- decode

    def decode(
        self,
        ticker: str,
        underlying_brokerage_symbol: str | None = None,
        unresolved: dict[str, LookupFailedError | None] | None = None,
    ) -> Symbol:
        """Return the Symbol for a Tradier ticker.

        ``underlying_brokerage_symbol`` (e.g. ``"BRK/B"``) pins the
        underlying of an equity option; index options ignore it.

        ``unresolved`` is a caller-owned memo for a batch of decodes. Roots
        whose quote came back empty are recorded as None and decode to the
        root without another quote; roots whose quote failed record the
        error and fail again without another quote. Nothing in it reaches
        the shared cache.

        Raises:
            UnparseableTickerError: Option suffix is not date + right + strike.
            LookupFailedError: The underlying quote call failed.
        """
        if not isinstance(ticker, str) or not ticker.strip():
            raise UnparseableTickerError(f"Empty or non-string ticker: {ticker!r}")

        kind = self.classify(ticker)

        if kind is SecurityType.INDEX_OPTION:
            root = ticker[:-OSI_SUFFIX_LENGTH]
            contract = parse_osi(root.ljust(OSI_ROOT_WIDTH) + ticker[-OSI_SUFFIX_LENGTH:])
            underlying = Symbol.create(
                index_for_option_root(contract.root), SecurityType.INDEX, self.market,
            )
            return Symbol.create_option(
                underlying,
                contract.right,
                contract.strike,
                contract.expiry,
                market=self.market,
                option_root=contract.root,
            )

        if kind is SecurityType.OPTION:
            root = ticker[:-OSI_SUFFIX_LENGTH]
            expiry, right, strike = parse_suffix(ticker[-OSI_SUFFIX_LENGTH:])
            underlying_ticker = self._resolve_underlying(
                root, ticker, underlying_brokerage_symbol, unresolved,
            )
            underlying = Symbol.create(underlying_ticker, SecurityType.EQUITY, self.market)
            return Symbol.create_option(
                underlying,
                right,
                strike,
                expiry,
                style=default_option_style(SecurityType.OPTION),
                market=self.market,
            )

        if kind is SecurityType.INDEX:
            return Symbol.create(ticker, SecurityType.INDEX, self.market)
        return Symbol.create(to_canonical_ticker(ticker), SecurityType.EQUITY, self.market)

    def _resolve_underlying(
        self,
        root: str,
        ticker: str,
        underlying_brokerage_symbol: str | None,
        unresolved: dict[str, LookupFailedError | None] | None = None,
    ) -> str:
        if underlying_brokerage_symbol:
            return to_canonical_ticker(underlying_brokerage_symbol)

        cache = self.underlying_cache
        if cache is None:
            logger.debug("No underlying hint or cache for %s; using root %s", ticker, root)
            return root
        if self.quote_underlying is None:
            return cache.get(root) or root

        if unresolved is not None and root in unresolved:
            earlier = unresolved[root]
            if earlier is None:
                return root
            raise LookupFailedError(
                f"Underlying lookup for {ticker} skipped; {root} failed earlier: {earlier}",
                retryable=True,
            ) from earlier

        quote = self.quote_underlying
        try:
            underlying = cache.resolve(root, lambda _root: quote(ticker))
        except SymbologyError as exc:
            if unresolved is not None and isinstance(exc, LookupFailedError):
                unresolved[root] = exc
            raise
        except Exception as exc:
            error = LookupFailedError(
                f"Underlying lookup for {ticker} failed: {exc}",
                retryable=True,
            )
            if unresolved is not None:
                unresolved[root] = error
            raise error from exc

        if unresolved is not None and root not in cache:
            unresolved[root] = None
        return underlying


_default_codec = TickerCodec()


def encode(symbol: Symbol) -> str:
    """Encode with a default codec (curated index list, USA market)."""
    return _default_codec.encode(symbol)


def decode(ticker: str, underlying_brokerage_symbol: str | None = None) -> Symbol:
    """Decode with a default codec; equity option roots are not resolved."""
    return _default_codec.decode(ticker, underlying_brokerage_symbol)

