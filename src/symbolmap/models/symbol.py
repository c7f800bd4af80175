"""Venue-neutral security identifier."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from symbolmap.indices import index_for_option_root
from symbolmap.enums import (
    OptionRight,
    OptionStyle,
    SecurityType,
    default_option_style,
)
from symbolmap.osi import OSI_SUFFIX_LENGTH, format_osi, to_decimal

DEFAULT_MARKET = "usa"


@dataclass(frozen=True)
class Symbol:
    """Immutable security identifier with structural equality.

    Option contracts carry the padded OSI ticker as ``value`` (e.g.
    ``"AAPL  250912C00227500"``). Canonical options (a whole chain, no
    contract fields) use ``"?ROOT"``.

    Attributes:
        value: Display ticker.
        security_type: Kind of security.
        market: Market code.
        underlying: Underlying symbol for derivatives.
        strike: Contract strike.
        expiry: Contract expiration date.
        right: Call or put.
        style: Exercise style.
    """

    value: str
    security_type: SecurityType
    market: str = DEFAULT_MARKET
    underlying: Symbol | None = None
    strike: Decimal | None = None
    expiry: date | None = None
    right: OptionRight | None = None
    style: OptionStyle | None = None

    def __str__(self) -> str:
        return self.value

    # ---- factories ----

    @classmethod
    def create(
        cls,
        ticker: str,
        security_type: SecurityType,
        market: str = DEFAULT_MARKET,
    ) -> Symbol:
        """Create a non-contract symbol.

        Option types produce a canonical option whose underlying is derived
        from ``ticker`` (an equity for OPTION, the mapped index for
        INDEX_OPTION).
        """
        if security_type is SecurityType.OPTION:
            underlying = cls.create(ticker, SecurityType.EQUITY, market)
            return cls.create_canonical_option(underlying, market=market)
        if security_type is SecurityType.INDEX_OPTION:
            underlying = cls.create(index_for_option_root(ticker), SecurityType.INDEX, market)
            return cls.create_canonical_option(underlying, option_root=ticker, market=market)
        return cls(value=ticker, security_type=security_type, market=market)

    @classmethod
    def create_canonical_option(
        cls,
        underlying: Symbol,
        option_root: str | None = None,
        market: str = DEFAULT_MARKET,
    ) -> Symbol:
        """Create the chain-level option symbol for ``underlying``."""
        security_type = _option_type_for(underlying)
        return cls(
            value=f"?{option_root or underlying.value}",
            security_type=security_type,
            market=market,
            underlying=underlying,
            style=default_option_style(security_type),
        )

    @classmethod
    def create_option(
        cls,
        underlying: Symbol | str,
        right: OptionRight,
        strike: Decimal | int | float | str,
        expiry: date,
        style: OptionStyle | None = None,
        market: str = DEFAULT_MARKET,
        option_root: str | None = None,
    ) -> Symbol:
        """Create an option contract.

        A string ``underlying`` is taken as an equity ticker. The contract is
        an INDEX_OPTION when the underlying is an index.

        Raises:
            InvalidStrikeError: If the strike cannot be written in OSI form.
        """
        if isinstance(underlying, str):
            underlying = cls.create(underlying, SecurityType.EQUITY, market)
        security_type = _option_type_for(underlying)
        strike = to_decimal(strike)
        root = option_root or underlying.value
        return cls(
            value=format_osi(root, expiry, right, strike),
            security_type=security_type,
            market=market,
            underlying=underlying,
            strike=strike,
            expiry=expiry,
            right=right,
            style=style or default_option_style(security_type),
        )

    # ---- properties ----

    @property
    def is_option(self) -> bool:
        return self.security_type.is_option

    @property
    def is_canonical(self) -> bool:
        """True for an option symbol naming a chain rather than a contract."""
        return self.is_option and self.expiry is None

    @property
    def option_root(self) -> str | None:
        """Root ticker of an option contract (``SPXW``, ``BRK.B``, ...)."""
        if not self.is_option:
            return None
        if self.is_canonical:
            return self.value.lstrip("?")
        return self.value[:-OSI_SUFFIX_LENGTH].rstrip()


def _option_type_for(underlying: Symbol) -> SecurityType:
    if underlying.security_type is SecurityType.INDEX:
        return SecurityType.INDEX_OPTION
    return SecurityType.OPTION
