"""Fixed-width OSI option ticker formatting and parsing.

Layout: ``ROOT(6, space padded) YYMMDD C|P STRIKE(8, x1000)``, e.g.
``SPY   210319C00410000``. The trailing 15 characters are always the
date/right/strike suffix; everything before them is the root.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import NamedTuple

from symbolmap.errors import InvalidStrikeError, UnparseableTickerError
from symbolmap.enums import OptionRight

OSI_SUFFIX_LENGTH = 15
OSI_ROOT_WIDTH = 6

_STRIKE_SCALE = Decimal(1000)
_MAX_SCALED_STRIKE = 99_999_999


class OsiContract(NamedTuple):
    root: str
    expiry: date
    right: OptionRight
    strike: Decimal


def to_decimal(value: Decimal | int | float | str) -> Decimal:
    """Coerce a strike to Decimal without binary float artefacts."""
    if isinstance(value, Decimal):
        return value
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError) as exc:
        raise InvalidStrikeError(f"Strike is not a number: {value!r}") from exc


def scale_strike(strike: Decimal | int | float | str | None) -> int:
    """Return ``strike * 1000`` as an int, or raise InvalidStrikeError."""
    if strike is None:
        raise InvalidStrikeError("Option contract has no strike")
    value = to_decimal(strike)
    if not value.is_finite() or value < 0:
        raise InvalidStrikeError(f"Strike must be a non-negative number: {strike}")
    scaled = value * _STRIKE_SCALE
    if scaled != scaled.to_integral_value():
        raise InvalidStrikeError(f"Strike {strike} has more than 3 decimal places")
    if scaled > _MAX_SCALED_STRIKE:
        raise InvalidStrikeError(f"Strike {strike} does not fit in 8 digits")
    return int(scaled)


def format_osi(
    root: str,
    expiry: date,
    right: OptionRight,
    strike: Decimal | int | float | str,
) -> str:
    """Build the padded OSI ticker, e.g. ``AAPL  250912C00227500``."""
    scaled = scale_strike(strike)
    return f"{root:<{OSI_ROOT_WIDTH}}{expiry:%y%m%d}{right.letter}{scaled:08d}"


def _is_ascii_digits(text: str) -> bool:
    return text.isascii() and text.isdigit()


def parse_suffix(suffix: str) -> tuple[date, OptionRight, Decimal]:
    """Parse the 15-character ``YYMMDD`` + right + strike suffix."""
    if len(suffix) != OSI_SUFFIX_LENGTH:
        raise UnparseableTickerError(
            f"Option suffix must be {OSI_SUFFIX_LENGTH} characters: {suffix!r}"
        )
    date_part, right_part, strike_part = suffix[:6], suffix[6], suffix[7:]

    if not _is_ascii_digits(date_part):
        raise UnparseableTickerError(f"Invalid expiry in option suffix: {suffix!r}")
    try:
        expiry = datetime.strptime(date_part, "%y%m%d").date()
    except ValueError as exc:
        raise UnparseableTickerError(f"Invalid expiry in option suffix: {suffix!r}") from exc

    try:
        right = OptionRight.from_letter(right_part)
    except ValueError as exc:
        raise UnparseableTickerError(f"Invalid right in option suffix: {suffix!r}") from exc

    if not _is_ascii_digits(strike_part):
        raise UnparseableTickerError(f"Invalid strike in option suffix: {suffix!r}")
    strike = Decimal(int(strike_part)) / _STRIKE_SCALE

    return expiry, right, strike


def parse_osi(ticker: str) -> OsiContract:
    """Parse a (padded or compact) OSI ticker into its parts."""
    if len(ticker) <= OSI_SUFFIX_LENGTH:
        raise UnparseableTickerError(f"Too short for an option ticker: {ticker!r}")
    root = ticker[:-OSI_SUFFIX_LENGTH].strip()
    if not root:
        raise UnparseableTickerError(f"Option ticker has no root: {ticker!r}")
    expiry, right, strike = parse_suffix(ticker[-OSI_SUFFIX_LENGTH:])
    return OsiContract(root, expiry, right, strike)
