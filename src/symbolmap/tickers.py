"""Ticker punctuation conventions: canonical ``BRK.B`` vs brokerage ``BRK/B``."""

from __future__ import annotations

CANONICAL_SEPARATOR = "."
BROKERAGE_SEPARATOR = "/"


def to_brokerage_ticker(ticker: str) -> str:
    return ticker.replace(CANONICAL_SEPARATOR, BROKERAGE_SEPARATOR)


def to_canonical_ticker(ticker: str) -> str:
    return ticker.replace(BROKERAGE_SEPARATOR, CANONICAL_SEPARATOR)


def compact_option_ticker(osi_ticker: str) -> str:
    """Drop OSI padding and dots: ``BRK.B 250620C00190000`` -> ``BRKB250620C00190000``."""
    return osi_ticker.replace(" ", "").replace(CANONICAL_SEPARATOR, "")
