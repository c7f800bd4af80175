"""Security classification enums."""

from __future__ import annotations

from enum import Enum


class SecurityType(Enum):
    """Kinds of security a Symbol can identify."""

    EQUITY = "equity"
    INDEX = "index"
    OPTION = "option"
    INDEX_OPTION = "index_option"
    FOREX = "forex"
    CRYPTO = "crypto"
    FUTURE = "future"

    @property
    def is_option(self) -> bool:
        return self in (SecurityType.OPTION, SecurityType.INDEX_OPTION)


class OptionRight(Enum):
    """Call or put."""

    CALL = "call"
    PUT = "put"

    @property
    def letter(self) -> str:
        """Single-letter OSI code: ``C`` or ``P``."""
        return "C" if self is OptionRight.CALL else "P"

    @classmethod
    def from_letter(cls, letter: str) -> OptionRight:
        if letter == "C":
            return cls.CALL
        if letter == "P":
            return cls.PUT
        raise ValueError(f"Invalid option right: {letter!r}")


class OptionStyle(Enum):
    """Exercise style."""

    AMERICAN = "american"
    EUROPEAN = "european"


def default_option_style(security_type: SecurityType) -> OptionStyle:
    """Equity options are American, cash-settled index options European."""
    if security_type is SecurityType.INDEX_OPTION:
        return OptionStyle.EUROPEAN
    return OptionStyle.AMERICAN
