"""Symbol models."""

from symbolmap.enums import (
    OptionRight,
    OptionStyle,
    SecurityType,
    default_option_style,
)
from symbolmap.models.symbol import DEFAULT_MARKET, Symbol

__all__ = [
    "DEFAULT_MARKET",
    "OptionRight",
    "OptionStyle",
    "SecurityType",
    "Symbol",
    "default_option_style",
]
