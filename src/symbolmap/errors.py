"""Symbol mapping error types."""

from __future__ import annotations

from enum import Enum


class SymbologyErrorCode(Enum):
    """Error classification codes."""

    UNSUPPORTED_SECURITY = "unsupported_security"
    INVALID_STRIKE = "invalid_strike"
    UNPARSEABLE_TICKER = "unparseable_ticker"
    LOOKUP_FAILED = "lookup_failed"


class SymbologyError(Exception):
    """Symbol mapping exception with error code and retryable flag.

    Attributes:
        message: Human-readable error description.
        code: Structured error code for programmatic handling.
        retryable: Whether the caller may retry the same call later.
    """

    default_code = SymbologyErrorCode.UNPARSEABLE_TICKER

    def __init__(
        self,
        message: str,
        code: SymbologyErrorCode | None = None,
        retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.retryable = retryable


class UnsupportedSecurityError(SymbologyError):
    """Security type has no brokerage ticker form."""

    default_code = SymbologyErrorCode.UNSUPPORTED_SECURITY


class InvalidStrikeError(SymbologyError):
    """Strike cannot be written as a non-negative 8-digit integer x1000."""

    default_code = SymbologyErrorCode.INVALID_STRIKE


class UnparseableTickerError(SymbologyError):
    """Brokerage ticker does not end in a valid date/right/strike suffix."""

    default_code = SymbologyErrorCode.UNPARSEABLE_TICKER


class LookupFailedError(SymbologyError):
    """The brokerage collaborator failed to answer a listing or quote call."""

    default_code = SymbologyErrorCode.LOOKUP_FAILED
