"""Abstract base class for brokerage clients consumed by the resolver."""

from __future__ import annotations

from abc import ABC, abstractmethod


class BaseBrokerageClient(ABC):
    """The two brokerage calls symbol mapping depends on.

    Transport concerns (auth, retries, rate limits, timeouts) belong to the
    implementation; the resolver and cache only see these methods.
    """

    @abstractmethod
    def list_options(self, root: str) -> list[str]:
        """List raw option tickers for an underlying.

        Args:
            root: Brokerage-form underlying ticker (``"SPY"``, ``"BRK/B"``).

        Returns:
            Option tickers such as ``"SPY250725C00600000"``; an empty list
            when the brokerage has nothing for ``root``.
        """
        ...

    def quote_underlying(self, ticker: str) -> str | None:
        """Return the underlying ticker (brokerage form) of an option, if known."""
        raise NotImplementedError

    def capabilities(self) -> set[str]:
        """Return the set of supported features: ``options_lookup``, ``quotes``."""
        return {"options_lookup"}
