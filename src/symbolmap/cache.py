"""Process-lifetime cache of option root -> true underlying ticker.

Tradier strips punctuation from option roots (``BRK.B`` options are listed as
``BRKB...``), so the real underlying has to be recovered with a quote call.
The answer never changes for a given root, so it is memoised here.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable

from symbolmap.tickers import to_canonical_ticker

logger = logging.getLogger(__name__)

UnderlyingLookup = Callable[[str], str | None]


def _usable(raw: str | None) -> str | None:
    if raw is None:
        return None
    text = str(raw).strip()
    if not text or text == "0":
        return None
    return to_canonical_ticker(text)


class UnderlyingCache:
    """Append-only root -> underlying map, safe for concurrent use.

    Reads never take the lock. Writes publish a complete value under a lock
    (last writer wins). Concurrent misses on one root may each call the
    lookup; they all store the same answer.
    """

    def __init__(self) -> None:
        self._store: dict[str, str] = {}
        self._write_lock = threading.Lock()

    def get(self, root: str) -> str | None:
        """Return the cached underlying, or None on miss."""
        return self._store.get(root)

    def resolve(self, root: str, lookup: UnderlyingLookup) -> str:
        """Return the canonical underlying ticker for ``root``.

        On miss, ``lookup(root)`` is called and its brokerage-form answer
        (``BRK/B``) is stored in canonical form (``BRK.B``). An empty answer
        falls back to ``root`` and is not cached. Exceptions from ``lookup``
        propagate.
        """
        cached = self._store.get(root)
        if cached is not None:
            logger.debug("Underlying cache hit: %s -> %s", root, cached)
            return cached

        logger.debug("Underlying cache miss: %s", root)
        underlying = _usable(lookup(root))
        if underlying is None:
            logger.debug("No underlying returned for %s; using root as-is", root)
            return root

        with self._write_lock:
            self._store[root] = underlying
        return underlying

    def __contains__(self, root: object) -> bool:
        return root in self._store

    def __len__(self) -> int:
        return len(self._store)
