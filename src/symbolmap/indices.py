"""Curated index roots used to tell index options from equity options.

Tradier tickers carry no security-type tag, so an option root is treated as
an index only when it appears here (or an optional extra rule accepts it).
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

AVAILABLE_INDEX_TICKERS: frozenset[str] = frozenset({
    "SPX", "NDX", "VIX", "SPXW", "NQX", "VIXW", "RUT", "BKX", "BXD", "BXM",
    "BXN", "BXR", "CLL", "COR1M", "COR1Y", "COR30D", "COR3M", "COR6M",
    "COR9M", "DJX", "DUX", "DVS", "DXL", "EVZ", "FVX", "GVZ", "HGX", "MID",
    "MIDG", "MIDV", "MRUT", "NYA", "NYFANG", "NYXBT", "OEX", "OSX", "OVX",
    "XDA", "XDB", "XEO", "XMI", "XNDX", "XSP", "BRR", "BRTI", "CEX", "COMP",
    "DJCIAGC", "DJCICC", "DJCIGC", "DJCIGR", "DJCIIK", "DJCIKC", "DJCISB",
    "DJCISI", "DJR", "DRG", "PUT", "RUA", "RUI", "RVX", "SET", "SGX", "SKEW",
    "SPSIBI", "SVX", "TNX", "TYX", "UKX", "UTY", "VIF", "VIN", "VIX1D",
    "VIX1Y", "VIX3M", "VIX6M", "VIX9D", "VOLI", "VPD", "VPN", "VVIX", "VWA",
    "VWB", "VXD", "VXN", "VXO", "VXSLV", "VXTH", "VXTLT", "XAU", "DJI",
    "DWCPF", "UTIL", "DAX", "DXY", "RLS", "SMLG", "SPGSCI", "VAF", "VRO",
    "AEX", "DJINET", "DTX", "SP600", "SPSV", "FTW5000", "DWCF", "HSI", "N225",
    "SX5E", "RUTW", "NDXP",
})

# Weekly / PM-settled option roots listed against a differently named index.
INDEX_OPTION_ROOTS: dict[str, str] = {
    "SPXW": "SPX",
    "VIXW": "VIX",
    "NDXP": "NDX",
    "NQX": "NDX",
    "RUTW": "RUT",
    "MRUT": "RUT",
}


def index_for_option_root(root: str) -> str:
    """Return the index ticker an index-option root is written against."""
    return INDEX_OPTION_ROOTS.get(root, root)


class IndexClassifier:
    """Decides whether a root ticker names a cash index.

    The curated set is authoritative. ``extra_rule`` is an optional hook for
    a broader index-style heuristic; it can only add roots, never remove them.
    """

    def __init__(
        self,
        tickers: Iterable[str] = AVAILABLE_INDEX_TICKERS,
        extra_rule: Callable[[str], bool] | None = None,
    ) -> None:
        self.tickers = frozenset(t.upper() for t in tickers)
        self.extra_rule = extra_rule

    def with_tickers(self, extra: Iterable[str]) -> IndexClassifier:
        """Return a copy whose curated set also contains ``extra``."""
        return IndexClassifier(self.tickers | {t.upper() for t in extra}, self.extra_rule)

    def is_index(self, ticker: str) -> bool:
        if ticker in self.tickers:
            return True
        return bool(self.extra_rule and self.extra_rule(ticker))

    def __contains__(self, ticker: object) -> bool:
        return isinstance(ticker, str) and self.is_index(ticker)
