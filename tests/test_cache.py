"""Tests for the underlying resolution cache."""

import threading
import time

import pytest

from symbolmap.cache import UnderlyingCache


class _CountingLookup:
    def __init__(self, answer):
        self.answer = answer
        self.calls: list[str] = []

    def __call__(self, root):
        self.calls.append(root)
        return self.answer


class TestUnderlyingCache:
    def test_single_lookup_then_hit(self):
        cache = UnderlyingCache()
        lookup = _CountingLookup("BRK/B")
        assert cache.resolve("BRKB", lookup) == "BRK.B"
        assert cache.resolve("BRKB", lookup) == "BRK.B"
        assert lookup.calls == ["BRKB"]

    def test_get_and_contains(self):
        cache = UnderlyingCache()
        assert cache.get("BRKB") is None
        cache.resolve("BRKB", _CountingLookup("BRK/B"))
        assert cache.get("BRKB") == "BRK.B"
        assert "BRKB" in cache
        assert len(cache) == 1

    @pytest.mark.parametrize("answer", [None, "", "  ", "0"])
    def test_empty_answer_falls_back_uncached(self, answer):
        cache = UnderlyingCache()
        assert cache.resolve("BRKB", _CountingLookup(answer)) == "BRKB"
        assert "BRKB" not in cache

        # A later successful lookup still populates the cache
        assert cache.resolve("BRKB", _CountingLookup("BRK/B")) == "BRK.B"
        assert cache.get("BRKB") == "BRK.B"

    def test_lookup_error_propagates(self):
        def boom(root):
            raise TimeoutError("slow")

        cache = UnderlyingCache()
        with pytest.raises(TimeoutError):
            cache.resolve("BRKB", boom)
        assert len(cache) == 0

    def test_plain_ticker_unchanged(self):
        cache = UnderlyingCache()
        assert cache.resolve("AAPL", _CountingLookup("AAPL")) == "AAPL"

    def test_instances_independent(self):
        a, b = UnderlyingCache(), UnderlyingCache()
        a.resolve("BRKB", _CountingLookup("BRK/B"))
        assert "BRKB" not in b

    def test_concurrent_resolve_consistent(self):
        cache = UnderlyingCache()
        calls: list[str] = []
        lock = threading.Lock()

        def slow_lookup(root):
            with lock:
                calls.append(root)
            time.sleep(0.01)
            return "BRK/B"

        results: list[str] = []

        def worker():
            results.append(cache.resolve("BRKB", slow_lookup))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results == ["BRK.B"] * 8
        assert 1 <= len(calls) <= 8
        assert cache.get("BRKB") == "BRK.B"
        assert len(cache) == 1
