"""Unit tests for ResultCache."""

import threading

import pytest
from cachetools import FIFOCache

from category_suggest.repositories.cache import ResultCache


class TestResultCache:
    """Test suite for ResultCache."""

    def test_get_missing_returns_none(self, result_cache):
        assert result_cache.get("cats") is None
        assert not result_cache.contains("cats")
        assert "cats" not in result_cache

    def test_put_then_get(self, result_cache):
        result_cache.put("cats", ["Cats", "Cats 2024"])

        assert result_cache.contains("cats")
        assert result_cache.get("cats") == ["Cats", "Cats 2024"]
        assert len(result_cache) == 1

    def test_initial_entries(self):
        cache = ResultCache({"cats": ["Cats"], "dogs": ["Dogs"]})

        assert cache.get("dogs") == ["Dogs"]
        assert len(cache) == 2

    def test_stored_entry_is_a_snapshot(self, result_cache):
        items = ["Cats"]
        result_cache.put("cats", items)
        items.append("Cats 1999")

        returned = result_cache.get("cats")
        returned.append("Mutated")

        assert result_cache.get("cats") == ["Cats"]

    def test_empty_list_is_a_hit(self, result_cache):
        result_cache.put("zzz", [])

        assert result_cache.contains("zzz")
        assert result_cache.get("zzz") == []

    def test_put_replaces_entry(self, result_cache):
        result_cache.put("cats", ["Cats"])
        result_cache.put("cats", ["Kittens"])

        assert result_cache.get("cats") == ["Kittens"]
        assert len(result_cache) == 1

    def test_snapshot_is_read_only_and_detached(self, result_cache):
        result_cache.put("cats", ["Cats"])
        snapshot = result_cache.snapshot()
        result_cache.put("dogs", ["Dogs"])

        assert dict(snapshot) == {"cats": ("Cats",)}
        with pytest.raises(TypeError):
            snapshot["dogs"] = ("Dogs",)

    def test_max_entries_evicts_oldest(self):
        cache = ResultCache(max_entries=2)
        cache.put("a", ["A"])
        cache.put("b", ["B"])
        cache.put("a", ["A2"])
        cache.put("c", ["C"])

        assert not cache.contains("b")
        assert cache.get("a") == ["A2"]
        assert cache.get("c") == ["C"]

    def test_bounded_cache_uses_fifo_store(self):
        cache = ResultCache(max_entries=3)
        for i in range(10):
            cache.put(str(i), [str(i)])

        assert isinstance(cache._entries, FIFOCache)
        assert cache._entries.maxsize == 3
        assert dict(cache.snapshot()) == {"7": ("7",), "8": ("8",), "9": ("9",)}

    def test_unbounded_cache_keeps_everything(self, result_cache):
        for i in range(1000):
            result_cache.put(str(i), [])

        assert len(result_cache) == 1000

    def test_invalid_max_entries(self):
        with pytest.raises(ValueError):
            ResultCache(max_entries=0)

    def test_clear(self, result_cache):
        result_cache.put("cats", ["Cats"])
        result_cache.clear()

        assert len(result_cache) == 0

    def test_concurrent_writes_and_reads(self, result_cache):
        def writer(n: int) -> None:
            for i in range(200):
                result_cache.put(f"{n}-{i}", [str(i)])

        def reader() -> None:
            for _ in range(200):
                result_cache.snapshot()
                result_cache.get("0-0")

        threads = [threading.Thread(target=writer, args=(n,)) for n in range(4)]
        threads += [threading.Thread(target=reader) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(result_cache) == 800
