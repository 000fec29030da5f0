"""
Unit tests for ContentCache.

The cache evicts in insertion order: reads and value updates never promote
an entry.
"""
import random
from types import SimpleNamespace

import pytest

from error_handling import ConfigurationError
from tab_management import ABSENT, ContentCache
from utils.event_logger import EventType


class TestPutAndGet:
    """Test suite for basic storage"""

    def test_get_returns_stored_value(self, cache_factory):
        """Test that a stored value comes back"""
        cache = cache_factory()
        cache.put("a", "<content a>")
        assert cache.get("a") == "<content a>"

    def test_get_unknown_returns_absent(self, cache_factory):
        """Test that a missing key yields the ABSENT marker"""
        cache = cache_factory()
        assert cache.get("missing") is ABSENT
        assert not ABSENT

    def test_stored_none_is_distinguishable_from_absent(self, cache_factory):
        """Test that None is a legitimate cached value"""
        cache = cache_factory()
        cache.put("a", None)
        assert cache.get("a") is None
        assert cache.get("a") is not ABSENT
        assert "a" in cache

    def test_put_records_timestamp(self, cache_factory):
        """Test that entries carry the time they were stored"""
        cache = cache_factory()
        cache.put("a", 1)
        assert cache.stored_at("a") is not None
        assert cache.stored_at("missing") is None

    def test_update_refreshes_value_and_timestamp(self, cache_factory, monkeypatch):
        """Test that putting an existing key replaces value and timestamp"""
        clock = iter([100.0, 200.0])
        monkeypatch.setattr(
            "tab_management.content_cache.time",
            SimpleNamespace(time=lambda: next(clock))
        )
        cache = cache_factory()
        cache.put("a", 1)
        cache.put("a", 9)
        assert cache.get("a") == 9
        assert cache.stored_at("a") == 200.0
        assert len(cache) == 1


class TestEviction:
    """Test suite for the FIFO eviction policy"""

    def test_oldest_entry_is_evicted(self, cache_factory):
        """Test that the earliest inserted key goes first"""
        cache = cache_factory(capacity=2)
        cache.put("a", 1)
        cache.put("b", 2)
        cache.put("c", 3)
        assert cache.keys() == ["b", "c"]
        assert cache.get("a") is ABSENT

    def test_get_does_not_promote(self, cache_factory):
        """Test put(a), put(b), get(a), put(c) evicts a, not b"""
        cache = cache_factory(capacity=2)
        cache.put("a", 1)
        cache.put("b", 2)
        cache.get("a")
        cache.put("c", 3)
        assert set(cache.keys()) == {"b", "c"}

    def test_update_is_not_reinsertion(self, cache_factory):
        """Test put(a), put(b), put(a, 9), put(c) still evicts a"""
        cache = cache_factory(capacity=2)
        cache.put("a", 1)
        cache.put("b", 2)
        cache.put("a", 9)
        cache.put("c", 3)
        assert cache.keys() == ["b", "c"]
        assert cache.get("c") == 3

    def test_update_at_capacity_evicts_nothing(self, cache_factory):
        """Test that updating a present key never evicts"""
        cache = cache_factory(capacity=2)
        cache.put("a", 1)
        cache.put("b", 2)
        cache.put("b", 3)
        assert cache.keys() == ["a", "b"]
        assert cache.evictions == 0

    def test_eviction_logs_event(self, cache_factory, event_logger):
        """Test that every eviction is reported"""
        cache = cache_factory(capacity=1)
        cache.put("a", 1)
        cache.put("b", 2)
        events = event_logger.get_history(EventType.CACHE_EVICTED)
        assert [event.details["key"] for event in events] == ["a"]

    @pytest.mark.parametrize("capacity", [1, 2, 3, 5])
    def test_capacity_invariant_holds_after_every_put(self, cache_factory, capacity):
        """Test that size never exceeds capacity"""
        rng = random.Random(capacity)
        cache = cache_factory(capacity=capacity)
        for _ in range(100):
            cache.put(f"k{rng.randrange(12)}", rng.random())
            assert len(cache) <= capacity


class TestCapacity:
    """Test suite for capacity changes"""

    def test_default_capacity_is_five(self, event_logger):
        """Test the default cache limit"""
        assert ContentCache(event_logger=event_logger).capacity == 5

    def test_lowering_capacity_is_lazy(self, cache_factory):
        """Test that set_capacity never evicts by itself"""
        cache = cache_factory(capacity=4)
        for key in "abcd":
            cache.put(key, key)
        cache.set_capacity(2)
        assert cache.capacity == 2
        assert len(cache) == 4

    def test_next_put_trims_to_capacity(self, cache_factory):
        """Test that the next insert evicts oldest-first until there is room"""
        cache = cache_factory(capacity=4)
        for key in "abcd":
            cache.put(key, key)
        cache.set_capacity(2)
        cache.put("e", "e")
        assert cache.keys() == ["d", "e"]
        assert cache.evictions == 3

    def test_update_after_lowering_capacity_does_not_trim(self, cache_factory):
        """Test that only inserting a new key enforces the lowered capacity"""
        cache = cache_factory(capacity=3)
        for key in "abc":
            cache.put(key, key)
        cache.set_capacity(1)
        cache.put("a", "A")
        assert cache.keys() == ["a", "b", "c"]

    def test_raising_capacity_allows_more_entries(self, cache_factory):
        """Test that a larger capacity takes effect for future inserts"""
        cache = cache_factory(capacity=1)
        cache.put("a", 1)
        cache.set_capacity(3)
        cache.put("b", 2)
        cache.put("c", 3)
        assert cache.keys() == ["a", "b", "c"]

    @pytest.mark.parametrize("capacity", [0, -1, 2.5, "3", True])
    def test_invalid_capacity_rejected(self, cache_factory, capacity):
        """Test that capacity must be a positive integer"""
        cache = cache_factory(capacity=2)
        with pytest.raises(ConfigurationError):
            cache.set_capacity(capacity)
        assert cache.capacity == 2

    def test_invalid_initial_capacity_rejected(self, event_logger):
        """Test that construction validates capacity too"""
        with pytest.raises(ConfigurationError):
            ContentCache(capacity=0, event_logger=event_logger)


class TestClearAndStats:
    """Test suite for clearing and statistics"""

    def test_clear_empties_cache(self, cache_factory, event_logger):
        """Test that clear removes every entry"""
        cache = cache_factory()
        cache.put("a", 1)
        cache.put("b", 2)
        cache.clear()
        assert len(cache) == 0
        assert cache.get("a") is ABSENT
        assert event_logger.get_history(EventType.CACHE_CLEARED)[-1].details["count"] == 2

    def test_clear_resets_eviction_order(self, cache_factory):
        """Test that keys inserted after clear start a fresh order"""
        cache = cache_factory(capacity=2)
        cache.put("a", 1)
        cache.clear()
        cache.put("b", 2)
        cache.put("a", 3)
        cache.put("c", 4)
        assert cache.keys() == ["a", "c"]

    def test_stats_count_hits_and_misses(self, cache_factory):
        """Test hit, miss and eviction counters"""
        cache = cache_factory(capacity=1)
        cache.put("a", 1)
        cache.get("a")
        cache.get("b")
        cache.put("b", 2)
        stats = cache.get_stats()
        assert stats["hits"] == 1
        assert stats["misses"] == 1
        assert stats["hit_rate"] == 50
        assert stats["evictions"] == 1
        assert stats["cache_size"] == 1
        assert stats["capacity"] == 1

    def test_keys_is_a_copy(self, cache_factory):
        """Test that the eviction order cannot be changed from outside"""
        cache = cache_factory()
        cache.put("a", 1)
        keys = cache.keys()
        keys.append("b")
        assert cache.keys() == ["a"]
