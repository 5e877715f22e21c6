"""
Tests for the in-memory TTL response cache.
"""

from services.cache import TTLCache


def test_fresh_entry_served(clock):
    cache = TTLCache(ttl_seconds=3600, clock=clock)
    cache.set("robot", {"animations": [1]})
    clock.advance(3599.9)
    assert cache.get("robot") == {"animations": [1]}


def test_stale_entry_dropped(clock):
    cache = TTLCache(ttl_seconds=3600, clock=clock)
    cache.set("robot", {"animations": [1]})
    clock.advance(3600)
    assert cache.get("robot") is None
    assert len(cache) == 0


def test_last_write_wins(clock):
    cache = TTLCache(clock=clock)
    cache.set("robot", "old")
    cache.set("robot", "new")
    assert cache.get("robot") == "new"
    assert len(cache) == 1


def test_overwrite_refreshes_timestamp(clock):
    cache = TTLCache(ttl_seconds=10, clock=clock)
    cache.set("robot", "old")
    clock.advance(8)
    cache.set("robot", "new")
    clock.advance(8)
    assert cache.get("robot") == "new"


def test_bounded_cache_evicts_least_recently_used(clock):
    cache = TTLCache(max_entries=2, clock=clock)
    cache.set("a", 1)
    cache.set("b", 2)
    cache.get("a")
    cache.set("c", 3)
    assert cache.get("b") is None
    assert cache.get("a") == 1
    assert cache.get("c") == 3


def test_unbounded_when_max_entries_zero(clock):
    cache = TTLCache(max_entries=0, clock=clock)
    for i in range(100):
        cache.set(str(i), i)
    assert len(cache) == 100
    assert cache.stats()["entries"] == 100
