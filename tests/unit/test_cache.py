"""Tests for the TTL cache repository."""

from fakes import FakeClock

from app.repositories.common import CacheRepository

TTL = 15 * 60


def make_cache() -> tuple[CacheRepository, FakeClock]:
    clock = FakeClock()
    return CacheRepository(ttl=TTL, clock=clock), clock


class TestGetSet:
    def test_missing_key(self):
        cache, _ = make_cache()
        assert cache.get("country:japan") is None

    def test_roundtrip(self):
        cache, _ = make_cache()
        value = {"name": "Japan"}
        cache.set("country:japan", value)
        assert cache.get("country:japan") is value

    def test_overwrite_restamps(self):
        cache, clock = make_cache()
        cache.set("k", "old")
        clock.advance(TTL - 10)
        cache.set("k", "new")
        clock.advance(TTL - 10)
        assert cache.get("k") == "new"

    def test_namespaced_keys_independent(self):
        cache, _ = make_cache()
        cache.set("country:japan", "pulse")
        cache.set("countries:all", "list")
        assert cache.get("country:japan") == "pulse"
        assert cache.get("countries:all") == "list"


class TestExpiry:
    def test_visible_just_before_ttl(self):
        cache, clock = make_cache()
        cache.set("k", "v")
        clock.advance(TTL - 0.001)
        assert cache.get("k") == "v"

    def test_absent_at_ttl(self):
        cache, clock = make_cache()
        cache.set("k", "v")
        clock.advance(TTL)
        assert cache.get("k") is None

    def test_stale_entry_evicted_on_read(self):
        cache, clock = make_cache()
        cache.set("k", "v")
        clock.advance(TTL + 1)
        assert cache.stats()["count"] == 1
        cache.get("k")
        assert cache.stats() == {"count": 0, "keys": []}

    def test_independent_lifetimes(self):
        cache, clock = make_cache()
        cache.set("a", 1)
        clock.advance(TTL / 2)
        cache.set("b", 2)
        clock.advance(TTL / 2)
        assert cache.get("a") is None
        assert cache.get("b") == 2


class TestClearStats:
    def test_stats(self):
        cache, _ = make_cache()
        cache.set("a", 1)
        cache.set("b", 2)
        assert cache.stats() == {"count": 2, "keys": ["a", "b"]}

    def test_clear(self):
        cache, _ = make_cache()
        cache.set("a", 1)
        cache.clear()
        assert cache.get("a") is None
        assert cache.stats()["count"] == 0
