"""Tests for SideCache."""

from vaultmeta.metadata.cache import SideCache


class TestSideCache:
    """Tests for SideCache."""

    def test_no_entries_until_accessed(self):
        """A new cache holds nothing."""
        cache = SideCache()
        assert len(cache) == 0
        assert "a" not in cache

    def test_entry_created_lazily(self):
        """First access creates an empty record."""
        cache = SideCache()
        assert cache.entry("a") == {}
        assert "a" in cache

    def test_same_record_returned(self):
        """Repeated access returns the same mutable record."""
        cache = SideCache()
        cache.entry("a")["x"] = 1
        assert cache.entry("a") is cache.entry("a")
        assert cache.entry("a") == {"x": 1}

    def test_entries_independent(self):
        """Each id has its own record."""
        cache = SideCache()
        cache.entry("a")["x"] = 1
        assert cache.entry("b") == {}

    def test_keyed_by_exact_string(self):
        """Ids are compared by string equality only."""
        cache = SideCache()
        cache.entry("notes/a")["x"] = 1
        assert cache.entry("notes/a.md") == {}

    def test_clear_one(self):
        """Clearing an id drops only that entry."""
        cache = SideCache()
        cache.entry("a")["x"] = 1
        cache.entry("b")
        cache.clear("a")
        assert "a" not in cache
        assert "b" in cache

    def test_clear_all(self):
        """Clearing without an id drops everything."""
        cache = SideCache()
        cache.entry("a")
        cache.entry("b")
        cache.clear()
        assert len(cache) == 0

    def test_clear_unknown_id(self):
        """Clearing an unknown id is a no-op."""
        cache = SideCache()
        cache.clear("missing")
        assert len(cache) == 0
