"""
Unit tests for the hash cache.
"""

import pytest

from thumbmatch.cache import HashCache
from thumbmatch.errors import CacheDecodeError
from thumbmatch.models import Role


class CountingCompute:
    """compute_fn stand-in that records how often it was called."""

    def __init__(self, phash):
        self.phash = phash
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return self.phash


class TestHashCacheLayout:
    """Test where cache entries live."""

    def test_path_for(self, temp_dir):
        cache = HashCache(temp_dir)
        assert cache.path_for(Role.THUMBNAIL, "a.png") == temp_dir / "thumbnail" / "a.png"
        assert cache.path_for(Role.FULLSIZE, "a.png") == temp_dir / "fullsize" / "a.png"

    def test_ensure_dirs(self, temp_dir):
        cache = HashCache(temp_dir / "cache")
        cache.ensure_dirs()
        assert (temp_dir / "cache" / "fullsize").is_dir()
        assert (temp_dir / "cache" / "thumbnail").is_dir()

    def test_store_writes_raw_hex(self, temp_dir, make_hash):
        cache = HashCache(temp_dir)
        phash = make_hash(4)
        path = cache.store(Role.FULLSIZE, "a.png", phash)
        assert path.read_bytes() == str(phash).encode('ascii')


class TestGetOrCompute:
    """Test get_or_compute."""

    def test_miss_computes_and_stores(self, temp_dir, make_hash):
        cache = HashCache(temp_dir)
        compute = CountingCompute(make_hash(3))

        result = cache.get_or_compute("a.png", Role.THUMBNAIL, compute)

        assert result == make_hash(3)
        assert compute.calls == 1
        assert cache.path_for(Role.THUMBNAIL, "a.png").exists()

    def test_second_call_is_a_hit(self, temp_dir, make_hash):
        """Same key twice: same hash, one computation."""
        cache = HashCache(temp_dir)
        compute = CountingCompute(make_hash(5))

        first = cache.get_or_compute("a.png", Role.THUMBNAIL, compute)
        second = cache.get_or_compute("a.png", Role.THUMBNAIL, compute)

        assert first == second
        assert first - second == 0
        assert compute.calls == 1
        assert cache.stats.cache_hits == 1
        assert cache.stats.cache_misses == 1

    def test_hit_does_not_write(self, temp_dir, make_hash):
        cache = HashCache(temp_dir)
        path = cache.store(Role.FULLSIZE, "a.png", make_hash(2))
        before = path.stat().st_mtime_ns

        def explode():
            raise AssertionError("compute_fn must not run on a hit")

        cache.get_or_compute("a.png", Role.FULLSIZE, explode)
        assert path.stat().st_mtime_ns == before

    def test_roles_are_separate(self, temp_dir, make_hash):
        cache = HashCache(temp_dir)
        cache.store(Role.FULLSIZE, "a.png", make_hash(2))
        compute = CountingCompute(make_hash(7))

        result = cache.get_or_compute("a.png", Role.THUMBNAIL, compute)

        assert result == make_hash(7)
        assert compute.calls == 1

    def test_stale_entry_is_served(self, temp_dir, make_hash):
        """Entries are keyed by name only; a wrong entry is trusted."""
        cache = HashCache(temp_dir)
        cache.store(Role.THUMBNAIL, "a.png", make_hash(60))
        compute = CountingCompute(make_hash(0))

        assert cache.get_or_compute("a.png", Role.THUMBNAIL, compute) == make_hash(60)
        assert compute.calls == 0

    def test_compute_error_propagates_without_entry(self, temp_dir):
        cache = HashCache(temp_dir)

        def fail():
            raise OSError("disk on fire")

        with pytest.raises(OSError):
            cache.get_or_compute("a.png", Role.FULLSIZE, fail)
        assert not cache.path_for(Role.FULLSIZE, "a.png").exists()


class TestCacheDecodeErrors:
    """Malformed entries are fatal, never recomputed."""

    @pytest.mark.parametrize("content", [b"", b"not-a-hash!!!!!!", b"abc", b"0123456789abcdef00"])
    def test_malformed_entry_raises(self, temp_dir, make_hash, content):
        cache = HashCache(temp_dir)
        path = cache.path_for(Role.FULLSIZE, "a.png")
        path.parent.mkdir(parents=True)
        path.write_bytes(content)
        compute = CountingCompute(make_hash(1))

        with pytest.raises(CacheDecodeError) as exc_info:
            cache.get_or_compute("a.png", Role.FULLSIZE, compute)

        assert compute.calls == 0
        assert exc_info.value.path == path
        assert path.read_bytes() == content

    def test_decode_error_is_value_error(self):
        assert issubclass(CacheDecodeError, ValueError)


class TestClear:
    """Test clear."""

    def test_clear_one_role(self, temp_dir, make_hash):
        cache = HashCache(temp_dir)
        cache.store(Role.FULLSIZE, "a.png", make_hash(1))
        cache.store(Role.THUMBNAIL, "b.png", make_hash(1))

        assert cache.clear(Role.THUMBNAIL) == 1
        assert cache.lookup(Role.THUMBNAIL, "b.png") is None
        assert cache.lookup(Role.FULLSIZE, "a.png") == make_hash(1)

    def test_clear_missing_root(self, temp_dir):
        assert HashCache(temp_dir / "nope").clear() == 0
