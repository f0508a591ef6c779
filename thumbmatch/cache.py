"""
Persistent perceptual hash cache.

One plain-text file per hashed image, laid out as
``<cache_root>/<role>/<file_name>`` and holding the hash's hex encoding.

Entries are keyed by file name only. There is no content-based
invalidation: if a file's bytes change but its name does not, the cached
(stale) hash keeps being served. Clear the role directory to force a
rehash.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Callable, Optional, Union

import imagehash

from .config import CACHE_DIR, HASH_SIZE
from .errors import CacheDecodeError
from .models import CacheStats, Role
from .scanner.hashing import decode_hash, encode_hash

logger = logging.getLogger(__name__)


class HashCache:
    """
    File-backed cache of perceptual hashes.

    Safe for concurrent use as long as no two callers compute the same
    (role, file_name) key at once, which holds within one batch since file
    names are unique in a directory.

    Usage:
        cache = HashCache('/tmp/cache')
        phash = cache.get_or_compute('a.png', Role.FULLSIZE,
                                     lambda: calculate_perceptual_hash(path))
    """

    def __init__(self, cache_root: Optional[Union[str, Path]] = None, hash_size: int = HASH_SIZE):
        """
        Initialize the hash cache.

        Args:
            cache_root: Directory holding the per-role cache directories.
                Uses the default location if None.
            hash_size: Expected hash size of stored entries
        """
        self.cache_root = Path(cache_root or CACHE_DIR)
        self.hash_size = hash_size
        self.stats = CacheStats()
        self._stats_lock = threading.Lock()

    def role_dir(self, role: Role) -> Path:
        """Directory holding the entries for one role."""
        return self.cache_root / Role(role).value

    def path_for(self, role: Role, file_name: str) -> Path:
        """Location of the cache entry for a file."""
        return self.role_dir(role) / file_name

    def ensure_dirs(self) -> None:
        """Create the role directories."""
        for role in Role:
            self.role_dir(role).mkdir(parents=True, exist_ok=True)

    def lookup(self, role: Role, file_name: str) -> Optional[imagehash.ImageHash]:
        """
        Return the cached hash for a file, or None if there is no entry.

        Raises:
            CacheDecodeError: If the entry exists but cannot be decoded
            OSError: If the entry exists but cannot be read
        """
        path = self.path_for(role, file_name)
        if not path.exists():
            return None
        encoded = path.read_text(encoding='ascii', errors='replace')
        try:
            return decode_hash(encoded, self.hash_size)
        except ValueError as e:
            raise CacheDecodeError(path, str(e)) from e

    def store(self, role: Role, file_name: str, phash: imagehash.ImageHash) -> Path:
        """Write a cache entry, replacing any existing one."""
        path = self.path_for(role, file_name)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(encode_hash(phash).encode('ascii'))
        return path

    def get_or_compute(
        self,
        file_name: str,
        role: Role,
        compute_fn: Callable[[], imagehash.ImageHash],
    ) -> imagehash.ImageHash:
        """
        Return the cached hash for a file, computing and storing it on a miss.

        compute_fn is only called on a miss, and exactly one entry is written
        per miss. Nothing is written on a hit.

        Args:
            file_name: Name of the file within its source directory
            role: Which side of the match the file is on
            compute_fn: Zero-argument callable producing the hash

        Returns:
            The cached or freshly computed ImageHash
        """
        cached = self.lookup(role, file_name)
        if cached is not None:
            self._record(hit=True)
            return cached

        logger.debug(f"Hashing: {file_name}")
        phash = compute_fn()
        self.store(role, file_name, phash)
        self._record(hit=False)
        return phash

    def _record(self, hit: bool) -> None:
        with self._stats_lock:
            if hit:
                self.stats.cache_hits += 1
            else:
                self.stats.cache_misses += 1
            self.stats.total_files += 1

    def clear(self, role: Optional[Role] = None) -> int:
        """
        Delete cached entries, for one role or for all of them.

        Returns:
            Number of entries removed
        """
        roles = [role] if role is not None else list(Role)
        removed = 0
        for r in roles:
            directory = self.role_dir(r)
            if not directory.is_dir():
                continue
            for entry in directory.iterdir():
                if entry.is_file():
                    entry.unlink()
                    removed += 1
        logger.info(f"Cleared {removed:,} cache entries")
        return removed


__all__ = ['HashCache']
