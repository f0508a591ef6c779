"""
Data models for Thumbnail Matcher.

Contains dataclasses for hashed files, matches and run reports.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

import imagehash

from .config import REVIEW_THRESHOLD


class Role(str, Enum):
    """Which side of the matching problem a file belongs to."""

    FULLSIZE = "fullsize"
    THUMBNAIL = "thumbnail"


@dataclass(frozen=True)
class HashedFile:
    """
    A file name paired with the perceptual hash of its content.

    Attributes:
        file_name: Name of the file, unique within its source directory
        phash: Perceptual hash of the (possibly trimmed) image
    """
    file_name: str
    phash: imagehash.ImageHash

    def distance(self, other: HashedFile) -> int:
        """Hamming distance between the two hashes."""
        return int(self.phash - other.phash)


@dataclass(frozen=True)
class Match:
    """
    The best full-size candidate found for one thumbnail.

    Attributes:
        thumbnail: Thumbnail file name
        fullsize: Matched full-size file name
        distance: Hash distance between the two (0 = identical fingerprint)
    """
    thumbnail: str
    fullsize: str
    distance: int

    def needs_review(self, threshold: int = REVIEW_THRESHOLD) -> bool:
        """True when the match is too far apart to trust without a human look."""
        return self.distance > threshold

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            'thumbnail': self.thumbnail,
            'fullsize': self.fullsize,
            'distance': self.distance,
        }


@dataclass
class CacheStats:
    """Statistics from a batch hashing run."""
    cache_hits: int = 0
    cache_misses: int = 0
    total_files: int = 0

    @property
    def hit_rate(self) -> float:
        """Cache hit rate as percentage."""
        if self.total_files == 0:
            return 0.0
        return (self.cache_hits / self.total_files) * 100


@dataclass
class MatchReport:
    """
    Outcome of a full matching run.

    Attributes:
        matches: One Match per thumbnail that had at least one candidate
        copied: Paths written into the output directory
        cache_stats: Cache hits/misses across both batches
        elapsed: Seconds spent hashing
    """
    matches: list = field(default_factory=list)
    copied: list = field(default_factory=list)
    cache_stats: CacheStats = field(default_factory=CacheStats)
    elapsed: float = 0.0

    def review_count(self, threshold: int = REVIEW_THRESHOLD) -> int:
        """Number of matches flagged for manual review."""
        return sum(1 for m in self.matches if m.needs_review(threshold))
