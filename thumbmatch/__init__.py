"""
Thumbnail Matcher
=================
Re-pairs thumbnails with their full-size originals by visual similarity.

Features:
- Light border trimming for padded thumbnails
- Perceptual (gradient) hashing, in parallel
- Per-file hash cache for fast re-runs
- Nearest-neighbour matching with a manual-review threshold
- CLI for automation

Author: thumbmatch contributors
"""

__version__ = "1.0.0"
__author__ = "thumbmatch contributors"

from .models import Role, HashedFile, Match, MatchReport, CacheStats
from .config import REVIEW_THRESHOLD, WHITE_THRESHOLD, DEFAULT_WORKERS
from .errors import ThumbmatchError, CacheDecodeError, InvalidSourceEntryError
from .scanner import (
    list_source_files,
    detect_inner_image_bounds,
    remove_borders,
    calculate_perceptual_hash,
    ParallelContext,
    load_phashes,
)
from .cache import HashCache
from .matcher import find_best_match, match_all
from .materializer import materialize_matches
from .pipeline import match_thumbnails

__all__ = [
    "Role",
    "HashedFile",
    "Match",
    "MatchReport",
    "CacheStats",
    "REVIEW_THRESHOLD",
    "WHITE_THRESHOLD",
    "DEFAULT_WORKERS",
    "ThumbmatchError",
    "CacheDecodeError",
    "InvalidSourceEntryError",
    "list_source_files",
    "detect_inner_image_bounds",
    "remove_borders",
    "calculate_perceptual_hash",
    "ParallelContext",
    "load_phashes",
    "HashCache",
    "find_best_match",
    "match_all",
    "materialize_matches",
    "match_thumbnails",
]
