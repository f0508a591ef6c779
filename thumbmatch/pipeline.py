"""
End-to-end thumbnail matching run.

Hashes the full-size batch, then the thumbnail batch, matches every
thumbnail to its closest original, and copies the winners out.
"""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Optional

from .cache import HashCache
from .config import REVIEW_THRESHOLD
from .matcher import match_all
from .materializer import materialize_matches
from .models import MatchReport, Role
from .scanner import ParallelContext, load_phashes
from .utils.formatters import format_time_estimate

logger = logging.getLogger(__name__)


def match_thumbnails(
    fullsize_dir: str | Path,
    thumbnail_dir: str | Path,
    cache_dir: str | Path,
    output_dir: str | Path,
    context: Optional[ParallelContext] = None,
    review_threshold: int = REVIEW_THRESHOLD,
    skip_invalid: bool = False,
    show_progress: bool = False,
) -> MatchReport:
    """
    Run the whole matching pipeline.

    All directories are created if missing. Hashing of both batches
    completes before any matching starts. Any error aborts the run; cache
    entries and copies written before the failure are left in place.

    Args:
        fullsize_dir: Full-size images (searched for a match)
        thumbnail_dir: Thumbnails (to find a match for)
        cache_dir: Hash cache root
        output_dir: Where matched full-size files are copied
        context: Worker pool for hashing
        review_threshold: Distance above which matches are flagged
        skip_invalid: Skip unusable source entries instead of failing
        show_progress: Whether to show progress bars

    Returns:
        MatchReport describing the run
    """
    fullsize_dir = Path(fullsize_dir)
    thumbnail_dir = Path(thumbnail_dir)
    output_dir = Path(output_dir)
    context = context or ParallelContext()

    for directory in (fullsize_dir, thumbnail_dir, output_dir):
        directory.mkdir(parents=True, exist_ok=True)

    cache = HashCache(cache_dir)
    cache.ensure_dirs()

    loading_start = time.monotonic()
    fullsize_hashes = load_phashes(
        fullsize_dir, cache, Role.FULLSIZE,
        trim=False,
        context=context,
        skip_invalid=skip_invalid,
        show_progress=show_progress,
    )
    thumb_hashes = load_phashes(
        thumbnail_dir, cache, Role.THUMBNAIL,
        trim=True,
        context=context,
        skip_invalid=skip_invalid,
        show_progress=show_progress,
    )
    elapsed = time.monotonic() - loading_start
    logger.info(f"Loading phashes took: {format_time_estimate(elapsed)}")

    stats = cache.stats
    logger.info(
        f"Cache: {stats.cache_hits:,} hits, {stats.cache_misses:,} misses "
        f"({stats.hit_rate:.1f}% hit rate)"
    )

    if not fullsize_hashes:
        logger.warning(f"No full-size images in {fullsize_dir}, nothing to match against")

    matches = match_all(thumb_hashes, fullsize_hashes, review_threshold=review_threshold)
    copied = materialize_matches(matches, fullsize_dir, output_dir)

    return MatchReport(
        matches=matches,
        copied=copied,
        cache_stats=stats,
        elapsed=elapsed,
    )


__all__ = ['match_thumbnails']
