"""
Nearest-neighbour matching of thumbnails against full-size images.

Every thumbnail independently picks the full-size image whose hash is
closest to its own. There is no global assignment: two thumbnails may pick
the same original.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from .config import REVIEW_THRESHOLD
from .models import HashedFile, Match

logger = logging.getLogger(__name__)


def find_best_match(
    thumb: HashedFile,
    fullsize_hashes: Sequence[HashedFile],
) -> Optional[Match]:
    """
    Scan every full-size candidate and keep the closest one.

    Only a strictly smaller distance replaces the current best, so among
    equally close candidates the first one in scan order wins.

    Args:
        thumb: Thumbnail to find an original for
        fullsize_hashes: Candidates, scanned in order

    Returns:
        The best Match, or None if there are no candidates
    """
    best: Optional[Match] = None
    for candidate in fullsize_hashes:
        distance = thumb.distance(candidate)
        if best is None or distance < best.distance:
            best = Match(
                thumbnail=thumb.file_name,
                fullsize=candidate.file_name,
                distance=distance,
            )
    return best


def match_all(
    thumb_hashes: Sequence[HashedFile],
    fullsize_hashes: Sequence[HashedFile],
    review_threshold: int = REVIEW_THRESHOLD,
) -> list[Match]:
    """
    Find the best full-size match for every thumbnail.

    Matches farther apart than review_threshold are logged as needing manual
    review but are still returned. O(T * F) hash comparisons.

    Args:
        thumb_hashes: Thumbnails to match
        fullsize_hashes: Full-size candidates
        review_threshold: Distance above which a match is flagged

    Returns:
        One Match per thumbnail, in thumbnail order. Empty when there are no
        full-size candidates.
    """
    matches = []
    for thumb in thumb_hashes:
        match = find_best_match(thumb, fullsize_hashes)
        if match is None:
            continue

        logger.info(f"Matched: {match.thumbnail} to {match.fullsize} (distance {match.distance})")
        if match.needs_review(review_threshold):
            logger.warning(
                f"Distance from {match.thumbnail} to {match.fullsize} was "
                f"{match.distance}, needs manual review"
            )
        matches.append(match)

    return matches


__all__ = ['find_best_match', 'match_all']
