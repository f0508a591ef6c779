"""
Copies matched full-size originals into the output directory.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Iterable

from .models import Match

logger = logging.getLogger(__name__)


def materialize_matches(
    matches: Iterable[Match],
    fullsize_dir: str | Path,
    output_dir: str | Path,
) -> list[Path]:
    """
    Copy the full-size file of every match into output_dir.

    File names are preserved and existing files are overwritten. The first
    failing copy raises and leaves the remaining matches uncopied.

    Args:
        matches: Matches to materialize
        fullsize_dir: Directory the full-size names refer to
        output_dir: Destination directory (must exist)

    Returns:
        Destination paths, in match order
    """
    fullsize_dir = Path(fullsize_dir)
    output_dir = Path(output_dir)

    copied = []
    for match in matches:
        source = fullsize_dir / match.fullsize
        dest = output_dir / match.fullsize
        shutil.copy(source, dest)
        logger.debug(f"Copied: {source} -> {dest}")
        copied.append(dest)

    return copied


__all__ = ['materialize_matches']
