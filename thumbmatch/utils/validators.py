"""
Input validation for Thumbnail Matcher.

Validators return (is_valid, error_message) tuples so callers can report
every problem the same way.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional


def validate_directory(directory: str | Path, must_exist: bool = False) -> tuple[bool, str]:
    """
    Validate a directory argument.

    Missing directories are accepted unless must_exist is set, since the
    pipeline creates them.

    Examples:
        >>> validate_directory('/etc/passwd')
        (False, 'Path is not a directory: /etc/passwd')
    """
    if not directory:
        return False, "Directory path is required"

    directory = str(directory)
    if not os.path.exists(directory):
        if must_exist:
            return False, f"Directory not found: {directory}"
        return True, ""

    if not os.path.isdir(directory):
        return False, f"Path is not a directory: {directory}"

    if not os.access(directory, os.R_OK):
        return False, f"Cannot read directory (permission denied): {directory}"

    return True, ""


def validate_threshold(threshold: int, max_distance: int = 64) -> tuple[bool, str]:
    """
    Validate that a review threshold is within the hash's distance range.

    Examples:
        >>> validate_threshold(10)
        (True, '')
        >>> validate_threshold(100)
        (False, 'Threshold must be between 0 and 64')
    """
    try:
        threshold = int(threshold)
        if not 0 <= threshold <= max_distance:
            return False, f"Threshold must be between 0 and {max_distance}"
        return True, ""
    except (ValueError, TypeError):
        return False, "Threshold must be an integer"


def validate_workers(workers: int) -> tuple[bool, str]:
    """Validate a worker count (1-32)."""
    try:
        workers = int(workers)
        if not 1 <= workers <= 32:
            return False, "Workers must be between 1 and 32"
        return True, ""
    except (ValueError, TypeError):
        return False, "Workers must be an integer"


def validate_match_params(
    fullsize: str | Path,
    thumbnail: str | Path,
    cache: str | Path,
    output: str | Path,
    threshold: Optional[int] = None,
    workers: Optional[int] = None,
) -> tuple[bool, str]:
    """
    Validate all parameters of a matching run.

    Returns:
        Tuple of (is_valid, error_message) for the first problem found
    """
    for directory in (fullsize, thumbnail, cache, output):
        is_valid, error = validate_directory(directory)
        if not is_valid:
            return False, error

    if Path(fullsize).resolve() == Path(output).resolve():
        return False, "Output directory must differ from the full-size directory"

    if threshold is not None:
        is_valid, error = validate_threshold(threshold)
        if not is_valid:
            return False, error

    if workers is not None:
        is_valid, error = validate_workers(workers)
        if not is_valid:
            return False, error

    return True, ""


__all__ = [
    'validate_directory',
    'validate_threshold',
    'validate_workers',
    'validate_match_params',
]
