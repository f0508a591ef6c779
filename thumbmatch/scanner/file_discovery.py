"""
File discovery module for the scanner package.

Lists the entries of a flat source directory. Source directories are
expected to hold image files only; anything else is rejected (or skipped,
when asked to).
"""

from __future__ import annotations

from pathlib import Path

from ..errors import InvalidSourceEntryError
from .dependencies import _logger


def list_source_files(root_path: str | Path, skip_invalid: bool = False) -> list[Path]:
    """
    List the files directly inside a source directory.

    No extension filtering is performed: every regular file is returned and
    will be decoded as an image. Results are sorted by name.

    Args:
        root_path: Directory to list (not searched recursively)
        skip_invalid: Skip non-file entries with a warning instead of failing

    Returns:
        List of file paths

    Raises:
        OSError: If the directory cannot be listed
        InvalidSourceEntryError: If an entry is not a regular file and
            skip_invalid is False
    """
    files = []
    for entry in sorted(Path(root_path).iterdir()):
        if entry.is_file():
            files.append(entry)
        elif skip_invalid:
            _logger.warning(f"Skipping non-file entry: {entry}")
        else:
            raise InvalidSourceEntryError(entry)
    return files


__all__ = ['list_source_files']
