"""
Exception types raised by Thumbnail Matcher.

Everything else (OSError from the filesystem, PIL decode errors) propagates
unchanged.
"""


class ThumbmatchError(Exception):
    """Base class for errors raised by this package."""


class CacheDecodeError(ThumbmatchError, ValueError):
    """A cache entry exists but does not hold a valid hash encoding."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Malformed cache entry {path}: {reason}")


class InvalidSourceEntryError(ThumbmatchError):
    """A source directory contains something that is not a regular file."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"Not a regular file: {path}")


__all__ = ['ThumbmatchError', 'CacheDecodeError', 'InvalidSourceEntryError']
