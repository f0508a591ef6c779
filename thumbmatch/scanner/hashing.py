"""
Hashing module for the scanner package.

Provides perceptual hash computation for image files plus the textual
encoding used by the hash cache.
"""

from __future__ import annotations

import re
from pathlib import Path

from ..config import HASH_SIZE, THUMBNAIL_LIMIT
from .bounds import remove_borders, to_8bit
from .dependencies import Image, imagehash

_HEX_RE = re.compile(r'[0-9a-fA-F]+')


def calculate_perceptual_hash(
    filepath: str | Path,
    trim: bool = False,
    hash_size: int = HASH_SIZE,
) -> imagehash.ImageHash:
    """
    Calculate the perceptual hash of an image file.

    The image is optionally stripped of light borders, downscaled to fit
    within THUMBNAIL_LIMIT pixels, then hashed with a gradient (difference)
    hash.

    Args:
        filepath: Path to the image
        trim: Remove light borders before hashing (thumbnail side)
        hash_size: Size of the hash (default 8, resulting in 64-bit hash)

    Returns:
        The ImageHash

    Raises:
        OSError: If the file cannot be read
        PIL.UnidentifiedImageError: If the file is not a decodable image
    """
    with Image.open(filepath) as img:
        # Force load to detect truncated/corrupt images early
        img.load()

        img = to_8bit(img)
        if img.mode not in ('RGB', 'L'):
            img = img.convert('RGB')

        if trim:
            img = remove_borders(img)
        else:
            img = img.copy()

        img.thumbnail((THUMBNAIL_LIMIT, THUMBNAIL_LIMIT))
        return imagehash.dhash(img, hash_size=hash_size)


def encode_hash(phash: imagehash.ImageHash) -> str:
    """Textual encoding of a hash, as stored in the cache."""
    return str(phash)


def decode_hash(encoded: str, hash_size: int = HASH_SIZE) -> imagehash.ImageHash:
    """
    Decode a hash produced by encode_hash.

    Raises:
        ValueError: If the text is not a hex encoding of a hash of hash_size
    """
    encoded = encoded.strip()
    expected = hash_size * hash_size // 4
    if len(encoded) != expected:
        raise ValueError(f"expected {expected} hex digits, got {len(encoded)}")
    if not _HEX_RE.fullmatch(encoded):
        raise ValueError("not a hex string")
    return imagehash.hex_to_hash(encoded)


def hash_distance(a: imagehash.ImageHash, b: imagehash.ImageHash) -> int:
    """Hamming distance between two hashes."""
    return int(a - b)


__all__ = [
    'calculate_perceptual_hash',
    'encode_hash',
    'decode_hash',
    'hash_distance',
]
