"""
Scanner package for Thumbnail Matcher.

Turns directories of images into lists of perceptual hashes, trimming
thumbnail borders and hashing in parallel.

Public API:
- list_source_files: List the files of a flat source directory
- detect_inner_image_bounds: Estimate the content rectangle of a bordered image
- remove_borders: Crop an image to its content rectangle
- calculate_perceptual_hash: Calculate the perceptual hash of an image file
- encode_hash / decode_hash: Textual hash encoding used by the cache
- hash_distance: Hamming distance between two hashes
- ParallelContext: Worker pool configuration for batch hashing
- load_phashes: Hash a whole directory with caching
- has_heif_support: Check if HEIC/HEIF support is available
"""

from __future__ import annotations

from .file_discovery import list_source_files
from .bounds import detect_inner_image_bounds, remove_borders
from .hashing import (
    calculate_perceptual_hash,
    encode_hash,
    decode_hash,
    hash_distance,
)
from .parallel import ParallelContext, load_phashes

# Import dependencies for has_heif_support function
from .dependencies import HAS_HEIF_SUPPORT


def has_heif_support() -> bool:
    """Check if HEIC/HEIF support is available."""
    return HAS_HEIF_SUPPORT


# Public API exports
__all__ = [
    # File discovery
    'list_source_files',
    # Border trimming
    'detect_inner_image_bounds',
    'remove_borders',
    # Hashing functions
    'calculate_perceptual_hash',
    'encode_hash',
    'decode_hash',
    'hash_distance',
    # Batch hashing
    'ParallelContext',
    'load_phashes',
    # Feature detection
    'has_heif_support',
]
