"""
Configuration constants for Thumbnail Matcher.

This module contains all configurable settings including:
- Border detection and downscaling limits
- Perceptual hash size and review threshold
- Default locations for the hash cache and user config
"""

import os

# A pixel counts as border/background when R, G and B all exceed this value
WHITE_THRESHOLD = 230

# Images are downscaled to fit this box before hashing
THUMBNAIL_LIMIT = 255

# Matches farther apart than this are flagged for manual review
# Hamming distance over HASH_SIZE * HASH_SIZE bits (0-64 with the default)
REVIEW_THRESHOLD = 10

# Gradient hash size (8 -> 64-bit hash)
HASH_SIZE = 8

# Default number of parallel workers for batch hashing
DEFAULT_WORKERS = 4

# Decompression bomb limit, raised for high-resolution scans
MAX_IMAGE_PIXELS = 500_000_000

# Hash cache root used when neither --cache nor THUMBMATCH_CACHE_DIR is given
CACHE_DIR = os.path.join(os.path.expanduser('~'), '.thumbmatch', 'cache')
