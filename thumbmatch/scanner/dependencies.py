"""
Dependency initialization for the scanner package.

Handles PIL, imagehash, numpy, HEIC/HEIF support, and tqdm imports with
proper error handling and configuration.
"""

from __future__ import annotations

import warnings
import logging
from typing import Optional, Any

from ..config import MAX_IMAGE_PIXELS

# Module-level logger
_logger = logging.getLogger(__name__)

# Check for required dependencies
try:
    from PIL import Image
    import imagehash
    import numpy as np
except ImportError:
    raise ImportError(
        "Required packages not found!\n"
        "Install with: pip install Pillow imagehash numpy"
    )

# Register HEIC/HEIF support via pillow-heif
# This must be done before opening any HEIC files
HAS_HEIF_SUPPORT = False
try:
    from pillow_heif import register_heif_opener
    register_heif_opener()
    HAS_HEIF_SUPPORT = True
    _logger.debug("HEIC/HEIF support enabled via pillow-heif")
except ImportError:
    _logger.debug(
        "pillow-heif not installed - HEIC/HEIF files cannot be decoded. "
        "Install with: pip install pillow-heif"
    )

# Full-size scans can be far beyond PIL's default ~89MP limit
Image.MAX_IMAGE_PIXELS = MAX_IMAGE_PIXELS
warnings.filterwarnings("ignore", category=Image.DecompressionBombWarning)

# Optional: tqdm for progress bars
HAS_TQDM = False
_tqdm_class: Optional[Any] = None

try:
    from tqdm import tqdm as _tqdm_import
    HAS_TQDM = True
    _tqdm_class = _tqdm_import
except ImportError:
    pass


__all__ = [
    'Image',
    'imagehash',
    'np',
    'HAS_HEIF_SUPPORT',
    'HAS_TQDM',
    '_tqdm_class',
    '_logger',
]
