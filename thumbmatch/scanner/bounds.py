"""
Border detection for the scanner package.

Thumbnails are often padded with a light, uniform border. These helpers
estimate where the real picture sits by sampling three rows and three
columns, and crop the border away before hashing.
"""

from __future__ import annotations

from ..config import WHITE_THRESHOLD
from .dependencies import Image, np

# Integer grayscale modes wider than 8 bits. 'I' is treated as 16-bit data,
# which is what Pillow decodes 16-bit PNG and TIFF scans into.
WIDE_INTEGER_MODES = ('I;16', 'I;16L', 'I;16B', 'I;16N', 'I')


def to_8bit(img: Image.Image) -> Image.Image:
    """
    Scale 16-bit (and 32-bit 'I') grayscale images down to 8-bit 'L'.

    Pillow's own ``convert('RGB')`` clips these modes at 255 instead of
    scaling them, so every mid-tone would come out white. Other modes are
    returned unchanged.
    """
    if img.mode not in WIDE_INTEGER_MODES:
        return img
    pixels = np.clip(np.asarray(img).astype(np.int64), 0, 0xFFFF)
    return Image.fromarray((pixels >> 8).astype(np.uint8))


def background_mask(img: Image.Image, threshold: int = WHITE_THRESHOLD):
    """
    Return a (height, width) boolean array, True where a pixel is background.

    A pixel is background when its R, G and B channels all exceed threshold.
    """
    img = to_8bit(img)
    if img.mode != 'RGB':
        img = img.convert('RGB')
    pixels = np.asarray(img)
    return (pixels > threshold).all(axis=2)


def _first_content(line, positions) -> int | None:
    """Index of the first non-background pixel of ``line`` in scan order."""
    for pos in positions:
        if not line[pos]:
            return pos
    return None


def detect_inner_image_bounds(
    img: Image.Image,
    threshold: int = WHITE_THRESHOLD,
) -> tuple[int, int, int, int]:
    """
    Estimate the rectangle holding the real content of an image.

    Samples the rows at H/4, H/2, 3H/4 and the columns at W/4, W/2, 3W/4.
    Each edge is scanned inward through its outer quarter; the outermost
    content pixel over the three samples becomes the bound. Edges with no
    content pixel stay at the image centre.

    This is a heuristic. It assumes roughly centred content on a single
    uniform border colour and can under- or over-trim otherwise.

    Args:
        img: Image to inspect
        threshold: Channel value above which a pixel counts as background

    Returns:
        (x, y, width, height). A fully background image yields
        (W // 2, H // 2, 0, 0).
    """
    width, height = img.size
    mask = background_mask(img, threshold)

    w4 = width // 4
    h4 = height // 4
    width_checks = (w4, w4 * 2, w4 * 3)
    height_checks = (h4, h4 * 2, h4 * 3)

    min_x = max_x = width // 2
    for row in height_checks:
        line = mask[row]
        left = _first_content(line, range(0, w4))
        if left is not None:
            min_x = min(min_x, left)
        right = _first_content(line, range(width - 1, width_checks[2] - 1, -1))
        if right is not None:
            max_x = max(max_x, right)

    min_y = max_y = height // 2
    for col in width_checks:
        line = mask[:, col]
        top = _first_content(line, range(0, h4))
        if top is not None:
            min_y = min(min_y, top)
        bottom = _first_content(line, range(height - 1, height_checks[2] - 1, -1))
        if bottom is not None:
            max_y = max(max_y, bottom)

    return min_x, min_y, max_x - min_x, max_y - min_y


def remove_borders(img: Image.Image, threshold: int = WHITE_THRESHOLD) -> Image.Image:
    """
    Crop an image to its detected content bounds.

    Returns the image unchanged when no content was found, since an empty
    crop cannot be hashed.
    """
    x, y, w, h = detect_inner_image_bounds(img, threshold)
    if w == 0 or h == 0:
        return img
    return img.crop((x, y, x + w, y + h))


__all__ = ['to_8bit', 'background_mask', 'detect_inner_image_bounds', 'remove_borders']
