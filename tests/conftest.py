"""
Pytest configuration and shared fixtures for test suite.
"""

import pytest
import tempfile
import shutil
from pathlib import Path

import imagehash
import numpy as np
from PIL import Image


def _gradient_array(width, height, increasing=True):
    """Horizontal gray ramp from 0 to 200 (never light enough to be border)."""
    ramp = np.linspace(0, 200, width)
    if not increasing:
        ramp = ramp[::-1]
    gray = np.tile(ramp, (height, 1)).astype(np.uint8)
    return np.stack([gray, gray, gray], axis=2)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    yield Path(tmpdir)
    shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def gradient_image():
    """Factory for 80x80 gradient images (left-to-right or right-to-left)."""
    def make(increasing=True, size=80):
        return Image.fromarray(_gradient_array(size, size, increasing))
    return make


@pytest.fixture
def bordered_image():
    """Factory pasting an image onto a white canvas with a uniform border."""
    def make(inner, border=20):
        width, height = inner.size
        canvas = Image.new('RGB', (width + 2 * border, height + 2 * border), color='white')
        canvas.paste(inner, (border, border))
        return canvas
    return make


@pytest.fixture
def make_hash():
    """Factory for 64-bit hashes with ``count`` bits set starting at ``offset``."""
    def make(count=0, offset=0):
        bits = np.zeros(64, dtype=bool)
        bits[offset:offset + count] = True
        return imagehash.ImageHash(bits.reshape(8, 8))
    return make


@pytest.fixture
def sample_dirs(temp_dir, gradient_image, bordered_image):
    """
    Create full-size and thumbnail directories for pipeline tests.

    Returns:
        dict with paths to:
        - fullsize/: a.png (increasing ramp), b.png (decreasing ramp)
        - thumbnail/: a_thumb.png (a's ramp with a white border)
        - cache/, output/ (not created)
    """
    fullsize = temp_dir / "fullsize"
    thumbnail = temp_dir / "thumbnail"
    fullsize.mkdir()
    thumbnail.mkdir()

    gradient_image(increasing=True).save(fullsize / "a.png", 'PNG')
    gradient_image(increasing=False).save(fullsize / "b.png", 'PNG')
    bordered_image(gradient_image(increasing=True)).save(thumbnail / "a_thumb.png", 'PNG')

    return {
        'fullsize': fullsize,
        'thumbnail': thumbnail,
        'cache': temp_dir / "cache",
        'output': temp_dir / "output",
    }
