import os
import shutil
import subprocess

import numpy as np
import pytest

from glyphgrid.model import RasterBitmap

_FONT_CANDIDATES = [
    "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationMono-Regular.ttf",
    "/usr/share/fonts/TTF/DejaVuSansMono.ttf",
    "/usr/share/fonts/dejavu-sans-mono-fonts/DejaVuSansMono.ttf",
]


def _find_monospace_font():
    """Find a TrueType monospace font on the system."""
    for path in _FONT_CANDIDATES:
        if os.path.exists(path):
            return path
    if shutil.which("fc-match"):
        out = subprocess.run(["fc-match", "-f", "%{file}", "monospace:fontformat=TrueType"], capture_output=True, text=True)
        if out.returncode == 0 and out.stdout.strip().lower().endswith((".ttf", ".otf")):
            return out.stdout.strip()
    return None


FONT_PATH = _find_monospace_font()
needs_font = pytest.mark.skipif(FONT_PATH is None, reason="No monospace font found on system")


def make_bitmap(pixels) -> RasterBitmap:
    """Build a bitmap from a nested list (rows of intensities)."""
    arr = np.asarray(pixels, dtype=np.uint8)
    return RasterBitmap(buffer=arr.tobytes(), width=arr.shape[1], height=arr.shape[0])


def gradient_rasterizer(font, codepoint, size):
    """Square bitmap of `size` pixels, dark at the bottom and light at the top."""
    side = max(2, int(size))
    column = np.arange(side, dtype=np.int64) * 255 // (side - 1)
    arr = np.repeat(column[:, None], side, axis=1).astype(np.uint8)
    return RasterBitmap(buffer=arr.tobytes(), width=side, height=side)
