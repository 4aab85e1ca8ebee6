import io
import math
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from glyphgrid.errors import FontLoadError, FontParseError, InvalidDimension
from glyphgrid.model import RasterBitmap

# Plane 16 private use; no ordinary font maps it, so it renders as .notdef
_MISSING_PROBE = "\U0010fffd"


@dataclass(frozen=True)
class FontHandle:
    data: bytes
    name: str = "<memory>"

    @classmethod
    def from_bytes(cls, data: bytes, name: str = "<memory>") -> "FontHandle":
        return cls(data=bytes(data), name=name)


def load_font(path: str | Path) -> FontHandle:
    """Read a TTF/OTF file into memory. Parsing is deferred to rasterize()."""
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise FontLoadError(f"Failed to read font {path}: {exc}") from exc
    return FontHandle(data=data, name=str(path))


def _as_char(codepoint: str | int) -> str:
    if isinstance(codepoint, int):
        try:
            return chr(codepoint)
        except (ValueError, OverflowError) as exc:
            raise FontParseError(f"Invalid code point: {codepoint}") from exc
    if isinstance(codepoint, str) and len(codepoint) == 1:
        return codepoint
    raise FontParseError(f"Expected a single character, got {codepoint!r}")


def _open(font: FontHandle, pixel_size: int) -> ImageFont.FreeTypeFont:
    try:
        return ImageFont.truetype(io.BytesIO(font.data), pixel_size)
    except (OSError, ValueError) as exc:
        raise FontParseError(f"Failed to parse font {font.name}: {exc}") from exc


def _draw_glyph(char: str, font: ImageFont.FreeTypeFont) -> np.ndarray:
    """Render a glyph cropped to its bounding box, as a (height, width) uint8 array."""
    left, top, right, bottom = font.getbbox(char)
    width, height = right - left, bottom - top
    if width <= 0 or height <= 0:
        return np.zeros((0, 0), dtype=np.uint8)
    img = Image.new("L", (width, height), 0)
    draw = ImageDraw.Draw(img)
    draw.text((-left, -top), char, fill=255, font=font)
    return np.asarray(img, dtype=np.uint8)


def rasterize(font: FontHandle, codepoint: str | int, size: float) -> RasterBitmap:
    """Rasterize one glyph at the given pixel size into a grayscale bitmap.

    Glyphs without ink (space and friends) come back as an empty bitmap.
    """
    char = _as_char(codepoint)
    if not size > 0 or not math.isfinite(size):
        raise InvalidDimension(f"Font size must be a positive finite number, got {size!r}")
    pil_font = _open(font, max(1, math.ceil(size)))

    arr = _draw_glyph(char, pil_font)
    if char != _MISSING_PROBE:
        notdef = _draw_glyph(_MISSING_PROBE, pil_font)
        if notdef.any() and np.array_equal(arr, notdef):
            raise FontParseError(f"Font {font.name} has no glyph for U+{ord(char):04X}")

    if arr.size == 0 or not arr.any():
        return RasterBitmap.empty()
    height, width = arr.shape
    return RasterBitmap(buffer=arr.tobytes(), width=width, height=height)


def find_font_for(char: str) -> str | None:
    """Ask fontconfig which font provides a given character."""
    if shutil.which("fc-match") is None:
        return None
    codepoint = f"{ord(char):04x}"
    result = subprocess.run(
        ["fc-match", "-f", "%{file}", f":charset={codepoint}"],
        capture_output=True,
        text=True,
    )
    if result.returncode == 0 and result.stdout.strip():
        return result.stdout.strip()
    return None
