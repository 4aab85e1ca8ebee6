from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

import numpy as np

from glyphgrid.sizing import check_dimensions


class CharacterSet(Enum):
    DENSITY = "density"
    BLOCKS = "blocks"


class ColorMode(Enum):
    NONE = "none"
    ANSI256 = "256"
    TRUECOLOR = "truecolor"


@dataclass(frozen=True)
class RenderMode:
    charset: CharacterSet = CharacterSet.DENSITY
    colour: ColorMode = ColorMode.NONE


@dataclass(frozen=True)
class RasterBitmap:
    """Grayscale glyph bitmap, one byte of intensity per pixel in row-major order.

    A zero-size bitmap (empty buffer) is valid and stands for a glyph with no ink.
    """

    buffer: bytes = b""
    width: int = 0
    height: int = 0

    def __post_init__(self):
        object.__setattr__(self, "buffer", bytes(self.buffer))
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Negative bitmap size: {self.width}x{self.height}")
        if self.buffer and len(self.buffer) != self.width * self.height:
            raise ValueError(
                f"Bitmap buffer holds {len(self.buffer)} bytes, expected {self.width}x{self.height}"
            )

    @classmethod
    def empty(cls) -> RasterBitmap:
        return cls()

    @property
    def is_empty(self) -> bool:
        return not self.buffer or self.width == 0 or self.height == 0

    def as_array(self) -> np.ndarray:
        """Return the pixels as a read-only (height, width) uint8 array."""
        if self.is_empty:
            return np.zeros((0, 0), dtype=np.uint8)
        return np.frombuffer(self.buffer, dtype=np.uint8).reshape(self.height, self.width)


@dataclass(frozen=True)
class RenderRequest:
    target_width: int
    target_height: int
    aspect_ratio: float = 2.0
    mode: RenderMode = field(default_factory=RenderMode)

    def validate(self) -> None:
        check_dimensions(self.target_width, self.target_height, self.aspect_ratio)


# None, an xterm-256 palette index, or an (r, g, b) triple
Colour = int | tuple[int, int, int] | None


@dataclass(frozen=True)
class Cell:
    char: str
    colour: Colour = None


@dataclass
class CharacterGrid:
    rows: list[list[Cell]]

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    def text(self) -> list[str]:
        """Characters only, one string per row."""
        return ["".join(cell.char for cell in row) for row in self.rows]
