import numpy as np

from glyphgrid.model import RasterBitmap
from glyphgrid.sizing import check_dimensions


def sample_indices(
    bitmap_width: int, bitmap_height: int, target_width: int, target_height: int, aspect_ratio: float
) -> tuple[np.ndarray, np.ndarray]:
    """Bitmap (row, column) index for every output cell, as two (target_height, target_width) arrays.

    Columns map 1:1 into physical space, rows are stretched by aspect_ratio
    first, then both are scaled back into bitmap pixels and floored.
    """
    scale_x = bitmap_width / target_width
    scale_y = bitmap_height / (target_height * aspect_ratio)

    phys_x = np.arange(target_width, dtype=np.float64)
    phys_y = np.arange(target_height, dtype=np.float64) * aspect_ratio
    bmp_x = np.floor(phys_x * scale_x).astype(np.int64)
    bmp_y = np.floor(phys_y * scale_y).astype(np.int64)
    return tuple(np.broadcast_arrays(bmp_y[:, None], bmp_x[None, :]))


def sample_grid(bitmap: RasterBitmap, target_width: int, target_height: int, aspect_ratio: float = 2.0) -> np.ndarray:
    """Nearest-neighbour resample of a glyph bitmap. Returns (target_height, target_width) uint8."""
    check_dimensions(target_width, target_height, aspect_ratio)
    result = np.zeros((target_height, target_width), dtype=np.uint8)
    if bitmap.is_empty:
        return result

    bmp_y, bmp_x = sample_indices(bitmap.width, bitmap.height, target_width, target_height, aspect_ratio)
    return gather(bitmap, bmp_y, bmp_x)


def gather(bitmap: RasterBitmap, bmp_y: np.ndarray, bmp_x: np.ndarray) -> np.ndarray:
    """Read bitmap pixels at the given (row, column) indices as uint8.

    Anything past the edge of a row or of the buffer reads as blank.
    """
    result = np.zeros(bmp_y.shape, dtype=np.uint8)
    if bitmap.is_empty:
        return result
    flat = np.frombuffer(bitmap.buffer, dtype=np.uint8)
    index = bmp_y * bitmap.width + bmp_x
    inside = (bmp_x >= 0) & (bmp_x < bitmap.width) & (index >= 0) & (index < flat.size)
    result[inside] = flat[index[inside]]
    return result
