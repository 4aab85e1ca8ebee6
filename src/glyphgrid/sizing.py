import math
import numbers

from glyphgrid.errors import InvalidDimension


def check_dimensions(target_width: int, target_height: int, aspect_ratio: float) -> None:
    """Reject grids and cell ratios that are not strictly positive."""
    for name, value in (("target_width", target_width), ("target_height", target_height)):
        if not isinstance(value, numbers.Integral) or value <= 0:
            raise InvalidDimension(f"{name} must be a positive integer, got {value!r}")
    if not aspect_ratio > 0 or not math.isfinite(aspect_ratio):
        raise InvalidDimension(f"aspect_ratio must be a positive finite number, got {aspect_ratio!r}")


def compute_raster_size(target_width: int, target_height: int, aspect_ratio: float = 2.0) -> float:
    """Font size to rasterize at so the glyph covers a target_width x target_height cell grid.

    Terminal cells are taller than wide, so rows are measured in square pixels as
    target_height * aspect_ratio. The larger of the two physical sides is used so
    neither axis is under-resolved when the bitmap is resampled.
    """
    check_dimensions(target_width, target_height, aspect_ratio)
    physical_width = float(target_width)
    physical_height = target_height * aspect_ratio
    return max(physical_width, physical_height)
