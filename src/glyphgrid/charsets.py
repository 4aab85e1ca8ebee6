import numpy as np

from glyphgrid.model import CharacterSet

# Lightest to darkest, 70 steps
DENSITY_RAMP = " .'`^\",:;Il!i><~+_-?][}{1)(|\\/tfjrxnuvczXYUJCLQ0OZmwqpdbkhao*#MW&8%B@$"

BLOCK_FILLED = "█"
BLOCK_EMPTY = " "

BLOCK_THRESHOLD = 128


def _check_intensity(intensity: int) -> None:
    if not 0 <= intensity <= 255:
        raise ValueError(f"Intensity out of range 0-255: {intensity}")


def ramp_index(intensity: int) -> int:
    _check_intensity(intensity)
    return int(intensity) * (len(DENSITY_RAMP) - 1) // 255


def map_intensity(intensity: int, charset: CharacterSet = CharacterSet.DENSITY) -> str:
    """Character for a single 0-255 intensity, 0 being the lightest."""
    _check_intensity(intensity)
    if charset is CharacterSet.BLOCKS:
        return BLOCK_FILLED if intensity > BLOCK_THRESHOLD else BLOCK_EMPTY
    return DENSITY_RAMP[ramp_index(intensity)]


def _lookup_table(charset: CharacterSet) -> np.ndarray:
    return np.array([map_intensity(i, charset) for i in range(256)])


def map_grid(samples: np.ndarray, charset: CharacterSet = CharacterSet.DENSITY) -> list[str]:
    """Map a (rows, cols) uint8 sample array to one string per row."""
    chars = _lookup_table(charset)[samples.astype(np.uint8)]
    return ["".join(row) for row in chars]
