import numpy as np
import pytest

from glyphgrid.charsets import BLOCK_FILLED, DENSITY_RAMP, map_grid, map_intensity, ramp_index
from glyphgrid.model import CharacterSet


def test_ramp_has_seventy_unique_entries():
    assert len(DENSITY_RAMP) == 70
    assert len(set(DENSITY_RAMP)) == 70
    assert DENSITY_RAMP[0] == " "


def test_density_extremes():
    assert map_intensity(0, CharacterSet.DENSITY) == DENSITY_RAMP[0]
    assert map_intensity(255, CharacterSet.DENSITY) == DENSITY_RAMP[-1]


def test_density_is_monotonic():
    indices = [ramp_index(i) for i in range(256)]
    assert all(a <= b for a, b in zip(indices, indices[1:]))
    assert indices[0] == 0
    assert indices[-1] == len(DENSITY_RAMP) - 1


def test_density_midpoint():
    # 128 * 69 // 255 == 34
    assert map_intensity(128) == DENSITY_RAMP[34]


def test_blocks_threshold_is_strict():
    assert map_intensity(128, CharacterSet.BLOCKS) == " "
    assert map_intensity(129, CharacterSet.BLOCKS) == BLOCK_FILLED


def test_blocks_extremes():
    assert map_intensity(0, CharacterSet.BLOCKS) == " "
    assert map_intensity(255, CharacterSet.BLOCKS) == BLOCK_FILLED


@pytest.mark.parametrize("value", [-1, 256])
def test_out_of_range_intensity(value):
    with pytest.raises(ValueError, match="out of range"):
        map_intensity(value)


def test_map_grid_matches_single_mapping():
    samples = np.array([[0, 64, 128], [192, 255, 1]], dtype=np.uint8)
    for charset in CharacterSet:
        rows = map_grid(samples, charset)
        expected = ["".join(map_intensity(int(v), charset) for v in row) for row in samples]
        assert rows == expected


def test_map_grid_blocks_pattern():
    samples = np.array([[255, 0], [0, 255]], dtype=np.uint8)
    assert map_grid(samples, CharacterSet.BLOCKS) == [BLOCK_FILLED + " ", " " + BLOCK_FILLED]
