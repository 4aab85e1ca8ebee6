from collections.abc import Callable
from pathlib import Path

from glyphgrid.charsets import map_grid
from glyphgrid.colour import encode, format_grid
from glyphgrid.fonts import FontHandle, load_font, rasterize
from glyphgrid.model import CharacterGrid, RasterBitmap, RenderMode, RenderRequest
from glyphgrid.sampling import sample_grid
from glyphgrid.sizing import check_dimensions, compute_raster_size

Rasterizer = Callable[[FontHandle, str | int, float], RasterBitmap]


def render_bitmap(bitmap: RasterBitmap, request: RenderRequest) -> CharacterGrid:
    """Turn an already rasterized glyph into a grid of exactly the requested size."""
    request.validate()
    samples = sample_grid(bitmap, request.target_width, request.target_height, request.aspect_ratio)
    charset = request.mode.charset
    colour = request.mode.colour
    rows = []
    for chars, values in zip(map_grid(samples, charset), samples.tolist()):
        rows.append([encode(char, value, colour) for char, value in zip(chars, values)])
    return CharacterGrid(rows=rows)


def render(
    font: FontHandle,
    codepoint: str | int,
    target_width: int,
    target_height: int,
    aspect_ratio: float = 2.0,
    mode: RenderMode | None = None,
    rasterizer: Rasterizer = rasterize,
) -> CharacterGrid:
    """Render one glyph from a loaded font as a target_width x target_height character grid.

    Dimensions are validated before the font is touched. Terminal cells are
    roughly twice as tall as wide, hence the default aspect ratio of 2.0.
    """
    request = RenderRequest(target_width, target_height, aspect_ratio, mode or RenderMode())
    size = compute_raster_size(target_width, target_height, aspect_ratio)
    bitmap = rasterizer(font, codepoint, size)
    return render_bitmap(bitmap, request)


def render_char(
    font_path: str | Path,
    codepoint: str | int,
    width: int,
    height: int,
    aspect_ratio: float = 2.0,
    mode: RenderMode | None = None,
) -> list[str]:
    """Load a font file and return the rendered glyph as terminal-ready lines."""
    check_dimensions(width, height, aspect_ratio)
    font = load_font(font_path)
    return format_grid(render(font, codepoint, width, height, aspect_ratio, mode))
