from glyphgrid.model import Cell, CharacterGrid, ColorMode

# xterm-256 grayscale ramp occupies indices 232-255 (24 shades)
GRAYSCALE_BASE = 232
GRAYSCALE_SHADES = 24

RESET = "\033[0m"


def grayscale_index(intensity: int) -> int:
    shade = int(intensity) * (GRAYSCALE_SHADES - 1) // 255
    return GRAYSCALE_BASE + shade


def encode(char: str, intensity: int, mode: ColorMode = ColorMode.NONE) -> Cell:
    """Attach a foreground colour derived from intensity. The character is left untouched."""
    if not 0 <= intensity <= 255:
        raise ValueError(f"Intensity out of range 0-255: {intensity}")
    if mode is ColorMode.ANSI256:
        return Cell(char, grayscale_index(intensity))
    if mode is ColorMode.TRUECOLOR:
        value = int(intensity)
        return Cell(char, (value, value, value))
    return Cell(char)


def format_cell(cell: Cell) -> str:
    if cell.colour is None:
        return cell.char
    if isinstance(cell.colour, tuple):
        r, g, b = cell.colour
        return f"\033[38;2;{r};{g};{b}m{cell.char}"
    return f"\033[38;5;{cell.colour}m{cell.char}"


def format_row(cells: list[Cell]) -> str:
    """Join a row of cells, resetting attributes at the end if any cell was coloured."""
    parts = [format_cell(cell) for cell in cells]
    if any(cell.colour is not None for cell in cells):
        parts.append(RESET)
    return "".join(parts)


def format_grid(grid: CharacterGrid) -> list[str]:
    """Terminal-ready rows of a rendered grid, including colour escape sequences."""
    return [format_row(row) for row in grid.rows]
