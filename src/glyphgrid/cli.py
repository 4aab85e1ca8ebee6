import argparse
import logging
import sys
from pathlib import Path

from glyphgrid.colour import format_grid
from glyphgrid.errors import RenderError
from glyphgrid.fonts import find_font_for, load_font, rasterize
from glyphgrid.model import CharacterSet, ColorMode, RenderMode
from glyphgrid.renderer import render
from glyphgrid.terminal import detect_colour_mode

LOG = logging.getLogger("glyphgrid")

CHARSETS = {c.value: c for c in CharacterSet}
COLOURS = {c.value: c for c in ColorMode}


def setup_logging(verbose: bool) -> None:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    LOG.handlers[:] = [handler]
    LOG.setLevel(logging.DEBUG if verbose else logging.WARNING)
    LOG.propagate = False


def _logged_rasterize(font, codepoint, size):
    LOG.debug("Rasterizing U+%04X at size %.2f", ord(codepoint), size)
    bitmap = rasterize(font, codepoint, size)
    LOG.debug("Glyph bitmap is %dx%d", bitmap.width, bitmap.height)
    return bitmap


def main(argv=None):
    parser = argparse.ArgumentParser(description="Render a single font glyph as terminal character art")
    parser.add_argument("char", help="Character to render (only the first is used)")
    parser.add_argument("width", nargs="?", type=int, default=30, help="Width in columns (default: 30)")
    parser.add_argument("height", nargs="?", type=int, default=30, help="Height in rows (default: 30)")
    parser.add_argument("-f", "--font", default=None, help="Path to a TTF/OTF font (default: fontconfig match)")
    parser.add_argument(
        "-a",
        "--aspect",
        type=float,
        default=2.0,
        help="Terminal cell height-to-width ratio (default: 2.0)",
    )
    parser.add_argument(
        "-s", "--charset", default="density", choices=sorted(CHARSETS), help="Character set (default: density)"
    )
    parser.add_argument(
        "-c",
        "--colour",
        default="auto",
        choices=["auto", *sorted(COLOURS)],
        help="Colour mode (default: auto, based on the terminal)",
    )
    parser.add_argument("-q", "--quiet", action="store_true", default=False, help="Omit the header line")
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Log debug details to stderr")
    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    if not args.char:
        print("Error: no character given", file=sys.stderr)
        sys.exit(1)
    char = args.char[0]

    font_path = args.font or find_font_for(char)
    if font_path is None:
        print(f"Error: no font found for {char!r}; pass one with --font", file=sys.stderr)
        sys.exit(1)
    font_path = Path(font_path)
    if not font_path.exists():
        print(f"File not found: {font_path}", file=sys.stderr)
        sys.exit(1)
    LOG.debug("Using font %s", font_path)

    colour = detect_colour_mode() if args.colour == "auto" else COLOURS[args.colour]
    mode = RenderMode(charset=CHARSETS[args.charset], colour=colour)
    LOG.debug("Render mode: %s / %s", mode.charset.value, mode.colour.value)

    try:
        font = load_font(font_path)
        grid = render(font, char, args.width, args.height, args.aspect, mode, rasterizer=_logged_rasterize)
    except RenderError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    if not args.quiet:
        print(f"Rendering '{char}' at {args.width}x{args.height} using {font_path}")
        print()
    print("\n".join(format_grid(grid)))


if __name__ == "__main__":
    main()
