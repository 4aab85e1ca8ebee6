import os
import sys

from glyphgrid.model import ColorMode


def detect_colour_mode() -> ColorMode:
    """Pick the richest colour mode the attached terminal advertises, or NONE if not a tty."""
    if not sys.stdout.isatty() or "NO_COLOR" in os.environ:
        return ColorMode.NONE
    if os.environ.get("COLORTERM", "").lower() in ("truecolor", "24bit"):
        return ColorMode.TRUECOLOR
    if "256color" in os.environ.get("TERM", ""):
        return ColorMode.ANSI256
    return ColorMode.NONE
