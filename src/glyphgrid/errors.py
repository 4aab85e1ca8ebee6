class RenderError(Exception):
    """Base class for every failure raised while turning a glyph into a character grid."""


class InvalidDimension(RenderError, ValueError):
    """Target width, target height or aspect ratio is not a positive number."""


class FontLoadError(RenderError, OSError):
    """Font file could not be read."""


class FontParseError(RenderError, ValueError):
    """Font data is malformed or the requested glyph is unavailable."""
