"""Common type aliases, enumerations and constants.

``Color`` mirrors the sixteen console foreground colors. ``EMPTY_PIXEL`` is the
reserved value meaning "draw nothing here"; it is treated as transparent when
frames are overlaid.
"""

from enum import StrEnum, auto


class Color(StrEnum):
    """Console foreground colors."""

    BLACK = auto()
    DARK_BLUE = auto()
    DARK_GREEN = auto()
    DARK_CYAN = auto()
    DARK_RED = auto()
    DARK_MAGENTA = auto()
    DARK_YELLOW = auto()
    GRAY = auto()
    DARK_GRAY = auto()
    BLUE = auto()
    GREEN = auto()
    CYAN = auto()
    RED = auto()
    MAGENTA = auto()
    YELLOW = auto()
    WHITE = auto()


Pixel = str  # a single character

EMPTY_PIXEL: Pixel = " "
DEFAULT_PIXEL_COLOR: Color = Color.GRAY
