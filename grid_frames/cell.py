"""Cell and position value objects.

A ``Cell`` is the content of one grid position: the character drawn there and
the foreground color it is drawn with. Both are frozen dataclasses so they can
be compared, hashed and shared freely; the frame itself keeps its own storage.
"""

from dataclasses import dataclass

from grid_frames.types import DEFAULT_PIXEL_COLOR, EMPTY_PIXEL, Color, Pixel


@dataclass(frozen=True)
class Position:
    """Grid coordinate.

    Attributes:
        x: Column index (0 at left).
        y: Row index (0 at top).
    """

    x: int
    y: int


@dataclass(frozen=True)
class Cell:
    """One grid position's (character, color) pair.

    Attributes:
        value: Character drawn at the position.
        color: Foreground color used when drawing ``value``.
    """

    value: Pixel = EMPTY_PIXEL
    color: Color = DEFAULT_PIXEL_COLOR

    @property
    def is_empty(self) -> bool:
        return self.value == EMPTY_PIXEL
