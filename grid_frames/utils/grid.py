"""Grid bounds helpers.

Pure predicates shared by the frame and the sprite builders. Kept free of any
frame import so they can be used on raw dimensions.
"""

from typing import Protocol, Tuple


class Sized2D(Protocol):
    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...


def is_in_bounds(width: int, height: int, x: int, y: int) -> bool:
    """Return True if ``(x, y)`` lies within a ``width`` x ``height`` rectangle."""
    return 0 <= x < width and 0 <= y < height


def overlap_extent(a: Sized2D, b: Sized2D) -> Tuple[int, int]:
    """Width and height of the region shared by two grids anchored at the origin."""
    return min(a.width, b.width), min(a.height, b.height)
