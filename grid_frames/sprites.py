"""Sprite tables and frame builders.

A sprite is plain data: an immutable vector of ``(x, y, value)`` triples. The
tables are turned into frames on demand with :func:`build_sprite`; every call
returns a fresh frame, so callers can mutate the result freely.

Examples
--------
>>> from grid_frames.sprites import SUN, build_sprite, get_sprite
>>> from grid_frames.types import Color
>>> sun = build_sprite(SUN, color=Color.YELLOW)
>>> man = get_sprite("man")
>>> sun.copy().add_overlay(man)  # doctest: +ELLIPSIS
Frame(...)
"""

import logging
from typing import Optional, Tuple

from pyrsistent import pmap, pvector
from pyrsistent.typing import PMap, PVector

from grid_frames.frame import DEFAULT_HEIGHT, DEFAULT_WIDTH, Frame
from grid_frames.types import DEFAULT_PIXEL_COLOR, Color, Pixel

logger = logging.getLogger(__name__)

SpritePixel = Tuple[int, int, Pixel]
SpriteTable = PVector[SpritePixel]


def sprite_table(*pixels: SpritePixel) -> SpriteTable:
    return pvector(pixels)


SUN: SpriteTable = sprite_table(
    (0, 0, "\\"),
    (1, 0, "|"),
    (2, 0, "/"),
    (0, 1, "-"),
    (1, 1, "O"),
    (2, 1, "-"),
    (0, 2, "/"),
    (1, 2, "|"),
    (2, 2, "\\"),
)

MAN: SpriteTable = sprite_table(
    (4, 9, "/"),
    (6, 9, "\\"),
    (5, 8, "|"),
    (4, 8, "/"),
    (6, 8, "\\"),
    (5, 7, "o"),
)

SPRITE_REGISTRY: PMap[str, SpriteTable] = pmap(
    {
        "sun": SUN,
        "man": MAN,
    }
)


def sprite_extent(table: SpriteTable) -> Tuple[int, int]:
    """Smallest (width, height) anchored at the origin that holds every pixel."""
    if len(table) == 0:
        return 0, 0
    return max(x for x, _, _ in table) + 1, max(y for _, y, _ in table) + 1


def build_sprite(
    table: SpriteTable,
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
    color: Optional[Color] = None,
) -> Frame:
    """Draw ``table`` onto a new blank frame.

    When the table's extent does not fit the requested size, the pixels
    outside the frame are dropped and a single warning names how many.
    """
    frame = Frame(width, height, color or DEFAULT_PIXEL_COLOR)
    extent_w, extent_h = sprite_extent(table)
    if extent_w > width or extent_h > height:
        visible = [(x, y, value) for x, y, value in table if frame.within_frame(x, y)]
        logger.warning(
            "Sprite extent %dx%d exceeds %dx%d frame, dropping %d pixels",
            extent_w,
            extent_h,
            width,
            height,
            len(table) - len(visible),
        )
    else:
        visible = list(table)
    for x, y, value in visible:
        frame.set_pixel(x, y, value)
    return frame


def get_sprite(
    name: str,
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
    color: Optional[Color] = None,
) -> Frame:
    if name not in SPRITE_REGISTRY:
        raise KeyError(
            f"Unknown sprite {name!r}, expected one of {sorted(SPRITE_REGISTRY)}"
        )
    return build_sprite(SPRITE_REGISTRY[name], width, height, color)
