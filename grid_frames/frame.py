"""Fixed-size character frame.

A :class:`Frame` is ``width`` x ``height`` pixels, each a character plus the
foreground color it is drawn with. Frames are mutated in place and every
mutator returns the frame itself so calls can be chained::

    >>> frame = Frame(3, 3).set_pixel(1, 1, "O").set_color(1, 1, Color.YELLOW)

Layering is done with :meth:`Frame.add_overlay`: every non-empty pixel of the
overlay replaces the pixel underneath, while ``EMPTY_PIXEL`` is transparent.
This lets sprites drawn on their own frames be stacked without their blank
backgrounds erasing each other.

Writes outside the frame never raise. They are dropped and reported as a
warning on this module's logger, so a sprite that partially leaves the frame
still draws the part that fits.

Storage is two numpy arrays indexed ``[x, y]``: one of single characters and
one of :class:`Color` members.
"""

import logging
from typing import TYPE_CHECKING, Iterator, Optional, Tuple

import numpy as np
import numpy.typing as npt

from grid_frames.cell import Cell, Position
from grid_frames.types import DEFAULT_PIXEL_COLOR, EMPTY_PIXEL, Color, Pixel
from grid_frames.utils.grid import is_in_bounds, overlap_extent

if TYPE_CHECKING:
    from grid_frames.config import FrameConfig
    from grid_frames.renderer.terminal import DisplaySink

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 10
DEFAULT_HEIGHT = 10

PixelArray = npt.NDArray[np.str_]
ColorArray = npt.NDArray[np.object_]


class InvalidDimensionsError(ValueError):
    """Raised when a frame is requested with a non-positive width or height."""


class Frame:
    pixel_color: Color

    def __init__(
        self,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        pixel_color: Color = DEFAULT_PIXEL_COLOR,
    ):
        if width <= 0 or height <= 0:
            raise InvalidDimensionsError(
                f"Frame dimensions must be positive, got {width}x{height}"
            )
        self._width = width
        self._height = height
        self._pixels: PixelArray = np.empty((width, height), dtype="<U1")
        self._colors: ColorArray = np.empty((width, height), dtype=object)
        self.pixel_color = pixel_color
        self.reset()

    @classmethod
    def from_config(cls, config: "FrameConfig") -> "Frame":
        return cls(config.width, config.height, config.pixel_color)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def within_frame(self, x: int, y: int) -> bool:
        return is_in_bounds(self._width, self._height, x, y)

    def reset(self) -> "Frame":
        """Set every pixel to ``EMPTY_PIXEL`` in the current ``pixel_color``."""
        self._pixels.fill(EMPTY_PIXEL)
        self._colors.fill(self.pixel_color)
        return self

    def set_pixel(
        self, x: int, y: int, value: Pixel, color: Optional[Color] = None
    ) -> "Frame":
        """Write ``value`` at ``(x, y)``.

        The pixel's color is always written as well: ``color`` if given,
        otherwise the frame's current ``pixel_color``. ``value`` must be a
        single character; anything else raises ``ValueError``.
        """
        if len(value) != 1:
            raise ValueError(
                f"Pixel value must be a single character, got {value!r}"
            )
        if not self.within_frame(x, y):
            logger.warning("Trying to set pixel outside frame: (%d, %d)", x, y)
            return self
        self._pixels[x, y] = value
        self._colors[x, y] = self.pixel_color if color is None else color
        return self

    def set_color(self, x: int, y: int, color: Color) -> "Frame":
        """Change the color at ``(x, y)``, keeping its character."""
        if not self.within_frame(x, y):
            logger.warning("Trying to set color outside frame: (%d, %d)", x, y)
            return self
        self._colors[x, y] = color
        return self

    def get_pixel(self, x: int, y: int) -> Optional[Cell]:
        """Return the cell at ``(x, y)`` or ``None`` outside the frame."""
        if not self.within_frame(x, y):
            return None
        return Cell(value=str(self._pixels[x, y]), color=self._colors[x, y])

    def cells(self) -> Iterator[Tuple[Position, Cell]]:
        """Yield every position and its cell, row by row."""
        for y in range(self._height):
            for x in range(self._width):
                yield Position(x, y), Cell(
                    value=str(self._pixels[x, y]), color=self._colors[x, y]
                )

    def copy(self) -> "Frame":
        """Return an independent frame with the same size and visible pixels."""
        new_frame = Frame(self._width, self._height, self.pixel_color)
        new_frame.add_overlay(self)
        return new_frame

    def add_overlay(self, overlay: "Frame") -> "Frame":
        """Overlay another frame on top of this one.

        Every non-empty pixel in ``overlay`` overwrites the corresponding
        pixel (character and color) in this frame. Pixels of ``overlay``
        outside this frame are ignored, and pixels of this frame outside
        ``overlay`` are left as they are.
        """
        w, h = overlap_extent(self, overlay)
        source_pixels = overlay._pixels[:w, :h]
        mask = source_pixels != EMPTY_PIXEL
        # slices are views, so masked assignment writes through to storage
        self._pixels[:w, :h][mask] = source_pixels[mask]
        self._colors[:w, :h][mask] = overlay._colors[:w, :h][mask]
        return self

    def draw(self, sink: "DisplaySink") -> None:
        """Write the frame to ``sink`` row by row.

        The sink's foreground color is changed per pixel and restored to its
        previous value once drawing ends.
        """
        previous_color = sink.foreground
        try:
            for y in range(self._height):
                for x in range(self._width):
                    sink.foreground = self._colors[x, y]
                    sink.write(str(self._pixels[x, y]))
                sink.write_line()
        finally:
            sink.foreground = previous_color

    def to_text(self) -> str:
        return "\n".join(
            "".join(self._pixels[:, y].tolist()) for y in range(self._height)
        )

    def __str__(self) -> str:
        return self.to_text()

    def __repr__(self) -> str:
        return (
            f"Frame(width={self._width}, height={self._height}, "
            f"pixel_color={self.pixel_color!r})"
        )
