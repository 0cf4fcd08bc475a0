"""Pillow based display sink.

``ImageSink`` records what a frame writes and rasterizes it on demand, one
fixed-size box per character, so a drawn frame can be saved or inspected as a
picture instead of printed to a terminal.
"""

from typing import Dict, List, Optional, Tuple

from PIL import Image, ImageDraw, ImageFont

from grid_frames.frame import InvalidDimensionsError
from grid_frames.types import DEFAULT_PIXEL_COLOR, EMPTY_PIXEL, Color

DEFAULT_CELL_SIZE: Tuple[int, int] = (10, 16)
DEFAULT_BACKGROUND: Tuple[int, int, int, int] = (0, 0, 0, 255)

RGB = Tuple[int, int, int]

# Classic console palette
COLOR_RGB: Dict[Color, RGB] = {
    Color.BLACK: (0, 0, 0),
    Color.DARK_BLUE: (0, 0, 128),
    Color.DARK_GREEN: (0, 128, 0),
    Color.DARK_CYAN: (0, 128, 128),
    Color.DARK_RED: (128, 0, 0),
    Color.DARK_MAGENTA: (128, 0, 128),
    Color.DARK_YELLOW: (128, 128, 0),
    Color.GRAY: (192, 192, 192),
    Color.DARK_GRAY: (128, 128, 128),
    Color.BLUE: (0, 0, 255),
    Color.GREEN: (0, 255, 0),
    Color.CYAN: (0, 255, 255),
    Color.RED: (255, 0, 0),
    Color.MAGENTA: (255, 0, 255),
    Color.YELLOW: (255, 255, 0),
    Color.WHITE: (255, 255, 255),
}

RecordedCell = Tuple[str, Optional[Color]]


class ImageSink:
    foreground: Optional[Color]
    cell_size: Tuple[int, int]
    background: Tuple[int, int, int, int]

    def __init__(
        self,
        cell_size: Tuple[int, int] = DEFAULT_CELL_SIZE,
        background: Tuple[int, int, int, int] = DEFAULT_BACKGROUND,
        foreground: Optional[Color] = DEFAULT_PIXEL_COLOR,
    ):
        if cell_size[0] <= 0 or cell_size[1] <= 0:
            raise InvalidDimensionsError(f"Cell size must be positive, got {cell_size}")
        self.cell_size = cell_size
        self.background = background
        self.foreground = foreground
        self._rows: List[List[RecordedCell]] = [[]]

    @property
    def rows(self) -> List[List[RecordedCell]]:
        """Completed rows; a trailing row still being written is included."""
        if self._rows[-1]:
            return self._rows
        return self._rows[:-1]

    def write(self, value: str) -> None:
        self._rows[-1].append((value, self.foreground))

    def write_line(self) -> None:
        self._rows.append([])

    def clear(self) -> None:
        self._rows = [[]]

    def to_image(self, font: Optional[ImageFont.ImageFont] = None) -> Image.Image:
        """Rasterize everything written so far into an RGBA image."""
        rows = self.rows
        cell_w, cell_h = self.cell_size
        columns = max((len(row) for row in rows), default=0)
        size = (max(columns, 1) * cell_w, max(len(rows), 1) * cell_h)
        img = Image.new("RGBA", size, self.background)
        draw = ImageDraw.Draw(img)
        font = font or ImageFont.load_default()

        for y, row in enumerate(rows):
            for x, (value, color) in enumerate(row):
                if value == EMPTY_PIXEL:
                    continue
                x0, y0 = x * cell_w, y * cell_h
                rgb = COLOR_RGB[color if color is not None else DEFAULT_PIXEL_COLOR]
                draw.text((x0, y0), value, fill=rgb + (255,), font=font)

        return img
