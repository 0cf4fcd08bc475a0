from typing import Dict, List, Tuple

from grid_frames.cell import Cell
from grid_frames.frame import Frame
from grid_frames.types import DEFAULT_PIXEL_COLOR, Color


class RecordingSink:
    """Display sink that keeps every write and every foreground change."""

    def __init__(self, foreground: Color = DEFAULT_PIXEL_COLOR) -> None:
        self.foreground = foreground
        self.writes: List[Tuple[str, Color]] = []
        self.lines: int = 0
        self.text: str = ""

    def write(self, value: str) -> None:
        self.writes.append((value, self.foreground))
        self.text += value

    def write_line(self) -> None:
        self.lines += 1
        self.text += "\n"


def snapshot(frame: Frame) -> Dict[Tuple[int, int], Cell]:
    """All cells of ``frame`` keyed by (x, y)."""
    return {(pos.x, pos.y): cell for pos, cell in frame.cells()}


def make_frame(
    width: int, height: int, pixels: Dict[Tuple[int, int], str]
) -> Frame:
    frame = Frame(width, height)
    for (x, y), value in pixels.items():
        frame.set_pixel(x, y, value)
    return frame
