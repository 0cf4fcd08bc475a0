import sys
from typing import Dict, Optional, Protocol, TextIO

from grid_frames.types import Color

ESC = "\x1b"
DEFAULT_FOREGROUND_CODE = 39

# SGR foreground codes, dark variants on 30-37 and bright ones on 90-97
COLOR_ANSI: Dict[Color, int] = {
    Color.BLACK: 30,
    Color.DARK_RED: 31,
    Color.DARK_GREEN: 32,
    Color.DARK_YELLOW: 33,
    Color.DARK_BLUE: 34,
    Color.DARK_MAGENTA: 35,
    Color.DARK_CYAN: 36,
    Color.GRAY: 37,
    Color.DARK_GRAY: 90,
    Color.RED: 91,
    Color.GREEN: 92,
    Color.YELLOW: 93,
    Color.BLUE: 94,
    Color.MAGENTA: 95,
    Color.CYAN: 96,
    Color.WHITE: 97,
}


def ansi_foreground(color: Optional[Color]) -> str:
    """SGR escape selecting ``color``; ``None`` selects the terminal default."""
    if color is None:
        return f"{ESC}[{DEFAULT_FOREGROUND_CODE}m"
    return f"{ESC}[{COLOR_ANSI[color]}m"


class DisplaySink(Protocol):
    """Surface a frame is drawn onto.

    ``foreground`` is the color used for subsequent writes; drawing code
    assigns it per pixel and puts the previous value back when done. ``None``
    stands for the sink's own default color.
    """

    foreground: Optional[Color]

    def write(self, value: str) -> None: ...

    def write_line(self) -> None: ...


class TerminalSink:
    """Writes characters to a text stream, coloring them with ANSI escapes.

    The terminal's starting color is unknown, so ``foreground`` starts as
    ``None`` unless given: the first color set always emits an escape, and
    setting ``None`` again returns the terminal to its default color. An
    escape is emitted only when ``foreground`` actually changes, so runs of
    same-colored pixels are written as plain text.
    """

    stream: TextIO

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        foreground: Optional[Color] = None,
    ):
        self.stream = stream if stream is not None else sys.stdout
        self._foreground = foreground

    @property
    def foreground(self) -> Optional[Color]:
        return self._foreground

    @foreground.setter
    def foreground(self, color: Optional[Color]) -> None:
        if color != self._foreground:
            self.stream.write(ansi_foreground(color))
            self._foreground = color

    def write(self, value: str) -> None:
        self.stream.write(value)

    def write_line(self) -> None:
        self.stream.write("\n")

    def flush(self) -> None:
        self.stream.flush()
