"""Rendering subpackage.

Display sinks a :class:`grid_frames.frame.Frame` can be drawn onto:

* :class:`TerminalSink` writes characters to a text stream and switches the
  foreground color with ANSI escapes.
* :class:`ImageSink` records the drawn cells and rasterizes them with Pillow.

Both satisfy the :class:`DisplaySink` protocol, which is all ``Frame.draw``
relies on.
"""

from .image import COLOR_RGB, ImageSink
from .terminal import COLOR_ANSI, DisplaySink, TerminalSink, ansi_foreground

__all__ = [
    "COLOR_ANSI",
    "COLOR_RGB",
    "DisplaySink",
    "ImageSink",
    "TerminalSink",
    "ansi_foreground",
]
