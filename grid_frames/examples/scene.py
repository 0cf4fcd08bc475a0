"""Layered scene example.

Stacks the built-in sprites onto a blank frame and prints the result::

    python -m grid_frames.examples.scene
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from grid_frames.config import DEFAULT_CONFIG, FrameConfig
from grid_frames.frame import Frame
from grid_frames.logging_config import setup_logging
from grid_frames.renderer.terminal import DisplaySink, TerminalSink
from grid_frames.sprites import MAN, SUN, build_sprite
from grid_frames.types import Color

logger = logging.getLogger(__name__)


def compose(
    layers: Iterable[Frame],
    width: int = DEFAULT_CONFIG.width,
    height: int = DEFAULT_CONFIG.height,
) -> Frame:
    """Overlay ``layers`` in order onto a blank frame; later layers end on top."""
    frame = Frame(width, height)
    for layer in layers:
        frame.add_overlay(layer)
    return frame


def build_scene(config: FrameConfig = DEFAULT_CONFIG) -> Frame:
    sun = build_sprite(SUN, config.width, config.height, Color.YELLOW)
    man = build_sprite(MAN, config.width, config.height, config.pixel_color)
    scene = Frame.from_config(config)
    return scene.add_overlay(sun).add_overlay(man)


def main(sink: Optional[DisplaySink] = None) -> None:
    setup_logging()
    scene = build_scene()
    logger.info("Drawing %dx%d scene", scene.width, scene.height)
    scene.draw(sink or TerminalSink())


if __name__ == "__main__":
    main()
