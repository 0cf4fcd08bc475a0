from __future__ import annotations

from dataclasses import dataclass

from grid_frames.frame import DEFAULT_HEIGHT, DEFAULT_WIDTH, InvalidDimensionsError
from grid_frames.types import DEFAULT_PIXEL_COLOR, Color


@dataclass(frozen=True)
class FrameConfig:
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    pixel_color: Color = DEFAULT_PIXEL_COLOR

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise InvalidDimensionsError(
                f"Frame dimensions must be positive, got {self.width}x{self.height}"
            )


DEFAULT_CONFIG = FrameConfig()
