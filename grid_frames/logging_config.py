"""Diagnostics setup for ``grid_frames``.

Frames and sprite builders never raise on writes that miss the grid; they
report them as warnings on loggers below ``grid_frames`` (``grid_frames.frame``,
``grid_frames.sprites``). Nothing is printed until a handler is attached, which
is what :func:`setup_logging` does for scripts such as the scene example.

Frames are usually drawn to stdout, so the warnings go to stderr and never end
up inside a drawn picture.
"""

import logging
import sys
from typing import Optional

LOGGER_NAME = "grid_frames"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """Attach stderr (and optionally file) handlers to the package logger.

    Calling it again replaces the handlers from the previous call, closing
    them first, so a script can switch level or log file without doubling
    every message.

    Args:
        level: Threshold for the package logger and its handlers; out-of-bounds
            writes are reported at ``logging.WARNING``.
        log_file: Path that also receives the diagnostics, truncated on open.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S")
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("Frame diagnostics go to %d handler(s)", len(handlers))
