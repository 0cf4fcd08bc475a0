# tests/unit/test_sprites.py

import logging

import pytest

from grid_frames.cell import Cell
from grid_frames.sprites import (
    MAN,
    SPRITE_REGISTRY,
    SUN,
    build_sprite,
    get_sprite,
    sprite_extent,
    sprite_table,
)
from grid_frames.types import DEFAULT_PIXEL_COLOR, Color
from tests.test_utils import snapshot


def test_sun_layout() -> None:
    sun = build_sprite(SUN)
    assert (sun.width, sun.height) == (10, 10)
    assert sun.to_text().splitlines()[:3] == [
        "\\|/       ",
        "-O-       ",
        "/|\\       ",
    ]


def test_man_layout() -> None:
    man = build_sprite(MAN)
    assert man.to_text().splitlines()[7:] == [
        "     o    ",
        "    /|\\   ",
        "    / \\   ",
    ]


def test_build_sprite_color() -> None:
    sun = build_sprite(SUN, color=Color.YELLOW)
    assert sun.get_pixel(1, 1) == Cell("O", Color.YELLOW)
    assert sun.pixel_color == Color.YELLOW


def test_build_sprite_returns_fresh_frames() -> None:
    first = build_sprite(SUN)
    first.set_pixel(1, 1, "X")
    second = build_sprite(SUN)
    assert second.get_pixel(1, 1) == Cell("O", DEFAULT_PIXEL_COLOR)


def test_build_sprite_drops_pixels_outside_frame(
    caplog: pytest.LogCaptureFixture,
) -> None:
    with caplog.at_level(logging.WARNING, logger="grid_frames"):
        man = build_sprite(MAN, width=6, height=9)
    assert man.get_pixel(5, 7) == Cell("o", DEFAULT_PIXEL_COLOR)
    assert man.get_pixel(4, 8) == Cell("/", DEFAULT_PIXEL_COLOR)
    # (6, 8), (4, 9) and (6, 9) fall outside, reported once
    assert len(caplog.records) == 1
    record = caplog.records[0]
    assert record.name == "grid_frames.sprites"
    assert record.getMessage() == (
        "Sprite extent 7x10 exceeds 6x9 frame, dropping 3 pixels"
    )


def test_build_sprite_fitting_table_logs_nothing(
    caplog: pytest.LogCaptureFixture,
) -> None:
    with caplog.at_level(logging.WARNING, logger="grid_frames"):
        build_sprite(MAN, width=7, height=10)
        build_sprite(SUN, width=3, height=3)
    assert caplog.records == []


def test_sprite_tables_are_immutable() -> None:
    with pytest.raises(TypeError):
        SUN[0] = (0, 0, "x")  # type: ignore[index]
    extended = SUN.append((5, 5, "x"))
    assert len(SUN) == 9
    assert len(extended) == 10


def test_sprite_extent() -> None:
    assert sprite_extent(SUN) == (3, 3)
    assert sprite_extent(MAN) == (7, 10)
    assert sprite_extent(sprite_table()) == (0, 0)


def test_sprite_fits_its_extent() -> None:
    width, height = sprite_extent(SUN)
    tight = build_sprite(SUN, width, height)
    assert snapshot(tight) == {
        key: cell for key, cell in snapshot(build_sprite(SUN)).items()
        if key[0] < width and key[1] < height
    }


def test_registry_lookup() -> None:
    assert set(SPRITE_REGISTRY) == {"sun", "man"}
    assert get_sprite("sun").to_text() == build_sprite(SUN).to_text()
    assert get_sprite("man", color=Color.RED).get_pixel(5, 7) == Cell("o", Color.RED)


def test_registry_unknown_name() -> None:
    with pytest.raises(KeyError):
        get_sprite("moon")
