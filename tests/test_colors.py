import pytest

from wireframe import settings
from wireframe.colors import (
    color_between,
    color_between_points,
    hex_to_int,
    pack_rgb,
)
from wireframe.model import Point, View


def test_pack_rgb_packs_channels():
    assert pack_rgb(0xFF, 0xD7, 0x00) == settings.GOLD
    assert pack_rgb(0, 0, 0) == settings.BLACK


def test_pack_rgb_clamps_out_of_range():
    assert pack_rgb(300, -5, 128) == pack_rgb(255, 0, 128)
    assert pack_rgb(1000, 1000, 1000) == settings.WHITE


@pytest.mark.parametrize(
    "start,end",
    [
        (settings.TEAL, settings.YELLOW),
        (settings.RED, settings.BLUE),
        (settings.BLACK, settings.WHITE),
    ],
)
def test_color_between_endpoints(start, end):
    assert color_between(0.0, start, end) == start
    assert color_between(1.0, start, end) == end


def test_color_between_same_colour_is_constant():
    for dist in (0.0, 0.3, 0.7, 1.0):
        assert color_between(dist, settings.GOLD, settings.GOLD) == settings.GOLD


def test_color_between_midpoint_grey():
    assert color_between(0.5, settings.BLACK, settings.WHITE) == 0x7F7F7F


def test_color_between_is_monotonic_on_grey_ramp():
    values = [color_between(d / 10, settings.BLACK, settings.WHITE) for d in range(11)]
    assert values == sorted(values)


def test_hex_to_int_parses_both_cases():
    assert hex_to_int("0xFF00FF") == settings.MAGENTA
    assert hex_to_int("0xffd700") == settings.GOLD


def test_hex_to_int_invalid_digit_gives_zero():
    assert hex_to_int("0xFFZZ00") == 0
    assert hex_to_int("0xFF\n") == 0


@pytest.mark.parametrize(
    "color", [settings.TEAL, settings.NAVY, settings.ORANGE, settings.SILVER]
)
def test_hex_round_trip(color):
    assert hex_to_int(f"0x{color:06X}") == color


def test_color_between_points_uses_scheme():
    first = Point(color=settings.BLACK, color_custom=settings.RED)
    second = Point(color=settings.WHITE, color_custom=settings.BLUE)
    view = View()
    assert color_between_points(view, first, second, 1.0) == settings.WHITE
    view.use_custom_colors = True
    assert color_between_points(view, first, second, 1.0) == settings.BLUE
    assert color_between_points(view, first, second, 0.0) == settings.RED