"""Colour packing, gradients and hexadecimal colour parsing."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .model import Point, View

_HEX_DIGITS = {c: int(c, 16) for c in "0123456789abcdefABCDEF"}


def _channel(value: float) -> int:
    if math.isnan(value):
        return 0
    return int(max(min(value, 255), 0))


def _component(color: int, shift: int) -> int:
    return (color >> shift) & 0xFF


def pack_rgb(red: float, green: float, blue: float) -> int:
    """Pack three channels, each clamped to 0..255, into a 0xRRGGBB integer."""
    return (_channel(red) << 16) | (_channel(green) << 8) | _channel(blue)


def color_between(dist: float, start_color: int, end_color: int) -> int:
    """Return the colour a fraction ``dist`` of the way from start to end."""
    channels = (
        _component(start_color, shift)
        + dist * (_component(end_color, shift) - _component(start_color, shift))
        for shift in (16, 8, 0)
    )
    return pack_rgb(*(int(c) if math.isfinite(c) else c for c in channels))


def hex_to_int(text: str) -> int:
    """Parse a colour written as ``0xRRGGBB``; any bad digit gives 0.

    The first two characters are taken to be the prefix and are skipped.
    """
    result = 0
    for char in text[2:]:
        value = _HEX_DIGITS.get(char)
        if value is None:
            return 0
        result = (result << 4) | value
    return result


def color_between_points(view: View, first: Point, second: Point, dist: float) -> int:
    """Interpolate between two points' colours, honouring the view's scheme."""
    if view.use_custom_colors:
        return color_between(dist, first.color_custom, second.color_custom)
    return color_between(dist, first.color, second.color)