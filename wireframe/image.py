"""A window-sized 32-bit pixel buffer."""

from __future__ import annotations

from .settings import WINDOW_H, WINDOW_W

_BYTES_PER_PIXEL = 4


def in_window(x: int, y: int) -> bool:
    """Whether the pixel (x, y) lies inside the window."""
    return 0 <= x < WINDOW_W and 0 <= y < WINDOW_H


class Image:
    """Pixels of the whole window, each a little-endian 32-bit 0xRRGGBB word."""

    width = WINDOW_W
    height = WINDOW_H

    def __init__(self) -> None:
        self._pixels = bytearray(WINDOW_W * WINDOW_H * _BYTES_PER_PIXEL)

    @staticmethod
    def _offset(x: int, y: int) -> int:
        return (y * WINDOW_W + x) * _BYTES_PER_PIXEL

    @staticmethod
    def _word(color: int) -> bytes:
        return (color & 0xFFFFFFFF).to_bytes(_BYTES_PER_PIXEL, "little")

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel; pixels outside the window are ignored."""
        if not in_window(x, y):
            return
        start = self._offset(x, y)
        self._pixels[start : start + _BYTES_PER_PIXEL] = self._word(color)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the colour of one pixel inside the window."""
        if not in_window(x, y):
            raise IndexError(f"pixel ({x}, {y}) is outside the window")
        start = self._offset(x, y)
        return int.from_bytes(self._pixels[start : start + _BYTES_PER_PIXEL], "little")

    def fill(self, color: int) -> None:
        """Paint every pixel with one colour."""
        self._pixels[:] = self._word(color) * (WINDOW_W * WINDOW_H)

    def to_bytes(self) -> bytes:
        """Return the raw pixel data, row by row."""
        return bytes(self._pixels)