import pytest

from wireframe.image import Image, in_window
from wireframe.settings import WINDOW_H, WINDOW_W


@pytest.mark.parametrize(
    "x, y, expected",
    [
        (0, 0, True),
        (WINDOW_W - 1, WINDOW_H - 1, True),
        (WINDOW_W, 0, False),
        (0, WINDOW_H, False),
        (-1, 5, False),
        (5, -1, False),
    ],
)
def test_in_window(x, y, expected):
    assert in_window(x, y) is expected


def test_new_image_is_black():
    image = Image()
    assert image.get_pixel(10, 20) == 0
    assert image.to_bytes() == bytes(WINDOW_W * WINDOW_H * 4)


def test_put_and_get_round_trip():
    image = Image()
    image.put_pixel(7, 3, 0xABCDEF)
    assert image.get_pixel(7, 3) == 0xABCDEF
    assert image.get_pixel(8, 3) == 0


def test_pixel_bytes_are_little_endian():
    image = Image()
    image.put_pixel(1, 0, 0x112233)
    assert image.to_bytes()[4:8] == bytes([0x33, 0x22, 0x11, 0x00])


def test_put_outside_window_is_ignored():
    image = Image()
    image.put_pixel(-1, 0, 0xFFFFFF)
    image.put_pixel(WINDOW_W, WINDOW_H, 0xFFFFFF)
    assert image.to_bytes() == bytes(WINDOW_W * WINDOW_H * 4)


def test_get_outside_window_raises():
    with pytest.raises(IndexError):
        Image().get_pixel(WINDOW_W, 0)


def test_fill_sets_every_pixel():
    image = Image()
    image.fill(0x000020)
    assert image.get_pixel(0, 0) == 0x000020
    assert image.get_pixel(WINDOW_W - 1, WINDOW_H - 1) == 0x000020
    data = image.to_bytes()
    assert len(data) == WINDOW_W * WINDOW_H * 4
    assert data == (0x000020).to_bytes(4, "little") * (WINDOW_W * WINDOW_H)