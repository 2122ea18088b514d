"""Scaling, rotation and isometric projection of map points onto the screen."""

from __future__ import annotations

import math

from . import settings
from .model import HeightMap, View, deg_to_radians
from .settings import Projection

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def scale(x: int, y: int, z: int, view: View) -> tuple[int, int, int]:
    """Stretch a grid position by the view's spacing and zoom."""
    return (
        int(x * view.xy_dist * view.zoom),
        int(y * view.xy_dist * view.zoom),
        int(z * view.z_dist * view.zoom),
    )


def rotate_x(y: int, z: int, angle: float) -> tuple[int, int]:
    """Rotate the (y, z) pair about the X axis by ``angle`` degrees."""
    rad = deg_to_radians(angle)
    cos, sin = math.cos(rad), math.sin(rad)
    return int(y * cos + z * sin), int(-y * sin + z * cos)


def rotate_y(x: int, z: int, angle: float) -> tuple[int, int]:
    """Rotate the (x, z) pair about the Y axis by ``angle`` degrees."""
    rad = deg_to_radians(angle)
    cos, sin = math.cos(rad), math.sin(rad)
    return int(x * cos + z * sin), int(-x * sin + z * cos)


def rotate_z(x: int, y: int, angle: float) -> tuple[int, int]:
    """Rotate the (x, y) pair about the Z axis by ``angle`` degrees."""
    rad = deg_to_radians(angle)
    cos, sin = math.cos(rad), math.sin(rad)
    return int(x * cos - y * sin), int(x * sin + y * cos)


def project(x: int, y: int, z: int) -> tuple[int, int, int]:
    """Apply the isometric projection; ``z`` is passed through unchanged."""
    rad = deg_to_radians(settings.DEF_ISO_ANGLE)
    return int((x - y) * math.cos(rad)), int((x + y) * math.sin(rad) - z), z


def iso_coordinates(x: int, y: int, z: int, view: View) -> tuple[int, int, int]:
    """Scale, rotate and (for the isometric view) project one position."""
    x, y, z = scale(x, y, z, view)
    # The first rotation deliberately works on the (z, y) pair.
    z, y = rotate_x(z, y, view.rot_x)
    x, z = rotate_y(x, z, view.rot_y)
    x, y = rotate_z(x, y, view.rot_z)
    if view.projection == Projection.ISO:
        x, y, z = project(x, y, z)
    return x, y, z


def origin_coordinates(height_map: HeightMap, view: View) -> tuple[int, int]:
    """Project the map's middle point and store it as the view's origin."""
    mid_x = int((height_map.width - 1) / 2)
    mid_y = int((height_map.height - 1) / 2)
    x, y, _ = iso_coordinates(mid_x, mid_y, 0, view)
    view.origin_x = float(x)
    view.origin_y = float(y)
    return x, y


def update_iso_coordinates(height_map: HeightMap, view: View) -> None:
    """Recompute the screen position of every point, centred in the window."""
    if not height_map.rows or not height_map.width:
        return
    origin_coordinates(height_map, view)
    shift_x = settings.X_CENTER - view.origin_x + view.x_off
    shift_y = settings.Y_CENTER - view.origin_y + view.y_off
    for r, row in enumerate(height_map.rows):
        for c, point in enumerate(row):
            x, y, _ = iso_coordinates(c, r, point.z, view)
            point.x_iso = int(x + shift_x)
            point.y_iso = int(y + shift_y)


def _half(total: int) -> int:
    return int(total / 2)


def update_bounding_box(height_map: HeightMap, view: View) -> None:
    """Store the extent of the projected map and its centre in the view."""
    view.x_max, view.x_min = INT_MIN, INT_MAX
    view.y_max, view.y_min = INT_MIN, INT_MAX
    for point in height_map.points():
        view.x_max = max(view.x_max, point.x_iso)
        view.x_min = min(view.x_min, point.x_iso)
        view.y_max = max(view.y_max, point.y_iso)
        view.y_min = min(view.y_min, point.y_iso)
    view.c_x = float(_half(view.x_max + view.x_min))
    view.c_y = float(_half(view.y_max + view.y_min))