"""Rasterising the wireframe: lines, gradients, nodes, rectangles and overlays."""

from __future__ import annotations

from dataclasses import replace

from . import settings
from .colors import color_between_points
from .image import Image, in_window
from .model import Line, Point, Scene, View
from .settings import WINDOW_H, WINDOW_W


def draw_horizontal_line(image: Image, line: Line) -> None:
    """Draw from ``x1`` to ``x2`` inclusive on row ``y1``, in one colour."""
    start, end = sorted((line.x1, line.x2))
    if not 0 <= line.y1 < WINDOW_H:
        return
    for x in range(max(start, 0), min(end, WINDOW_W - 1) + 1):
        image.put_pixel(x, line.y1, line.color)


def draw_single_color_line(image: Image, line: Line) -> None:
    """Draw column ``x1`` from the lower to the higher of ``y1``/``y2``, end excluded."""
    start, end = sorted((line.y1, line.y2))
    if not 0 <= line.x1 < WINDOW_W:
        return
    for y in range(max(start, 0), min(end, WINDOW_H)):
        image.put_pixel(line.x1, y, line.color)


def draw_vertical_line(image: Image, view: View, first: Point, second: Point) -> None:
    """Draw a gradient down the first point's column, last row excluded."""
    if first.y_iso > second.y_iso:
        first, second = second, first
    if not 0 <= first.x_iso < WINDOW_W:
        return
    span = second.y_iso - first.y_iso
    for y in range(max(first.y_iso, 0), min(second.y_iso, WINDOW_H)):
        dist = (y - first.y_iso) / span
        image.put_pixel(first.x_iso, y, color_between_points(view, first, second, dist))


def _draw_step(image: Image, view: View, current: Point, following: Point) -> None:
    if abs(current.y_iso - following.y_iso) >= 1:
        draw_vertical_line(image, view, current, following)
    else:
        image.put_pixel(current.x_iso, current.y_iso, current.color)


def draw_sloped_line(image: Image, view: View, first: Point, second: Point) -> None:
    """Draw a gradient line from ``first`` rightwards to ``second`` (excluded)."""
    run = second.x_iso - first.x_iso
    if run <= 0:
        return
    slope = (second.y_iso - first.y_iso) / run
    current = replace(first)
    following = replace(first)
    # A step at x may paint column x + 1, so x = -1 can still reach the window.
    for x in range(max(first.x_iso, -1), min(second.x_iso, WINDOW_W)):
        current.x_iso = x
        current.y_iso = int(first.y_iso + (x - first.x_iso) * slope)
        current.color = color_between_points(
            view, first, second, (x - first.x_iso) / run
        )
        current.color_custom = current.color
        following.x_iso = x + 1
        following.y_iso = int(first.y_iso + (following.x_iso - first.x_iso) * slope)
        following.color = color_between_points(
            view, current, second, 1 / (second.x_iso - x)
        )
        following.color_custom = following.color
        _draw_step(image, view, current, following)


def connect_two_nodes(image: Image, view: View, first: Point, second: Point) -> None:
    """Join two projected points unless both lie outside the window."""
    if not in_window(first.x_iso, first.y_iso) and not in_window(
        second.x_iso, second.y_iso
    ):
        return
    if first.x_iso == second.x_iso:
        draw_vertical_line(image, view, first, second)
    elif first.x_iso < second.x_iso:
        draw_sloped_line(image, view, first, second)
    else:
        draw_sloped_line(image, view, second, first)


def draw_node(image: Image, view: View, x: int, y: int, color: int) -> None:
    """Paint a square of side ``node_size`` centred on (x, y)."""
    image.put_pixel(x, y, color)
    half = int(view.node_size / 2)
    for cx in range(x - half, x + half + 1):
        for cy in range(y - half, y + half + 1):
            image.put_pixel(cx, cy, color)


def draw_map(image: Image, scene: Scene) -> None:
    """Connect every point to its right and lower neighbours, and draw nodes."""
    view = scene.view
    rows = scene.height_map.rows
    for r, row in enumerate(rows):
        for c, point in enumerate(row):
            if settings.DRAW_LINES and c < len(row) - 1:
                connect_two_nodes(image, view, point, row[c + 1])
            if settings.DRAW_LINES and r < len(rows) - 1:
                connect_two_nodes(image, view, point, rows[r + 1][c])
            if view.show_nodes:
                color = point.color_custom if view.use_custom_colors else point.color
                draw_node(image, view, point.x_iso, point.y_iso, color)


def draw_rectangle(image: Image, first: Point, second: Point, color: int) -> None:
    """Fill the rectangle spanned by two points' grid coordinates, axes exchanged."""
    for x in range(first.x, second.x):
        for y in range(first.y, second.y):
            image.put_pixel(y, x, color)


def _draw_crosshair(image: Image, view: View, x: int, y: int, color: int) -> None:
    draw_single_color_line(
        image,
        Line(x1=x, y1=y - settings.CENTER_LINE_PX, y2=y - settings.CL_MARGIN, color=color),
    )
    draw_single_color_line(
        image,
        Line(x1=x, y1=y + settings.CENTER_LINE_PX, y2=y + settings.CL_MARGIN, color=color),
    )
    draw_horizontal_line(
        image,
        Line(x1=x - settings.CENTER_LINE_PX, x2=x - settings.CL_MARGIN, y1=y, color=color),
    )
    draw_horizontal_line(
        image,
        Line(x1=x + settings.CENTER_LINE_PX, x2=x + settings.CL_MARGIN, y1=y, color=color),
    )
    draw_node(image, view, x, y, color)


def _draw_bounding_box(image: Image, view: View) -> None:
    color = settings.BBOX_COLOR
    draw_horizontal_line(
        image, Line(x1=view.x_min, x2=view.x_max, y1=view.y_min, color=color)
    )
    draw_horizontal_line(
        image, Line(x1=view.x_min, x2=view.x_max, y1=view.y_max, color=color)
    )
    draw_single_color_line(
        image, Line(x1=view.x_min, y1=view.y_max, y2=view.y_min, color=color)
    )
    draw_single_color_line(
        image, Line(x1=view.x_max, y1=view.y_max, y2=view.y_min, color=color)
    )


def show_admin(image: Image, view: View) -> None:
    """Draw the origin, window-centre and map-centre crosshairs and the bounding box."""
    _draw_crosshair(image, view, int(view.origin_x), int(view.origin_y), settings.RED)
    _draw_crosshair(image, view, settings.X_CENTER, settings.Y_CENTER, settings.GREEN)
    _draw_crosshair(image, view, int(view.c_x), int(view.c_y), settings.YELLOW)
    _draw_bounding_box(image, view)