"""Data model: map points, the height map, view state, mouse state and scene."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from . import settings
from .colors import color_between
from .settings import Language, Projection


def deg_to_radians(angle: float) -> float:
    """Convert degrees to radians."""
    return angle * (math.pi / 180.0)


def normalize_degrees(angle: float) -> float:
    """Bring an angle back into the (-360, 360) range after a full turn."""
    return math.fmod(max(angle, angle + 360), 360)


@dataclass
class Point:
    """One node of the height map, with its colours and screen position."""

    x: int = 0
    y: int = 0
    z: int = 0
    color: int = settings.DEF_LINE_COLOR
    z_rel: float = 0.0
    color_custom: int = settings.WHITE
    x_iso: int = 0
    y_iso: int = 0


@dataclass
class HeightMap:
    """A grid of points, row by row."""

    rows: list[list[Point]] = field(default_factory=list)
    z_max: float = 0.0
    z_min: int = 0
    has_color_info: bool = False

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    @classmethod
    def filled(cls, height: int, width: int, z: int) -> HeightMap:
        """Create a ``height`` by ``width`` map with every point at ``z``."""
        return cls(rows=[[Point(z=z) for _ in range(width)] for _ in range(height)])

    def points(self):
        """Yield every point, row by row."""
        for row in self.rows:
            yield from row

    def update_z_rel(self) -> None:
        """Set each point's height relative to the highest point."""
        flat = self.z_min == self.z_max
        for point in self.points():
            if flat:
                point.z_rel = 0.0
            elif self.z_max:
                point.z_rel = point.z / self.z_max
            elif point.z == 0:
                point.z_rel = math.nan
            else:
                point.z_rel = math.copysign(math.inf, point.z)

    def update_colors(self, low_color: int, high_color: int) -> None:
        """Colour each point along the low-to-high gradient by its relative height."""
        for point in self.points():
            point.color_custom = color_between(point.z_rel, low_color, high_color)

    def dump(self) -> str:
        """Return the heights as text, each value followed by a tab."""
        return "".join(
            "".join(f"{point.z}\t" for point in row) + "\n" for row in self.rows
        )


@dataclass
class View:
    """Everything that controls how the map is shown."""

    show_welcome: bool = settings.SHOW_WELCOME_IMAGE
    show_admin: bool = False
    language: Language = Language.EN
    show_nodes: bool = settings.DRAW_NODES
    node_size: int = settings.NODE_SIZE
    use_custom_colors: bool = False
    low_color: int = settings.SCHEME_1_LO
    high_color: int = settings.SCHEME_1_HI
    bg_color: int = settings.DEF_BG_COLOR
    xy_dist: float = float(settings.XY_DIST)
    z_dist: float = float(settings.Z_DIST)
    z_limit: float = 0.0
    x_off: int = settings.DEF_OFFSET_X
    y_off: int = settings.DEF_OFFSET_Y
    zoom: float = settings.DEF_STARTING_ZOOM
    projection: Projection = settings.DEF_PROJECTION
    rot_x: float = settings.DEF_ISO_ROT_X
    rot_y: float = settings.DEF_ISO_ROT_Y
    rot_z: float = settings.DEF_ISO_ROT_Z
    x_min: int = 0
    x_max: int = 0
    y_min: int = 0
    y_max: int = 0
    c_x: float = 0.0
    c_y: float = 0.0
    origin_x: float = 0.0
    origin_y: float = 0.0

    def reset_angle(self) -> None:
        """Return all rotations to their defaults."""
        self.rot_x = settings.DEF_ISO_ROT_X
        self.rot_y = settings.DEF_ISO_ROT_Y
        self.rot_z = settings.DEF_ISO_ROT_Z

    def normalize_angles(self) -> None:
        """Normalise all three rotation angles."""
        self.rot_x = normalize_degrees(self.rot_x)
        self.rot_y = normalize_degrees(self.rot_y)
        self.rot_z = normalize_degrees(self.rot_z)

    def setup_for_map(self, height_map: HeightMap) -> None:
        """Fit the grid spacing to the window width for the given map."""
        self.xy_dist = float(settings.WINDOW_W // height_map.width)
        self.z_dist = float(int(self.xy_dist) // 5)
        if height_map.has_color_info:
            self.use_custom_colors = False


@dataclass
class Mouse:
    """Mouse button and position state."""

    left_pressed: bool = False
    right_pressed: bool = False
    x: int = 0
    y: int = 0
    previous_x: int = 0
    previous_y: int = 0


@dataclass
class Line:
    """A single-colour line segment in screen coordinates."""

    x1: int = 0
    y1: int = 0
    x2: int = 0
    y2: int = 0
    color: int = settings.WHITE


@dataclass
class Scene:
    """The map together with the view and input state."""

    height_map: HeightMap
    view: View = field(default_factory=View)
    mouse: Mouse = field(default_factory=Mouse)
    window_open: bool = True