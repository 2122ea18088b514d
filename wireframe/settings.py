"""Colours, window geometry, defaults and input codes for the wireframe viewer."""

from enum import IntEnum

# Colours
BLACK = 0x000000
WHITE = 0xFFFFFF
GREY = 0x444444
DARKGREY = 0x0F0F0F

RED = 0x990000
GREEN = 0x00FF00
BLUE = 0x0000FF

YELLOW = 0xFFFF00
CYAN = 0x00FFFF
MAGENTA = 0xFF00FF
ORANGE = 0xFFA500
PURPLE = 0x800080
PINK = 0xFFC0CB
BROWN = 0xA52A2A
GOLD = 0xFFD700
SILVER = 0xC0C0C0
LIME = 0x32CD32
NAVY = 0x000020
TEAL = 0x008080
MAROON = 0x200000

# Colour schemes
SCHEME_1_LO = TEAL
SCHEME_1_HI = YELLOW
SCHEME_1_BG = NAVY

SCHEME_2_LO = RED
SCHEME_2_HI = BLUE
SCHEME_2_BG = DARKGREY

# Window
WINDOW_NAME = "wireframe"
VERSION_INFO = "wireframe viewer, v1.0"
WINDOW_W = 1200
WINDOW_H = 900

# Default scale
X_CENTER = 600
Y_CENTER = 450
XY_DIST = 100
Z_DIST = 1

# Offsets
DEF_OFFSET_X = 0
DEF_OFFSET_Y = 0

DEF_BG_COLOR = BLACK

# Lines and nodes
DRAW_LINES = True
DEF_LINE_COLOR = WHITE
DRAW_NODES = False
NODE_SIZE = 6

# Default rotation (degrees)
DEF_ISO_ROT_X = 0.0
DEF_ISO_ROT_Y = 0.0
DEF_ISO_ROT_Z = 0.0
DEF_ISO_ANGLE = 30

DEF_ROTATE_STEP = 1
DEF_KEY_OFFSET = 10
DEF_Z_STEP = 0.5
DEF_DRAG_LIM = 400

# Zoom
MAX_ZOOM = 5.0
MIN_ZOOM = 0.5
KEYBOARD_ZOOM = 0.1
DEF_STARTING_ZOOM = 0.5

# Mouse sensitivity
MOUSE_SENS_ROTATE = 0.2
MOUSE_SENS_DRAG = 0.7
MOUSE_SENS_SCROLL = 0.1

# Menu and UI
DEF_MENU_ROW_H = 15
MENU_WIDTH_PX = 200
UI_CLR_1 = WHITE
UI_CLR_2 = GOLD

# Bounding box and crosshairs
BBOX_COLOR = GREEN
CENTER_LINE_PX = 50
CL_MARGIN = 20

# Map parsing
PARSE_MAP = True
TEST_MAP_X = 10
TEST_MAP_Y = 10
TEST_MAP_Z = 0

# Welcome screen
WELCOME_IMAGE = "./assets/images/intro.xpm"
SHOW_WELCOME_IMAGE = True

# Error code for a failed graphics setup
MLX_ERROR = 1


class Projection(IntEnum):
    """How map points are projected onto the screen."""

    ISO = 0
    PARALLEL = 1


DEF_PROJECTION = Projection.ISO


class Language(IntEnum):
    """Language of the controls panel."""

    EN = 0
    DE = 1


class Key(IntEnum):
    """Keyboard symbols understood by the viewer (X11 keysym values)."""

    ESCAPE = 0xFF1B
    SPACE = 0x20
    MINUS = 0x2D
    EQUAL = 0x3D
    BRACKET_LEFT = 0x5B
    BRACKET_RIGHT = 0x5D
    SLASH = 0x2F
    UP = 0xFF52
    DOWN = 0xFF54
    LEFT = 0xFF51
    RIGHT = 0xFF53
    ONE = 0x31
    TWO = 0x32
    THREE = 0x33
    A = 0x61
    I = 0x69  # noqa: E741
    L = 0x6C
    N = 0x6E
    P = 0x70
    Q = 0x71
    R = 0x72
    S = 0x73
    W = 0x77
    X = 0x78
    Z = 0x7A


class MouseButton(IntEnum):
    """Mouse button numbers as reported by the windowing system."""

    LEFT = 1
    RIGHT = 2
    THIRD = 3
    SCROLL_UP = 4
    SCROLL_DOWN = 5
    SCROLL_LEFT = 6
    SCROLL_RIGHT = 7