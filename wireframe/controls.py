"""Keyboard and mouse handling: zoom, pan, rotation, colours and toggles."""

from __future__ import annotations

from . import settings
from .model import Scene, View
from .settings import Key, Language, MouseButton, Projection

_ZOOM_KEYS = frozenset({Key.MINUS, Key.EQUAL})
_Z_DIST_KEYS = frozenset({Key.BRACKET_LEFT, Key.BRACKET_RIGHT})
_OFFSET_KEYS = frozenset({Key.UP, Key.DOWN, Key.LEFT, Key.RIGHT})
_ROTATION_KEYS = frozenset({Key.Q, Key.W, Key.A, Key.S, Key.Z, Key.X})
_PROJECTION_KEYS = frozenset({Key.I, Key.P})
_TOGGLE_KEYS = frozenset({Key.SLASH, Key.N, Key.L})
_SCHEME_KEYS = frozenset({Key.ONE, Key.TWO, Key.THREE})

_OFFSET_STEPS = {
    Key.UP: (0, settings.DEF_KEY_OFFSET),
    Key.DOWN: (0, -settings.DEF_KEY_OFFSET),
    Key.LEFT: (settings.DEF_KEY_OFFSET, 0),
    Key.RIGHT: (-settings.DEF_KEY_OFFSET, 0),
}

_ROTATION_STEPS = {
    Key.Q: ("rot_x", -settings.DEF_ROTATE_STEP),
    Key.W: ("rot_x", settings.DEF_ROTATE_STEP),
    Key.A: ("rot_y", -settings.DEF_ROTATE_STEP),
    Key.S: ("rot_y", settings.DEF_ROTATE_STEP),
    Key.Z: ("rot_z", -settings.DEF_ROTATE_STEP),
    Key.X: ("rot_z", settings.DEF_ROTATE_STEP),
}

_SCHEMES = {
    Key.TWO: (settings.SCHEME_1_LO, settings.SCHEME_1_HI, settings.SCHEME_1_BG),
    Key.THREE: (settings.SCHEME_2_LO, settings.SCHEME_2_HI, settings.SCHEME_2_BG),
}


def _zoom_in(view: View, step: float) -> None:
    view.zoom = min(view.zoom * (1 + step), settings.MAX_ZOOM)


def _zoom_out(view: View, step: float) -> None:
    view.zoom = max(view.zoom / (1 + step), settings.MIN_ZOOM)


def _keypress_zoom(scene: Scene, key: int) -> None:
    if key == Key.EQUAL:
        _zoom_in(scene.view, settings.KEYBOARD_ZOOM)
    elif key == Key.MINUS:
        _zoom_out(scene.view, settings.KEYBOARD_ZOOM)


def _keypress_z_dist(scene: Scene, key: int) -> None:
    view = scene.view
    if key == Key.BRACKET_RIGHT:
        view.z_dist += settings.DEF_Z_STEP
    elif key == Key.BRACKET_LEFT:
        view.z_dist = max(0.0, view.z_dist - settings.DEF_Z_STEP)


def _keypress_offsets(scene: Scene, key: int) -> None:
    dx, dy = _OFFSET_STEPS[Key(key)]
    scene.view.x_off += dx
    scene.view.y_off += dy


def _keypress_rotation(scene: Scene, key: int) -> None:
    view = scene.view
    attribute, step = _ROTATION_STEPS[Key(key)]
    setattr(view, attribute, getattr(view, attribute) + step)
    view.normalize_angles()


def _keypress_projection(scene: Scene, key: int) -> None:
    view = scene.view
    view.reset_angle()
    view.projection = Projection.ISO if key == Key.I else Projection.PARALLEL


def _keypress_toggles(scene: Scene, key: int) -> None:
    view = scene.view
    if key == Key.SLASH:
        view.show_admin = not view.show_admin
    elif key == Key.N:
        view.show_nodes = not view.show_nodes
        view.node_size += 1
    elif key == Key.L:
        view.language = Language.DE if view.language == Language.EN else Language.EN


def _keypress_reset(scene: Scene) -> None:
    view = scene.view
    view.x_off = 0
    view.y_off = 0
    view.reset_angle()


def _keypress_scheme(scene: Scene, key: int) -> None:
    view = scene.view
    if key == Key.ONE:
        view.use_custom_colors = False
        view.bg_color = settings.DEF_BG_COLOR
        return
    view.use_custom_colors = True
    view.low_color, view.high_color, view.bg_color = _SCHEMES[Key(key)]
    scene.height_map.update_colors(view.low_color, view.high_color)


def handle_keypress(scene: Scene, key: int) -> None:
    """React to one key press; only Escape and Space work on the welcome screen."""
    view = scene.view
    if key == Key.ESCAPE:
        print("ESC button pressed, closing the window...")
        scene.window_open = False
    if key == Key.SPACE and view.show_welcome:
        view.show_welcome = False
    if view.show_welcome:
        return
    if key in _ZOOM_KEYS:
        _keypress_zoom(scene, key)
    if key in _Z_DIST_KEYS:
        _keypress_z_dist(scene, key)
    if key in _OFFSET_KEYS:
        _keypress_offsets(scene, key)
    if key in _ROTATION_KEYS:
        _keypress_rotation(scene, key)
    if key in _PROJECTION_KEYS:
        _keypress_projection(scene, key)
    if key in _TOGGLE_KEYS:
        _keypress_toggles(scene, key)
    if key == Key.R:
        _keypress_reset(scene)
    if key in _SCHEME_KEYS:
        _keypress_scheme(scene, key)


def mouse_press(scene: Scene, button: int, x: int, y: int) -> None:
    """Scroll to zoom; remember which drag buttons are held."""
    view = scene.view
    if view.show_welcome:
        return
    if button == MouseButton.SCROLL_UP:
        _zoom_in(view, settings.MOUSE_SENS_SCROLL)
    elif button == MouseButton.SCROLL_DOWN:
        _zoom_out(view, settings.MOUSE_SENS_SCROLL)
    if button == MouseButton.LEFT:
        scene.mouse.left_pressed = True
    if button == MouseButton.THIRD:
        scene.mouse.right_pressed = True


def mouse_release(scene: Scene, button: int, x: int, y: int) -> None:
    """Forget a released drag button."""
    if scene.view.show_welcome:
        return
    if button == MouseButton.LEFT:
        scene.mouse.left_pressed = False
    if button == MouseButton.THIRD:
        scene.mouse.right_pressed = False


def _clamp_offset(offset: int, limit: float) -> int:
    if offset > 0:
        return int(min(offset, limit))
    return int(max(offset, -limit))


def _drag(scene: Scene, x: int, y: int) -> None:
    view = scene.view
    mouse = scene.mouse
    limit = settings.DEF_DRAG_LIM * view.zoom
    view.x_off = int(view.x_off + (x - mouse.previous_x) * settings.MOUSE_SENS_DRAG)
    view.x_off = _clamp_offset(view.x_off, limit)
    view.y_off = int(view.y_off + (y - mouse.previous_y) * settings.MOUSE_SENS_DRAG)
    view.y_off = _clamp_offset(view.y_off, limit)


def mouse_move(scene: Scene, x: int, y: int) -> None:
    """Track the pointer; rotate with the third button held, pan with the left."""
    view = scene.view
    mouse = scene.mouse
    mouse.previous_x, mouse.previous_y = mouse.x, mouse.y
    mouse.x, mouse.y = x, y
    if view.show_welcome:
        return
    if mouse.right_pressed:
        turn = (mouse.previous_x - x) * settings.MOUSE_SENS_ROTATE
        if y > view.c_y:
            view.rot_z += turn
        else:
            view.rot_z -= turn
        view.normalize_angles()
    if mouse.left_pressed:
        _drag(scene, x, y)