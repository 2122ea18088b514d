"""The viewer application: frame rendering, the window loop and the command."""

from __future__ import annotations

import sys
from pathlib import Path

from . import settings
from .drawing import draw_map, show_admin
from .image import Image
from .model import HeightMap, Scene, View
from .parser import ArgumentError, MapError, check_arguments, parse_map
from .projection import update_bounding_box, update_iso_coordinates
from .controls import handle_keypress, mouse_move, mouse_press, mouse_release
from .settings import Key
from .ui import Label, ui_labels

_PROBE_SIZE = 511
_FRAMES_PER_SECOND = 60
_FONT_SIZE = 16


def validate_file_content(path: str | Path) -> bool:
    """Whether the file at ``path`` can be read and is not empty.

    A file whose first bytes mention ``404`` (a failed download) is reported
    but still counts as valid.
    """
    try:
        with open(path, "rb") as handle:
            head = handle.read(_PROBE_SIZE)
    except FileNotFoundError:
        print("Error: Could not open welcome image file\n.", end="")
        return False
    except OSError:
        print("Error: Could not read file.")
        return False
    if not head:
        return False
    if b"404" in head.split(b"\0", 1)[0]:
        print("Error: File contains 404: ")
    return True


def render(scene: Scene, image: Image) -> list[Label] | None:
    """Draw one frame of the map into ``image`` and return its text overlays.

    Returns ``None`` when nothing is drawn: the window is closed or the
    welcome screen is showing.
    """
    view = scene.view
    if not scene.window_open or view.show_welcome:
        return None
    update_iso_coordinates(scene.height_map, view)
    image.fill(view.bg_color)
    if view.show_admin:
        show_admin(image, view)
    draw_map(image, scene)
    update_bounding_box(scene.height_map, view)
    return ui_labels(view)


def _rgb(color: int) -> tuple[int, int, int]:
    return (color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF


def run(scene: Scene, welcome_path: str | Path) -> int:
    """Open the window and show the scene until it is closed."""
    import pygame

    try:
        pygame.init()
        screen = pygame.display.set_mode((settings.WINDOW_W, settings.WINDOW_H))
    except pygame.error as exc:
        print(f"Error: could not open the window: {exc}", file=sys.stderr)
        return settings.MLX_ERROR
    pygame.display.set_caption(settings.WINDOW_NAME)

    special_keys = {
        pygame.K_ESCAPE: Key.ESCAPE,
        pygame.K_UP: Key.UP,
        pygame.K_DOWN: Key.DOWN,
        pygame.K_LEFT: Key.LEFT,
        pygame.K_RIGHT: Key.RIGHT,
    }

    welcome = None
    if settings.SHOW_WELCOME_IMAGE:
        try:
            welcome = pygame.image.load(str(welcome_path))
        except (pygame.error, OSError):
            welcome = None

    font = pygame.font.Font(None, _FONT_SIZE)
    frame = pygame.Surface(
        (settings.WINDOW_W, settings.WINDOW_H),
        depth=32,
        masks=(0xFF0000, 0x00FF00, 0x0000FF, 0),
    )
    image = Image()
    clock = pygame.time.Clock()

    try:
        while scene.window_open:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type == pygame.KEYDOWN:
                    handle_keypress(scene, special_keys.get(event.key, event.key))
                elif event.type == pygame.MOUSEBUTTONDOWN:
                    mouse_press(scene, event.button, *event.pos)
                elif event.type == pygame.MOUSEBUTTONUP:
                    mouse_release(scene, event.button, *event.pos)
                elif event.type == pygame.MOUSEMOTION:
                    mouse_move(scene, *event.pos)
            if not scene.window_open:
                break

            labels = render(scene, image)
            if labels is None:
                if welcome is not None:
                    screen.blit(welcome, (0, 0))
            else:
                frame.get_buffer().write(image.to_bytes(), 0)
                screen.blit(frame, (0, 0))
                for label in labels:
                    text = font.render(label.text, True, _rgb(label.color))
                    screen.blit(text, (label.x, label.y - text.get_height()))
            pygame.display.flip()
            clock.tick(_FRAMES_PER_SECOND)
    finally:
        pygame.quit()
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the viewer; ``argv`` holds the program name followed by the map path."""
    if argv is None:
        argv = sys.argv
    try:
        path = check_arguments(list(argv))
    except ArgumentError as exc:
        print(exc, file=sys.stderr)
        return 1

    view = View()
    if not validate_file_content(settings.WELCOME_IMAGE):
        view.show_welcome = False

    if settings.PARSE_MAP:
        try:
            height_map = parse_map(path, view)
        except MapError as exc:
            print(exc)
            return 1
    else:
        height_map = HeightMap.filled(
            settings.TEST_MAP_X, settings.TEST_MAP_Y, settings.TEST_MAP_Z
        )
        update_iso_coordinates(height_map, view)

    view.setup_for_map(height_map)
    scene = Scene(height_map=height_map, view=view)
    return run(scene, settings.WELCOME_IMAGE)