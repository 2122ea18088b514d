"""Text overlays: controls panel, rotation and zoom readouts, version line."""

from __future__ import annotations

import math
from dataclasses import dataclass

from . import settings
from .model import View
from .settings import Language

_PANEL_EN = (
    (15, settings.UI_CLR_1, "CONTROLS"),
    (15, settings.UI_CLR_2, "Zoom: Scroll or [+] / [-]"),
    (15, settings.UI_CLR_2, "Move: Drag around or Arrows"),
    (15, settings.UI_CLR_2, "Flatten: [ / ]"),
    (15, settings.UI_CLR_2, "Rotate: Press RMB & Move"),
    (35, settings.UI_CLR_2, "or:"),
    (57, settings.UI_CLR_1, "X-Axis - Q/W"),
    (57, settings.UI_CLR_1, "Y-Axis - A/S"),
    (57, settings.UI_CLR_1, "Z-Axis - Z/W"),
    (15, settings.UI_CLR_2, "Projections"),
    (57, settings.UI_CLR_1, "ISO: [I]"),
    (57, settings.UI_CLR_1, "Parallel: [P]"),
    (15, settings.UI_CLR_2, "Show / hide nodes: [N]"),
    (15, settings.UI_CLR_2, "Reset offs: [R]"),
    (15, settings.UI_CLR_2, "Map colors: [1][2][3]"),
    (15, settings.CYAN, "Secret admin mode: [/]"),
)

_PANEL_DE = (
    (15, settings.UI_CLR_1, "STEUERUNGEN"),
    (15, settings.UI_CLR_2, "Zoom: Scrollen oder [+] / [-]"),
    (15, settings.UI_CLR_2, "Bewegen: Ziehen / Pfeiltasten"),
    (15, settings.UI_CLR_2, "Abflachen: [ / ]"),
    (15, settings.UI_CLR_2, "Drehen: RMB drucken & Bewegen"),
    (35, settings.UI_CLR_2, "oder:"),
    (57, settings.UI_CLR_1, "X-Achse - Q/W"),
    (57, settings.UI_CLR_1, "Y-Achse - A/S"),
    (57, settings.UI_CLR_1, "Z-Achse - Z/W"),
    (15, settings.UI_CLR_2, "Projektionen"),
    (57, settings.UI_CLR_1, "ISO: [I]"),
    (57, settings.UI_CLR_1, "Parallel: [P]"),
    (15, settings.UI_CLR_2, "Knoten: [N]"),
    (15, settings.UI_CLR_2, "Zurucksetzen: [R]"),
    (15, settings.UI_CLR_2, "Kartenfarben: [1][2][3]"),
    (15, settings.CYAN, "Geheimer Admin-Modus: [/]"),
)


@dataclass(frozen=True)
class Label:
    """A piece of text to be drawn at a window position."""

    x: int
    y: int
    color: int
    text: str


def controls_panel(language: Language) -> list[Label]:
    """The controls help, one label per row, in the requested language."""
    rows = _PANEL_DE if language == Language.DE else _PANEL_EN
    return [
        Label(x, settings.DEF_MENU_ROW_H * (index + 1), color, text)
        for index, (x, color, text) in enumerate(rows)
    ]


def zoom_info(view: View) -> list[Label]:
    """The zoom readout in the bottom right corner, as tenths."""
    y = settings.WINDOW_H - 10
    return [
        Label(settings.WINDOW_W - 69, y, settings.UI_CLR_1, "Zoom: "),
        Label(
            settings.WINDOW_W - 35,
            y,
            settings.UI_CLR_2,
            str(math.floor(view.zoom * 10)),
        ),
    ]


def coordinate_info(view: View) -> list[Label]:
    """Rotation readouts for the three axes, followed by the zoom readout."""
    labels = []
    y = settings.WINDOW_H - 40
    for name, angle in (("X: ", view.rot_x), ("Y: ", view.rot_y), ("Z: ", view.rot_z)):
        labels.append(Label(settings.WINDOW_W - 51, y, settings.UI_CLR_1, name))
        labels.append(
            Label(settings.WINDOW_W - 35, y, settings.UI_CLR_2, str(math.floor(angle)))
        )
        y += 10
    return labels + zoom_info(view)


def license_info() -> Label:
    """The version line at the bottom of the window."""
    return Label(
        settings.WINDOW_W // 2 - 100,
        settings.WINDOW_H - 10,
        settings.GREY,
        settings.VERSION_INFO,
    )


def ui_labels(view: View) -> list[Label]:
    """Every overlay label for the current view."""
    return [*controls_panel(view.language), *coordinate_info(view), license_info()]