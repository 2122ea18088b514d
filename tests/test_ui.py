from wireframe import settings
from wireframe.model import View
from wireframe.settings import Language
from wireframe.ui import (
    Label,
    controls_panel,
    coordinate_info,
    license_info,
    ui_labels,
    zoom_info,
)


def test_english_panel_first_row():
    panel = controls_panel(Language.EN)
    assert panel[0] == Label(15, settings.DEF_MENU_ROW_H, settings.UI_CLR_1, "CONTROLS")
    assert panel[-1].text == "Secret admin mode: [/]"
    assert panel[-1].color == settings.CYAN


def test_panel_rows_step_by_row_height():
    panel = controls_panel(Language.EN)
    ys = [label.y for label in panel]
    assert ys == [settings.DEF_MENU_ROW_H * (i + 1) for i in range(len(panel))]


def test_german_panel_matches_english_layout():
    en = controls_panel(Language.EN)
    de = controls_panel(Language.DE)
    assert de[0].text == "STEUERUNGEN"
    assert [(l.x, l.y, l.color) for l in de] == [(l.x, l.y, l.color) for l in en]
    assert [l.text for l in de] != [l.text for l in en]


def test_zoom_info_in_tenths():
    labels = zoom_info(View(zoom=0.5))
    assert labels[0].text == "Zoom: "
    assert labels[1].text == "5"
    assert labels[1].x == settings.WINDOW_W - 35
    assert labels[1].y == settings.WINDOW_H - 10


def test_coordinate_info_values():
    labels = coordinate_info(View(rot_x=30.0, rot_y=-0.5, rot_z=359.9, zoom=2.0))
    texts = [label.text for label in labels]
    assert texts[:6] == ["X: ", "30", "Y: ", "-1", "Z: ", "359"]
    assert texts[6:] == [label.text for label in zoom_info(View(zoom=2.0))]
    assert [labels[i].y for i in (0, 2, 4)] == [
        settings.WINDOW_H - 40,
        settings.WINDOW_H - 30,
        settings.WINDOW_H - 20,
    ]


def test_license_info():
    label = license_info()
    assert label.text == settings.VERSION_INFO
    assert label.color == settings.GREY
    assert label.y == settings.WINDOW_H - 10


def test_ui_labels_follow_language():
    view = View(language=Language.DE)
    labels = ui_labels(view)
    assert labels[0].text == "STEUERUNGEN"
    assert labels[-1] == license_info()
    assert labels[16:-1] == coordinate_info(view)
    assert ui_labels(View())[0].text == "CONTROLS"