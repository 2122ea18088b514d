from wireframe import settings
from wireframe.app import main, render, validate_file_content
from wireframe.image import Image
from wireframe.model import HeightMap, Scene, View
from wireframe.ui import ui_labels


def _scene(height=1, width=1):
    view = View(show_welcome=False)
    return Scene(height_map=HeightMap.filled(height, width, 0), view=view)


def test_validate_missing_file(tmp_path, capsys):
    assert validate_file_content(tmp_path / "absent.xpm") is False
    assert "Could not open" in capsys.readouterr().out


def test_validate_empty_file(tmp_path):
    path = tmp_path / "empty.xpm"
    path.write_bytes(b"")
    assert validate_file_content(path) is False


def test_validate_regular_file(tmp_path, capsys):
    path = tmp_path / "intro.xpm"
    path.write_text("/* XPM */\nstatic char *intro[] = {};\n")
    assert validate_file_content(path) is True
    assert "404" not in capsys.readouterr().out


def test_validate_file_with_404_is_reported_but_valid(tmp_path, capsys):
    path = tmp_path / "intro.xpm"
    path.write_text("404: Not Found")
    assert validate_file_content(path) is True
    assert "contains 404" in capsys.readouterr().out


def test_render_closed_window_draws_nothing():
    scene = _scene()
    scene.window_open = False
    image = Image()
    before = image.to_bytes()
    assert render(scene, image) is None
    assert image.to_bytes() == before


def test_render_welcome_screen_draws_nothing():
    scene = _scene()
    scene.view.show_welcome = True
    image = Image()
    image.fill(settings.RED)
    assert render(scene, image) is None
    assert image.get_pixel(0, 0) == settings.RED


def test_render_returns_ui_labels_and_fills_background():
    scene = _scene(2, 2)
    scene.view.bg_color = settings.NAVY
    image = Image()
    labels = render(scene, image)
    assert labels == ui_labels(scene.view)
    assert image.get_pixel(0, 0) == settings.NAVY


def test_render_updates_bounding_box():
    scene = _scene(3, 3)
    render(scene, Image())
    xs = [p.x_iso for p in scene.height_map.points()]
    ys = [p.y_iso for p in scene.height_map.points()]
    assert scene.view.x_min == min(xs)
    assert scene.view.x_max == max(xs)
    assert scene.view.y_min == min(ys)
    assert scene.view.y_max == max(ys)


def test_render_single_point_sits_at_window_centre():
    scene = _scene()
    render(scene, Image())
    point = scene.height_map.rows[0][0]
    assert (point.x_iso, point.y_iso) == (settings.X_CENTER, settings.Y_CENTER)


def test_render_admin_draws_centre_crosshair():
    scene = _scene()
    scene.view.show_admin = True
    image = Image()
    render(scene, image)
    x = settings.X_CENTER - settings.CL_MARGIN
    assert image.get_pixel(x, settings.Y_CENTER) == settings.GREEN


def test_render_without_admin_has_no_crosshair():
    scene = _scene()
    image = Image()
    render(scene, image)
    x = settings.X_CENTER - settings.CL_MARGIN
    assert image.get_pixel(x, settings.Y_CENTER) == scene.view.bg_color


def test_main_without_map_fails(capsys):
    assert main(["wireframe"]) == 1
    assert "No map provided" in capsys.readouterr().err


def test_main_with_too_many_arguments_fails(capsys):
    assert main(["wireframe", "a.fdf", "b.fdf"]) == 1
    assert "Too many arguments" in capsys.readouterr().err


def test_main_with_unreadable_map_fails(tmp_path, capsys):
    assert main(["wireframe", str(tmp_path / "missing.fdf")]) == 1
    assert "Can't read file" in capsys.readouterr().out