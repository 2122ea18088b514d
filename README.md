# wireframe

An interactive viewer that draws a height map as a 3D wireframe. Each
number in the map is a point's height, and each point is joined to its
right and lower neighbours by lines whose colour fades from one point to
the next. The map can be shown in isometric or parallel projection, and
you can rotate it, zoom in and out, and move it around.

## Installation

```
pip install .
```

The viewer uses `pygame` for its window.

## Usage

```
wireframe path/to/map.fdf
```

Give exactly one map file. If no map is given, or more than one, the
program prints an error and exits with status 1. It also exits with
status 1 if the map cannot be read or is unusable, or if the window
cannot be opened. After a successful parse it prints the number of rows
and columns.

### Map format

A map is a text file. Each line is one row of the map. Heights on a line
are separated by spaces. A height may carry a colour, written as
`0x` followed by hexadecimal digits, after a comma:

```
0 0 0 0
0 10 10 0
0 10,0xFF0000 10 0
0 0 0 0
```

- A point without a colour is drawn in white.
- A colour with any character that is not a hexadecimal digit reads as
  black (0). This includes a colour at the very end of a line, since the
  line ending is part of the last value.
- The first line fixes the width of the map. It must hold at least one
  value, and no later line may hold more values than the first; a shorter
  line leaves the rest of its row at height 0.
- An empty file is rejected.

### Welcome screen

At start the viewer looks for `./assets/images/intro.xpm`, relative to
the current directory. If that file exists and is not empty, it is shown
first (a file whose start mentions `404` is reported but still used).
Press space to go on to the map; until then only space and `Esc` do
anything. If the file is there but cannot be loaded as an image, the
window stays blank until space is pressed. If the file is missing or
empty, the map is shown straight away.

### Controls

| Input                     | Action                                        |
|---------------------------|-----------------------------------------------|
| Scroll wheel, `=` / `-`   | Zoom in / out (between 0.5 and 5)             |
| Left mouse drag, arrows   | Move the map                                  |
| `]` / `[`                 | Make heights larger / flatten them            |
| Right mouse drag          | Rotate around the Z axis                      |
| `Q` / `W`                 | Rotate around the X axis                      |
| `A` / `S`                 | Rotate around the Y axis                      |
| `Z` / `X`                 | Rotate around the Z axis                      |
| `I` / `P`                 | Isometric / parallel projection (resets rotation) |
| `N`                       | Show or hide the nodes (each press also grows them by one pixel) |
| `R`                       | Reset position and rotation                   |
| `1`                       | Colours from the map, black background        |
| `2` / `3`                 | Height-based colour schemes                   |
| `L`                       | Switch the panel between English and German   |
| `/`                       | Admin overlay: crosshairs and bounding box    |
| `Esc`                     | Close the window                              |

The bottom right corner shows the three rotation angles and the zoom in
tenths.

## Using it as a library

The modules can be used without opening a window:

```python
from wireframe.app import render
from wireframe.image import Image
from wireframe.model import Scene, View
from wireframe.parser import parse_lines

view = View(show_welcome=False)
height_map = parse_lines(["0 0 0", "0 5 0", "0 0 0"], view)
view.setup_for_map(height_map)
print(height_map.dump())

image = Image()
labels = render(Scene(height_map=height_map, view=view), image)
print(image.get_pixel(0, 0), len(labels))
```

- `wireframe.parser`: `parse_map(path, view)` and `parse_lines(lines, view)`
  build a `HeightMap` and raise `MapError` on bad input;
  `check_arguments(argv)` raises `ArgumentError`.
- `wireframe.model`: `Point`, `HeightMap`, `View`, `Mouse`, `Line`, `Scene`.
- `wireframe.projection`: scaling, rotations, the isometric projection,
  `update_iso_coordinates` and `update_bounding_box`.
- `wireframe.image`: `Image`, a window-sized 32-bit pixel buffer
  (1200 × 900) with `put_pixel`, `get_pixel`, `fill` and `to_bytes`.
- `wireframe.drawing`: line, gradient, node and overlay rasterising,
  including `draw_map`.
- `wireframe.controls`: `handle_keypress`, `mouse_press`, `mouse_release`
  and `mouse_move`, which change a `Scene`.
- `wireframe.ui`: the text overlays as `Label` values.
- `wireframe.colors`: for example `color_between(0.5, 0x000000, 0xFFFFFF)`
  gives the colour halfway between two colours, and
  `hex_to_int("0xFF00FF")` reads a colour written in a map.
- `wireframe.app`: `render(scene, image)`, `run(scene, welcome_path)`
  and `main(argv)`, which the `wireframe` command calls.