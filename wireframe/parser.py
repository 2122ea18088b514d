"""Reading height maps from text: one row per line, heights split by spaces."""

from __future__ import annotations

import re
from collections.abc import Iterable
from pathlib import Path

from . import settings
from .colors import hex_to_int
from .model import HeightMap, View
from .projection import update_iso_coordinates

_INTEGER = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_LINE = re.compile(r"[^\n]*\n|[^\n]+")


class MapError(Exception):
    """The map file cannot be read or has an unusable layout."""


class ArgumentError(Exception):
    """The command line does not name exactly one map file."""


def _words(text: str, separator: str) -> list[str]:
    return [word for word in text.split(separator) if word]


def count_words(text: str, separator: str) -> int:
    """Count the non-empty pieces of ``text`` between separators."""
    return len(_words(text, separator))


def _to_int(text: str) -> int:
    match = _INTEGER.match(text)
    return int(match.group(1)) if match else 0


def check_arguments(argv: list[str]) -> str:
    """Check that ``argv`` (program name first) names one map; return its path."""
    if len(argv) <= 1:
        raise ArgumentError("No map provided... Please provide a map in .fdf format.")
    if len(argv) != 2:
        raise ArgumentError(
            "Too many arguments... Please provide a map in .fdf format."
        )
    return argv[1]


def parse_lines(lines: Iterable[str], view: View) -> HeightMap:
    """Build a height map from lines of text, line endings included."""
    lines = list(lines)
    if not lines:
        raise MapError("The map is empty.")
    width = count_words(lines[0], " ")
    if width == 0:
        raise MapError("The first row of the map holds no values.")
    height_map = HeightMap.filled(len(lines), width, 0)

    for row_index, line in enumerate(lines):
        values = _words(line, " ")
        if len(values) > width:
            raise MapError(
                f"Row {row_index + 1} has {len(values)} values, expected {width}."
            )
        row = height_map.rows[row_index]
        for point, value in zip(row, values):
            z = _to_int(value)
            point.z = z
            parts = _words(value, ",")
            if len(parts) == 2:
                point.color = hex_to_int(parts[1])
                height_map.has_color_info = True
            else:
                point.color = settings.DEF_LINE_COLOR
            height_map.z_max = float(max(height_map.z_max, z))
            height_map.z_min = min(height_map.z_min, z)

    update_iso_coordinates(height_map, view)
    height_map.update_z_rel()
    return height_map


def parse_map(path: str | Path, view: View) -> HeightMap:
    """Read and parse the map file at ``path``."""
    try:
        text = Path(path).read_bytes().decode("latin-1")
    except OSError as exc:
        raise MapError("Can't read file. Check the filename, try again.") from exc
    height_map = parse_lines(_LINE.findall(text), view)
    print(f"Map parsed. Rows: {height_map.height}, Columns: {height_map.width}")
    return height_map