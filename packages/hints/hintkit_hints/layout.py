"""Layout data records built from ``layout_data`` hints."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass
class GridData:
    """Placement of a widget inside a grid layout."""

    BEGINNING: ClassVar[int] = 1
    CENTER: ClassVar[int] = 2
    END: ClassVar[int] = 3
    FILL: ClassVar[int] = 4
    DEFAULT: ClassVar[int] = -1

    horizontal_alignment: int = BEGINNING
    vertical_alignment: int = CENTER
    width_hint: int = DEFAULT
    height_hint: int = DEFAULT
    horizontal_indent: int = 0
    vertical_indent: int = 0
    horizontal_span: int = 1
    vertical_span: int = 1
    grab_excess_horizontal_space: bool = False
    grab_excess_vertical_space: bool = False
    minimum_width: int = 0
    minimum_height: int = 0
    exclude: bool = False


LAYOUT_DATA_TYPES: dict[str, type] = {
    "grid": GridData,
}
