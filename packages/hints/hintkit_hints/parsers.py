"""Value parsers for color, font and constant-name hint specs."""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Any

from .constants import ConstantSpace, FontStyle
from .errors import InvalidHintValue, UnknownConstantName, UnknownStyleToken
from .models import RGB, FontDescriptor
from .toolkit import Toolkit


_HEX_COLOR = re.compile(r"^#([0-9A-Fa-f]{2})([0-9A-Fa-f]{2})([0-9A-Fa-f]{2})$")
_DECIMAL_COLOR = re.compile(r"^\(?\s*(\d+)(?:\s*,\s*|\s+)(\d+)(?:\s*,\s*|\s+)(\d+)\s*\)?$")
_NAME_SEPARATORS = re.compile(r"[\s\-]+")

_FONT_TOKEN_SPLIT = re.compile(r"\s*,\s*")
_RELATIVE_HEIGHT = re.compile(r"^[+-]\d+")
_ABSOLUTE_HEIGHT = re.compile(r"^\d+")
_STYLE_TOKEN = re.compile(r"^(NORMAL|BOLD|ITALIC)", re.IGNORECASE)
_STYLE_SPLIT = re.compile(r"\s*\|\s*")

_CONSTANT_SPLIT = re.compile(r"\s*[\s,|]\s*")


def parse_rgb(spec: Any) -> RGB | None:
    """Parse ``#RRGGBB``, ``(r, g, b)``/``r g b`` or a 3-sequence of ints.

    Returns None when the spec is none of those, i.e. it should be treated
    as a system color name.
    """
    if isinstance(spec, Sequence) and not isinstance(spec, str):
        if len(spec) != 3 or not all(isinstance(c, int) for c in spec):
            raise InvalidHintValue(f"color tuple must hold three integers: {spec!r}")
        return RGB(*spec)

    text = str(spec).strip()
    match = _HEX_COLOR.match(text)
    if match:
        return RGB(*(int(group, 16) for group in match.groups()))
    match = _DECIMAL_COLOR.match(text)
    if match:
        return RGB(*(int(group) for group in match.groups()))
    return None


def system_color_key(name: str) -> str:
    return "COLOR_" + _NAME_SEPARATORS.sub("_", name.strip()).upper()


def parse_color(toolkit: Toolkit, spec: Any) -> Any:
    rgb = parse_rgb(spec)
    if rgb is not None:
        return toolkit.make_color(rgb)
    return toolkit.system_color(system_color_key(str(spec)))


def parse_font(toolkit: Toolkit, spec: str) -> FontDescriptor:
    """Build a font descriptor from comma-delimited tokens.

    * ``N`` sets an exact height, ``+N``/``-N`` is relative to the height so far.
      Only the leading digits count, so ``18pt`` is a height of 18.
    * ``NORMAL`` resets the style; ``BOLD`` and ``ITALIC`` are OR-ed in.
      Style tokens may be combined with ``|``.
    * Anything else is the family name; the last one wins.

    Unspecified settings come from the toolkit's default font, with its
    bold/italic bits cleared. Examples::

        "Arial, 18, BOLD"   -> Arial, 18pt, bold
        "BOLD, 18, Arial"   -> same
        "Courier, +2"       -> Courier, default height + 2
        "+4, BOLD, ITALIC"  -> default family, +4, bold and italic
        "NORMAL"            -> default family and height, plain
    """
    default = toolkit.default_font()
    styles = toolkit.font_styles
    name = default.name
    height = default.height
    style = default.style & ~(styles.resolve("BOLD") | styles.resolve("ITALIC"))
    normal = styles.resolve("NORMAL")

    for token in _FONT_TOKEN_SPLIT.split(str(spec).strip()):
        if not token:
            continue
        relative = _RELATIVE_HEIGHT.match(token)
        absolute = _ABSOLUTE_HEIGHT.match(token)
        if relative:
            height += int(relative.group())
        elif absolute:
            height = int(absolute.group())
        elif _STYLE_TOKEN.match(token):
            for part in _STYLE_SPLIT.split(token.strip()):
                try:
                    bit = styles.resolve(part)
                except UnknownConstantName:
                    raise UnknownStyleToken(part.strip().upper()) from None
                if bit == normal:
                    style = bit
                else:
                    style |= bit
        else:
            name = token
    return FontDescriptor(name=name, height=height, style=style)


def font_style_names(style: int) -> list[str]:
    if not style:
        return [FontStyle.NORMAL.name]
    return [flag.name for flag in (FontStyle.BOLD, FontStyle.ITALIC) if style & flag]


def _constant_names(spec: Any) -> list[Any]:
    if isinstance(spec, (list, tuple)):
        return list(spec)
    return [name for name in _CONSTANT_SPLIT.split(str(spec).strip()) if name]


def parse_constant(spec: str, constants: ConstantSpace) -> int:
    return constants.resolve(spec)


def parse_constant_bits(spec: Any, constants: ConstantSpace) -> int:
    """OR together constants named by a delimited string or a list of names or values."""
    if isinstance(spec, int) and not isinstance(spec, bool):
        return spec
    bits = 0
    for name in _constant_names(spec):
        # Enum members and ints in a list are already resolved.
        if isinstance(name, int) and not isinstance(name, bool):
            bits |= int(name)
        else:
            bits |= constants.resolve(name)
    return bits
