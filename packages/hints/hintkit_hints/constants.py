"""Named toolkit constants and the spaces they are resolved in."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from enum import Enum, IntFlag

from .errors import UnknownConstantName


class FontStyle(IntFlag):
    NORMAL = 0
    BOLD = 1
    ITALIC = 2


class LabelStyle(IntFlag):
    NONE = 0
    # Alignment bits share Qt.AlignmentFlag values.
    LEFT = 0x0001
    RIGHT = 0x0002
    CENTER = 0x0004
    JUSTIFY = 0x0008
    TOP = 0x0020
    BOTTOM = 0x0040
    VCENTER = 0x0080
    BORDER = 1 << 16
    WRAP = 1 << 17
    SHADOW_IN = 1 << 18
    SHADOW_OUT = 1 << 19
    SEPARATOR = 1 << 20


ALIGNMENT_MASK = (
    LabelStyle.LEFT
    | LabelStyle.RIGHT
    | LabelStyle.CENTER
    | LabelStyle.JUSTIFY
    | LabelStyle.TOP
    | LabelStyle.BOTTOM
    | LabelStyle.VCENTER
)


def _int_value(value: object) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, int):
        return int(value)
    return None


class ConstantSpace(Mapping[str, int]):
    """Case-insensitive lookup table of integer constants."""

    def __init__(self, values: Mapping[str, int], label: str = "constants") -> None:
        self._values = {k.upper(): int(v) for k, v in values.items()}
        self.label = label

    @classmethod
    def from_enums(cls, *enums: type[Enum], label: str | None = None) -> ConstantSpace:
        values: dict[str, int] = {}
        for enum_type in enums:
            # __members__ keeps zero-valued flags, which iteration skips.
            for name, member in enum_type.__members__.items():
                values[name] = int(member.value)
        return cls(values, label=label or "+".join(e.__name__ for e in enums))

    @classmethod
    def from_class(cls, owner: type) -> ConstantSpace:
        values: dict[str, int] = {}
        for name in dir(owner):
            if not name.isupper() or name.startswith("_"):
                continue
            value = _int_value(getattr(owner, name))
            if value is not None:
                values[name] = value
        return cls(values, label=owner.__name__)

    def resolve(self, name: str) -> int:
        key = str(name).strip().upper()
        try:
            return self._values[key]
        except KeyError:
            raise UnknownConstantName(key) from None

    def __getitem__(self, key: str) -> int:
        return self._values[str(key).strip().upper()]

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and key.strip().upper() in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"ConstantSpace({self.label!r}, {len(self._values)} names)"


TOOLKIT_CONSTANTS = ConstantSpace.from_enums(LabelStyle, label="toolkit")
FONT_STYLES = ConstantSpace.from_enums(FontStyle, label="font")
