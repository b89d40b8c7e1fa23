"""Typed hint models."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .errors import InvalidHintValue


class HintName(str, Enum):
    ALIGNMENT = "alignment"
    BACKGROUND = "background"
    FONT = "font"
    FOREGROUND = "foreground"
    LAYOUT = "layout"
    LAYOUT_DATA = "layout_data"
    STYLE = "style"


def hint_key(name: object) -> str:
    """Plain string key for a HintName member or any other hint name."""
    return str(getattr(name, "value", name))


@dataclass(frozen=True)
class RGB:
    red: int
    green: int
    blue: int

    def __post_init__(self) -> None:
        for component in (self.red, self.green, self.blue):
            if not 0 <= component <= 255:
                raise InvalidHintValue(f"color component out of range: {component}")

    def hex(self) -> str:
        return f"#{self.red:02X}{self.green:02X}{self.blue:02X}"


@dataclass(frozen=True)
class FontDescriptor:
    name: str
    height: int
    style: int


@dataclass
class ApplyReport:
    applied: list[str] = field(default_factory=list)
    skipped: list[str] = field(default_factory=list)
    missing: list[str] = field(default_factory=list)
