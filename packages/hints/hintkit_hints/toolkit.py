"""Toolkit context handed to parsers and appliers, plus a headless implementation."""

from __future__ import annotations

from typing import Any, Callable, Protocol

from .constants import FONT_STYLES, TOOLKIT_CONSTANTS, ConstantSpace, FontStyle
from .errors import UnknownColorName
from .models import RGB, FontDescriptor


class Toolkit(Protocol):
    constants: ConstantSpace
    font_styles: ConstantSpace

    def make_color(self, rgb: RGB) -> Any: ...

    def system_color(self, name: str) -> Any: ...

    def default_font(self) -> FontDescriptor: ...

    def make_font(self, descriptor: FontDescriptor) -> Any: ...

    def create_label(self, parent: Any, style: int) -> Any: ...

    def set_label_text(self, label: Any, text: str) -> None: ...

    def on_dispose(self, widget: Any, callback: Callable[[], None]) -> None: ...


SYSTEM_COLORS: dict[str, RGB] = {
    "COLOR_WHITE": RGB(255, 255, 255),
    "COLOR_BLACK": RGB(0, 0, 0),
    "COLOR_RED": RGB(255, 0, 0),
    "COLOR_DARK_RED": RGB(128, 0, 0),
    "COLOR_GREEN": RGB(0, 255, 0),
    "COLOR_DARK_GREEN": RGB(0, 128, 0),
    "COLOR_YELLOW": RGB(255, 255, 0),
    "COLOR_DARK_YELLOW": RGB(128, 128, 0),
    "COLOR_BLUE": RGB(0, 0, 255),
    "COLOR_DARK_BLUE": RGB(0, 0, 128),
    "COLOR_MAGENTA": RGB(255, 0, 255),
    "COLOR_DARK_MAGENTA": RGB(128, 0, 128),
    "COLOR_CYAN": RGB(0, 255, 255),
    "COLOR_DARK_CYAN": RGB(0, 128, 128),
    "COLOR_GRAY": RGB(192, 192, 192),
    "COLOR_DARK_GRAY": RGB(128, 128, 128),
    "COLOR_WIDGET_BACKGROUND": RGB(239, 239, 239),
    "COLOR_WIDGET_FOREGROUND": RGB(0, 0, 0),
    "COLOR_WIDGET_SHADOW": RGB(160, 160, 160),
    "COLOR_WIDGET_HIGHLIGHT_SHADOW": RGB(255, 255, 255),
    "COLOR_LIST_BACKGROUND": RGB(255, 255, 255),
    "COLOR_LIST_FOREGROUND": RGB(0, 0, 0),
    "COLOR_LIST_SELECTION": RGB(48, 140, 198),
    "COLOR_LIST_SELECTION_TEXT": RGB(255, 255, 255),
    "COLOR_INFO_BACKGROUND": RGB(255, 255, 220),
    "COLOR_INFO_FOREGROUND": RGB(0, 0, 0),
    "COLOR_TITLE_BACKGROUND": RGB(48, 140, 198),
    "COLOR_TITLE_FOREGROUND": RGB(255, 255, 255),
}


class StaticLabel:
    """In-memory label that records every setter call."""

    def __init__(self, parent: Any = None, style: int = 0) -> None:
        self.parent = parent
        self.style = style
        self.text = ""
        self.background: Any = None
        self.foreground: Any = None
        self.font: Any = None
        self.alignment = 0
        self.layout_data: Any = None
        self.tool_tip = ""
        self.calls: list[tuple[str, Any]] = []
        self.disposed = False
        self._dispose_callbacks: list[Callable[[], None]] = []

    def set_text(self, text: str) -> None:
        self.calls.append(("text", text))
        self.text = text

    def set_background(self, color: Any) -> None:
        self.calls.append(("background", color))
        self.background = color

    def set_foreground(self, color: Any) -> None:
        self.calls.append(("foreground", color))
        self.foreground = color

    def set_font(self, font: Any) -> None:
        self.calls.append(("font", font))
        self.font = font

    def set_alignment(self, bits: int) -> None:
        self.calls.append(("alignment", bits))
        self.alignment = bits

    def set_layout_data(self, data: Any) -> None:
        self.calls.append(("layout_data", data))
        self.layout_data = data

    def dispose(self) -> None:
        if self.disposed:
            return
        self.disposed = True
        callbacks, self._dispose_callbacks = self._dispose_callbacks, []
        for callback in callbacks:
            callback()

    def __repr__(self) -> str:
        return f"StaticLabel(text={self.text!r}, style={self.style:#x})"


class StaticToolkit:
    """Table-driven toolkit that needs no display; colors are RGB, fonts are descriptors."""

    def __init__(
        self,
        default_font: FontDescriptor | None = None,
        system_colors: dict[str, RGB] | None = None,
        constants: ConstantSpace | None = None,
    ) -> None:
        self._default_font = default_font or FontDescriptor("Sans", 10, int(FontStyle.NORMAL))
        self._system_colors = dict(SYSTEM_COLORS if system_colors is None else system_colors)
        self.constants = constants or TOOLKIT_CONSTANTS
        self.font_styles = FONT_STYLES

    def make_color(self, rgb: RGB) -> RGB:
        return rgb

    def system_color(self, name: str) -> RGB:
        try:
            return self._system_colors[name]
        except KeyError:
            raise UnknownColorName(name) from None

    def default_font(self) -> FontDescriptor:
        return self._default_font

    def make_font(self, descriptor: FontDescriptor) -> FontDescriptor:
        return descriptor

    def create_label(self, parent: Any, style: int) -> StaticLabel:
        return StaticLabel(parent, style)

    def set_label_text(self, label: StaticLabel, text: str) -> None:
        label.set_text(text)

    def on_dispose(self, widget: StaticLabel, callback: Callable[[], None]) -> None:
        widget._dispose_callbacks.append(callback)
