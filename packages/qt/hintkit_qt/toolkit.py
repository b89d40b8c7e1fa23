"""PySide6 toolkit context: colors, fonts and labels for applied hints."""

from __future__ import annotations

import os
import re
import sys
from typing import Callable

from PySide6.QtCore import Qt
from PySide6.QtGui import QColor, QFont, QPalette
from PySide6.QtWidgets import QApplication, QFrame, QLabel, QWidget

from hintkit_core.logging_setup import get_logger
from hintkit_hints.constants import ALIGNMENT_MASK, FONT_STYLES, TOOLKIT_CONSTANTS, FontStyle, LabelStyle
from hintkit_hints.errors import UnknownColorName
from hintkit_hints.models import RGB, FontDescriptor


_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")

PALETTE_COLORS: dict[str, QPalette.ColorRole] = {
    "COLOR_WIDGET_BACKGROUND": QPalette.ColorRole.Window,
    "COLOR_WIDGET_FOREGROUND": QPalette.ColorRole.WindowText,
    "COLOR_WIDGET_SHADOW": QPalette.ColorRole.Shadow,
    "COLOR_WIDGET_HIGHLIGHT_SHADOW": QPalette.ColorRole.Light,
    "COLOR_LIST_BACKGROUND": QPalette.ColorRole.Base,
    "COLOR_LIST_FOREGROUND": QPalette.ColorRole.Text,
    "COLOR_LIST_SELECTION": QPalette.ColorRole.Highlight,
    "COLOR_LIST_SELECTION_TEXT": QPalette.ColorRole.HighlightedText,
    "COLOR_INFO_BACKGROUND": QPalette.ColorRole.ToolTipBase,
    "COLOR_INFO_FOREGROUND": QPalette.ColorRole.ToolTipText,
    "COLOR_TITLE_BACKGROUND": QPalette.ColorRole.Highlight,
    "COLOR_TITLE_FOREGROUND": QPalette.ColorRole.HighlightedText,
}


def _global_colors() -> dict[str, Qt.GlobalColor]:
    colors: dict[str, Qt.GlobalColor] = {}
    for name, member in Qt.GlobalColor.__members__.items():
        colors["COLOR_" + _CAMEL_BOUNDARY.sub("_", name).upper()] = member
    return colors


GLOBAL_COLORS = _global_colors()


def ensure_application(qpa_platform: str | None = None) -> QApplication:
    app = QApplication.instance()
    if app is None:
        if qpa_platform:
            os.environ["QT_QPA_PLATFORM"] = qpa_platform
        app = QApplication(sys.argv[:1])
        get_logger("qt").debug(
            f"created QApplication platform={app.platformName()}",
            extra={"event": "qt_application_created"},
        )
    return app


class QtToolkit:
    def __init__(self, qpa_platform: str | None = None) -> None:
        self.app = ensure_application(qpa_platform)
        self.constants = TOOLKIT_CONSTANTS
        self.font_styles = FONT_STYLES

    def make_color(self, rgb: RGB) -> QColor:
        return QColor(rgb.red, rgb.green, rgb.blue)

    def system_color(self, name: str) -> QColor:
        role = PALETTE_COLORS.get(name)
        if role is not None:
            return QColor(self.app.palette().color(role))
        member = GLOBAL_COLORS.get(name)
        if member is None:
            raise UnknownColorName(name)
        return QColor(member)

    def default_font(self) -> FontDescriptor:
        font = QApplication.font()
        height = font.pointSize() if font.pointSize() > 0 else font.pixelSize()
        style = int(FontStyle.NORMAL)
        if font.bold():
            style |= FontStyle.BOLD
        if font.italic():
            style |= FontStyle.ITALIC
        return FontDescriptor(name=font.family(), height=height, style=int(style))

    def make_font(self, descriptor: FontDescriptor) -> QFont:
        font = QFont(descriptor.name)
        font.setPointSize(max(1, descriptor.height))
        font.setBold(bool(descriptor.style & FontStyle.BOLD))
        font.setItalic(bool(descriptor.style & FontStyle.ITALIC))
        return font

    def create_label(self, parent: QWidget | None, style: int) -> QLabel:
        label = QLabel(parent)
        alignment = style & ALIGNMENT_MASK
        if alignment:
            label.setAlignment(Qt.AlignmentFlag(alignment))
        if style & LabelStyle.SEPARATOR:
            label.setFrameShape(QFrame.Shape.HLine)
            label.setFrameShadow(QFrame.Shadow.Sunken)
            return label
        if style & LabelStyle.BORDER:
            label.setFrameShape(QFrame.Shape.Box)
        elif style & (LabelStyle.SHADOW_IN | LabelStyle.SHADOW_OUT):
            label.setFrameShape(QFrame.Shape.Panel)
        if style & LabelStyle.SHADOW_IN:
            label.setFrameShadow(QFrame.Shadow.Sunken)
        elif style & LabelStyle.SHADOW_OUT:
            label.setFrameShadow(QFrame.Shadow.Raised)
        if style & LabelStyle.WRAP:
            label.setWordWrap(True)
        return label

    def set_label_text(self, label: QLabel, text: str) -> None:
        label.setText(text)

    def on_dispose(self, widget: QWidget, callback: Callable[[], None]) -> None:
        widget.destroyed.connect(lambda *_: callback())
