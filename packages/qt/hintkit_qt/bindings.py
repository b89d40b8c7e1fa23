"""Setter bindings for Qt widgets that have no ``set_<hint>`` method of their own."""

from __future__ import annotations

from typing import Any

from PySide6.QtCore import Qt
from PySide6.QtGui import QBrush, QColor, QFont, QPalette
from PySide6.QtWidgets import QGridLayout, QLabel, QListWidgetItem, QSizePolicy, QTreeWidgetItem, QWidget

from hintkit_hints.bindings import SetterBindings
from hintkit_hints.constants import ALIGNMENT_MASK
from hintkit_hints.layout import GridData
from hintkit_hints.models import HintName


LAYOUT_DATA_PROPERTY = "hintkitLayoutData"


def _set_palette_color(widget: QWidget, roles: tuple[QPalette.ColorRole, ...], color: Any) -> None:
    palette = widget.palette()
    for role in roles:
        palette.setColor(role, QColor(color))
    widget.setPalette(palette)


def set_widget_background(widget: QWidget, color: Any) -> None:
    _set_palette_color(widget, (QPalette.ColorRole.Window, QPalette.ColorRole.Base), color)
    widget.setAutoFillBackground(True)


def set_widget_foreground(widget: QWidget, color: Any) -> None:
    _set_palette_color(widget, (QPalette.ColorRole.WindowText, QPalette.ColorRole.Text), color)


def set_widget_font(widget: QWidget, font: QFont) -> None:
    widget.setFont(font)


def set_label_alignment(label: QLabel, bits: int) -> None:
    label.setAlignment(Qt.AlignmentFlag(int(bits) & ALIGNMENT_MASK))


def _size_policy(grab: bool, alignment: int) -> QSizePolicy.Policy:
    if grab:
        return QSizePolicy.Policy.Expanding
    if alignment == GridData.FILL:
        return QSizePolicy.Policy.MinimumExpanding
    return QSizePolicy.Policy.Preferred


def set_widget_layout_data(widget: QWidget, data: GridData) -> None:
    widget.setSizePolicy(
        _size_policy(data.grab_excess_horizontal_space, data.horizontal_alignment),
        _size_policy(data.grab_excess_vertical_space, data.vertical_alignment),
    )
    min_width = max(data.minimum_width, data.width_hint)
    min_height = max(data.minimum_height, data.height_hint)
    if min_width > 0:
        widget.setMinimumWidth(min_width)
    if min_height > 0:
        widget.setMinimumHeight(min_height)
    if data.horizontal_indent or data.vertical_indent:
        widget.setContentsMargins(data.horizontal_indent, data.vertical_indent, 0, 0)
    widget.setProperty(LAYOUT_DATA_PROPERTY, data)


def grid_alignment(data: GridData) -> Qt.AlignmentFlag:
    horizontal = {
        GridData.BEGINNING: Qt.AlignmentFlag.AlignLeft,
        GridData.CENTER: Qt.AlignmentFlag.AlignHCenter,
        GridData.END: Qt.AlignmentFlag.AlignRight,
    }.get(data.horizontal_alignment)
    vertical = {
        GridData.BEGINNING: Qt.AlignmentFlag.AlignTop,
        GridData.CENTER: Qt.AlignmentFlag.AlignVCenter,
        GridData.END: Qt.AlignmentFlag.AlignBottom,
    }.get(data.vertical_alignment)
    # FILL leaves the axis unaligned so the cell stretches the widget.
    flags = Qt.AlignmentFlag(0)
    for flag in (horizontal, vertical):
        if flag is not None:
            flags |= flag
    return flags


def add_to_grid(grid: QGridLayout, widget: QWidget, row: int, column: int) -> None:
    """Place a widget using the GridData applied to it, if any."""
    data = widget.property(LAYOUT_DATA_PROPERTY)
    if not isinstance(data, GridData):
        grid.addWidget(widget, row, column)
        return
    if data.exclude:
        widget.hide()
        return
    grid.addWidget(widget, row, column, data.vertical_span, data.horizontal_span, grid_alignment(data))


def set_item_background(item: QListWidgetItem | QTreeWidgetItem, color: Any) -> None:
    if isinstance(item, QTreeWidgetItem):
        for column in range(max(1, item.columnCount())):
            item.setBackground(column, QBrush(QColor(color)))
        return
    item.setBackground(QBrush(QColor(color)))


def set_item_foreground(item: QListWidgetItem | QTreeWidgetItem, color: Any) -> None:
    if isinstance(item, QTreeWidgetItem):
        for column in range(max(1, item.columnCount())):
            item.setForeground(column, QBrush(QColor(color)))
        return
    item.setForeground(QBrush(QColor(color)))


def build_qt_bindings() -> SetterBindings:
    bindings = SetterBindings()
    bindings.register(
        QWidget,
        {
            HintName.BACKGROUND: set_widget_background,
            HintName.FOREGROUND: set_widget_foreground,
            HintName.FONT: set_widget_font,
            HintName.LAYOUT_DATA: set_widget_layout_data,
        },
    )
    bindings.bind(QLabel, HintName.ALIGNMENT, set_label_alignment)
    for item_type in (QListWidgetItem, QTreeWidgetItem):
        bindings.register(
            item_type,
            {
                HintName.BACKGROUND: set_item_background,
                HintName.FOREGROUND: set_item_foreground,
            },
        )
    return bindings


QT_BINDINGS = build_qt_bindings()
