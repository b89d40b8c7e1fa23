"""PySide6 toolkit context and widget bindings for hintkit."""

from __future__ import annotations

from hintkit_hints import COLOR_TRANSFORMS, HintApplier, HintTransformRegistry

from .bindings import QT_BINDINGS, add_to_grid, build_qt_bindings, grid_alignment
from .toolkit import GLOBAL_COLORS, PALETTE_COLORS, QtToolkit, ensure_application


def qt_applier(
    toolkit: QtToolkit | None = None,
    registry: HintTransformRegistry | None = None,
    strict: bool = False,
) -> HintApplier:
    return HintApplier(toolkit or QtToolkit(), registry=registry, bindings=QT_BINDINGS, strict=strict)


def qt_item_applier(toolkit: QtToolkit | None = None, strict: bool = False) -> HintApplier:
    """Applier for list/tree entries, which only take color hints."""
    return qt_applier(toolkit, registry=COLOR_TRANSFORMS, strict=strict)


__all__ = [
    "GLOBAL_COLORS",
    "PALETTE_COLORS",
    "QT_BINDINGS",
    "QtToolkit",
    "add_to_grid",
    "build_qt_bindings",
    "ensure_application",
    "grid_alignment",
    "qt_applier",
    "qt_item_applier",
]
