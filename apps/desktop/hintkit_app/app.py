"""Demo speedbar window and offscreen snapshots built from a hint sheet."""

from __future__ import annotations

import os
from pathlib import Path

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QApplication,
    QGridLayout,
    QLineEdit,
    QListWidget,
    QListWidgetItem,
    QMainWindow,
    QVBoxLayout,
    QWidget,
)

from hintkit_core import AppConfig, load_config
from hintkit_core.logging_setup import configure_logging, get_logger, install_crash_hooks
from hintkit_hints import COLOR_TRANSFORMS, HintApplier, HintSheet, LabelItem, LabelModel
from hintkit_qt import QtToolkit, add_to_grid, qt_applier, qt_item_applier

from .defaults import resolve_sheet


def color_hints(model: LabelModel) -> dict:
    return {k: v for k, v in (model.hints or {}).items() if k in COLOR_TRANSFORMS}


class Speedbar(QWidget):
    """Row of hinted labels, one per sheet item."""

    def __init__(self, applier: HintApplier, sheet: HintSheet, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.models = sheet.models()
        self.items: dict[str, LabelItem] = {}

        grid = QGridLayout(self)
        grid.setContentsMargins(6, 4, 6, 4)
        for column, (key, model) in enumerate(self.models.items()):
            item = LabelItem(applier, self, model)
            add_to_grid(grid, item.label, 0, column)
            self.items[key] = item


class SpeedbarWindow(QMainWindow):
    def __init__(self, sheet: HintSheet, cfg: AppConfig) -> None:
        super().__init__()
        self.setWindowTitle("hintkit speedbar")
        self.logger = get_logger("app")

        toolkit = QtToolkit()
        applier = qt_applier(toolkit, strict=cfg.hints.strict)
        item_applier = qt_item_applier(toolkit, strict=cfg.hints.strict)

        root = QWidget()
        self.setCentralWidget(root)
        outer = QVBoxLayout(root)

        self.entries = QListWidget()
        for key, model in sheet.models().items():
            entry = QListWidgetItem(key)
            item_applier.apply(entry, color_hints(model))
            self.entries.addItem(entry)

        self.editor = QLineEdit()
        self.editor.setPlaceholderText("Label text")

        self.speedbar = Speedbar(applier, sheet)
        self._keys = list(self.speedbar.models)

        outer.addWidget(self.entries, 1)
        outer.addWidget(self.editor)
        outer.addWidget(self.speedbar)

        self.entries.currentRowChanged.connect(self._select)
        self.editor.textEdited.connect(self._edit)
        if self._keys:
            self.entries.setCurrentRow(0)

        for key, item in self.speedbar.items.items():
            if item.report.missing:
                self.logger.warning(f"item {key}: hints without setter {item.report.missing}")

    def _current_model(self) -> LabelModel | None:
        row = self.entries.currentRow()
        if 0 <= row < len(self._keys):
            return self.speedbar.models[self._keys[row]]
        return None

    def _select(self, _row: int) -> None:
        model = self._current_model()
        self.editor.setText(model.text if model else "")

    def _edit(self, text: str) -> None:
        model = self._current_model()
        if model is not None:
            model.text = text


def render_snapshot(sheet: HintSheet, out_path: Path, cfg: AppConfig) -> Path:
    """Render the speedbar offscreen and save it as an image."""
    toolkit = QtToolkit(cfg.toolkit.qpa_platform or "offscreen")
    speedbar = Speedbar(qt_applier(toolkit, strict=cfg.hints.strict), sheet)
    speedbar.resize(cfg.preview.width, cfg.preview.height)
    speedbar.ensurePolished()
    out_path.parent.mkdir(parents=True, exist_ok=True)
    if not speedbar.grab().save(str(out_path)):
        raise OSError(f"could not write snapshot to {out_path}")
    speedbar.deleteLater()
    return out_path


def run_gui(sheet_path: str | None = None) -> int:
    cfg = load_config()
    configure_logging(keep_files=cfg.logging.keep_files, console=cfg.logging.console, level=cfg.logging.level)
    install_crash_hooks()
    logger = get_logger()

    if cfg.toolkit.qpa_platform:
        os.environ.setdefault("QT_QPA_PLATFORM", cfg.toolkit.qpa_platform)
    QApplication.setHighDpiScaleFactorRoundingPolicy(Qt.HighDpiScaleFactorRoundingPolicy.PassThrough)

    app = QApplication.instance() or QApplication([])
    app.setApplicationName("hintkit")

    sheet = resolve_sheet(sheet_path or cfg.hints.sheet_path)
    window = SpeedbarWindow(sheet, cfg)
    window.resize(max(cfg.preview.width, 480), 360)
    window.show()
    logger.info("speedbar window shown", extra={"event": "gui_started"})
    return int(app.exec())
