"""Persistent hintkit settings schema and load/save helpers."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from .logging_setup import LOG_LEVELS, config_root


CONFIG_VERSION = 1
TOOLKIT_BACKENDS = ("qt", "static")


@dataclass
class ToolkitConfig:
    backend: str = "qt"
    qpa_platform: str | None = None


@dataclass
class HintsConfig:
    strict: bool = False
    sheet_path: str | None = None


@dataclass
class LoggingConfig:
    keep_files: int = 7
    console: bool = True
    level: str = "INFO"


@dataclass
class PreviewConfig:
    width: int = 480
    height: int = 120


@dataclass
class AppConfig:
    config_version: int = CONFIG_VERSION
    toolkit: ToolkitConfig = field(default_factory=ToolkitConfig)
    hints: HintsConfig = field(default_factory=HintsConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    preview: PreviewConfig = field(default_factory=PreviewConfig)


def config_path() -> Path:
    return config_root() / "config.json"


def _merge(dataclass_type, raw: dict[str, Any]):
    defaults = dataclass_type()  # type: ignore[misc]
    if not isinstance(raw, dict):
        return defaults
    for k, v in raw.items():
        if hasattr(defaults, k):
            setattr(defaults, k, v)
    return defaults


def _normalize_toolkit(cfg: AppConfig) -> None:
    if cfg.toolkit.backend not in TOOLKIT_BACKENDS:
        cfg.toolkit.backend = "qt"


def _normalize_logging(cfg: AppConfig) -> None:
    cfg.logging.keep_files = max(2, int(cfg.logging.keep_files))
    cfg.logging.level = str(cfg.logging.level).upper()
    if cfg.logging.level not in LOG_LEVELS:
        cfg.logging.level = "INFO"


def _normalize_preview(cfg: AppConfig) -> None:
    cfg.preview.width = max(120, min(4096, int(cfg.preview.width)))
    cfg.preview.height = max(24, min(2048, int(cfg.preview.height)))


def load_config(path: Path | None = None) -> AppConfig:
    path = path or config_path()
    if not path.exists():
        return AppConfig()

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except Exception:
        return AppConfig()
    if not isinstance(data, dict):
        return AppConfig()

    cfg = AppConfig(
        config_version=int(data.get("config_version", CONFIG_VERSION)),
        toolkit=_merge(ToolkitConfig, data.get("toolkit", {})),
        hints=_merge(HintsConfig, data.get("hints", {})),
        logging=_merge(LoggingConfig, data.get("logging", {})),
        preview=_merge(PreviewConfig, data.get("preview", {})),
    )

    _normalize_toolkit(cfg)
    _normalize_logging(cfg)
    _normalize_preview(cfg)
    return cfg


def save_config(cfg: AppConfig, path: Path | None = None) -> Path:
    cfg.config_version = CONFIG_VERSION
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(asdict(cfg), indent=2, sort_keys=True), encoding="utf-8")
    return path
