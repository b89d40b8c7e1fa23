"""Core hintkit services: settings and logging."""

from .config import AppConfig, HintsConfig, LoggingConfig, PreviewConfig, ToolkitConfig, load_config, save_config
from .logging_setup import configure_logging, get_logger, install_crash_hooks

__all__ = [
    "AppConfig",
    "HintsConfig",
    "LoggingConfig",
    "PreviewConfig",
    "ToolkitConfig",
    "configure_logging",
    "get_logger",
    "install_crash_hooks",
    "load_config",
    "save_config",
]
