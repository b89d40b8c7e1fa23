"""Built-in demo sheet and sheet path resolution."""

from __future__ import annotations

from pathlib import Path

from hintkit_hints import HintSheet, load_hint_sheet
from hintkit_hints.sheets import parse_hint_sheet


DEFAULT_SHEET = {
    "version": 1,
    "items": {
        "find": {
            "text": "Find:",
            "hints": {"style": "BORDER | VCENTER", "font": "BOLD, +1", "foreground": "dark blue"},
        },
        "status": {
            "text": "3 matches",
            "hints": {
                "background": "info background",
                "foreground": "info foreground",
                "tool_tip": "Matches in the current document",
                "layout_data": {"horizontal_alignment": "fill", "grab_excess_horizontal_space": True},
            },
        },
        "mode": {
            "text": "regex",
            "hints": {"style": "SHADOW_IN, CENTER", "font": "Monospace, ITALIC", "background": "#F0E6C8"},
        },
    },
}


def resolve_sheet(sheet_path: str | None) -> HintSheet:
    if sheet_path:
        return load_hint_sheet(Path(sheet_path).expanduser())
    return parse_hint_sheet(DEFAULT_SHEET)
