"""JSON hint sheets: named label items with their UI hints, plus validation."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .applier import HintApplier
from .errors import HintError, InvalidHintValue
from .items import LabelModel
from .models import HintName, hint_key


SHEET_VERSION = 1
PASS_THROUGH_HINTS = frozenset({"text", "tool_tip", "enabled", "visible"})


@dataclass(frozen=True)
class SheetItem:
    text: str
    hints: dict[str, Any] = field(default_factory=dict)


@dataclass
class HintSheet:
    version: int = SHEET_VERSION
    items: dict[str, SheetItem] = field(default_factory=dict)

    def models(self) -> dict[str, LabelModel]:
        return {key: LabelModel(item.text, item.hints) for key, item in self.items.items()}


@dataclass
class SheetReport:
    total_items: int = 0
    total_hints: int = 0
    errors: list[str] = field(default_factory=list)


def _parse_item(key: str, raw: Any) -> SheetItem:
    if isinstance(raw, str):
        return SheetItem(text=raw)
    if not isinstance(raw, dict):
        raise InvalidHintValue(f"sheet item {key!r} must be an object or a string")
    hints = raw.get("hints") or {}
    if not isinstance(hints, dict):
        raise InvalidHintValue(f"hints of sheet item {key!r} must be an object")
    return SheetItem(text=str(raw.get("text", key)), hints=dict(hints))


def parse_hint_sheet(data: Any) -> HintSheet:
    if not isinstance(data, dict):
        raise InvalidHintValue("hint sheet must be a JSON object")
    items = data.get("items", {})
    if not isinstance(items, dict):
        raise InvalidHintValue("hint sheet 'items' must be an object")
    return HintSheet(
        version=int(data.get("version", SHEET_VERSION)),
        items={str(k): _parse_item(str(k), v) for k, v in items.items()},
    )


def load_hint_sheet(path: Path) -> HintSheet:
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise InvalidHintValue(f"{path}: {exc}") from exc
    return parse_hint_sheet(data)


def _known_hint(name: str, applier: HintApplier) -> bool:
    if name in applier.registry or name in PASS_THROUGH_HINTS:
        return True
    return name in {member.value for member in HintName}


def validate_sheet(sheet: HintSheet, applier: HintApplier, strict: bool = True) -> SheetReport:
    """Run every hint value through its transform and collect the failures."""
    report = SheetReport(total_items=len(sheet.items))
    for key, item in sheet.items.items():
        for raw_name, value in item.hints.items():
            name = hint_key(raw_name)
            report.total_hints += 1
            if strict and not _known_hint(name, applier):
                report.errors.append(f"{key}.{name}: unknown hint")
                continue
            try:
                applier.transform_value(None, name, value)
            except HintError as exc:
                report.errors.append(f"{key}.{name}: {exc}")
    return report
