"""Speedbar label built from a label item and its hints."""

from __future__ import annotations

from typing import Any

from .applier import HintApplier, get_item_hints
from .items import CHANGED_TEXT, Subscription
from .models import ApplyReport, HintName


class LabelItem:
    def __init__(self, applier: HintApplier, parent: Any, item: Any) -> None:
        self.item = item
        self.toolkit = applier.toolkit

        # style is a constructor argument, not a setter.
        hints = get_item_hints(item)
        style = 0
        if hints and HintName.STYLE in hints:
            hints = dict(hints)
            style = applier.transform_value(None, HintName.STYLE, hints.pop(HintName.STYLE))

        self.label = self.toolkit.create_label(parent, style)
        self.style = style
        self.toolkit.set_label_text(self.label, item.text)
        self._subscription: Subscription = item.add_listener(CHANGED_TEXT, self._on_changed_text)
        self.toolkit.on_dispose(self.label, self.dispose)
        try:
            self.report: ApplyReport = applier.apply(self.label, hints)
        except BaseException:
            # Construction failed; the caller never gets this item to dispose.
            self.dispose()
            raise

    def _on_changed_text(self, _new_text: str) -> None:
        self.toolkit.set_label_text(self.label, self.item.text)

    @property
    def subscribed(self) -> bool:
        return self._subscription.active

    def dispose(self) -> None:
        self._subscription.release()
