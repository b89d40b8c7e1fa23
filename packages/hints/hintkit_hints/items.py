"""Toolkit-free item models and their change subscriptions."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable

CHANGED_TEXT = "changed_text"


class Subscription:
    """Handle for a registered listener; release it when the owner goes away."""

    def __init__(self, release: Callable[[], None]) -> None:
        self._release: Callable[[], None] | None = release

    @property
    def active(self) -> bool:
        return self._release is not None

    def release(self) -> None:
        release, self._release = self._release, None
        if release is not None:
            release()

    def __enter__(self) -> Subscription:
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.release()
        return False


class LabelModel:
    """A speedbar label item: text, optional UI hints and a change notification."""

    def __init__(self, text: str = "", hints: Mapping[str, Any] | None = None) -> None:
        self._text = text
        self.hints = dict(hints) if hints else None
        self._listeners: dict[str, list[Callable[..., None]]] = {}

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, value: str) -> None:
        if value == self._text:
            return
        self._text = value
        self._notify(CHANGED_TEXT, value)

    def add_listener(self, event: str, callback: Callable[..., None]) -> Subscription:
        listeners = self._listeners.setdefault(event, [])
        listeners.append(callback)

        def _remove() -> None:
            if callback in listeners:
                listeners.remove(callback)

        return Subscription(_remove)

    def listener_count(self, event: str) -> int:
        return len(self._listeners.get(event, ()))

    def _notify(self, event: str, *args: Any) -> None:
        for callback in list(self._listeners.get(event, ())):
            callback(*args)

    def __repr__(self) -> str:
        return f"LabelModel(text={self._text!r})"
