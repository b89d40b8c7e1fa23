"""Explicit per-type setter tables, consulted before duck-typed setter probing."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable

from .models import hint_key

Setter = Callable[[Any, Any], None]


class SetterBindings:
    def __init__(self) -> None:
        self._by_type: dict[type, dict[str, Setter]] = {}

    def bind(self, target_type: type, name: str, setter: Setter) -> None:
        self._by_type.setdefault(target_type, {})[hint_key(name)] = setter

    def register(self, target_type: type, setters: Mapping[str, Setter]) -> None:
        for name, setter in setters.items():
            self.bind(target_type, name, setter)

    def lookup(self, target: Any, name: str) -> Callable[[Any], None] | None:
        key = hint_key(name)
        for klass in type(target).__mro__:
            setter = self._by_type.get(klass, {}).get(key)
            if setter is not None:
                return lambda value, _setter=setter: _setter(target, value)
        return None

    def names_for(self, target_type: type) -> list[str]:
        names: set[str] = set()
        for klass in target_type.__mro__:
            names.update(self._by_type.get(klass, {}))
        return sorted(names)
