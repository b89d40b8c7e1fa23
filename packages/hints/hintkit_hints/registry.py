"""Hint-name to transform lookup tables."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any, Callable

from .bindings import SetterBindings
from .models import hint_key
from .toolkit import Toolkit


class _Skip:
    def __repr__(self) -> str:
        return "SKIP"


# Returned by a transform when no setter should be called for the hint.
SKIP: Any = _Skip()


@dataclass(frozen=True)
class TransformContext:
    toolkit: Toolkit
    bindings: SetterBindings = field(default_factory=SetterBindings)
    strict: bool = False


Transform = Callable[[TransformContext, Any, Any], Any]


class HintTransformRegistry:
    def __init__(self, transforms: Mapping[str, Transform] | None = None) -> None:
        self._transforms: dict[str, Transform] = {}
        for name, fn in (transforms or {}).items():
            self.register(name, fn)

    def register(self, name: str, fn: Transform | None = None):
        key = hint_key(name)

        def _decorator(func: Transform) -> Transform:
            self._transforms[key] = func
            return func

        if fn is None:
            return _decorator
        return _decorator(fn)

    def get(self, name: str) -> Transform | None:
        return self._transforms.get(hint_key(name))

    def transform(self, ctx: TransformContext, target: Any, name: str, value: Any) -> Any:
        fn = self.get(name)
        if fn is None:
            return value
        return fn(ctx, target, value)

    def subset(self, *names: str) -> HintTransformRegistry:
        return HintTransformRegistry({n: self._transforms[hint_key(n)] for n in names})

    def names(self) -> list[str]:
        return sorted(self._transforms)

    def __contains__(self, name: object) -> bool:
        return hint_key(name) in self._transforms

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._transforms)

    def __repr__(self) -> str:
        return f"HintTransformRegistry({self.names()!r})"
