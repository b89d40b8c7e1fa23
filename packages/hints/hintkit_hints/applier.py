"""Applies UI hints to widgets.

Hint values are first mapped through the transform registry (e.g. a color
name becomes a toolkit color), then handed to the matching setter on the
target. Setters are looked up in this order:

1. an explicit binding registered for the target's type;
2. ``set_<name>``;
3. the Qt-style ``set<Name>`` (``tool_tip`` -> ``setToolTip``);
4. plain attribute assignment, when ``<name>`` is a settable attribute.

A hint without a setter is logged and skipped; the remaining hints are
still applied.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable

from hintkit_core.logging_setup import get_logger

from .bindings import SetterBindings
from .errors import InvalidHintValue, MissingSetterError
from .models import ApplyReport, hint_key
from .registry import SKIP, HintTransformRegistry, TransformContext
from .toolkit import Toolkit


logger = get_logger("hints")


def get_item_hints(item: Any) -> Mapping[str, Any] | None:
    """Safe accessor for the hints attached to an item, or None."""
    hints = getattr(item, "hints", None)
    if callable(hints):
        hints = hints()
    return hints


def _camel_setter_name(name: str) -> str:
    parts = [p for p in name.split("_") if p]
    return "set" + "".join(p[:1].upper() + p[1:] for p in parts)


def _attribute_settable(target: Any, name: str) -> bool:
    attr = getattr(type(target), name, None)
    if isinstance(attr, property):
        return attr.fset is not None
    if callable(attr):
        return False
    if name in getattr(target, "__dict__", {}):
        return True
    return any(name in getattr(klass, "__slots__", ()) for klass in type(target).__mro__)


def resolve_setter(ctx: TransformContext, target: Any, name: str) -> tuple[str, Callable[[Any], None] | None]:
    setter_name = f"set_{name}"
    bound = ctx.bindings.lookup(target, name)
    if bound is not None:
        return setter_name, bound

    for candidate in (setter_name, _camel_setter_name(name)):
        setter = getattr(target, candidate, None)
        if callable(setter):
            return candidate, setter

    if _attribute_settable(target, name):
        return f"{name}=", lambda value: setattr(target, name, value)
    return setter_name, None


def apply_params(
    ctx: TransformContext,
    target: Any,
    params: Mapping[str, Any],
    transforms: HintTransformRegistry,
) -> ApplyReport:
    """Apply every param to the target, mapping values through the given transforms."""
    report = ApplyReport()
    for raw_name, raw_value in params.items():
        name = hint_key(raw_name)
        value = transforms.transform(ctx, target, name, raw_value)
        if value is SKIP:
            report.skipped.append(name)
            continue

        setter_name, setter = resolve_setter(ctx, target, name)
        if setter is None:
            if ctx.strict:
                raise MissingSetterError(target, setter_name)
            logger.warning(
                f"invalid method {setter_name} on target {target!r}",
                extra={"event": "missing_setter"},
            )
            report.missing.append(name)
            continue

        setter(value)
        report.applied.append(name)
    return report


class HintApplier:
    def __init__(
        self,
        toolkit: Toolkit,
        registry: HintTransformRegistry | None = None,
        bindings: SetterBindings | None = None,
        strict: bool = False,
    ) -> None:
        if registry is None:
            from .transforms import HINT_TRANSFORMS

            registry = HINT_TRANSFORMS
        self.registry = registry
        self.context = TransformContext(
            toolkit=toolkit,
            bindings=bindings if bindings is not None else SetterBindings(),
            strict=strict,
        )

    @property
    def toolkit(self) -> Toolkit:
        return self.context.toolkit

    def transform_value(self, target: Any, name: str, value: Any) -> Any:
        return self.registry.transform(self.context, target, hint_key(name), value)

    def apply(self, target: Any, item_or_hints: Any) -> ApplyReport:
        """Apply a hints mapping, or the hints of an item exposing ``hints``."""
        if hasattr(item_or_hints, "hints"):
            hints = get_item_hints(item_or_hints)
        else:
            hints = item_or_hints
        if not hints:
            return ApplyReport()
        if not isinstance(hints, Mapping):
            raise InvalidHintValue(f"hints must be a mapping, got {type(hints).__name__}")
        return apply_params(self.context, target, hints, self.registry)
