"""Built-in hint transforms and the canonical transform tables."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from hintkit_core.logging_setup import get_logger

from .applier import apply_params
from .constants import ConstantSpace
from .errors import InvalidHintValue, UnknownSymbolError
from .layout import LAYOUT_DATA_TYPES, GridData
from .models import HintName
from .parsers import parse_color, parse_constant, parse_constant_bits, parse_font
from .registry import SKIP, HintTransformRegistry, TransformContext


logger = get_logger("hints")


def make_color(ctx: TransformContext, target: Any, value: Any) -> Any:
    return parse_color(ctx.toolkit, value)


def make_font(ctx: TransformContext, target: Any, value: Any) -> Any:
    return ctx.toolkit.make_font(parse_font(ctx.toolkit, value))


def make_constant(ctx: TransformContext, target: Any, value: Any) -> int:
    return parse_constant(value, ctx.toolkit.constants)


def make_constant_bits(ctx: TransformContext, target: Any, value: Any) -> int:
    return parse_constant_bits(value, ctx.toolkit.constants)


def make_class_constant(ctx: TransformContext, target: Any, value: Any) -> int:
    """Value of a constant declared on the target's class, e.g. ``GridData.FILL``."""
    return parse_constant(value, ConstantSpace.from_class(type(target)))


def make_class_constant_bits(ctx: TransformContext, target: Any, value: Any) -> int:
    return parse_constant_bits(value, ConstantSpace.from_class(type(target)))


def make_layout(ctx: TransformContext, target: Any, value: Any) -> Any:
    # TODO: build layout managers once the layout hint format is settled.
    logger.info("layout hints are not supported; ignoring", extra={"event": "layout_hint_ignored"})
    return SKIP


GRID_DATA_TRANSFORMS = HintTransformRegistry(
    {
        "horizontal_alignment": make_class_constant,
        "vertical_alignment": make_class_constant,
    }
)

LAYOUT_DATA_TRANSFORMS: dict[type, HintTransformRegistry] = {
    GridData: GRID_DATA_TRANSFORMS,
}


def _layout_data_type(spec: Any) -> type:
    if isinstance(spec, type):
        return spec
    try:
        return LAYOUT_DATA_TYPES[str(spec).strip().lower()]
    except KeyError:
        raise UnknownSymbolError(str(spec), kind="layout data type") from None


def make_layout_data(ctx: TransformContext, target: Any, params: Any) -> Any:
    """Construct a layout data object; ``type`` picks its class (GridData by default)."""
    if not isinstance(params, Mapping):
        raise InvalidHintValue(f"layout_data must be a mapping, got {type(params).__name__}")
    data_type: type = GridData
    if "type" in params:
        data_type = _layout_data_type(params["type"])
        params = {k: v for k, v in params.items() if k != "type"}

    data = data_type()
    transforms = LAYOUT_DATA_TRANSFORMS.get(data_type, HintTransformRegistry())
    apply_params(ctx, data, params, transforms)
    return data


HINT_TRANSFORMS = HintTransformRegistry(
    {
        HintName.ALIGNMENT: make_constant_bits,
        HintName.BACKGROUND: make_color,
        HintName.FONT: make_font,
        HintName.FOREGROUND: make_color,
        HintName.LAYOUT: make_layout,
        HintName.LAYOUT_DATA: make_layout_data,
        HintName.STYLE: make_constant_bits,
    }
)

# Item-like targets (list and tree entries) only take colors.
COLOR_TRANSFORMS = HINT_TRANSFORMS.subset(HintName.BACKGROUND, HintName.FOREGROUND)
