"""Toolkit-neutral UI hint parsing, transform tables and setter dispatch."""

from .applier import HintApplier, apply_params, get_item_hints, resolve_setter
from .bindings import SetterBindings
from .constants import FONT_STYLES, TOOLKIT_CONSTANTS, ConstantSpace, FontStyle, LabelStyle
from .errors import (
    HintError,
    InvalidHintValue,
    MissingSetterError,
    UnknownColorName,
    UnknownConstantName,
    UnknownStyleToken,
    UnknownSymbolError,
)
from .items import Subscription, LabelModel
from .label_item import LabelItem
from .layout import GridData
from .models import RGB, ApplyReport, FontDescriptor, HintName
from .parsers import parse_color, parse_constant, parse_constant_bits, parse_font, parse_rgb
from .registry import SKIP, HintTransformRegistry, TransformContext
from .sheets import HintSheet, SheetItem, SheetReport, load_hint_sheet, validate_sheet
from .toolkit import StaticLabel, StaticToolkit, Toolkit
from .transforms import COLOR_TRANSFORMS, GRID_DATA_TRANSFORMS, HINT_TRANSFORMS

__all__ = [
    "ApplyReport",
    "COLOR_TRANSFORMS",
    "ConstantSpace",
    "FONT_STYLES",
    "FontDescriptor",
    "FontStyle",
    "GRID_DATA_TRANSFORMS",
    "GridData",
    "HINT_TRANSFORMS",
    "HintApplier",
    "HintError",
    "HintName",
    "HintSheet",
    "HintTransformRegistry",
    "InvalidHintValue",
    "LabelItem",
    "LabelModel",
    "LabelStyle",
    "MissingSetterError",
    "RGB",
    "SKIP",
    "SetterBindings",
    "SheetItem",
    "SheetReport",
    "StaticLabel",
    "StaticToolkit",
    "Subscription",
    "TOOLKIT_CONSTANTS",
    "Toolkit",
    "TransformContext",
    "UnknownColorName",
    "UnknownConstantName",
    "UnknownStyleToken",
    "UnknownSymbolError",
    "apply_params",
    "get_item_hints",
    "load_hint_sheet",
    "parse_color",
    "parse_constant",
    "parse_constant_bits",
    "parse_font",
    "parse_rgb",
    "resolve_setter",
    "validate_sheet",
]
