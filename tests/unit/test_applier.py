import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "core"))
sys.path.insert(0, str(ROOT / "packages" / "hints"))

from hintkit_hints.applier import HintApplier
from hintkit_hints.bindings import SetterBindings
from hintkit_hints.constants import LabelStyle
from hintkit_hints.errors import MissingSetterError, UnknownColorName, UnknownSymbolError
from hintkit_hints.items import LabelModel
from hintkit_hints.layout import GridData
from hintkit_hints.models import RGB, FontDescriptor, HintName
from hintkit_hints.registry import HintTransformRegistry, TransformContext
from hintkit_hints.toolkit import StaticToolkit
from hintkit_hints.transforms import (
    COLOR_TRANSFORMS,
    HINT_TRANSFORMS,
    make_class_constant_bits,
    make_constant,
)


class _Widget:
    def __init__(self):
        self.calls = []
        self.caption = ""
        self._width = 0

    def set_background(self, value):
        self.calls.append(("background", value))

    def set_font(self, value):
        self.calls.append(("font", value))

    def set_layout(self, value):
        self.calls.append(("layout", value))

    def set_layout_data(self, value):
        self.calls.append(("layout_data", value))

    def setToolTip(self, value):
        self.calls.append(("tool_tip", value))

    @property
    def width(self):
        return self._width

    @width.setter
    def width(self, value):
        self._width = value

    @property
    def kind(self):
        return "widget"

    def __repr__(self):
        return "_Widget()"


class _SubWidget(_Widget):
    pass


class _FlowData:
    SPACIOUS = 8

    def __init__(self):
        self.spacing = 0
        self.horizontal_alignment = None


class HintApplierTests(unittest.TestCase):
    def setUp(self):
        self.toolkit = StaticToolkit()
        self.applier = HintApplier(self.toolkit)

    def test_missing_setter_warns_once_and_continues(self):
        widget = _Widget()
        with self.assertLogs("hintkit.hints", level="WARNING") as logs:
            report = self.applier.apply(widget, {"background": "#FF0000", "nonexistentProp": "x"})
        self.assertEqual(widget.calls, [("background", RGB(255, 0, 0))])
        self.assertEqual(len(logs.records), 1)
        self.assertIn("set_nonexistentProp", logs.records[0].getMessage())
        self.assertEqual(report.applied, ["background"])
        self.assertEqual(report.missing, ["nonexistentProp"])

    def test_empty_or_absent_hints_are_noops(self):
        widget = _Widget()
        for hints in (None, {}, LabelModel("no hints")):
            with self.assertNoLogs("hintkit.hints", level="WARNING"):
                report = self.applier.apply(widget, hints)
            self.assertEqual(report.applied, [])
        self.assertEqual(widget.calls, [])

    def test_item_hints_are_used(self):
        widget = _Widget()
        self.applier.apply(widget, LabelModel("x", {"background": "blue"}))
        self.assertEqual(widget.calls, [("background", RGB(0, 0, 255))])

    def test_mapping_order_is_preserved(self):
        widget = _Widget()
        self.applier.apply(widget, {"font": "Mono, 9", "tool_tip": "hi", "background": "black"})
        self.assertEqual([name for name, _ in widget.calls], ["font", "tool_tip", "background"])
        self.assertEqual(widget.calls[0][1], FontDescriptor("Mono", 9, 0))

    def test_enum_keys(self):
        widget = _Widget()
        report = self.applier.apply(widget, {HintName.BACKGROUND: "red"})
        self.assertEqual(report.applied, ["background"])

    def test_camel_case_setter(self):
        widget = _Widget()
        self.applier.apply(widget, {"tool_tip": 5})
        self.assertEqual(widget.calls, [("tool_tip", 5)])

    def test_attribute_assignment_fallback(self):
        widget = _Widget()
        report = self.applier.apply(widget, {"caption": "Find", "width": 120})
        self.assertEqual(widget.caption, "Find")
        self.assertEqual(widget.width, 120)
        self.assertEqual(report.applied, ["caption", "width"])

    def test_read_only_property_is_not_a_setter(self):
        widget = _Widget()
        with self.assertLogs("hintkit.hints", level="WARNING"):
            report = self.applier.apply(widget, {"kind": "label"})
        self.assertEqual(report.missing, ["kind"])

    def test_strict_mode_raises(self):
        applier = HintApplier(self.toolkit, strict=True)
        with self.assertRaises(MissingSetterError) as ctx:
            applier.apply(_Widget(), {"glow": "yes"})
        self.assertEqual(ctx.exception.setter_name, "set_glow")

    def test_unknown_color_propagates(self):
        with self.assertRaises(UnknownColorName):
            self.applier.apply(_Widget(), {"background": "nocolor"})

    def test_explicit_binding_wins_and_is_inherited(self):
        seen = []
        bindings = SetterBindings()
        bindings.bind(_Widget, "background", lambda target, value: seen.append((target, value)))
        applier = HintApplier(self.toolkit, bindings=bindings)
        widget = _SubWidget()
        applier.apply(widget, {"background": "#000000"})
        self.assertEqual(seen, [(widget, RGB(0, 0, 0))])
        self.assertEqual(widget.calls, [])
        self.assertEqual(bindings.names_for(_SubWidget), ["background"])

    def test_layout_hint_calls_no_setter(self):
        widget = _Widget()
        report = self.applier.apply(widget, {"layout": {"columns": 2}})
        self.assertEqual(widget.calls, [])
        self.assertEqual(report.skipped, ["layout"])

    def test_layout_data_builds_grid_data(self):
        widget = _Widget()
        params = {"type": "grid", "horizontal_alignment": "FILL", "width_hint": 120, "horizontal_span": 2}
        self.applier.apply(widget, {"layout_data": params})
        (name, data), = widget.calls
        self.assertEqual(name, "layout_data")
        self.assertEqual(data, GridData(horizontal_alignment=GridData.FILL, width_hint=120, horizontal_span=2))
        self.assertIn("type", params)

    def test_layout_data_defaults_to_grid(self):
        data = self.applier.transform_value(None, "layout_data", {"vertical_alignment": "end"})
        self.assertIsInstance(data, GridData)
        self.assertEqual(data.vertical_alignment, GridData.END)

    def test_layout_data_with_custom_type(self):
        data = self.applier.transform_value(None, "layout_data", {"type": _FlowData, "spacing": 3, "horizontal_alignment": "FILL"})
        self.assertIsInstance(data, _FlowData)
        self.assertFalse(hasattr(data, "type"))
        self.assertEqual(data.spacing, 3)
        self.assertEqual(data.horizontal_alignment, "FILL")

    def test_layout_data_unknown_type(self):
        with self.assertRaises(UnknownSymbolError):
            self.applier.transform_value(None, "layout_data", {"type": "flow"})

    def test_style_transform(self):
        bits = self.applier.transform_value(None, HintName.STYLE, "BORDER|WRAP")
        self.assertEqual(bits, LabelStyle.BORDER | LabelStyle.WRAP)


class TransformRegistryTests(unittest.TestCase):
    def test_color_subset_shares_functions(self):
        self.assertEqual(COLOR_TRANSFORMS.names(), ["background", "foreground"])
        self.assertNotIn("font", COLOR_TRANSFORMS)
        self.assertIs(COLOR_TRANSFORMS.get("background"), HINT_TRANSFORMS.get(HintName.BACKGROUND))

    def test_register_decorator(self):
        registry = HintTransformRegistry()

        @registry.register("opacity")
        def _opacity(ctx, target, value):
            return float(value) / 100

        ctx = TransformContext(StaticToolkit())
        self.assertEqual(registry.transform(ctx, None, "opacity", "50"), 0.5)
        self.assertEqual(registry.transform(ctx, None, "other", "50"), "50")

    def test_color_only_applier_passes_other_hints_through(self):
        widget = _Widget()
        applier = HintApplier(StaticToolkit(), registry=COLOR_TRANSFORMS)
        applier.apply(widget, {"background": "red", "font": "Mono"})
        self.assertEqual(widget.calls, [("background", RGB(255, 0, 0)), ("font", "Mono")])

    def test_constant_transforms(self):
        ctx = TransformContext(StaticToolkit())
        self.assertEqual(make_constant(ctx, None, " border "), LabelStyle.BORDER)
        self.assertEqual(make_class_constant_bits(ctx, _FlowData(), "spacious"), _FlowData.SPACIOUS)


if __name__ == "__main__":
    unittest.main()
