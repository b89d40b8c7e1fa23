import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "core"))
sys.path.insert(0, str(ROOT / "packages" / "hints"))

from hintkit_hints.constants import FONT_STYLES, TOOLKIT_CONSTANTS, ConstantSpace, FontStyle, LabelStyle
from hintkit_hints.errors import (
    InvalidHintValue,
    UnknownColorName,
    UnknownConstantName,
    UnknownStyleToken,
    UnknownSymbolError,
)
from hintkit_hints.layout import GridData
from hintkit_hints.models import RGB, FontDescriptor
from hintkit_hints.parsers import parse_color, parse_constant, parse_constant_bits, parse_font, parse_rgb
from hintkit_hints.toolkit import StaticToolkit


class ColorParserTests(unittest.TestCase):
    def setUp(self):
        self.toolkit = StaticToolkit()

    def test_hex_triplets(self):
        for spec, expected in (
            ("#FF0000", RGB(255, 0, 0)),
            ("#00ff7f", RGB(0, 255, 127)),
            ("#0A0F1D", RGB(10, 15, 29)),
        ):
            self.assertEqual(parse_color(self.toolkit, spec), expected)

    def test_decimal_triplets_ignore_parens_and_spacing(self):
        for spec in ("(12, 34, 56)", "12,34,56", " ( 12 ,34,  56 ) ", "12 34 56"):
            self.assertEqual(parse_color(self.toolkit, spec), RGB(12, 34, 56))

    def test_integer_sequence(self):
        self.assertEqual(parse_color(self.toolkit, (1, 2, 3)), RGB(1, 2, 3))

    def test_out_of_range_component(self):
        with self.assertRaises(InvalidHintValue):
            parse_color(self.toolkit, "(300, 0, 0)")

    def test_system_color_names_are_case_insensitive(self):
        resolved = {parse_color(self.toolkit, name) for name in ("red", "RED", "ReD")}
        self.assertEqual(resolved, {RGB(255, 0, 0)})

    def test_multi_word_system_color(self):
        self.assertEqual(parse_color(self.toolkit, "dark-red"), RGB(128, 0, 0))
        self.assertEqual(parse_color(self.toolkit, "widget background"), RGB(239, 239, 239))

    def test_unknown_color_name(self):
        with self.assertRaises(UnknownColorName) as ctx:
            parse_color(self.toolkit, "chartreuse-ish")
        self.assertIsInstance(ctx.exception, UnknownSymbolError)
        self.assertEqual(ctx.exception.name, "COLOR_CHARTREUSE_ISH")

    def test_parse_rgb_returns_none_for_names(self):
        self.assertIsNone(parse_rgb("blue"))


class FontParserTests(unittest.TestCase):
    def setUp(self):
        self.toolkit = StaticToolkit(default_font=FontDescriptor("Sans", 10, int(FontStyle.BOLD)))

    def test_token_order_does_not_matter(self):
        a = parse_font(self.toolkit, "Arial, 18, BOLD")
        b = parse_font(self.toolkit, "BOLD, 18, Arial")
        self.assertEqual(a, b)
        self.assertEqual(a, FontDescriptor("Arial", 18, int(FontStyle.BOLD)))
        self.assertFalse(a.style & FontStyle.ITALIC)

    def test_relative_height_and_styles(self):
        font = parse_font(self.toolkit, "+4, BOLD, ITALIC")
        self.assertEqual(font, FontDescriptor("Sans", 14, int(FontStyle.BOLD | FontStyle.ITALIC)))

    def test_negative_delta_with_family(self):
        self.assertEqual(parse_font(self.toolkit, "Courier, -2"), FontDescriptor("Courier", 8, 0))

    def test_default_style_starts_cleared(self):
        self.assertEqual(parse_font(self.toolkit, ""), FontDescriptor("Sans", 10, 0))

    def test_normal_resets_earlier_bold(self):
        self.assertEqual(parse_font(self.toolkit, "BOLD, NORMAL"), FontDescriptor("Sans", 10, 0))
        self.assertEqual(parse_font(self.toolkit, "NORMAL, BOLD").style, int(FontStyle.BOLD))

    def test_pipe_combined_style(self):
        self.assertEqual(parse_font(self.toolkit, "bold|italic").style, 3)

    def test_heights_apply_in_encounter_order(self):
        self.assertEqual(parse_font(self.toolkit, "+4, 18").height, 18)
        self.assertEqual(parse_font(self.toolkit, "18, +4").height, 22)

    def test_height_tokens_read_leading_digits(self):
        self.assertEqual(parse_font(self.toolkit, "Arial, 18pt"), FontDescriptor("Arial", 18, 0))
        self.assertEqual(parse_font(self.toolkit, "+2pt").height, 12)

    def test_last_family_wins(self):
        self.assertEqual(parse_font(self.toolkit, "Arial, Courier New").name, "Courier New")

    def test_unknown_style_part(self):
        with self.assertRaises(UnknownStyleToken) as ctx:
            parse_font(self.toolkit, "BOLD|UNDERLINE")
        self.assertEqual(ctx.exception.name, "UNDERLINE")


class ConstantBitsTests(unittest.TestCase):
    def test_delimiters_are_equivalent(self):
        piped = parse_constant_bits("BOLD|ITALIC", FONT_STYLES)
        commas = parse_constant_bits("bold, italic", FONT_STYLES)
        self.assertEqual(piped, commas)
        self.assertEqual(piped, FONT_STYLES.resolve("BOLD") | FONT_STYLES.resolve("ITALIC"))

    def test_whitespace_and_pipes(self):
        bits = parse_constant_bits(" BORDER | center  wrap ", TOOLKIT_CONSTANTS)
        self.assertEqual(bits, LabelStyle.BORDER | LabelStyle.CENTER | LabelStyle.WRAP)

    def test_list_of_names(self):
        self.assertEqual(parse_constant_bits(["border", " shadow_in "], TOOLKIT_CONSTANTS), LabelStyle.BORDER | LabelStyle.SHADOW_IN)

    def test_list_of_members_and_names(self):
        bits = parse_constant_bits([LabelStyle.BORDER, "center", 0x40], TOOLKIT_CONSTANTS)
        self.assertEqual(bits, LabelStyle.BORDER | LabelStyle.CENTER | LabelStyle.BOTTOM)

    def test_int_passes_through(self):
        self.assertEqual(parse_constant_bits(0x14, TOOLKIT_CONSTANTS), 0x14)

    def test_zero_valued_names_resolve(self):
        self.assertEqual(parse_constant("none", TOOLKIT_CONSTANTS), 0)
        self.assertEqual(parse_constant("NORMAL", FONT_STYLES), 0)

    def test_unknown_name(self):
        with self.assertRaises(UnknownConstantName):
            parse_constant_bits("BORDER|SPARKLE", TOOLKIT_CONSTANTS)

    def test_class_constants(self):
        space = ConstantSpace.from_class(GridData)
        self.assertEqual(space.resolve("fill"), GridData.FILL)
        self.assertIn("BEGINNING", space)
        self.assertEqual(space[" fill "], GridData.FILL)
        self.assertNotIn("horizontal_span", space)


if __name__ == "__main__":
    unittest.main()
