import pytest

from colorscheme_compiler.color import Color
from colorscheme_compiler.errors import (
    InvalidColorLiteral,
    ParseError,
    ColorOutOfRange,
    UnknownHue,
    UnresolvedReference,
)
from colorscheme_compiler.palette import HueTable, evaluate, parse_expression
from colorscheme_compiler.palette.expressions import (
    Adjust,
    Alias,
    HexLiteral,
    Hsl,
    Mix,
    is_expression,
)


class TestParseExpression:
    def test_hex_literal(self):
        expr = parse_expression("#AABBCC")
        assert expr == HexLiteral((170, 187, 204))
        assert expr.references == ()

    def test_hsl_with_literal_hue(self):
        expr = parse_expression("hsl(120, 0.5, 0.25)")
        assert expr == Hsl(120.0, 0.5, 0.25)
        assert expr.hue_references == ()

    def test_hsl_with_hue_reference(self):
        expr = parse_expression("hsl($blue, .6, 0.65)")
        assert expr == Hsl(None, 0.6, 0.65, hue_name="blue")
        assert expr.hue_references == ("blue",)
        assert expr.references == ()

    def test_adjust(self):
        expr = parse_expression("adjust(fg, -0.1, 0.2)")
        assert expr == Adjust("fg", -0.1, 0.2)
        assert expr.references == ("fg",)

    def test_darken_is_negative_adjust(self):
        assert parse_expression("darken(bg, 0.2)") == Adjust("bg", 0.0, -0.2)

    def test_lighten_is_positive_adjust(self):
        assert parse_expression("lighten(bg, 0.2)") == Adjust("bg", 0.0, 0.2)

    def test_mix(self):
        expr = parse_expression("mix(red, blue, 0.25)")
        assert expr == Mix("red", "blue", 0.25)
        assert expr.references == ("red", "blue")

    def test_function_names_ignore_case(self):
        assert parse_expression("MIX(a, b, 1)") == Mix("a", "b", 1.0)
        assert parse_expression("Darken(a, 1e-1)") == Adjust("a", 0.0, -0.1)

    def test_whitespace_is_ignored(self):
        assert parse_expression("  adjust( fg ,0 ,  0.1 ) ") == Adjust("fg", 0.0, 0.1)

    def test_bare_name_is_alias(self):
        expr = parse_expression("fg_dim")
        assert expr == Alias("fg_dim")
        assert expr.references == ("fg_dim",)

    @pytest.mark.parametrize(
        "text",
        [
            "rgb(1, 2, 3)",
            "hsl(1, 2)",
            "darken(a, 0.1, 0.2)",
            "adjust(a, x, 0.1)",
            "hsl(1, 0.5, 5%)",
            "hsl(1,, 0.5)",
            "darken($hue, 0.1)",
            "mix(a, $b, 0.5)",
            "hsl($, 0.5, 0.5)",
            "lighten(a b, 0.1)",
            "hsl(1e400, 0.5, 0.5)",
            "mix(a, b, -1e999)",
            "not valid!",
            "",
            "   ",
        ],
    )
    def test_parse_errors(self, text):
        with pytest.raises(ParseError) as exc:
            parse_expression(text)
        assert exc.value.expr == text
        assert exc.value.reason

    def test_malformed_hex_literal(self):
        with pytest.raises(InvalidColorLiteral):
            parse_expression("#abc")


def test_is_expression():
    assert is_expression("#ffffff")
    assert is_expression("darken(bg, 0.1)")
    assert not is_expression("bg")


class TestEvaluate:
    hues = HueTable({"blue": 220, "wrap": 400})

    def test_hsl_with_hue_reference(self):
        assert evaluate("hsl($blue, 0.5, 0.5)", self.hues, {}) == Color(220.0, 0.5, 0.5)

    def test_hsl_wraps_hue_and_clamps(self):
        assert evaluate("hsl(-30, 1.5, -0.2)", self.hues, {}) == Color(330.0, 1.0, 0.0)
        assert evaluate("hsl($wrap, 0.5, 0.5)", self.hues, {}).hue == 40.0

    def test_hex_literal(self):
        assert evaluate("#ff0000", self.hues, {}) == Color(0.0, 1.0, 0.5)

    def test_adjust_against_table(self):
        colors = {"base": Color(10.0, 0.5, 0.5)}
        result = evaluate("darken(base, 0.2)", self.hues, colors)
        assert result.hue == 10.0
        assert result.saturation == 0.5
        assert result.lightness == pytest.approx(0.3)

    def test_mix_against_table(self):
        colors = {"a": Color(0.0, 0.0, 0.0), "b": Color(100.0, 1.0, 1.0)}
        result = evaluate("mix(a, b, 0.25)", self.hues, colors)
        assert tuple(result) == pytest.approx((75.0, 0.75, 0.75))

    def test_alias_copies_color(self):
        colors = {"fg": Color(200.0, 0.1, 0.9)}
        assert evaluate("fg", self.hues, colors) == colors["fg"]

    def test_overflowing_mix_weight(self):
        colors = {"a": Color(10.0, 0.2, 0.3), "b": Color(300.0, 0.9, 0.7)}
        with pytest.raises(ColorOutOfRange):
            evaluate("mix(a, b, 1e308)", self.hues, colors)

    def test_missing_color_is_unresolved(self):
        with pytest.raises(UnresolvedReference) as exc:
            evaluate("lighten(missing, 0.1)", self.hues, {})
        assert exc.value.name == "missing"

    def test_missing_hue(self):
        with pytest.raises(UnknownHue):
            evaluate("hsl($green, 0.5, 0.5)", self.hues, {})

    def test_is_deterministic(self):
        colors = {"a": Color(12.0, 0.3, 0.4)}
        first = evaluate("adjust(a, 0.1, 0.1)", self.hues, colors)
        second = evaluate("adjust(a, 0.1, 0.1)", self.hues, colors)
        assert first == second
        assert colors == {"a": Color(12.0, 0.3, 0.4)}
