"""Color expression language.

A colors entry is one of::

    #RRGGBB                     hex literal
    hsl(H, S, L)                H is degrees or $hue_name
    adjust(name, dS, dL)        absolute saturation/lightness deltas
    darken(name, dL)            adjust(name, 0, -dL)
    lighten(name, dL)           adjust(name, 0, +dL)
    mix(name1, name2, W)        W=1 gives name1, W=0 gives name2
    name                        copy of another color

parse_expression() turns the text into one of the expression classes below
without looking anything up, so the resolver can read ``references`` before
anything is evaluated. ``evaluate()`` then computes the Color against the hue
table and the colors resolved so far.
"""

import math
import re
from dataclasses import dataclass

from ..color import adjust_color, create_color, hex_to_rgb, mix, rgb_to_hsl
from ..errors import ParseError, UnresolvedReference

CALL_RE = re.compile(r"([A-Za-z_]\w*)\s*\((.*)\)", re.DOTALL)
NAME_RE = re.compile(r"[A-Za-z0-9_][\w-]*")
NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")

# function name -> number of arguments
ARITY = {
    "hsl": 3,
    "adjust": 3,
    "darken": 2,
    "lighten": 2,
    "mix": 3,
}


def _lookup(colors, name):
    try:
        return colors[name]
    except KeyError:
        raise UnresolvedReference(name) from None


@dataclass(frozen=True)
class HexLiteral:
    rgb: tuple

    @property
    def references(self):
        return ()

    @property
    def hue_references(self):
        return ()

    def evaluate(self, hues, colors):
        return create_color(*rgb_to_hsl(*self.rgb))


@dataclass(frozen=True)
class Hsl:
    hue: float
    saturation: float
    lightness: float
    # Set instead of ``hue`` when the hue argument is $name
    hue_name: str = None

    @property
    def references(self):
        return ()

    @property
    def hue_references(self):
        return (self.hue_name,) if self.hue_name is not None else ()

    def evaluate(self, hues, colors):
        hue = hues.lookup(self.hue_name) if self.hue_name is not None else self.hue
        return create_color(hue, self.saturation, self.lightness)


@dataclass(frozen=True)
class Adjust:
    base: str
    saturation_delta: float
    lightness_delta: float

    @property
    def references(self):
        return (self.base,)

    @property
    def hue_references(self):
        return ()

    def evaluate(self, hues, colors):
        return adjust_color(
            _lookup(colors, self.base), self.saturation_delta, self.lightness_delta
        )


@dataclass(frozen=True)
class Mix:
    color1: str
    color2: str
    weight: float

    @property
    def references(self):
        return (self.color1, self.color2)

    @property
    def hue_references(self):
        return ()

    def evaluate(self, hues, colors):
        return mix(
            _lookup(colors, self.color1), _lookup(colors, self.color2), self.weight
        )


@dataclass(frozen=True)
class Alias:
    name: str

    @property
    def references(self):
        return (self.name,)

    @property
    def hue_references(self):
        return ()

    def evaluate(self, hues, colors):
        return _lookup(colors, self.name)


def _parse_number(expr, text):
    if not NUMBER_RE.fullmatch(text):
        raise ParseError(expr, f"expected a number, got {text!r}")
    value = float(text)
    if not math.isfinite(value):
        raise ParseError(expr, f"number out of range: {text!r}")
    return value


def _parse_name(expr, text):
    if text.startswith("$"):
        raise ParseError(
            expr, f"hue reference {text!r} is only allowed as the hue of hsl()"
        )
    if not NAME_RE.fullmatch(text):
        raise ParseError(expr, f"expected a color name, got {text!r}")
    return text


def _parse_hue(expr, text):
    if text.startswith("$"):
        name = text[1:]
        if not NAME_RE.fullmatch(name):
            raise ParseError(expr, f"invalid hue reference {text!r}")
        return None, name
    return _parse_number(expr, text), None


def _split_args(expr, function, body):
    args = [part.strip() for part in body.split(",")]
    expected = ARITY[function]
    if len(args) != expected:
        raise ParseError(
            expr, f"{function}() takes {expected} arguments, got {len(args)}"
        )
    if any(not arg for arg in args):
        raise ParseError(expr, "empty argument")
    return args


def parse_expression(text):
    """Parse one colors entry into an expression object.

    Raises:
        ParseError: On unknown functions, wrong arity or malformed arguments
        InvalidColorLiteral: On a malformed hex literal
    """
    if not isinstance(text, str):
        raise ParseError(text, "expected a string")
    expr = text.strip()
    if not expr:
        raise ParseError(text, "empty expression")

    if expr.startswith("#"):
        return HexLiteral(hex_to_rgb(expr))

    call = CALL_RE.fullmatch(expr)
    if call is None:
        if NAME_RE.fullmatch(expr):
            return Alias(expr)
        raise ParseError(text, "not a hex color, function call or color name")

    function = call.group(1).lower()
    if function not in ARITY:
        raise ParseError(text, f"unknown function {call.group(1)!r}")
    args = _split_args(text, function, call.group(2))

    if function == "hsl":
        hue, hue_name = _parse_hue(text, args[0])
        return Hsl(
            hue,
            _parse_number(text, args[1]),
            _parse_number(text, args[2]),
            hue_name=hue_name,
        )
    if function == "adjust":
        return Adjust(
            _parse_name(text, args[0]),
            _parse_number(text, args[1]),
            _parse_number(text, args[2]),
        )
    if function == "darken":
        return Adjust(_parse_name(text, args[0]), 0.0, -_parse_number(text, args[1]))
    if function == "lighten":
        return Adjust(_parse_name(text, args[0]), 0.0, _parse_number(text, args[1]))
    return Mix(
        _parse_name(text, args[0]),
        _parse_name(text, args[1]),
        _parse_number(text, args[2]),
    )


def is_expression(text):
    """True if text is a hex literal or a function call rather than a name."""
    expr = text.strip()
    return expr.startswith("#") or CALL_RE.fullmatch(expr) is not None


def evaluate(expression, hues, colors):
    """Evaluate a parsed expression, or expression text, to a Color.

    Args:
        expression: Expression object or text
        hues: HueTable for $name lookups
        colors: Mapping of already resolved colors

    Raises:
        UnresolvedReference: If a referenced color is not in ``colors`` yet
        UnknownHue: If a $name is not in ``hues``
    """
    if isinstance(expression, str):
        expression = parse_expression(expression)
    return expression.evaluate(hues, colors)
