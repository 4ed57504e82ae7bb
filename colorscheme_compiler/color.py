import colorsys
import math
import re
from collections import namedtuple

from .errors import ColorOutOfRange, InvalidColorLiteral

HEX_RE = re.compile(r"#?([0-9a-fA-F]{6})")


def rgb_to_hex(r, g, b):
    return f"#{r:02x}{g:02x}{b:02x}"


def hex_to_rgb(hex_color):
    match = HEX_RE.fullmatch(hex_color) if isinstance(hex_color, str) else None
    if match is None:
        raise InvalidColorLiteral(hex_color)
    digits = match.group(1)
    return tuple(int(digits[i : i + 2], 16) for i in (0, 2, 4))


def rgb_to_hsl(r, g, b):
    """Convert 0-255 channels to (hue degrees, saturation 0-1, lightness 0-1)"""
    h, l, s = colorsys.rgb_to_hls(r / 255, g / 255, b / 255)
    return (normalize_hue(h * 360), s, l)


def hsl_to_rgb(h, s, l):
    r, g, b = colorsys.hls_to_rgb(normalize_hue(h) / 360, clamp01(l), clamp01(s))
    return (round(r * 255), round(g * 255), round(b * 255))


def clamp01(value):
    return max(0.0, min(1.0, value))


def normalize_hue(hue):
    """Wrap a hue in degrees into [0, 360)."""
    wrapped = hue % 360
    # Tiny negative inputs wrap to exactly 360.0 in floating point
    if wrapped >= 360:
        return 0.0
    return wrapped


class Color(namedtuple("Color", ["hue", "saturation", "lightness"])):
    """A resolved HSL color.

    Hue is in degrees [0, 360), saturation and lightness in [0, 1]. Use
    create_color() to build one from arbitrary values.
    """

    __slots__ = ()

    @property
    def rgb(self):
        return hsl_to_rgb(*self)

    @property
    def hex(self):
        return rgb_to_hex(*self.rgb)


def create_color(hue, saturation, lightness):
    """Create a Color with the hue wrapped and saturation/lightness clamped

    Raises:
        ColorOutOfRange: If a component is infinite or NaN
    """
    if not all(math.isfinite(v) for v in (hue, saturation, lightness)):
        raise ColorOutOfRange(hue, saturation, lightness)
    return Color(normalize_hue(hue), clamp01(saturation), clamp01(lightness))


def hex_to_hsl(hex_color):
    """Parse a 6-digit hex string (with or without '#') into a Color.

    Raises:
        InvalidColorLiteral: If the string is not a 6-digit hex color
    """
    return create_color(*rgb_to_hsl(*hex_to_rgb(hex_color)))


def hsl_to_hex(hsl):
    h, s, l = hsl
    return rgb_to_hex(*hsl_to_rgb(h, s, l))


def adjust_color(color, saturation_delta=0, lightness_delta=0):
    """Shift saturation and lightness by absolute amounts.

    Each component is clamped to [0, 1] on its own; the hue is unchanged.
    """
    h, s, l = color
    return Color(h, clamp01(s + saturation_delta), clamp01(l + lightness_delta))


def mix(color1, color2, weight):
    """Interpolate two colors component-wise in HSL space.

    weight=1 returns color1, weight=0 returns color2. The hue is interpolated
    linearly, not along the shortest arc. Weights outside [0, 1] extrapolate
    and the result is wrapped/clamped back into range.

    Raises:
        ColorOutOfRange: If extrapolation overflows a component
    """
    h1, s1, l1 = color1
    h2, s2, l2 = color2
    other = 1 - weight
    return create_color(
        weight * h1 + other * h2,
        weight * s1 + other * s2,
        weight * l1 + other * l2,
    )


def relative_luminance(r, g, b):
    """Calculate relative luminance per WCAG 2.0"""

    def channel(c):
        c = c / 255
        return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4

    return 0.2126 * channel(r) + 0.7152 * channel(g) + 0.0722 * channel(b)


def contrast_ratio(color1, color2):
    """WCAG contrast ratio between two colors, 1.0-21.0"""
    lum1 = relative_luminance(*color1.rgb)
    lum2 = relative_luminance(*color2.rgb)
    lighter = max(lum1, lum2)
    darker = min(lum1, lum2)
    return (lighter + 0.05) / (darker + 0.05)
