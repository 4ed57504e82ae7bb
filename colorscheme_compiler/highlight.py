"""Highlight lines and globals.

A highlight value is either ``link:Group`` or up to four whitespace separated
fields::

    foreground background styles special

Trailing fields may be left out and ``-`` unsets a field in any position.
Styles are a run of letters, one per StyleFlag.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from .errors import InvalidHighlight, UnknownColorReference, UnknownStyleFlag
from .palette.expressions import evaluate, is_expression, parse_expression

logger = logging.getLogger(__name__)

UNSET = "-"
LINK_PREFIX = "link:"
MAX_FIELDS = 4


class StyleFlag(Enum):
    STANDOUT = "standout"
    UNDERLINE = "underline"
    UNDERCURL = "undercurl"
    UNDERDOUBLE = "underdouble"
    UNDERDOTTED = "underdotted"
    UNDERDASHED = "underdashed"
    STRIKETHROUGH = "strikethrough"
    ITALIC = "italic"
    BOLD = "bold"
    REVERSE = "reverse"
    NOCOMBINE = "nocombine"


STYLE_LETTERS = {
    "o": StyleFlag.STANDOUT,
    "u": StyleFlag.UNDERLINE,
    "c": StyleFlag.UNDERCURL,
    "d": StyleFlag.UNDERDOUBLE,
    "t": StyleFlag.UNDERDOTTED,
    "h": StyleFlag.UNDERDASHED,
    "s": StyleFlag.STRIKETHROUGH,
    "i": StyleFlag.ITALIC,
    "b": StyleFlag.BOLD,
    "r": StyleFlag.REVERSE,
    "n": StyleFlag.NOCOMBINE,
}


@dataclass(frozen=True)
class Styled:
    foreground: object = None
    background: object = None
    styles: frozenset = frozenset()
    special: object = None

    def ordered_styles(self):
        return [flag for flag in StyleFlag if flag in self.styles]


@dataclass(frozen=True)
class Link:
    target: str


def resolve_color_ref(name, colors, group):
    """Resolve a color field: ``-`` is unset, anything else must be a color name."""
    if name == UNSET:
        return None
    try:
        return colors[name]
    except KeyError:
        raise UnknownColorReference(name, group) from None


def parse_styles(field, group):
    if field == UNSET:
        return frozenset()
    styles = set()
    for letter in field:
        if letter not in STYLE_LETTERS:
            raise UnknownStyleFlag(letter, group)
        styles.add(STYLE_LETTERS[letter])
    return frozenset(styles)


def parse_highlight(group, value, colors):
    """Parse one highlight value into a Styled or Link spec.

    Args:
        group: Highlight group name, used in error messages
        value: The highlight string
        colors: Resolved color table

    Raises:
        InvalidHighlight: On an empty value, more than four fields or a bad link
        UnknownColorReference: If a color field names an unknown color
        UnknownStyleFlag: If the styles field has an unknown letter
    """
    line = value.strip()

    if line.startswith(LINK_PREFIX):
        target = line[len(LINK_PREFIX) :].strip()
        if not target or len(target.split()) != 1:
            raise InvalidHighlight(group, value)
        return Link(target)

    fields = line.split()
    if not fields or len(fields) > MAX_FIELDS:
        raise InvalidHighlight(group, value)

    # Omitted trailing fields behave exactly like "-"
    fields += [UNSET] * (MAX_FIELDS - len(fields))
    foreground, background, styles, special = fields

    return Styled(
        foreground=resolve_color_ref(foreground, colors, group),
        background=resolve_color_ref(background, colors, group),
        styles=parse_styles(styles, group),
        special=resolve_color_ref(special, colors, group),
    )


def parse_highlights(highlights, colors):
    """Parse every highlight entry, keeping declaration order.

    Returns:
        list of (group, spec) tuples
    """
    parsed = [
        (group, parse_highlight(group, value, colors))
        for group, value in highlights.items()
    ]
    logger.debug("Parsed %d highlight groups", len(parsed))
    return parsed


def resolve_global(name, value, colors, hues):
    """Resolve one global to a color, or None for ``-``.

    A value that is not a color name may be an inline color expression
    (hex literal or function call), evaluated against the color table.
    """
    stripped = value.strip()
    if stripped != UNSET and stripped not in colors and is_expression(stripped):
        expression = parse_expression(stripped)
        for reference in expression.references:
            if reference not in colors:
                raise UnknownColorReference(reference, name)
        return evaluate(expression, hues, colors)
    return resolve_color_ref(stripped, colors, name)


def resolve_globals(globals_, colors, hues):
    """Resolve the globals section into a list of (name, color) tuples."""
    resolved = [
        (name, resolve_global(name, value, colors, hues))
        for name, value in globals_.items()
    ]
    logger.debug("Resolved %d globals", len(resolved))
    return resolved
