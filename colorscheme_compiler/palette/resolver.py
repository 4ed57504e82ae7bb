import logging
from types import MappingProxyType

from ..errors import CyclicColorReference, UnknownHue, UnknownReference
from .expressions import evaluate, parse_expression

logger = logging.getLogger(__name__)

# Depth-first marks
_VISITING = 1
_VISITED = 2


def parse_palette(colors):
    """Parse every colors entry, keeping declaration order.

    Args:
        colors: Mapping (or iterable of pairs) of color name -> expression text

    Returns:
        dict: color name -> expression object
    """
    items = colors.items() if hasattr(colors, "items") else colors
    return {name: parse_expression(text) for name, text in items}


def check_references(expressions, hues):
    """Fail on any color or hue name that nothing declares.

    Runs on parsed expressions only, before anything is evaluated.
    """
    for name, expression in expressions.items():
        for hue_name in expression.hue_references:
            if hue_name not in hues:
                raise UnknownHue(hue_name)
        for reference in expression.references:
            if reference not in expressions:
                raise UnknownReference(reference, name)


def resolution_order(expressions):
    """Order color names so every color comes after the colors it references.

    Depth-first topological sort over the entries in declaration order, with
    references visited in argument order. Entries with no ordering constraint
    between them keep their declaration order.

    Raises:
        CyclicColorReference: If entries reference each other in a loop
    """
    marks = {}
    order = []

    def visit(name, path):
        mark = marks.get(name)
        if mark == _VISITED:
            return
        if mark == _VISITING:
            start = path.index(name)
            raise CyclicColorReference(path[start:] + [name])

        marks[name] = _VISITING
        path.append(name)
        for reference in expressions[name].references:
            visit(reference, path)
        path.pop()
        marks[name] = _VISITED
        order.append(name)

    for name in expressions:
        visit(name, [])

    return order


def resolve_palette(colors, hues):
    """Evaluate all colors entries into a read-only color table.

    Args:
        colors: Mapping of color name -> expression text, in declaration order
        hues: HueTable

    Returns:
        Read-only mapping of color name -> Color, in declaration order
    """
    expressions = parse_palette(colors)
    check_references(expressions, hues)
    order = resolution_order(expressions)
    logger.debug("Resolving %d colors in order: %s", len(order), ", ".join(order))

    resolved = {}
    for name in order:
        resolved[name] = evaluate(expressions[name], hues, resolved)

    table = {name: resolved[name] for name in expressions}
    return MappingProxyType(table)
