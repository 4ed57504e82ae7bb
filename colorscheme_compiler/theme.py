import logging
from dataclasses import dataclass
from enum import Enum

from .errors import InvalidBackground
from .highlight import parse_highlights, resolve_globals
from .palette import HueTable, load_theme_document, resolve_palette

logger = logging.getLogger(__name__)


class Background(Enum):
    DARK = "dark"
    LIGHT = "light"

    @classmethod
    def parse(cls, value):
        try:
            return cls(value.strip().lower())
        except (AttributeError, ValueError):
            raise InvalidBackground(value) from None

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class CompiledTheme:
    """A fully resolved theme, ready to be written out.

    Attributes:
        name: Colorscheme name
        background: Background mode
        colors: Read-only mapping of color name -> Color
        highlights: List of (group, Styled or Link) in file order
        globals: List of (name, Color or None) in file order
    """

    name: str
    background: Background
    colors: object
    highlights: list
    globals: list


def compile_theme(document):
    """Resolve a ThemeDocument into a CompiledTheme.

    Stops at the first error; nothing is returned for a partly valid theme.
    """
    background = Background.parse(document.background)
    hues = HueTable(document.hues)
    colors = resolve_palette(document.colors, hues)
    highlights = parse_highlights(document.highlights, colors)
    globals_ = resolve_globals(document.globals, colors, hues)

    logger.debug(
        "Compiled theme %r: %d hues, %d colors, %d highlights, %d globals",
        document.name,
        len(hues),
        len(colors),
        len(highlights),
        len(globals_),
    )
    return CompiledTheme(
        name=document.name,
        background=background,
        colors=colors,
        highlights=highlights,
        globals=globals_,
    )


def compile_theme_file(path):
    return compile_theme(load_theme_document(path))
