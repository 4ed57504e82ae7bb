import re
import tomllib
from dataclasses import dataclass, field
from pathlib import Path

from ..errors import InvalidEntry, ThemeFileError

# Used as a directory and Lua module name; "." would split the require() path
THEME_NAME_RE = re.compile(r"[A-Za-z0-9_][\w-]*")


@dataclass(frozen=True)
class ThemeDocument:
    """Raw sections of a theme file, before any color is resolved."""

    name: str
    background: str
    colors: dict
    hues: dict = field(default_factory=dict)
    highlights: dict = field(default_factory=dict)
    globals: dict = field(default_factory=dict)


def _string_table(data, section, required=False):
    if section not in data:
        if required:
            raise InvalidEntry(section, None, None)
        return {}

    table = data[section]
    if not isinstance(table, dict):
        raise InvalidEntry(section, None, table)
    for key, value in table.items():
        if not isinstance(value, str):
            raise InvalidEntry(section, key, value)
    return dict(table)


def _scalar(data, key):
    value = data.get(key)
    if not isinstance(value, str) or not value.strip():
        raise InvalidEntry(key, None, value)
    return value


def _theme_name(data):
    name = _scalar(data, "name")
    if not THEME_NAME_RE.fullmatch(name):
        raise InvalidEntry("name", None, name)
    return name


def theme_document_from_dict(data):
    """Build a ThemeDocument from an already parsed TOML table.

    ``name``, ``background`` and ``[colors]`` are required; ``[hues]``,
    ``[highlights]`` and ``[globals]`` may be left out.
    """
    hues = data.get("hues", {})
    if not isinstance(hues, dict):
        raise InvalidEntry("hues", None, hues)

    return ThemeDocument(
        name=_theme_name(data),
        background=_scalar(data, "background"),
        colors=_string_table(data, "colors", required=True),
        hues=dict(hues),
        highlights=_string_table(data, "highlights"),
        globals=_string_table(data, "globals"),
    )


def load_theme_document(path):
    """Load a theme TOML file.

    Args:
        path: Path to the theme file

    Returns:
        ThemeDocument with sections in file order
    """
    path = Path(path)
    if not path.is_file():
        raise ThemeFileError(path, "file not found")

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ThemeFileError(path, str(e)) from e

    return theme_document_from_dict(data)
