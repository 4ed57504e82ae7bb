from .expressions import evaluate, parse_expression
from .hues import HueTable
from .loader import ThemeDocument, load_theme_document, theme_document_from_dict
from .resolver import resolution_order, resolve_palette

__all__ = [
    "HueTable",
    "ThemeDocument",
    "evaluate",
    "load_theme_document",
    "parse_expression",
    "resolution_order",
    "resolve_palette",
    "theme_document_from_dict",
]
