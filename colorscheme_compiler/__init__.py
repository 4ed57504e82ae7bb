from .color import Color, hex_to_hsl, hsl_to_hex
from .highlight import Link, StyleFlag, Styled
from .theme import Background, CompiledTheme, compile_theme, compile_theme_file

__version__ = "0.1.0"

__all__ = [
    "Background",
    "Color",
    "CompiledTheme",
    "Link",
    "StyleFlag",
    "Styled",
    "compile_theme",
    "compile_theme_file",
    "hex_to_hsl",
    "hsl_to_hex",
]
