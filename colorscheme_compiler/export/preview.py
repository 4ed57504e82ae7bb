from rich.console import Console
from rich.style import Style
from rich.table import Table
from rich.text import Text

from ..color import contrast_ratio
from ..highlight import Styled


def normal_background(theme):
    """Background of the Normal highlight group, if the theme sets one."""
    for group, spec in theme.highlights:
        if group == "Normal" and isinstance(spec, Styled):
            return spec.background
    return None


def print_palette(theme, console=None):
    """Print the resolved palette as a table of swatches"""
    console = console or Console()
    bg = normal_background(theme)

    table = Table(
        title=f"{theme.name} ({str(theme.background).upper()})",
        show_header=True,
        header_style="bold",
    )
    table.add_column("Color", style="cyan", no_wrap=True)
    table.add_column("Swatch")
    table.add_column("Hex")
    table.add_column("HSL")
    if bg is not None:
        table.add_column("Contrast", justify="right")

    for name, color in theme.colors.items():
        swatch = Text(" " * 6, style=Style(bgcolor=color.hex))
        hsl = f"{color.hue:6.1f} {color.saturation:.2f} {color.lightness:.2f}"
        row = [name, swatch, color.hex, hsl]
        if bg is not None:
            row.append(f"{contrast_ratio(color, bg):.1f}:1")
        table.add_row(*row)

    console.print(table)
