import argparse
import logging
import os
import sys

from .errors import ThemeError
from .export import export_json, print_palette, write_colorscheme
from .theme import compile_theme_file


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Generate a Neovim Lua colorscheme from a TOML theme file"
    )
    parser.add_argument(
        "filename",
        help="The input colorscheme file",
    )
    parser.add_argument(
        "output",
        nargs="?",
        default=None,
        help="Directory of the generated colorscheme (default: current directory)",
    )
    parser.add_argument(
        "--palette-json",
        metavar="JSON",
        default=None,
        help="Also export the resolved palette to this JSON file",
    )
    parser.add_argument(
        "--preview",
        action="store_true",
        help="Print the resolved palette to the terminal",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log resolution details",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        _run(args)
    except ThemeError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


def _run(args):
    """Compile the theme file and write all requested outputs."""
    output_dir = args.output or os.getcwd()

    print(f"Compiling: {args.filename}")

    theme = compile_theme_file(args.filename)

    print(
        f"Resolved {len(theme.colors)} colors, "
        f"{len(theme.highlights)} highlights, {len(theme.globals)} globals"
    )

    if args.preview:
        print_palette(theme)

    init_path, colors_path = write_colorscheme(theme, output_dir)
    exported = [init_path, colors_path]

    if args.palette_json:
        palette_dir = os.path.dirname(args.palette_json)
        if palette_dir:
            os.makedirs(palette_dir, exist_ok=True)
        export_json(theme, args.palette_json)
        exported.append(args.palette_json)

    print("\n" + "=" * 60)
    print("Exported:")
    for path in exported:
        print(f"  - {path}")
    print(f"\nUse it with :colorscheme {theme.name} ({theme.background} background)")
    print("=" * 60)


if __name__ == "__main__":
    sys.exit(main())
