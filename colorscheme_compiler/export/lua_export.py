import logging
import os

from ..nvim import generate_colors_lua, generate_init_lua

logger = logging.getLogger(__name__)


def setup_directories(output_dir, theme_name):
    module_dir = os.path.join(output_dir, "lua", theme_name)
    colors_dir = os.path.join(output_dir, "colors")
    os.makedirs(module_dir, exist_ok=True)
    os.makedirs(colors_dir, exist_ok=True)
    return module_dir, colors_dir


def write_colorscheme(theme, output_dir):
    """Write a compiled theme as a Neovim colorscheme plugin.

    Creates ``lua/<name>/init.lua`` and ``colors/<name>.lua`` under
    ``output_dir``.

    Returns:
        tuple: (init.lua path, colors file path)
    """
    module_dir, colors_dir = setup_directories(output_dir, theme.name)

    init_path = os.path.join(module_dir, "init.lua")
    colors_path = os.path.join(colors_dir, f"{theme.name}.lua")

    with open(init_path, "w") as f:
        f.write(generate_init_lua(theme))
    logger.debug("Wrote %s", init_path)

    with open(colors_path, "w") as f:
        f.write(generate_colors_lua(theme))
    logger.debug("Wrote %s", colors_path)

    return init_path, colors_path
