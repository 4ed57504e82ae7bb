import re

from ..highlight import Link

NONE = "NONE"
LUA_IDENTIFIER_RE = re.compile(r"[A-Za-z_]\w*")


def lua_string(value):
    escaped = value.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
    return f'"{escaped}"'


def format_color(color):
    """Hex string for a color, or Neovim's NONE for an unset one"""
    return lua_string(NONE if color is None else color.hex)


def highlight_attributes(spec):
    """Build the ``nvim_set_hl`` attribute list for a highlight spec.

    Args:
        spec: Styled or Link

    Returns:
        list of (key, lua value) pairs in output order
    """
    if isinstance(spec, Link):
        return [("link", lua_string(spec.target))]

    attributes = [
        ("fg", format_color(spec.foreground)),
        ("bg", format_color(spec.background)),
    ]
    if spec.special is not None:
        attributes.append(("sp", format_color(spec.special)))
    attributes.extend((flag.value, "true") for flag in spec.ordered_styles())
    return attributes


def format_highlight(group, spec):
    body = ", ".join(f"{key} = {value}" for key, value in highlight_attributes(spec))
    return f"    hl(0, {lua_string(group)}, {{ {body} }})"


def format_global(name, color):
    if LUA_IDENTIFIER_RE.fullmatch(name):
        target = f"vim.g.{name}"
    else:
        target = f"vim.g[{lua_string(name)}]"
    return f"    {target} = {format_color(color)}"


def generate_init_lua(theme):
    """Generate the ``lua/<name>/init.lua`` module for a compiled theme.

    Args:
        theme: CompiledTheme

    Returns:
        Lua source of the colorscheme module
    """
    lines = [
        "local M = {}",
        "",
        "local function set_hl_groups()",
        "    local hl = vim.api.nvim_set_hl",
        "",
    ]
    lines.extend(format_highlight(group, spec) for group, spec in theme.highlights)
    lines.extend(
        [
            "end",
            "",
            "function M.init()",
            '    vim.cmd("hi clear")',
            "",
            '    if vim.fn.exists("syntax_on") == 1 then',
            '        vim.cmd("syntax reset")',
            "    end",
            "",
            f"    vim.o.background = {lua_string(str(theme.background))}",
            "    vim.o.termguicolors = true",
            f"    vim.g.colors_name = {lua_string(theme.name)}",
            "",
        ]
    )
    if theme.globals:
        lines.extend(format_global(name, color) for name, color in theme.globals)
        lines.append("")
    lines.extend(
        [
            "    set_hl_groups()",
            "end",
            "",
            "return M",
            "",
        ]
    )
    return "\n".join(lines)


def generate_colors_lua(theme):
    """Generate ``colors/<name>.lua``, the file ``:colorscheme`` loads."""
    return f"require({lua_string(theme.name)}).init()\n"
