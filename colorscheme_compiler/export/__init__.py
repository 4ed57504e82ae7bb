from .json_export import export_json
from .lua_export import write_colorscheme
from .preview import print_palette

__all__ = ["export_json", "print_palette", "write_colorscheme"]
