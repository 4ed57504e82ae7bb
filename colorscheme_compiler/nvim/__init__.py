from .theme import generate_colors_lua, generate_init_lua

__all__ = ["generate_colors_lua", "generate_init_lua"]
