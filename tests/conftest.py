import pytest

from colorscheme_compiler.color import Color

SAMPLE_THEME = """\
name = "ember"
background = "dark"

[hues]
red = 5
blue = 220

[colors]
bg = "hsl($blue, 0.2, 0.12)"
bg_light = "lighten(bg, 0.06)"
fg = "#d8dee9"
fg_dim = "adjust(fg, -0.1, -0.2)"
red = "hsl($red, 0.7, 0.6)"
blue = "hsl($blue, 0.6, 0.65)"
accent = "mix(red, blue, 0.5)"
comment = "fg_dim"

[highlights]
Normal = "fg bg"
NormalFloat = "fg bg_light"
Comment = "comment - i"
Error = "red - bu red"
Visual = "- bg_light r"
Todo = "link:Comment"

[globals]
terminal_color_0 = "bg"
terminal_color_1 = "red"
terminal_color_4 = "blue"
"""


@pytest.fixture
def theme_file(tmp_path):
    path = tmp_path / "ember.toml"
    path.write_text(SAMPLE_THEME)
    return path


@pytest.fixture
def colors():
    return {
        "fg": Color(220.0, 0.3, 0.9),
        "bg": Color(220.0, 0.2, 0.12),
        "red": Color(5.0, 0.7, 0.6),
    }
