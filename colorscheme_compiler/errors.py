class ThemeError(Exception):
    """Base class for every error raised while compiling a theme."""


class InvalidColorLiteral(ThemeError):
    def __init__(self, literal):
        self.literal = literal
        super().__init__(f"Invalid hex color {literal!r} (expected #RRGGBB)")


class ParseError(ThemeError):
    def __init__(self, expr, reason):
        self.expr = expr
        self.reason = reason
        super().__init__(f"Cannot parse color expression {expr!r}: {reason}")


class ColorOutOfRange(ThemeError):
    def __init__(self, hue, saturation, lightness):
        self.components = (hue, saturation, lightness)
        super().__init__(
            f"Color components are not finite numbers: "
            f"hsl({hue!r}, {saturation!r}, {lightness!r})"
        )


class UnknownHue(ThemeError):
    def __init__(self, name):
        self.name = name
        super().__init__(f"Referenced hue {name!r} is not present in hues")


class UnknownReference(ThemeError):
    def __init__(self, name, entry=None):
        self.name = name
        self.entry = entry
        where = f" (in color {entry!r})" if entry else ""
        super().__init__(f"Referenced color {name!r} is not present in colors{where}")


class UnknownColorReference(ThemeError):
    def __init__(self, name, group):
        self.name = name
        self.group = group
        super().__init__(f"Color {name!r} used by {group!r} is not present in colors")


class CyclicColorReference(ThemeError):
    def __init__(self, cycle):
        self.cycle = list(cycle)
        super().__init__(f"Cyclic color reference: {' -> '.join(self.cycle)}")


class UnresolvedReference(ThemeError):
    """A color was evaluated before one of its references.

    Only seen when colors are evaluated out of dependency order, so it points
    at a resolver bug rather than at the theme file.
    """

    def __init__(self, name):
        self.name = name
        super().__init__(f"Color {name!r} has not been resolved yet")


class UnknownStyleFlag(ThemeError):
    def __init__(self, letter, group):
        self.letter = letter
        self.group = group
        super().__init__(f"Unknown style option {letter!r} in highlight {group!r}")


class InvalidHighlight(ThemeError):
    def __init__(self, group, value):
        self.group = group
        self.value = value
        super().__init__(f"Invalid highlight {group!r}: {value!r}")


class InvalidBackground(ThemeError):
    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid background {value!r} (expected 'dark' or 'light')")


class InvalidEntry(ThemeError):
    def __init__(self, section, name, value):
        self.section = section
        self.name = name
        self.value = value
        if name is None:
            message = f"Missing or invalid value for {section!r}: {value!r}"
        else:
            message = f"Invalid value for {section}.{name}: {value!r}"
        super().__init__(message)


class DuplicateHue(ThemeError):
    def __init__(self, name):
        self.name = name
        super().__init__(f"Hue {name!r} is defined more than once")


class ThemeFileError(ThemeError):
    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read theme file {str(path)!r}: {reason}")
