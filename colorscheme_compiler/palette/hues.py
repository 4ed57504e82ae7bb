import math
from collections.abc import Mapping
from types import MappingProxyType

from ..color import normalize_hue
from ..errors import DuplicateHue, InvalidEntry, UnknownHue


def _is_number(value):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


class HueTable:
    """Named hue angles referenced from color expressions as ``$name``.

    Values are wrapped into [0, 360) when the table is built; out-of-range
    hues are never rejected.
    """

    def __init__(self, entries=None):
        if entries is None:
            entries = ()
        elif isinstance(entries, Mapping):
            entries = entries.items()

        hues = {}
        for name, value in entries:
            if name in hues:
                raise DuplicateHue(name)
            if not _is_number(value):
                raise InvalidEntry("hues", name, value)
            hues[name] = normalize_hue(float(value))
        self._hues = MappingProxyType(hues)

    def lookup(self, name):
        try:
            return self._hues[name]
        except KeyError:
            raise UnknownHue(name) from None

    def __contains__(self, name):
        return name in self._hues

    def __len__(self):
        return len(self._hues)
