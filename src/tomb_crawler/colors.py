"""RGB colour constants.

Colours are opaque rendering hints for the core; only renderers interpret them.
"""
from typing import Tuple

Color = Tuple[int, int, int]

BLACK: Color = (0, 0, 0)
WHITE: Color = (255, 255, 255)
RED: Color = (255, 0, 0)
DARK_RED: Color = (191, 0, 0)
DARKER_RED: Color = (127, 0, 0)
LIGHT_RED: Color = (255, 63, 63)
ORANGE: Color = (255, 127, 0)
GREEN: Color = (0, 255, 0)
DARKER_GREEN: Color = (0, 127, 0)
DESATURATED_GREEN: Color = (63, 127, 63)
VIOLET: Color = (127, 0, 255)
LIGHT_GREY: Color = (159, 159, 159)

# tile colours
DARK_WALL: Color = (0, 0, 100)
LIGHT_WALL: Color = (130, 110, 50)
DARK_GROUND: Color = (50, 50, 150)
LIGHT_GROUND: Color = (200, 180, 50)

_NAMED = {
    name.lower(): value
    for name, value in dict(globals()).items()
    if name.isupper() and isinstance(value, tuple)
}


def parse_color(value) -> Color:
    """Accept a colour name (``"desaturated_green"``) or an ``[r, g, b]`` triple."""
    if isinstance(value, str):
        try:
            return _NAMED[value.strip().lower()]
        except KeyError:
            raise ValueError(f"Unknown colour name: {value!r}") from None
    r, g, b = (int(c) for c in value)
    return (r, g, b)
