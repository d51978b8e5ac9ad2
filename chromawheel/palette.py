"""
Built-in colors.

These colors come from the `Tango palette
<http://tango.freedesktop.org/Tango_Icon_Theme_Guidelines>`_, which provides
aesthetically reasonable defaults. Each color also comes with a light and a
dark version.
"""
import re
from types import MappingProxyType
from typing import Mapping

from .colors import RGBA, rgb

LIGHT_RED = rgb(239, 41, 41)
RED = rgb(204, 0, 0)
DARK_RED = rgb(164, 0, 0)

LIGHT_ORANGE = rgb(252, 175, 62)
ORANGE = rgb(245, 121, 0)
DARK_ORANGE = rgb(206, 92, 0)

LIGHT_YELLOW = rgb(255, 233, 79)
YELLOW = rgb(237, 212, 0)
DARK_YELLOW = rgb(196, 160, 0)

LIGHT_GREEN = rgb(138, 226, 52)
GREEN = rgb(115, 210, 22)
DARK_GREEN = rgb(78, 154, 6)

LIGHT_BLUE = rgb(114, 159, 207)
BLUE = rgb(52, 101, 164)
DARK_BLUE = rgb(32, 74, 135)

LIGHT_PURPLE = rgb(173, 127, 168)
PURPLE = rgb(117, 80, 123)
DARK_PURPLE = rgb(92, 53, 102)

LIGHT_BROWN = rgb(233, 185, 110)
BROWN = rgb(193, 125, 17)
DARK_BROWN = rgb(143, 89, 2)

BLACK = rgb(0, 0, 0)
WHITE = rgb(255, 255, 255)

LIGHT_GREY = rgb(238, 238, 236)
GREY = rgb(211, 215, 207)
DARK_GREY = rgb(186, 189, 182)

LIGHT_CHARCOAL = rgb(136, 138, 133)
CHARCOAL = rgb(85, 87, 83)
DARK_CHARCOAL = rgb(46, 52, 54)

TANGO_PALETTE: Mapping[str, RGBA] = MappingProxyType({
    "light_red": LIGHT_RED,
    "red": RED,
    "dark_red": DARK_RED,
    "light_orange": LIGHT_ORANGE,
    "orange": ORANGE,
    "dark_orange": DARK_ORANGE,
    "light_yellow": LIGHT_YELLOW,
    "yellow": YELLOW,
    "dark_yellow": DARK_YELLOW,
    "light_green": LIGHT_GREEN,
    "green": GREEN,
    "dark_green": DARK_GREEN,
    "light_blue": LIGHT_BLUE,
    "blue": BLUE,
    "dark_blue": DARK_BLUE,
    "light_purple": LIGHT_PURPLE,
    "purple": PURPLE,
    "dark_purple": DARK_PURPLE,
    "light_brown": LIGHT_BROWN,
    "brown": BROWN,
    "dark_brown": DARK_BROWN,
    "black": BLACK,
    "white": WHITE,
    "light_grey": LIGHT_GREY,
    "grey": GREY,
    "dark_grey": DARK_GREY,
    "light_charcoal": LIGHT_CHARCOAL,
    "charcoal": CHARCOAL,
    "dark_charcoal": DARK_CHARCOAL,
})

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z])(?=[A-Z])")


def palette_color(name: str) -> RGBA:
    """
    Look up a palette color by name.

    Accepts ``"dark_red"``, ``"DARK_RED"``, ``"darkRed"`` or ``"dark red"``.

    Raises:
        KeyError: If no palette color has that name.
    """
    key = _CAMEL_BOUNDARY.sub("_", name.strip()).replace(" ", "_").replace("-", "_").lower()
    try:
        return TANGO_PALETTE[key]
    except KeyError:
        raise KeyError(f"Unknown palette color: {name!r}") from None


__all__ = [
    'LIGHT_RED',
    'RED',
    'DARK_RED',
    'LIGHT_ORANGE',
    'ORANGE',
    'DARK_ORANGE',
    'LIGHT_YELLOW',
    'YELLOW',
    'DARK_YELLOW',
    'LIGHT_GREEN',
    'GREEN',
    'DARK_GREEN',
    'LIGHT_BLUE',
    'BLUE',
    'DARK_BLUE',
    'LIGHT_PURPLE',
    'PURPLE',
    'DARK_PURPLE',
    'LIGHT_BROWN',
    'BROWN',
    'DARK_BROWN',
    'BLACK',
    'WHITE',
    'LIGHT_GREY',
    'GREY',
    'DARK_GREY',
    'LIGHT_CHARCOAL',
    'CHARCOAL',
    'DARK_CHARCOAL',
    'TANGO_PALETTE',
    'palette_color',
]
