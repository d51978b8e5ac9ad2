"""
chromawheel - RGB and HSL colors
================================

A small color-model library: colors live in two interchangeable encodings,
RGBA and HSLA, with conversions between them, complementary colors and the
Tango palette as ready-made constants.

Key Features
------------
- Immutable RGBA/HSLA values, hashable and safe to share
- Hue in radians, wrapped into [0, 2π) at construction
- Any color-shaped record (dict, plain object) accepted by the conversions
- Vectorized numpy conversions for batches of colors
- Alpha carried unchanged through every conversion

Quick Start
-----------
>>> from chromawheel import hsl, degrees, to_rgb, complement, RED
>>>
>>> green = hsl(degrees(120), 1, 0.5)
>>> to_rgb(green).value
(0, 255, 0, 1.0)
>>> to_rgb(complement(RED))
RGBA(red=0, green=204, blue=204, alpha=1.0)

Modules
-------
- angle: turns/degrees helpers for hues
- colors: color classes, constructors, recognition and conversion
- conversions: scalar and vectorized RGB ↔ HSL formulas
- palette: Tango palette constants
"""

from .angle import turns, degrees, to_degrees
from .errors import InvalidColorShape
from .colors import (
    ColorBase,
    RGBA,
    HSLA,
    Color,
    rgb,
    rgba,
    hsl,
    hsla,
    grayscale,
    as_color,
    color_kind,
    is_color,
    to_rgb,
    to_hsl,
    complement,
    complement_preserving,
    clamp_rgb,
    color_convert,
)
from .conversions import rgb_to_hsl, hsl_to_rgb, np_rgb_to_hsl, np_hsl_to_rgb
from .palette import *  # noqa: F401,F403
from .palette import TANGO_PALETTE, palette_color
from . import palette as _palette

__version__ = "1.0.0"

__all__ = [
    # Angles
    "turns", "degrees", "to_degrees",

    # Color classes
    "ColorBase", "RGBA", "HSLA", "Color",

    # Construction
    "rgb", "rgba", "hsl", "hsla", "grayscale",

    # Recognition
    "as_color", "color_kind", "is_color", "InvalidColorShape",

    # Conversion
    "to_rgb", "to_hsl", "complement", "complement_preserving",
    "clamp_rgb", "color_convert",
    "rgb_to_hsl", "hsl_to_rgb", "np_rgb_to_hsl", "np_hsl_to_rgb",

    # Palette
    *_palette.__all__,

    # Version
    "__version__",
]
