"""
chromawheel Color Classes
=========================

Immutable RGBA and HSLA colors and the functions that build, recognize and
convert them.

Features
--------
- Immutable color instances (frozen after initialization, hashable)
- Hue stored in radians and wrapped into [0, 2π) by ``hsl``/``hsla``
- Structural records (dicts, plain objects) accepted wherever a color is
- Alpha carried unchanged through every conversion

Usage
-----
>>> from chromawheel.colors import rgb, hsl, to_hsl, to_rgb, complement
>>> from chromawheel.angle import degrees
>>>
>>> orange = rgb(255, 128, 0)
>>> to_hsl(orange).lightness
0.5
>>> to_rgb(hsl(degrees(120), 1, 0.5)).value
(0, 255, 0, 1.0)
>>> to_rgb(complement(orange)).value
(0, 127, 255, 1.0)

Notes
-----
- Values are not clamped; ``clamp_rgb`` is available when a consumer needs
  channels in 0-255
- ``complement`` always answers in HSLA; ``complement_preserving`` keeps
  RGBA input as RGBA
"""

from .color_base import ColorBase
from .rgb import RGBA
from .hsl import HSLA
from .construct import rgb, rgba, hsl, hsla, grayscale, wrap_hue
from .shape import as_color, color_kind, is_color
from .color import (
    Color,
    to_rgb,
    to_hsl,
    complement,
    complement_preserving,
    clamp_rgb,
    color_convert,
    unified_kind_to_class,
)

__all__ = [
    'ColorBase',
    'RGBA',
    'HSLA',
    'Color',
    'rgb',
    'rgba',
    'hsl',
    'hsla',
    'grayscale',
    'wrap_hue',
    'as_color',
    'color_kind',
    'is_color',
    'to_rgb',
    'to_hsl',
    'complement',
    'complement_preserving',
    'clamp_rgb',
    'color_convert',
]
