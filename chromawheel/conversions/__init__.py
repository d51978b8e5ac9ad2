"""
chromawheel Color Space Conversions
===================================

Closed-form RGB ↔ HSL conversions, in scalar and vectorized (numpy) form.

Conversion Functions
-------------------

RGB → HSL:
    rgb_to_hsl(red, green, blue)
        Scalar conversion, channels 0-255, hue returned in radians
    np_rgb_to_hsl(red, green, blue)
        Vectorized conversion, returns an array of shape (..., 3)

HSL → RGB:
    hsl_to_rgb(hue, saturation, lightness)
        Scalar conversion, integer channels rounded half up
    np_hsl_to_rgb(hue, saturation, lightness)
        Vectorized conversion, returns an integer array of shape (..., 3)

Helpers
-------
    fmod(f, n)
        Floor-based modulo used for hue sectors
    round_half_up(value)
        Channel rounding used by HSL → RGB
    clamp_channel(value), clamp_alpha(value)
        Opt-in range clamping, never applied by the conversions

Examples
--------
>>> from chromawheel.conversions import rgb_to_hsl, hsl_to_rgb
>>> h, s, l = rgb_to_hsl(255, 128, 0)
>>> hsl_to_rgb(h, s, l)
(255, 128, 0)
>>>
>>> import numpy as np
>>> from chromawheel.conversions import np_rgb_to_hsl
>>> rgb_array = np.array([[255, 128, 0], [0, 255, 128]])
>>> hsl_array = np_rgb_to_hsl(rgb_array[..., 0], rgb_array[..., 1], rgb_array[..., 2])
"""

from .to_hsl import rgb_to_hsl, np_rgb_to_hsl
from .to_rgb import hsl_to_rgb, np_hsl_to_rgb
from .numbers import fmod, round_half_up, clamp_channel, clamp_alpha

__all__ = [
    # RGB → HSL
    'rgb_to_hsl',
    'np_rgb_to_hsl',

    # HSL → RGB
    'hsl_to_rgb',
    'np_hsl_to_rgb',

    # Helpers
    'fmod',
    'round_half_up',
    'clamp_channel',
    'clamp_alpha',
]
