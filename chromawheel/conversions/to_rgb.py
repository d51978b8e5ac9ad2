import math

import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import RGB_MAX, HUE_SECTOR, FULL_TURN
from .numbers import fmod, round_half_up
from .to_hsl import np_fmod

LAST_SECTOR = math.nextafter(6.0, 0.0)


def hsl_to_rgb(hue: float, saturation: float, lightness: float) -> tuple[int, int, int]:
    """
    Convert HSL to RGB channels.

    The hue is expected in ``[0, 2π)``; anything outside maps to black before
    the lightness offset. Channels are rounded half up and not clamped, so
    out-of-range saturation or lightness can produce values outside 0-255.

    Args:
        hue: Hue in radians
        saturation: Saturation, 0-1 by convention
        lightness: Lightness, 0-1 by convention

    Returns:
        Tuple[int, int, int]: (red, green, blue)
    """
    chroma = (1 - abs(2 * lightness - 1)) * saturation
    h = hue / HUE_SECTOR
    # hues just below 2π can divide out to exactly 6
    if h >= 6 and hue < FULL_TURN:
        h = LAST_SECTOR
    x = chroma * (1 - abs(fmod(h, 2) - 1))

    if 0 <= h < 1:
        r, g, b = chroma, x, 0.0
    elif 1 <= h < 2:
        r, g, b = x, chroma, 0.0
    elif 2 <= h < 3:
        r, g, b = 0.0, chroma, x
    elif 3 <= h < 4:
        r, g, b = 0.0, x, chroma
    elif 4 <= h < 5:
        r, g, b = x, 0.0, chroma
    elif 5 <= h < 6:
        r, g, b = chroma, 0.0, x
    else:
        r, g, b = 0.0, 0.0, 0.0

    m = lightness - chroma / 2

    return (
        round_half_up(RGB_MAX * (r + m)),
        round_half_up(RGB_MAX * (g + m)),
        round_half_up(RGB_MAX * (b + m)),
    )


def np_hsl_to_rgb(hue: NDArray, saturation: NDArray, lightness: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to RGB channels.

    Args:
        hue: array-like or scalar, radians in [0, 2π)
        saturation: array-like or scalar, 0-1 by convention
        lightness: array-like or scalar, 0-1 by convention

    Returns:
        rgb: integer array of shape (..., 3): (red, green, blue)
    """
    hue = np.asarray(hue, dtype=float)
    s = np.asarray(saturation, dtype=float)
    l = np.asarray(lightness, dtype=float)

    out_shape = np.broadcast(hue, s, l).shape
    h = hue / HUE_SECTOR
    h = np.broadcast_to(np.where((h >= 6) & (hue < FULL_TURN), LAST_SECTOR, h), out_shape)
    s = np.broadcast_to(s, out_shape)
    l = np.broadcast_to(l, out_shape)

    chroma = (1 - np.abs(2 * l - 1)) * s
    x = chroma * (1 - np.abs(np_fmod(h, 2) - 1))
    zero = np.zeros(out_shape)

    sectors = [
        (h >= 0) & (h < 1),
        (h >= 1) & (h < 2),
        (h >= 2) & (h < 3),
        (h >= 3) & (h < 4),
        (h >= 4) & (h < 5),
        (h >= 5) & (h < 6),
    ]
    r = np.select(sectors, [chroma, x, zero, zero, x, chroma], default=0.0)
    g = np.select(sectors, [x, chroma, chroma, x, zero, zero], default=0.0)
    b = np.select(sectors, [zero, zero, x, chroma, chroma, x], default=0.0)

    m = l - chroma / 2
    rgb = np.stack([r + m, g + m, b + m], axis=-1)

    return np.floor(RGB_MAX * rgb + 0.5).astype(int)
