import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import RGB_MAX, HUE_SECTOR
from .numbers import fmod


def np_fmod(f: NDArray, n: int) -> NDArray:
    """Vectorized counterpart of ``fmod``."""
    integer = np.floor(f)
    return np.mod(integer, n) + (f - integer)


def _saturation(delta: float, lightness: float) -> float:
    if delta == 0 or lightness == 0:
        return 0.0
    denominator = 1 - abs(2 * lightness - 1)
    if denominator == 0:
        return 0.0
    return delta / denominator


def rgb_to_hsl(red: float, green: float, blue: float) -> tuple[float, float, float]:
    """
    Convert RGB channels (0-255) to HSL.

    Achromatic colors (all channels equal) get hue 0 and saturation 0
    instead of dividing by a zero chroma.

    Args:
        red: Red channel, 0-255 by convention
        green: Green channel, 0-255 by convention
        blue: Blue channel, 0-255 by convention

    Returns:
        Tuple[float, float, float]: (hue in radians [0, 2π), saturation, lightness)
    """
    r, g, b = red / RGB_MAX, green / RGB_MAX, blue / RGB_MAX
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    if delta == 0:
        h = 0.0
    elif max_c == r:
        h = fmod((g - b) / delta, 6)
    elif max_c == g:
        h = (b - r) / delta + 2
    else:
        h = (r - g) / delta + 4
    hue = HUE_SECTOR * h

    lightness = (max_c + min_c) / 2
    saturation = _saturation(delta, lightness)

    return hue, saturation, lightness


def np_rgb_to_hsl(red: NDArray, green: NDArray, blue: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB channels (0-255) to HSL.

    Args:
        red, green, blue: array-like or scalar, 0-255 by convention

    Returns:
        hsl: array of shape (..., 3): (hue in radians, saturation, lightness)
    """
    r = np.asarray(red, dtype=float) / RGB_MAX
    g = np.asarray(green, dtype=float) / RGB_MAX
    b = np.asarray(blue, dtype=float) / RGB_MAX

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2.0

    denominator = 1 - np.abs(2 * lightness - 1)
    saturation = np.zeros(out_shape)
    mask_s = (delta != 0) & (lightness != 0) & (denominator != 0)
    saturation[mask_s] = delta[mask_s] / denominator[mask_s]

    # Same precedence as the scalar branch chain: red, then green, then blue
    h = np.zeros(out_shape)
    chromatic = delta != 0
    mask_r = chromatic & (max_c == r)
    mask_g = chromatic & ~mask_r & (max_c == g)
    mask_b = chromatic & ~mask_r & ~mask_g

    h[mask_r] = np_fmod((g[mask_r] - b[mask_r]) / delta[mask_r], 6)
    h[mask_g] = (b[mask_g] - r[mask_g]) / delta[mask_g] + 2
    h[mask_b] = (r[mask_b] - g[mask_b]) / delta[mask_b] + 4

    return np.stack([h * HUE_SECTOR, saturation, lightness], axis=-1)
