import math
from boundednumbers import clamp

from ..types.color_types import ALPHA_OPAQUE, RGB_MAX


def fmod(f: float, n: int) -> float:
    """Floor-based modulo, non-negative for a positive ``n`` even when ``f`` is negative."""
    integer = math.floor(f)
    return integer % n + (f - integer)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves going up (2.5 -> 3, -2.5 -> -2)."""
    return math.floor(value + 0.5)


def clamp_channel(value: float) -> int:
    """Clamp an RGB channel into ``[0, 255]``."""
    return int(clamp(value, 0, RGB_MAX))


def clamp_alpha(value: float) -> float:
    return float(clamp(value, 0.0, ALPHA_OPAQUE))
