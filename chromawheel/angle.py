"""
Angle helpers.

Hues are stored in radians. These helpers let callers write hues in
whichever unit reads best:

>>> from chromawheel import hsl, degrees, turns
>>> green = hsl(degrees(120), 1, 0.5)
>>> also_green = hsl(turns(1 / 3), 1, 0.5)
"""
import math


def turns(n: float) -> float:
    """Convert full rotations to radians."""
    return 2 * math.pi * n


def degrees(n: float) -> float:
    """Convert degrees to radians."""
    return n * math.pi / 180


def to_degrees(radians: float) -> float:
    """Convert radians back to degrees, e.g. to display a stored hue."""
    return radians * 180 / math.pi
