import math


def hue_distance(a: float, b: float) -> float:
    """Shortest distance between two hues in radians."""
    d = abs(a - b) % (2 * math.pi)
    return min(d, 2 * math.pi - d)
