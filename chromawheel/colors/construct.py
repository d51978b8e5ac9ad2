from ..angle import turns
from ..types.color_types import ALPHA_OPAQUE, FULL_TURN, Scalar
from .rgb import RGBA
from .hsl import HSLA


def rgba(red: Scalar, green: Scalar, blue: Scalar, alpha: float) -> RGBA:
    """
    Create RGB colors with an alpha component for transparency.
    The alpha component is specified with numbers between 0 and 1.
    """
    return RGBA(red, green, blue, alpha)


def rgb(red: Scalar, green: Scalar, blue: Scalar) -> RGBA:
    """Create RGB colors from numbers between 0 and 255 inclusive."""
    return RGBA(red, green, blue, ALPHA_OPAQUE)


def wrap_hue(hue: float) -> float:
    """Wrap a hue in radians into ``[0, 2π)``."""
    # float floor division keeps NaN and infinite hues flowing as NaN
    wrapped = hue - turns(hue // FULL_TURN)
    # rounding can land a hair outside either edge
    if wrapped < 0 or wrapped >= FULL_TURN:
        return 0.0
    return wrapped


def hsla(hue: float, saturation: float, lightness: float, alpha: float) -> HSLA:
    """
    Create HSL colors with an alpha component for transparency.

    Any real hue is accepted and wrapped around the color wheel, so
    ``hsla(turns(1.25), ...)`` and ``hsla(turns(0.25), ...)`` store the same hue.
    """
    return HSLA(wrap_hue(hue), saturation, lightness, alpha)


def hsl(hue: float, saturation: float, lightness: float) -> HSLA:
    """
    Create HSL colors. This gives you access to colors more like a color
    wheel, where all hues are arranged in a circle that you specify with
    angles (radians).

    >>> red = hsl(degrees(0), 1, 0.5)
    >>> green = hsl(degrees(120), 1, 0.5)
    >>> blue = hsl(degrees(240), 1, 0.5)
    >>> pastel_red = hsl(degrees(0), 0.7, 0.7)

    To cycle through all colors, just cycle through degrees. The saturation
    level is how vibrant the color is, like a dial between grey and bright
    colors. The lightness level is a dial between white and black.
    """
    return hsla(hue, saturation, lightness, ALPHA_OPAQUE)


def grayscale(value: float) -> HSLA:
    """Produce a gray based on the input. 0 is white, 1 is black."""
    return HSLA(0.0, 0.0, 1 - value, ALPHA_OPAQUE)
