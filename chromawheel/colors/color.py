from __future__ import annotations
from typing import Any, Union

from ..angle import degrees
from ..conversions import rgb_to_hsl, hsl_to_rgb, clamp_channel, clamp_alpha
from ..types.color_types import ColorSpace
from .color_base import ColorBase, build_registry
from .construct import hsla
from .hsl import HSLA
from .rgb import RGBA
from .shape import as_color

Color = Union[RGBA, HSLA]

unified_kind_to_class = build_registry(RGBA, HSLA)


def _rgba_to_hsla(color: RGBA) -> HSLA:
    hue, saturation, lightness = rgb_to_hsl(color.red, color.green, color.blue)
    return hsla(hue=hue, saturation=saturation, lightness=lightness, alpha=color.alpha)


def _hsla_to_rgba(color: HSLA) -> RGBA:
    red, green, blue = hsl_to_rgb(color.hue, color.saturation, color.lightness)
    return RGBA(red=red, green=green, blue=blue, alpha=color.alpha)


def to_hsl(color: Any) -> HSLA:
    """
    Convert given color into the HSL format.

    HSLA input is returned as is. Structural records are accepted, see
    ``as_color``.

    Raises:
        InvalidColorShape: If ``color`` is not color-shaped.
    """
    color = as_color(color, stacklevel=2)
    if isinstance(color, HSLA):
        return color
    return _rgba_to_hsla(color)


def to_rgb(color: Any) -> RGBA:
    """
    Convert given color into the RGB format.

    RGBA input is returned as is. Channels produced from HSL are rounded
    integers and are not clamped to 0-255; see ``clamp_rgb``.

    Raises:
        InvalidColorShape: If ``color`` is not color-shaped.
    """
    color = as_color(color, stacklevel=2)
    if isinstance(color, RGBA):
        return color
    return _hsla_to_rgba(color)


def complement(color: Any) -> HSLA:
    """
    Produce a "complementary color". The two colors will accent each other.
    This is the same as rotating the hue by 180°, so the result is always
    an HSLA color regardless of the input variant.
    """
    color = to_hsl(as_color(color, stacklevel=2))
    return hsla(color.hue + degrees(180), color.saturation, color.lightness, color.alpha)


def complement_preserving(color: Any) -> Color:
    """Like ``complement``, but RGBA input gives an RGBA result."""
    color = as_color(color, stacklevel=2)
    result = complement(color)
    if isinstance(color, RGBA):
        return _hsla_to_rgba(result)
    return result


def clamp_rgb(color: Any) -> RGBA:
    """Return the RGB form of ``color`` with channels clamped to 0-255 and alpha to 0-1."""
    color = to_rgb(as_color(color, stacklevel=2))
    return RGBA(
        clamp_channel(color.red),
        clamp_channel(color.green),
        clamp_channel(color.blue),
        clamp_alpha(color.alpha),
    )


def color_convert(color: Any, to_space: ColorSpace) -> Color:
    """
    Convert a color to the named space.

    Args:
        color: Any color-shaped value
        to_space: "rgb"/"rgba" or "hsl"/"hsla" (case-insensitive; the alpha
            channel is always carried)

    Returns:
        The converted color
    """
    space = to_space.lower()
    if not space.endswith("a"):
        space += "a"
    cls = unified_kind_to_class.get(space)  # type: ignore[arg-type]
    if cls is None:
        raise ValueError(f"Unsupported color space: {to_space!r}")
    color = as_color(color, stacklevel=2)
    if cls is RGBA:
        return to_rgb(color)
    return to_hsl(color)


ColorBase.to_rgb = to_rgb
ColorBase.to_hsl = to_hsl
ColorBase.complement = complement
ColorBase.convert = color_convert
