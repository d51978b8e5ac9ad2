"""
Recognition of color-shaped values.

Every public conversion accepts either a built color (``RGBA``/``HSLA``) or
an untyped structural record such as a dict decoded from JSON or any object
with the right attributes. ``as_color`` turns such a record into one of the
two variants, in this order:

1. ``RGBA``/``HSLA`` instances are returned unchanged.
2. A ``"type"`` tag (``"rgba"``, ``"Color.RGBA"``, ``"hsla"``, ``"Color.HSLA"``)
   selects the variant; the tagged variant's fields must all be present.
3. Numeric ``red``/``green``/``blue`` fields make an RGBA.
4. Numeric ``hue``/``saturation``/``lightness`` fields make an HSLA.

A missing alpha defaults to 1. Anything else raises ``InvalidColorShape``.

>>> as_color({"red": 10, "green": 20, "blue": 30})
RGBA(red=10, green=20, blue=30, alpha=1.0)
"""
from __future__ import annotations
import numbers
import warnings
from collections.abc import Mapping
from typing import Any, Optional, Tuple

from ..errors import InvalidColorShape
from ..types.color_types import (
    ALPHA_FIELD, ALPHA_OPAQUE, ColorKind, HSL_FIELDS, HSLA_TAGS, RGB_FIELDS, RGBA_TAGS, TAG_FIELD,
)
from .color_base import ColorBase
from .construct import hsla, rgba

_MISSING = object()


def _read(value: Any, name: str) -> Any:
    if isinstance(value, Mapping):
        return value.get(name, _MISSING)
    return getattr(value, name, _MISSING)


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _channels(value: Any, names: Tuple[str, ...]) -> Optional[list]:
    channels = [_read(value, name) for name in names]
    if all(_is_number(channel) for channel in channels):
        return channels
    return None


def _alpha(value: Any) -> float:
    alpha = _read(value, ALPHA_FIELD)
    if alpha is _MISSING or alpha is None:
        return ALPHA_OPAQUE
    if not _is_number(alpha):
        raise InvalidColorShape(value, f"alpha must be a number, got {alpha!r}")
    return alpha


def _tag(value: Any) -> Optional[ColorKind]:
    tag = _read(value, TAG_FIELD)
    if not isinstance(tag, str):
        return None
    tag = tag.lower()
    if tag in RGBA_TAGS:
        return "rgba"
    if tag in HSLA_TAGS:
        return "hsla"
    return None


def _from_tag(value: Any, kind: ColorKind) -> ColorBase:
    names = RGB_FIELDS if kind == "rgba" else HSL_FIELDS
    channels = _channels(value, names)
    if channels is None:
        raise InvalidColorShape(value, f"tagged as {kind} but missing numeric {', '.join(names)}")
    if kind == "rgba":
        return rgba(*channels, _alpha(value))
    return hsla(*channels, _alpha(value))


def as_color(value: Any, *, stacklevel: int = 1) -> ColorBase:
    """
    Interpret ``value`` as an RGBA or HSLA color.

    Args:
        value: A color instance, a mapping, or an object exposing the channel
            names as attributes.
            stacklevel: How many frames above the caller of ``as_color`` the
                ambiguous-record warning points at; public wrappers pass 2.

    Returns:
        The color itself, or a new ``RGBA``/``HSLA`` built from the record.

    Raises:
        InvalidColorShape: If the value matches neither shape.
    """
    if isinstance(value, ColorBase):
        return value
    if value is None:
        raise InvalidColorShape(value, "got None")

    kind = _tag(value)
    if kind is not None:
        return _from_tag(value, kind)

    rgb_channels = _channels(value, RGB_FIELDS)
    hsl_channels = _channels(value, HSL_FIELDS)

    if rgb_channels is not None:
        if hsl_channels is not None:
            warnings.warn(
                f"Color record {value!r} has both RGB and HSL channels; reading it as RGBA",
                stacklevel=stacklevel + 1,
            )
        return rgba(*rgb_channels, _alpha(value))

    if hsl_channels is not None:
        return hsla(*hsl_channels, _alpha(value))

    raise InvalidColorShape(value)


def color_kind(value: Any) -> Optional[ColorKind]:
    """Return ``"rgba"`` or ``"hsla"`` for color-shaped values, ``None`` otherwise."""
    try:
        return as_color(value).mode
    except InvalidColorShape:
        return None


def is_color(value: Any) -> bool:
    return color_kind(value) is not None
