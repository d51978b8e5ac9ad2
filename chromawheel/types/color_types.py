from __future__ import annotations
from typing import Literal, Tuple
import math

from ..angle import degrees

Scalar = int | float
ScalarVector = Tuple[Scalar, ...]
ColorSpace = Literal["rgb", "rgba", "hsl", "hsla"]
ColorKind = Literal["rgba", "hsla"]
HUE_SPACES = {"hsl", "hsla"}

RGB_MAX = 255
ALPHA_OPAQUE = 1.0
FULL_TURN = 2 * math.pi
HUE_SECTOR = degrees(60)

RGB_FIELDS = ("red", "green", "blue")
HSL_FIELDS = ("hue", "saturation", "lightness")
ALPHA_FIELD = "alpha"
TAG_FIELD = "type"

# Accepted values of a "type" tag on structural records, lowercased
RGBA_TAGS = {"rgb", "rgba", "color.rgba"}
HSLA_TAGS = {"hsl", "hsla", "color.hsla"}
