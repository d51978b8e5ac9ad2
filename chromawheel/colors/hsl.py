from typing import ClassVar, Tuple
from ..types.color_types import ColorKind
from .color_base import ColorBase


class HSLA(ColorBase):
    """
    An HSL color with alpha.

    The hue is in radians. Build instances with ``hsl``/``hsla`` to get the
    hue wrapped into ``[0, 2π)``; the class itself stores what it is given.
    """
    __slots__ = ()

    mode:   ClassVar[ColorKind] = "hsla"
    fields: ClassVar[Tuple[str, str, str, str]] = ("hue", "saturation", "lightness", "alpha")

    def __init__(self, hue: float, saturation: float, lightness: float, alpha: float) -> None:
        super().__init__(hue, saturation, lightness, alpha)

    @property
    def hue(self) -> float:
        return self._value[0]

    @property
    def saturation(self) -> float:
        return self._value[1]

    @property
    def lightness(self) -> float:
        return self._value[2]
