from typing import ClassVar, Tuple
from ..types.color_types import ColorKind, Scalar
from .color_base import ColorBase


class RGBA(ColorBase):
    """An RGB color with alpha. Channels are 0-255 and alpha 0-1 by convention."""
    __slots__ = ()

    mode:   ClassVar[ColorKind] = "rgba"
    fields: ClassVar[Tuple[str, str, str, str]] = ("red", "green", "blue", "alpha")

    def __init__(self, red: Scalar, green: Scalar, blue: Scalar, alpha: float) -> None:
        super().__init__(red, green, blue, alpha)

    @property
    def red(self) -> Scalar:
        return self._value[0]

    @property
    def green(self) -> Scalar:
        return self._value[1]

    @property
    def blue(self) -> Scalar:
        return self._value[2]
