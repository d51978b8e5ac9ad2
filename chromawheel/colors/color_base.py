from __future__ import annotations
from typing import Any, Callable, ClassVar, Iterator, Tuple, TypeVar

from ..types.color_types import ColorKind, ColorSpace, ScalarVector, HUE_SPACES

C = TypeVar("C", bound="ColorBase")


class ColorBase:
    __slots__ = ('_value', '_is_frozen')  # prevents adding new attributes → immutability

    mode:   ClassVar[ColorKind]
    fields: ClassVar[Tuple[str, str, str, str]]

    # Bound in colors/color.py
    to_rgb: Callable[[ColorBase], ColorBase]
    to_hsl: Callable[[ColorBase], ColorBase]
    complement: Callable[[ColorBase], ColorBase]
    convert: Callable[[ColorBase, ColorSpace], ColorBase]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __delattr__(self, name):
        raise AttributeError(f"{self.__class__.__name__} is immutable; cannot delete {name}")

    def __init__(self, *value: Any) -> None:
        if len(value) != len(self.fields):
            raise ValueError(
                f"{self.mode} expects {len(self.fields)} channels {self.fields!r}, got {len(value)}"
            )
        self._value = tuple(value)

        # freeze instance, no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> ScalarVector:
        return self._value

    @property
    def alpha(self) -> float:
        return self._value[-1]

    @property
    def has_hue(self) -> bool:
        """Check if this color space includes a hue channel."""
        return self.mode in HUE_SPACES

    def as_dict(self) -> dict[str, Any]:
        return dict(zip(self.fields, self._value))

    def with_alpha(self: C, alpha: float) -> C:
        """
        Return a new instance with the alpha channel replaced.

        Args:
            alpha: New alpha value, 0-1 by convention. Not clamped.

        Returns:
            New color instance of the same variant.
        """
        return self.__class__(*self._value[:-1], alpha)

    # ------------------ VALUE SEMANTICS ------------------
    def __iter__(self) -> Iterator[Any]:
        return iter(self._value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        return self.mode == other.mode and self._value == other._value

    def __hash__(self) -> int:
        return hash((self.mode, self._value))

    def __repr__(self) -> str:
        channels = ", ".join(f"{name}={val!r}" for name, val in zip(self.fields, self._value))
        return f"{self.__class__.__name__}({channels})"

    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return (self.__class__, self._value)


def build_registry(*classes: type[ColorBase]) -> dict[ColorKind, type[ColorBase]]:
    return {cls.mode: cls for cls in classes}
