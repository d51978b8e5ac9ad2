import math
import warnings
from types import SimpleNamespace

import pytest

from chromawheel import (
    RGBA, HSLA, InvalidColorShape, as_color, color_kind, is_color,
    rgb, hsl, rgba, to_rgb, to_hsl, complement, turns,
)


def test_plain_rgb_record_defaults_alpha():
    color = to_hsl({"red": 10, "green": 20, "blue": 30})
    assert isinstance(color, HSLA)
    assert color.alpha == 1.0
    assert color == to_hsl(rgb(10, 20, 30))


def test_records_with_alpha():
    assert as_color({"red": 1, "green": 2, "blue": 3, "alpha": 0.5}) == rgba(1, 2, 3, 0.5)
    assert as_color({"hue": 1.0, "saturation": 0.5, "lightness": 0.5, "alpha": 0.2}).alpha == 0.2
    assert as_color({"red": 1, "green": 2, "blue": 3, "alpha": None}).alpha == 1.0


def test_hsl_record_hue_is_wrapped():
    color = as_color({"hue": turns(2.5), "saturation": 1, "lightness": 0.5})
    assert isinstance(color, HSLA)
    assert color.hue == pytest.approx(math.pi)


def test_attribute_records_are_accepted():
    record = SimpleNamespace(red=255, green=0, blue=0)
    assert to_rgb(record) == rgb(255, 0, 0)

    record = SimpleNamespace(hue=0.0, saturation=1.0, lightness=0.5, alpha=0.5)
    assert to_rgb(record) == rgba(255, 0, 0, 0.5)


def test_colors_pass_through():
    color = hsl(1, 1, 0.5)
    assert as_color(color) is color


@pytest.mark.parametrize("record", [
    {"green": 20, "blue": 30},
    {"red": 10, "blue": 30},
    {"red": 10, "green": 20},
    {"saturation": 1, "lightness": 0.5},
    {"hue": 1, "lightness": 0.5},
    {"hue": 1, "saturation": 1},
    {"red": 10, "green": 20, "blue": "30"},
    {"red": True, "green": 20, "blue": 30},
    {"hue": None, "saturation": 1, "lightness": 0.5},
    {},
])
def test_incomplete_records_are_rejected(record):
    for fn in (to_rgb, to_hsl, complement, as_color):
        with pytest.raises(InvalidColorShape):
            fn(record)


@pytest.mark.parametrize("value", [None, 42, "red", (255, 0, 0), [255, 0, 0], object()])
def test_non_records_are_rejected(value):
    with pytest.raises(InvalidColorShape):
        to_rgb(value)


def test_invalid_shape_is_a_type_error():
    with pytest.raises(TypeError) as info:
        to_hsl({"red": 1})
    assert info.value.value == {"red": 1}
    assert "Unsupported color structure" in str(info.value)


def test_non_numeric_alpha_is_rejected():
    with pytest.raises(InvalidColorShape):
        as_color({"red": 1, "green": 2, "blue": 3, "alpha": "opaque"})


def test_type_tag_selects_variant():
    color = as_color({"type": "Color.RGBA", "red": 1, "green": 2, "blue": 3, "alpha": 0.5})
    assert color == rgba(1, 2, 3, 0.5)

    color = as_color({"type": "hsla", "hue": 1.0, "saturation": 0.1, "lightness": 0.2})
    assert isinstance(color, HSLA)

    # the tag wins over the other variant's channels
    color = as_color({
        "type": "Color.HSLA",
        "red": 1, "green": 2, "blue": 3,
        "hue": 1.0, "saturation": 0.1, "lightness": 0.2,
    })
    assert isinstance(color, HSLA)


def test_tag_requires_its_own_fields():
    with pytest.raises(InvalidColorShape):
        as_color({"type": "Color.HSLA", "red": 1, "green": 2, "blue": 3})


def test_unknown_tag_falls_back_to_structure():
    assert as_color({"type": "swatch", "red": 1, "green": 2, "blue": 3}) == rgb(1, 2, 3)


def test_ambiguous_record_warns_and_reads_rgb():
    record = {"red": 1, "green": 2, "blue": 3, "hue": 1.0, "saturation": 0.1, "lightness": 0.2}
    with pytest.warns(UserWarning, match="both RGB and HSL"):
        color = as_color(record)
    assert isinstance(color, RGBA)


def test_unambiguous_record_does_not_warn():
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        as_color({"red": 1, "green": 2, "blue": 3})


def test_color_kind_and_is_color():
    assert color_kind(rgb(1, 2, 3)) == "rgba"
    assert color_kind(hsl(1, 2, 3)) == "hsla"
    assert color_kind({"red": 1, "green": 2, "blue": 3}) == "rgba"
    assert color_kind({"hue": 1, "saturation": 2, "lightness": 3}) == "hsla"
    assert color_kind({"red": 1}) is None
    assert is_color(rgb(0, 0, 0))
    assert not is_color(None)
    assert not is_color("#ff0000")


def test_ambiguous_record_warning_points_at_caller():
    record = {"red": 1, "green": 2, "blue": 3, "hue": 1.0, "saturation": 0.1, "lightness": 0.2}
    for fn in (as_color, to_rgb, to_hsl, complement):
        with pytest.warns(UserWarning) as caught:
            fn(record)
        assert caught[0].filename == __file__


def test_non_finite_hue_records_construct():
    color = as_color({"hue": float("inf"), "saturation": 1, "lightness": 0.5})
    assert isinstance(color, HSLA)
    assert math.isnan(color.hue)
