import random

import pytest

from rescuekit.color import Color


def test_default_is_black():
    assert Color() == Color.BLACK
    assert Color().to_rgb() == 0


def test_components_round_trip():
    color = Color(12, 200, 255)
    assert (color.red, color.green, color.blue) == (12, 200, 255)


def test_hex_round_trip():
    color = Color(1, 2, 3)
    assert Color.from_hex(color.to_rgb()) == color


def test_from_hex_components():
    color = Color.from_hex(0xFF0000)
    assert (color.red, color.green, color.blue) == (255, 0, 0)


def test_white_html():
    assert Color.WHITE.to_html() == "#ffffff"


def test_html_pads_components():
    assert Color(1, 2, 3).to_html() == "#010203"


@pytest.mark.parametrize("args", [(-1, 0, 0), (0, 256, 0), (0, 0, 300)])
def test_out_of_range_components(args):
    with pytest.raises(ValueError):
        Color(*args)


@pytest.mark.parametrize("value", [-1, 0x1000000])
def test_from_hex_out_of_range(value):
    with pytest.raises(ValueError):
        Color.from_hex(value)


def test_from_hsv_pure_red():
    assert Color.from_hsv(0, 1, 1) == Color.RED


def test_from_hsv_unsaturated_is_gray():
    color = Color.from_hsv(0.3, 0, 0.5)
    assert color.red == color.green == color.blue


def test_from_hsv_zero_value_is_black():
    assert Color.from_hsv(0.7, 0.4, 0) == Color.BLACK


@pytest.mark.parametrize("args", [(-0.1, 0, 0), (0, 1.5, 0), (0, 0, 2)])
def test_from_hsv_out_of_range(args):
    with pytest.raises(ValueError):
        Color.from_hsv(*args)


def test_random_in_range():
    random.seed(7)
    for _ in range(20):
        color = Color.random()
        assert 0 <= color.to_rgb() <= 0xFFFFFF
        assert Color.from_hex(color.to_rgb()) == color


def test_str_of_named_colors():
    assert str(Color.BLACK) == "Color.BLACK"
    assert str(Color(255, 255, 0)) == "Color.YELLOW"


def test_str_of_unnamed_color_is_html():
    color = Color(1, 2, 3)
    assert str(color) == color.to_html()


def test_ordering_follows_packed_value():
    assert Color(0, 0, 1) < Color(0, 1, 0)
    assert sorted([Color.WHITE, Color.BLACK, Color.BLUE]) == [Color.BLACK, Color.BLUE, Color.WHITE]


def test_hash_matches_equality():
    assert len({Color(5, 5, 5), Color.from_hex(Color(5, 5, 5).to_rgb())}) == 1