import pytest

from quadframe.color import (
    BLANK,
    MAGENTA,
    PINK,
    Color,
    color_u8,
    hsl_to_rgb,
    rgb_to_hsl,
)
from quadframe.vec import Vec4


def test_color_from_bytes_macro():
    assert Color(1.0, 0.0, 0.0, 1.0) == color_u8(255, 0, 0, 255)
    assert Color(1.0, 0.5, 0.0, 1.0) == color_u8(255, 127.5, 0, 255)
    assert Color(0.0, 1.0, 0.5, 1.0) == color_u8(0, 255, 127.5, 255)


def test_new_keeps_components():
    pink = Color(1.00, 0.43, 0.76, 1.00)
    assert (pink.r, pink.g, pink.b, pink.a) == (1.00, 0.43, 0.76, 1.00)
    assert pink == PINK


def test_from_hex_light_blue():
    light_blue = Color.from_hex(0x3CA7D5)
    assert light_blue.r == pytest.approx(0.23529412, abs=1e-7)
    assert light_blue.g == pytest.approx(0.654902, abs=1e-7)
    assert light_blue.b == pytest.approx(0.8352941, abs=1e-7)
    assert light_blue.a == 1.0


def test_from_hex_ignores_top_byte():
    assert Color.from_hex(0xFF3CA7D5) == Color.from_hex(0x3CA7D5)


def test_from_rgba_matches_macro():
    assert Color.from_rgba(255, 0, 255, 255) == color_u8(255, 0, 255, 255)
    assert Color.from_rgba(255, 0, 255, 255) == MAGENTA


def test_to_bytes_truncates():
    assert Color(1.0, 0.5, 0.0, 1.0).to_bytes() == (255, 127, 0, 255)


def test_to_bytes_saturates():
    assert Color(2.0, -1.0, 0.0, 1.0).to_bytes() == (255, 0, 0, 255)


@pytest.mark.parametrize("data", [(0, 0, 0, 0), (255, 0, 0, 255), (12, 34, 56, 78), (255, 255, 255, 255)])
def test_bytes_round_trip(data):
    assert Color.from_bytes(data).to_bytes() == data


def test_from_bytes_rejects_wrong_length():
    with pytest.raises(ValueError):
        Color.from_bytes((1, 2, 3))


def test_vec_round_trip():
    color = Color(0.1, 0.2, 0.3, 0.4)
    vec = color.to_vec()
    assert vec == Vec4(0.1, 0.2, 0.3, 0.4)
    assert Color.from_vec(vec) == color


def test_with_alpha():
    assert PINK.with_alpha(0.0) == Color(1.00, 0.43, 0.76, 0.0)
    assert PINK.a == 1.0


def test_default_is_blank():
    assert Color() == BLANK


def test_hsl_gray():
    assert hsl_to_rgb(0.3, 0.0, 0.25) == Color(0.25, 0.25, 0.25, 1.0)
    assert rgb_to_hsl(Color(0.25, 0.25, 0.25, 1.0)) == (0.0, 0.0, 0.25)


def test_hsl_primary_red():
    color = hsl_to_rgb(0.0, 1.0, 0.5)
    assert color.r == pytest.approx(1.0)
    assert color.g == pytest.approx(0.0)
    assert color.b == pytest.approx(0.0)


@pytest.mark.parametrize(
    "color",
    [
        Color(1.0, 0.0, 0.0, 1.0),
        Color(0.0, 1.0, 0.0, 1.0),
        Color(0.0, 0.0, 1.0, 1.0),
        Color(0.2, 0.6, 0.4, 1.0),
        Color(0.9, 0.1, 0.7, 1.0),
    ],
)
def test_hsl_round_trip(color):
    back = hsl_to_rgb(*rgb_to_hsl(color))
    assert back.r == pytest.approx(color.r, abs=1e-6)
    assert back.g == pytest.approx(color.g, abs=1e-6)
    assert back.b == pytest.approx(color.b, abs=1e-6)
    assert back.a == 1.0


def test_rgb_to_hsl_ranges():
    h, s, l = rgb_to_hsl(Color(0.9, 0.1, 0.7, 0.5))
    assert 0.0 <= h <= 1.0
    assert 0.0 <= s <= 1.0
    assert l == pytest.approx(0.5)