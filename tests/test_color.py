import pytest

from mahigui.color import (
    Color,
    Hsv,
    luminance,
    random_color,
    to_hsv,
    to_rgb,
    with_alpha,
)


def test_hex_six_digits():
    assert to_rgb("#FF0000") == Color(1.0, 0.0, 0.0, 1.0)
    assert to_rgb("00ff00") == Color(0.0, 1.0, 0.0, 1.0)


def test_hex_eight_digits_alpha():
    c = to_rgb("#0000FF80")
    assert c.b == 1.0
    assert c.a == pytest.approx(128 / 255)


def test_hex_bad_length_is_white():
    assert to_rgb("#123") == Color(1.0, 1.0, 1.0, 1.0)
    assert to_rgb("") == Color(1.0, 1.0, 1.0, 1.0)


def test_hex_bad_digits_raise():
    with pytest.raises(ValueError):
        to_rgb("#GGGGGG")


@pytest.mark.parametrize(
    "color",
    [Color(0.2, 0.4, 0.6), Color(1.0, 0.5, 0.0), Color(0.3, 0.3, 0.3), Color(0, 0, 0)],
)
def test_hsv_round_trip(color):
    back = to_rgb(to_hsv(color))
    assert back.r == pytest.approx(color.r)
    assert back.g == pytest.approx(color.g)
    assert back.b == pytest.approx(color.b)


def test_to_hsv_from_hex_matches_color():
    assert to_hsv("#336699") == to_hsv(to_rgb("#336699"))


def test_gray_has_no_saturation():
    hsv = to_hsv(Color(0.5, 0.5, 0.5))
    assert hsv.s == 0.0
    assert hsv.v == 0.5


def test_with_alpha():
    c = Color(0.1, 0.2, 0.3, 1.0)
    assert with_alpha(c, 0.25) == Color(0.1, 0.2, 0.3, 0.25)
    assert c.a == 1.0


def test_luminance_bounds():
    assert luminance(Color(1, 1, 1)) == pytest.approx(1.0)
    assert luminance(Color(0, 0, 0)) == 0.0
    assert luminance(Color(0, 1, 0)) > luminance(Color(1, 0, 0)) > luminance(Color(0, 0, 1))


def test_random_color_default_range():
    for _ in range(50):
        c = random_color()
        assert 0.0 <= c.r <= 1.0 and 0.0 <= c.g <= 1.0 and 0.0 <= c.b <= 1.0
        assert c.a == 1.0


def test_random_color_between():
    lo = Color(0.1, 0.2, 0.3, 0.4)
    hi = Color(0.2, 0.3, 0.4, 0.5)
    for _ in range(50):
        c = random_color(lo, hi)
        assert lo.r <= c.r <= hi.r
        assert lo.g <= c.g <= hi.g
        assert lo.b <= c.b <= hi.b
        assert lo.a <= c.a <= hi.a


def test_string_forms():
    assert str(Color(1, 0, 0.5, 1)) == "(R:1,G:0,B:0.5,A:1)"
    assert str(Hsv(0.5, 1, 0, 1)) == "(H:0.5,S:1,V:0,A:1)"