import pytest

from mahigui.transform import Transform
from mahigui.vec2 import Rect, Vec2, magnitude


def assert_vec_close(a, b):
    assert a.x == pytest.approx(b.x, abs=1e-7)
    assert a.y == pytest.approx(b.y, abs=1e-7)


def assert_transform_close(a, b):
    assert a.matrix() == pytest.approx(b.matrix(), abs=1e-7)


def test_default_is_identity():
    assert Transform() == Transform.identity()
    p = Vec2(3.5, -1.25)
    assert Transform().transform_point(p) == p


def test_matrix_layout():
    m = Transform(1, 2, 3, 4, 5, 6, 7, 8, 9).matrix()
    assert len(m) == 16
    assert (m[0], m[4], m[12]) == (1, 2, 3)
    assert (m[1], m[5], m[13]) == (4, 5, 6)
    assert (m[3], m[7], m[15]) == (7, 8, 9)
    assert m[10] == 1


def test_translate_moves_point_by_offset():
    p = Vec2(1.0, 2.0)
    t = Transform().translate(4.0, -3.0)
    assert t.transform_point(p) == p + Vec2(4.0, -3.0)


def test_inverse_round_trip():
    t = Transform().translate(3, 4).rotate(30).scale(2, 0.5)
    p = Vec2(-1.5, 7.0)
    assert_vec_close(t.inverse().transform_point(t.transform_point(p)), p)
    assert_transform_close(t * t.inverse(), Transform())


def test_singular_inverse_is_identity():
    singular = Transform(0, 0, 0, 0, 0, 0, 0, 0, 0)
    assert singular.inverse() == Transform()


def test_combination_order():
    a = Transform().translate(5, 1)
    b = Transform().scale(2, 3)
    p = Vec2(1.0, -2.0)
    assert_vec_close((a * b).transform_point(p), a.transform_point(b.transform_point(p)))


def test_mul_with_vector():
    t = Transform().translate(2, 2).rotate(45)
    p = Vec2(1.0, 3.0)
    assert t * p == t.transform_point(p)


def test_imul_modifies_in_place():
    t = Transform()
    original = t
    t *= Transform().translate(1, 2)
    assert t is original
    assert t == Transform().translate(1, 2)


def test_combine_returns_self_and_copy_is_independent():
    t = Transform()
    assert t.combine(Transform().scale(2, 2)) is t
    c = t.copy()
    assert c == t
    c.translate(1, 1)
    assert c != t


def test_rotation_quarter_turn():
    p = Transform().rotate(90).transform_point(Vec2(1.0, 0.0))
    assert_vec_close(p, Vec2(0.0, 1.0))


def test_rotation_preserves_length_and_reverses():
    p = Vec2(3.0, -2.0)
    t = Transform().rotate(37)
    assert magnitude(t.transform_point(p)) == pytest.approx(magnitude(p))
    back = Transform().rotate(37).rotate(-37)
    assert_transform_close(back, Transform())


def test_rotation_about_center_keeps_center_fixed():
    center = Vec2(4.0, -1.0)
    t = Transform().rotate(73, center)
    assert_vec_close(t.transform_point(center), center)


def test_scale():
    t = Transform().scale(2.5, -4.0)
    assert t.transform_point(Vec2(1.0, 1.0)) == Vec2(2.5, -4.0)
    center = Vec2(3.0, 6.0)
    assert_vec_close(Transform().scale(2.0, 5.0, center).transform_point(center), center)


def test_transform_rect_translation():
    r = Rect(1.0, 2.0, 3.0, 4.0)
    moved = Transform().translate(10.0, 20.0).transform_rect(r)
    assert moved == Rect(11.0, 22.0, 3.0, 4.0)


def test_transform_rect_quarter_turn_swaps_size():
    r = Rect(0.0, 0.0, 3.0, 5.0)
    rotated = Transform().rotate(90).transform_rect(r)
    assert rotated.width == pytest.approx(r.height)
    assert rotated.height == pytest.approx(r.width)


def test_equality_ignores_z_components():
    a = Transform(1, 2, 3, 4, 5, 6, 7, 8, 9)
    b = Transform(1, 2, 3, 4, 5, 6, 7, 8, 9)
    assert a == b
    assert a != Transform(1, 2, 3, 4, 5, 6, 7, 8, 10)
    assert (a == "not a transform") is False
    with pytest.raises(TypeError):
        hash(a)