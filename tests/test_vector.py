import math

import pytest

from pongphysics.vector import Vector3, rotate_vector


def approx_vec(v):
    return pytest.approx(tuple(v))


def test_default_is_zero():
    v = Vector3()
    assert tuple(v) == (0.0, 0.0, 0.0)
    assert v.is_zero()


def test_add_then_subtract_round_trip():
    v1 = Vector3(1.0, 2.0, 3.0)
    v2 = Vector3(4.0, 5.0, 6.0)
    assert tuple((v1 + v2) - v2) == approx_vec(v1)


def test_negation_and_difference():
    v1 = Vector3(1.0, 2.0, 3.0)
    v2 = Vector3(4.0, 5.0, 6.0)
    assert tuple(-(v2 - v1)) == approx_vec(v1 - v2)


def test_scalar_multiplication_commutes():
    v = Vector3(1.5, -2.0, 0.25)
    assert v * 2.0 == 2.0 * v
    assert tuple((v * 2.0) / 2.0) == approx_vec(v)


def test_equality_and_inequality():
    v3 = Vector3(-3.0, -3.0, -3.0)
    v4 = v3 * 4.0
    assert not (v3 == v4)
    assert v3 != v4
    assert v3 == Vector3(-3.0, -3.0, -3.0)


def test_length_squared_matches_dot_self():
    v = Vector3(1.0, 2.0, 3.0)
    assert v.length_squared() == pytest.approx(v.dot(v))
    assert v.length() == pytest.approx(math.sqrt(v.dot(v)))


def test_length_of_three_four_five():
    assert Vector3(3.0, 4.0, 0.0).length() == pytest.approx(5.0)


def test_distance_is_symmetric():
    v1 = Vector3(1.0, 2.0, 3.0)
    v2 = Vector3(4.0, 5.0, 6.0)
    assert v1.distance(v2) == pytest.approx(v2.distance(v1))
    assert v1.distance_squared(v2) == pytest.approx((v2 - v1).length_squared())
    assert v1.distance(v2) ** 2 == pytest.approx(v1.distance_squared(v2))


def test_cross_is_perpendicular_to_operands():
    v1 = Vector3(1.0, 2.0, 3.0)
    v2 = Vector3(4.0, 5.0, 6.0)
    c = v1.cross(v2)
    assert c.dot(v1) == pytest.approx(0.0)
    assert c.dot(v2) == pytest.approx(0.0)
    assert tuple(v2.cross(v1)) == approx_vec(-c)


def test_cross_of_axes():
    assert tuple(Vector3(1, 0, 0).cross(Vector3(0, 1, 0))) == approx_vec(Vector3(0, 0, 1))


def test_normalized_has_unit_length_and_leaves_original():
    v = Vector3(1.0, 2.0, 3.0)
    n = v.normalized()
    assert n.length() == pytest.approx(1.0)
    assert tuple(v) == (1.0, 2.0, 3.0)
    assert n.cross(v).length() == pytest.approx(0.0, abs=1e-9)


def test_normalized_zero_raises():
    with pytest.raises(ZeroDivisionError):
        Vector3().normalized()


def test_is_zero_false_for_nonzero():
    assert not Vector3(0.0, 0.5, 0.0).is_zero()


def test_rotate_full_turn_returns_to_start():
    v = Vector3(2.0, -1.0, 0.0)
    assert tuple(rotate_vector(v, 2 * math.pi)) == pytest.approx(tuple(v), abs=1e-9)


def test_rotate_half_turn_negates():
    v = Vector3(2.0, -1.0, 0.0)
    assert tuple(rotate_vector(v, math.pi)) == pytest.approx(tuple(-v), abs=1e-9)


def test_rotate_preserves_length_and_drops_z():
    v = Vector3(3.0, 4.0, 7.0)
    r = rotate_vector(v, 0.7)
    assert r.z == 0.0
    assert r.length() == pytest.approx(Vector3(3.0, 4.0, 0.0).length())


def test_copy_is_independent():
    v = Vector3(1.0, 1.0, 1.0)
    c = v.copy()
    c.x = 9.0
    assert v.x == 1.0