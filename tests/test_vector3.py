import math

import pytest

from hexium.vector3 import Vector3


A = Vector3(1.5, -2.0, 4.0)
B = Vector3(-3.0, 0.5, 2.5)


def test_default_is_zero():
    assert tuple(Vector3()) == (0.0, 0.0, 0.0)


def test_iter_yields_components():
    assert list(Vector3(1.0, 2.0, 3.0)) == [1.0, 2.0, 3.0]


def test_add_then_subtract_round_trip():
    result = A.add(B).subtract(B)
    assert tuple(result) == pytest.approx(tuple(A))


def test_operators_match_methods():
    assert A + B == A.add(B)
    assert A - B == A.subtract(B)
    assert A * 2.0 == A.multiply(2.0)
    assert 2.0 * A == A.multiply(2.0)


def test_multiply_by_zero_gives_zero_vector():
    assert A.multiply(0.0) == Vector3(0.0, 0.0, 0.0)


def test_add_is_commutative():
    assert A.add(B) == B.add(A)


def test_dot_is_symmetric():
    assert A.dot(B) == pytest.approx(B.dot(A))


def test_length_squared_equals_self_dot():
    assert A.length_squared() == pytest.approx(A.dot(A))
    assert A.length() == pytest.approx(math.sqrt(A.dot(A)))


def test_cross_of_axes():
    assert Vector3(1, 0, 0).cross(Vector3(0, 1, 0)) == Vector3(0, 0, 1)
    assert Vector3(0, 1, 0).cross(Vector3(0, 0, 1)) == Vector3(1, 0, 0)


def test_cross_is_perpendicular_to_inputs():
    c = A.cross(B)
    assert c.dot(A) == pytest.approx(0.0, abs=1e-9)
    assert c.dot(B) == pytest.approx(0.0, abs=1e-9)


def test_cross_is_anticommutative():
    assert tuple(A.cross(B)) == pytest.approx(tuple(-B.cross(A)))


def test_normalize_gives_unit_length_same_direction():
    n = A.normalize()
    assert n.length() == pytest.approx(1.0)
    assert n.dot(A) == pytest.approx(A.length())


def test_normalize_zero_vector_raises():
    with pytest.raises(ZeroDivisionError):
        Vector3().normalize()


@pytest.mark.parametrize(
    "v",
    [
        Vector3(1.0, 2.0, 3.0),
        Vector3(5.0, 0.1, 2.0),
        Vector3(5.0, 4.0, 0.2),
        Vector3(0.0, 0.0, 1.0),
    ],
)
def test_perpendicular_is_orthogonal_and_nonzero(v):
    p = v.perpendicular()
    assert p.dot(v) == pytest.approx(0.0, abs=1e-12)
    assert p.length() > 0.0


def test_perpendicular_drops_smallest_component():
    p = Vector3(0.1, 2.0, 3.0).perpendicular()
    assert p.x == 0.0


def test_operator_with_wrong_type_raises():
    with pytest.raises(TypeError):
        A + 1.0
    assert A + Vector3() == A