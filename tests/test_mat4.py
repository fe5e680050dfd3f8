import pytest

from hexium.mat4 import Mat4
from hexium.vector3 import Vector3


ORIGIN = Vector3(0.0, 0.0, 0.0)


def _approx(v: Vector3):
    return pytest.approx(tuple(v), abs=1e-6)


def test_default_is_identity():
    data = Mat4().data
    assert [data[i] for i in (0, 5, 10, 15)] == [1.0, 1.0, 1.0, 1.0]
    assert sum(data) == 4.0


def test_identity_multiply_is_neutral():
    m = Mat4.rotate_x(30.0)
    assert Mat4.multiply(Mat4(), m).data == pytest.approx(m.data)
    assert Mat4.multiply(m, Mat4()).data == pytest.approx(m.data)


def test_translate_moves_point():
    t = Vector3(1.0, 2.0, 3.0)
    assert tuple(Mat4.translate(t).multiply_vec(ORIGIN)) == _approx(t)


def test_translate_ignores_direction_when_w_is_zero():
    d = Vector3(4.0, -1.0, 2.0)
    result = Mat4.translate(Vector3(1.0, 2.0, 3.0)).multiply_vec(d, 0.0)
    assert tuple(result) == _approx(d)


def test_translations_compose_by_adding():
    a, b = Vector3(1.0, 2.0, 3.0), Vector3(-4.0, 0.5, 2.0)
    m = Mat4.multiply(Mat4.translate(a), Mat4.translate(b))
    assert tuple(m.multiply_vec(ORIGIN)) == _approx(a + b)


def test_scale_scales_components():
    s = Vector3(2.0, 3.0, 4.0)
    assert tuple(Mat4.scale(s).multiply_vec(Vector3(1.0, 1.0, 1.0))) == _approx(s)


def test_rotate_z_quarter_turn():
    result = Mat4.rotate_z(90.0).multiply_vec(Vector3(1.0, 0.0, 0.0))
    assert tuple(result) == _approx(Vector3(0.0, 1.0, 0.0))


def test_rotate_x_quarter_turn():
    result = Mat4.rotate_x(90.0).multiply_vec(Vector3(0.0, 1.0, 0.0))
    assert tuple(result) == _approx(Vector3(0.0, 0.0, 1.0))


def test_rotate_y_quarter_turn():
    result = Mat4.rotate_y(90.0).multiply_vec(Vector3(0.0, 0.0, 1.0))
    assert tuple(result) == _approx(Vector3(1.0, 0.0, 0.0))


@pytest.mark.parametrize("rotate", [Mat4.rotate_x, Mat4.rotate_y, Mat4.rotate_z])
def test_rotation_preserves_length(rotate):
    v = Vector3(1.0, -2.0, 3.0)
    assert rotate(37.0).multiply_vec(v).length() == pytest.approx(v.length())


@pytest.mark.parametrize("rotate", [Mat4.rotate_x, Mat4.rotate_y, Mat4.rotate_z])
def test_rotation_inverse_round_trip(rotate):
    v = Vector3(1.0, -2.0, 3.0)
    back = Mat4.multiply(rotate(25.0), rotate(-25.0))
    assert tuple(back.multiply_vec(v)) == _approx(v)


def test_radians_of_half_turn_uses_engine_pi():
    assert Mat4.radians(180.0) == pytest.approx(3.14159265)


def test_perspective_fixed_entries():
    m = Mat4.perspective(45.0, 16.0 / 9.0, 0.1, 1700.0)
    assert m.data[11] == -1.0
    assert m.data[15] == 0.0


def test_perspective_maps_near_and_far_planes():
    near, far = 0.1, 1700.0
    m = Mat4.perspective(45.0, 1.0, near, far)
    assert m.multiply_vec(Vector3(0.0, 0.0, -near)).z == pytest.approx(-1.0)
    assert m.multiply_vec(Vector3(0.0, 0.0, -far)).z == pytest.approx(1.0)


def test_ortho_maps_box_corners():
    m = Mat4.ortho(-2.0, 6.0, -1.0, 3.0, 0.5, 10.0)
    low = m.multiply_vec(Vector3(-2.0, -1.0, -0.5))
    high = m.multiply_vec(Vector3(6.0, 3.0, -10.0))
    assert tuple(low) == _approx(Vector3(-1.0, -1.0, -1.0))
    assert tuple(high) == _approx(Vector3(1.0, 1.0, 1.0))


def test_look_at_puts_eye_at_origin_and_center_ahead():
    eye = Vector3(0.0, 0.0, 5.0)
    view = Mat4.look_at(eye, ORIGIN, Vector3(0.0, 1.0, 0.0))
    assert tuple(view.multiply_vec(eye)) == _approx(ORIGIN)
    assert tuple(view.multiply_vec(ORIGIN)) == _approx(Vector3(0.0, 0.0, -5.0))


def test_look_at_preserves_distance():
    eye = Vector3(3.0, 2.0, -4.0)
    center = Vector3(-1.0, 0.5, 2.0)
    view = Mat4.look_at(eye, center, Vector3(0.0, 1.0, 0.0))
    assert view.multiply_vec(center).length() == pytest.approx(
        center.subtract(eye).length()
    )


def test_look_at_with_same_eye_and_center_raises():
    with pytest.raises(ZeroDivisionError):
        Mat4.look_at(ORIGIN, ORIGIN, Vector3(0.0, 1.0, 0.0))