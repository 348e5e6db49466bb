import math

import pytest

from dragonforge.matrix import ColumnProxy, Matrix
from dragonforge.vector import Vector, radians


def _sample() -> Matrix:
    return Matrix.from_columns(
        Vector(2.0, 0.0, 1.0, 0.0),
        Vector(1.0, 3.0, 0.0, 0.0),
        Vector(0.0, 1.0, 4.0, 0.0),
        Vector(1.0, 2.0, 3.0, 1.0),
    )


def test_default_is_identity():
    m = Matrix()
    assert m.data() == [
        1.0, 0.0, 0.0, 0.0,
        0.0, 1.0, 0.0, 0.0,
        0.0, 0.0, 1.0, 0.0,
        0.0, 0.0, 0.0, 1.0,
    ]
    assert m * m == m
    assert m.inversed() == m


def test_scalar_diagonal():
    m = Matrix(3, 3, 2.5)
    assert (m.columns, m.rows) == (3, 3)
    assert m[1][1] == 2.5
    assert m[0][1] == 0.0


def test_non_square_shape():
    m = Matrix(2, 3)
    assert (m.columns, m.rows) == (2, 3)
    assert len(m[1]) == 3
    assert m[1][1] == 1.0
    assert m[1][2] == 0.0


def test_invalid_size_raises():
    with pytest.raises(ValueError):
        Matrix(5, 4)
    with pytest.raises(ValueError):
        Matrix.from_columns(Vector(1, 2), Vector(1, 2, 3))


def test_from_columns_round_trip():
    m = _sample()
    assert m[3].to_vector() == Vector(1.0, 2.0, 3.0, 1.0)
    assert isinstance(m[0], ColumnProxy) and m[0].to_vector() == Vector(2.0, 0.0, 1.0, 0.0)


def test_data_is_column_major():
    assert _sample().data()[4:8] == [1.0, 3.0, 0.0, 0.0]


def test_column_proxy_writes_through():
    m = Matrix()
    m[0].y = 5.0
    m.up.assign(Vector(7.0, 8.0, 9.0, 0.0))
    m[2] = Vector(1.0, 1.0, 1.0, 1.0)
    assert m[0][1] == 5.0
    assert m[1].to_vector() == Vector(7.0, 8.0, 9.0, 0.0)
    assert list(m[2]) == [1.0, 1.0, 1.0, 1.0]
    with pytest.raises(ValueError):
        m[3].assign(Vector(1.0, 2.0, 3.0))


def test_axis_properties():
    m = _sample()
    assert m.right.to_vector() == m[0].to_vector()
    assert m.up.to_vector() == m[1].to_vector()
    assert m.backward.to_vector() == m[2].to_vector()
    assert m.position.to_vector() == m[3].to_vector()
    with pytest.raises(ValueError):
        Matrix(3, 3).position
    with pytest.raises(ValueError):
        Matrix(2, 2).right


def test_identity_is_neutral():
    s = _sample()
    assert s * Matrix() == s
    assert Matrix() * s == s


def test_multiplication_is_associative():
    a = _sample()
    b = Matrix().rotated(0.3, Vector(1.0, 2.0, 0.5))
    c = Matrix().translated(Vector(4.0, -1.0, 2.0))
    assert ((a * b) * c).data() == pytest.approx((a * (b * c)).data())


def test_inverse_round_trip():
    s = _sample()
    identity = Matrix().data()
    assert (s.inversed() * s).data() == pytest.approx(identity)
    assert (s / s).data() == pytest.approx(identity)
    assert s == _sample()
    t = _sample()
    t.inverse()
    assert (t * s).data() == pytest.approx(identity)


def test_singular_inverse_raises():
    with pytest.raises(ValueError):
        Matrix(4, 4, 0.0).inversed()
    with pytest.raises(ValueError):
        Matrix(2, 3).inverse()


def test_scalar_operations():
    s = _sample()
    assert (s + 1.5) - 1.5 == s
    assert s * 4 / 4 == s
    assert 2 * s == s + s
    assert s - s == Matrix(4, 4, 0.0)
    with pytest.raises(ZeroDivisionError):
        s / 0


def test_in_place_operations_mutate():
    m = _sample()
    alias = m
    m += Matrix()
    assert alias is m
    assert m == _sample() + Matrix()
    m *= Matrix()
    assert alias == _sample() + Matrix()


def test_shape_mismatch_raises():
    with pytest.raises(ValueError):
        Matrix(3, 3) + Matrix()
    with pytest.raises(ValueError):
        Matrix(3, 3) * Matrix()


def test_index_errors():
    with pytest.raises(IndexError):
        Matrix()[4]
    with pytest.raises(IndexError):
        Matrix()[0][4]


def test_translate():
    m = Matrix()
    m.translate(Vector(1.0, 2.0, 3.0))
    assert m.position.to_vector() == Vector(1.0, 2.0, 3.0, 1.0)
    assert m.right.to_vector() == Matrix().right.to_vector()


def test_translated_composes_and_does_not_mutate():
    base = Matrix()
    a = Vector(1.0, 2.0, 3.0)
    b = Vector(4.0, 5.0, 6.0)
    assert base.translated(a).translated(b) == base.translated(a + b)
    assert base == Matrix()


def test_translate_errors():
    with pytest.raises(ValueError):
        Matrix().translate(Vector(1.0, 2.0))
    with pytest.raises(ValueError):
        Matrix(3, 3).translate(Vector(1.0, 2.0, 3.0))


def test_rotation_round_trip():
    axis = Vector(0.0, 0.0, 1.0)
    r = Matrix().rotated(0.7, axis)
    assert r.rotated(-0.7, axis).data() == pytest.approx(Matrix().data())
    assert Matrix().rotated(2 * math.pi, axis).data() == pytest.approx(Matrix().data(), abs=1e-12)


def test_rotation_keeps_axis_and_unit_columns():
    r = Matrix().rotated(1.1, Vector(0.0, 0.0, 3.0))
    assert list(r.backward) == pytest.approx([0.0, 0.0, 1.0, 0.0])
    assert math.hypot(*r.right) == pytest.approx(1.0)
    assert math.hypot(*r.up) == pytest.approx(1.0)


def test_rotate_in_place_and_zero_axis():
    m = Matrix()
    m.rotate(0.5, Vector(1.0, 0.0, 0.0))
    assert m == Matrix().rotated(0.5, Vector(1.0, 0.0, 0.0))
    with pytest.raises(ValueError):
        m.rotate(0.5, Vector(0.0, 0.0, 0.0))


def test_perspective():
    p = Matrix.perspective(radians(90), 1.5, 0.1, 100.0)
    assert p[2][3] == -1.0
    assert p[3][3] == 0.0
    assert p[0][0] * 1.5 == pytest.approx(p[1][1])
    with pytest.raises(ValueError):
        Matrix.perspective(radians(90), 0.0, 0.1, 100.0)


def test_ortho():
    o = Matrix.ortho(-4.0, 4.0, -2.0, 2.0, 0.1, 100.0)
    assert o.position.x == 0.0
    assert o.position.y == 0.0
    assert o[3][3] == 1.0
    assert o[0][0] * 4.0 + o.position.x == pytest.approx(1.0)
    with pytest.raises(ValueError):
        Matrix.ortho(1.0, 1.0, 0.0, 1.0, 0.1, 10.0)