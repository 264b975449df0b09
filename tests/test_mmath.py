import math

import pytest

from raytrace.mmath import (
    Matrix3,
    Matrix4,
    Vec2,
    Vec3,
    Vec4,
    cross,
    cwise_product,
    norm,
    normalized,
    squared_norm,
)


_IDENTITY_ROWS = [
    (1.0, 0.0, 0.0, 0.0),
    (0.0, 1.0, 0.0, 0.0),
    (0.0, 0.0, 1.0, 0.0),
    (0.0, 0.0, 0.0, 1.0),
]


def test_add_then_subtract_round_trip():
    a = Vec3(1.5, -2.0, 3.25)
    b = Vec3(0.5, 4.0, -1.0)
    assert (a + b) - b == a


def test_vec2_and_vec4_arithmetic_round_trip():
    a2, b2 = Vec2(1.0, 2.0), Vec2(3.0, -4.0)
    assert (a2 - b2) + b2 == a2
    a4, b4 = Vec4(1.0, 2.0, 3.0, 4.0), Vec4(-1.0, 0.5, 2.0, 8.0)
    assert (a4 + b4) - b4 == a4


def test_scalar_multiplication_commutes_and_divides_back():
    v = Vec3(1.0, -2.0, 4.0)
    assert 2.0 * v == v * 2.0
    assert (v * 4.0) / 4.0 == v


def test_dot_product_of_orthogonal_vectors_is_zero():
    assert Vec3(1.0, 0.0, 0.0) * Vec3(0.0, 1.0, 0.0) == 0.0


def test_dot_with_self_equals_squared_norm():
    v = Vec4(1.0, 2.0, 3.0, 4.0)
    assert v * v == squared_norm(v)
    assert math.isclose(norm(v) ** 2, squared_norm(v))


def test_norm_of_three_four_triangle():
    assert norm(Vec2(3.0, 4.0)) == 5.0


def test_normalized_has_unit_length():
    v = normalized(Vec3(3.0, -7.0, 2.0))
    assert math.isclose(norm(v), 1.0)


def test_normalized_zero_vector_is_unchanged():
    assert normalized(Vec3()) == Vec3()


def test_cwise_product():
    a = Vec3(2.0, 3.0, 4.0)
    ones = Vec3(1.0, 1.0, 1.0)
    assert cwise_product(a, ones) == a


def test_cwise_product_mismatched_types():
    with pytest.raises(TypeError):
        cwise_product(Vec2(1.0, 2.0), Vec3(1.0, 2.0, 3.0))


def test_cross_of_axes():
    x, y, z = Vec3(1.0, 0.0, 0.0), Vec3(0.0, 1.0, 0.0), Vec3(0.0, 0.0, 1.0)
    assert cross(x, y) == z
    assert cross(y, z) == x
    assert cross(z, x) == y


def test_cross_is_orthogonal_to_inputs():
    a, b = Vec3(1.0, 2.0, 3.0), Vec3(-2.0, 0.5, 4.0)
    c = cross(a, b)
    assert math.isclose(c * a, 0.0, abs_tol=1e-12)
    assert math.isclose(c * b, 0.0, abs_tol=1e-12)


def test_indexing_and_swizzles():
    v = Vec4(1.0, 2.0, 3.0, 4.0)
    assert [v[i] for i in range(4)] == [1.0, 2.0, 3.0, 4.0]
    assert v.xyz() == Vec3(1.0, 2.0, 3.0)
    assert v.xy() == Vec2(1.0, 2.0)
    assert Vec3(5.0, 6.0, 7.0).xy() == Vec2(5.0, 6.0)


@pytest.mark.parametrize("index", [-1, 3, 10])
def test_index_out_of_range(index):
    with pytest.raises(IndexError):
        Vec3(1.0, 2.0, 3.0)[index]


def test_mixed_vector_addition_raises():
    with pytest.raises(TypeError):
        Vec2(1.0, 2.0) + Vec3(1.0, 2.0, 3.0)


def test_matrix3_identity_times_vector():
    v = Vec3(1.0, -2.0, 3.0)
    assert Matrix3.identity() * v == v


def test_matrix3_default_is_zero():
    assert Matrix3() * Vec3(1.0, 2.0, 3.0) == Vec3()


def test_matrix3_product_with_identity():
    m = Matrix3([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
    assert m * Matrix3.identity() == m
    assert Matrix3.identity() * m == m


def test_matrix3_rows_from_vectors():
    m = Matrix3([Vec3(1.0, 2.0, 3.0), Vec3(4.0, 5.0, 6.0), Vec3(7.0, 8.0, 9.0)])
    assert m[1] == (4.0, 5.0, 6.0)


def test_matrix_wrong_shape():
    with pytest.raises(ValueError):
        Matrix3([[1, 2], [3, 4]])
    with pytest.raises(ValueError):
        Matrix4([[1, 2, 3]] * 4)


def test_matrix4_transpose_twice():
    m = Matrix4([[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12], [13, 14, 15, 16]])
    assert m.transpose().transpose() == m
    assert m.transpose()[0] == (1.0, 5.0, 9.0, 13.0)


def test_matrix4_translation_on_point_and_vec3():
    tx, ty, tz = 2.0, -3.0, 5.0
    t = Matrix4([[1, 0, 0, tx], [0, 1, 0, ty], [0, 0, 1, tz], [0, 0, 0, 1]])
    assert t * Vec4(0.0, 0.0, 0.0, 1.0) == Vec4(tx, ty, tz, 1.0)
    v = Vec3(1.0, 2.0, 3.0)
    assert t * v == v


def test_matrix4_inverse_times_self_is_identity():
    m = Matrix4([[2, 0, 1, 3], [1, 3, 0, -1], [0, 1, 4, 2], [1, 0, 0, 1]])
    right = m * m.inverse()
    left = m.inverse() * m
    for i, expected in enumerate(_IDENTITY_ROWS):
        assert tuple(right[i]) == pytest.approx(expected, abs=1e-9)
        assert tuple(left[i]) == pytest.approx(expected, abs=1e-9)


def test_matrix4_singular_inverse_is_identity():
    singular = Matrix4([[1, 2, 3, 4]] * 4)
    assert singular.inverse() == Matrix4.identity()