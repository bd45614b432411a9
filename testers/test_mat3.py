# -*- coding: utf-8 -*-
from fractions import Fraction

import numpy as np
import pytest

from game_engine_math import Mat3, SingularMatrixError, Vec3

A = Mat3.SAMPLE_A
B = Mat3.SAMPLE_B


def test_constructor_columns():
    m = Mat3(Vec3(1, 2, 3), Vec3(4, 5, 6), Vec3(7, 8, 9))
    assert m.a == Vec3(1, 2, 3)
    assert m.b == Vec3(4, 5, 6)
    assert m.c == Vec3(7, 8, 9)
    assert m.x == Vec3(1, 4, 7)
    assert m.row("z") == Vec3(3, 6, 9)
    assert m[2, 0] == 3
    assert m.element(0, 2) == 7


def test_from_dict_with_nested_maps():
    m = Mat3.from_dict({
        "a": {"x": 1, "y": 2, "z": 3},
        "b": Vec3(4, 5, 6),
        "c": {"x": 7, "y": 8, "z": 9},
    })
    assert m == Mat3(Vec3(1, 2, 3), Vec3(4, 5, 6), Vec3(7, 8, 9))
    assert Mat3.from_dict(m.to_dict()) == m


def test_from_np_roundtrip():
    assert Mat3.from_np(A.to_np()) == A
    with pytest.raises(ValueError):
        Mat3.from_np(np.zeros((2, 3)))


def test_row_cross_products():
    assert A.yz == A.y.cross(A.z)
    assert A.zx == A.z.cross(A.x)
    assert A.xy == A.x.cross(A.y)


def test_unknown_row():
    with pytest.raises(ValueError):
        A.row("w")


def test_constants():
    assert Mat3.ZERO.is_zero()
    assert Mat3() == Mat3.ZERO
    assert Mat3.IDENTITY == Mat3.diagonal(1)
    assert Mat3.IDENTITY.is_diagonal()
    assert Mat3.fill(2) == Mat3(Vec3(2, 2, 2), Vec3(2, 2, 2), Vec3(2, 2, 2))


# ----------------------------------------------------------------------
# арифметика
# ----------------------------------------------------------------------
def test_add_and_subtract():
    assert A + Mat3.IDENTITY - Mat3.IDENTITY == A
    assert (A + A) == A * 2
    assert (A - A).is_zero()


@pytest.mark.parametrize("operand", [1, "abc", Vec3(1, 2, 3)])
def test_add_unsupported_operand(operand):
    with pytest.raises(TypeError):
        A + operand


def test_vector_multiplication():
    assert A * Vec3(10, 11, 12) == Vec3(138, 99, 204)
    assert A @ Vec3(10, 11, 12) == Vec3(138, 99, 204)


def test_matrix_multiplication():
    expected = Mat3.from_dict({
        "a": {"x": 30, "y": 18, "z": 42},
        "b": {"x": 18, "y": 18, "z": 30},
        "c": {"x": 27, "y": 21, "z": 39},
    })
    assert A * B == expected
    assert A @ B == expected


def test_scalar_multiplication():
    assert A * 3 == 3 * A
    assert (A * 3).a == A.a * 3


def test_multiply_unsupported_operand():
    with pytest.raises(TypeError):
        A * "abc"
    with pytest.raises(TypeError):
        A @ 2


def test_identity_is_neutral():
    assert A * Mat3.IDENTITY == A
    assert Mat3.IDENTITY * A == A


# ----------------------------------------------------------------------
# определитель и обращение
# ----------------------------------------------------------------------
def test_determinant():
    assert A.determinant() == -36
    assert Mat3.IDENTITY.determinant() == 1


def test_determinant_product_rule():
    assert (A * B).determinant() == A.determinant() * B.determinant()


def test_determinant_transpose_symmetry():
    assert A.transpose().determinant() == A.determinant()


def test_determinant_scalar_factorization():
    assert (A * 7).determinant() == 7 ** 3 * A.determinant()
    assert (B * 2.0).determinant() == 2 ** 3 * B.determinant()


def test_inverse():
    expected = Mat3.from_dict({
        "a": {"x": Fraction(-11, 12), "y": Fraction(1, 3), "z": Fraction(1, 12)},
        "b": {"x": Fraction(-1, 6), "y": Fraction(1, 3), "z": Fraction(-1, 6)},
        "c": {"x": Fraction(3, 4), "y": Fraction(-1, 3), "z": Fraction(1, 12)},
    })
    assert A.is_invertible()
    assert A.inverse() == expected
    assert A * A.inverse() == Mat3.IDENTITY
    assert A.inverse() * A == Mat3.IDENTITY


def test_determinant_of_inverse():
    assert A.inverse().determinant() == 1 / A.determinant()


def test_singular_matrix():
    m = Mat3.fill(1)
    assert not m.is_invertible()
    with pytest.raises(SingularMatrixError):
        m.inverse()
    with pytest.raises(ZeroDivisionError):
        Mat3.ZERO.inverse()


def test_transpose_and_trace():
    t = A.transpose()
    assert t.a == A.x
    assert t.transpose() == A
    assert A.trace() == 1 + 5 + 9


# ----------------------------------------------------------------------
# структурные предикаты
# ----------------------------------------------------------------------
def test_diagonal_predicate():
    assert Mat3.diagonal(1, 2, 3).is_diagonal()
    assert not A.is_diagonal()
    # единственный ненулевой элемент вне диагонали – c.y
    assert not Mat3(Vec3(1, 0, 0), Vec3(0, 1, 0), Vec3(0, 5, 1)).is_diagonal()


def test_symmetric_predicates():
    assert Mat3.SAMPLE_C.is_symmetric()
    assert not Mat3.SAMPLE_C.is_skew_symmetric()
    assert Mat3.SAMPLE_D.is_skew_symmetric()
    assert not Mat3.SAMPLE_D.is_symmetric()
    assert Mat3.SAMPLE_C.transpose() == Mat3.SAMPLE_C


# ----------------------------------------------------------------------
# экспорт / вывод
# ----------------------------------------------------------------------
def test_structural_export():
    assert A.to_list() == [[1, 2, 3], [4, 5, 6], [7, 2, 9]]
    assert A.to_dict()["c"] == {"x": 7, "y": 2, "z": 9}
    assert np.allclose(A.to_np() @ np.array([10, 11, 12]), [138, 99, 204])


def test_text_table():
    lines = str(A).splitlines()
    assert lines[0].split() == ["a", "b", "c"]
    assert lines[1] == "x   1.00   4.00   7.00"
    assert lines[3] == "z   3.00   6.00   9.00"
