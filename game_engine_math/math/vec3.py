# game_engine_math/math/vec3.py
"""
Трёхмерный вектор с точной рациональной арифметикой (Fraction).
Значение неизменяемое: все операторы возвращают новый объект.
"""

import math
from collections.abc import Mapping
from fractions import Fraction
from typing import Iterable, Tuple

import numpy as np

from game_engine_math.math.errors import InvalidAxisError
from game_engine_math.math.rational import (
    is_scalar, rational_sqrt, rational_trig, to_rational,
)
from game_engine_math.utils.formatting import format_table


class Vec3:
    __slots__ = ("_x", "_y", "_z")

    def __init__(self, x=0, y=0, z=0):
        self._x = to_rational(x)
        self._y = to_rational(y)
        self._z = to_rational(z)

    # -------------------------------------------------
    # фабрики
    # -------------------------------------------------
    @classmethod
    def from_dict(cls, data: Mapping) -> "Vec3":
        return cls(data.get("x", 0), data.get("y", 0), data.get("z", 0))

    @classmethod
    def from_sequence(cls, values: Iterable) -> "Vec3":
        """Список / кортеж / ndarray ровно из трёх компонент."""
        items = list(values.ravel()) if isinstance(values, np.ndarray) else list(values)
        if len(items) != 3:
            raise ValueError(f"Vec3 needs exactly 3 components, got {len(items)}")
        return cls(*items)

    # -------------------------------------------------
    # свойства (только чтение)
    # -------------------------------------------------
    @property
    def x(self) -> Fraction:
        return self._x

    @property
    def y(self) -> Fraction:
        return self._y

    @property
    def z(self) -> Fraction:
        return self._z

    # -------------------------------------------------
    # арифметика (не меняет исходный объект)
    # -------------------------------------------------
    def _componentwise(self, other, op):
        if isinstance(other, Vec3):
            return Vec3(op(self._x, other._x), op(self._y, other._y), op(self._z, other._z))
        if is_scalar(other):
            s = to_rational(other)
            return Vec3(op(self._x, s), op(self._y, s), op(self._z, s))
        return NotImplemented

    def __add__(self, other):
        return self._componentwise(other, lambda a, b: a + b)

    def __sub__(self, other):
        return self._componentwise(other, lambda a, b: a - b)

    def __mul__(self, other):
        return self._componentwise(other, lambda a, b: a * b)

    def __truediv__(self, other):
        return self._componentwise(other, lambda a, b: a / b)

    def __radd__(self, other):
        # скаляр слева: s + v == v + s
        if is_scalar(other):
            return self + other
        return NotImplemented

    def __rmul__(self, other):
        if is_scalar(other):
            return self * other
        return NotImplemented

    def __neg__(self):
        return Vec3(-self._x, -self._y, -self._z)

    # -------------------------------------------------
    # сравнение
    # -------------------------------------------------
    def __eq__(self, other):
        if not isinstance(other, Vec3):
            return NotImplemented
        return self._x == other._x and self._y == other._y and self._z == other._z

    def __hash__(self):
        return hash((Vec3, self._x, self._y, self._z))

    # -------------------------------------------------
    # вспомогательные методы
    # -------------------------------------------------
    def dot(self, other: "Vec3") -> Fraction:
        """Скалярное произведение."""
        return self._x * other._x + self._y * other._y + self._z * other._z

    def square(self) -> Fraction:
        return self.dot(self)

    def magnitude(self) -> Fraction:
        """Длина вектора (см. rational_sqrt)."""
        return rational_sqrt(self.square())

    def normalize(self) -> "Vec3":
        n = self.magnitude()
        if n == 0:
            raise ZeroDivisionError("Cannot normalize a zero vector")
        return self / n

    def cross(self, other: "Vec3") -> "Vec3":
        """Векторное произведение (правая тройка)."""
        return Vec3(self._y * other._z - self._z * other._y,
                    self._z * other._x - self._x * other._z,
                    self._x * other._y - self._y * other._x)

    def project(self, other: "Vec3") -> "Vec3":
        """Проекция на other: other * (self·other / other·other)."""
        denom = other.square()
        if denom == 0:
            raise ZeroDivisionError("Cannot project onto a zero vector")
        return other * (self.dot(other) / denom)

    def reject(self, other: "Vec3") -> "Vec3":
        """Составляющая, ортогональная other."""
        return self - self.project(other)

    def reflect(self, other: "Vec3") -> "Vec3":
        """Отражение относительно плоскости, ортогональной other."""
        return self.reject(other) - self.project(other)

    def involute(self, other: "Vec3") -> "Vec3":
        """Отражение относительно прямой вдоль other."""
        return self.project(other) - self.reject(other)

    def scale(self, sx, sy=None, sz=None) -> "Vec3":
        """Эквивалент Mat3.diagonal(sx, sy, sz) * self."""
        sy = sx if sy is None else sy
        sz = sx if sz is None else sz
        return self * Vec3(sx, sy, sz)

    def skew(self, angle, a: "Vec3", b: "Vec3") -> "Vec3":
        """
        Сдвиг на угол angle (радианы): точки смещаются вдоль a
        пропорционально их проекции на b.
        """
        a_hat = a.normalize()
        b_hat = b.normalize()
        return self + a_hat * (b_hat.dot(self) * rational_trig(math.tan, angle))

    def rotate(self, rotations) -> "Vec3":
        """
        Последовательность поворотов: словарь {ось: угол} или
        итерируемое пар (ось, угол), применяется по порядку.

            v.rotate({"x": pi / 2, "z": pi})
            v.rotate([(Vec3(1, 1, 0), pi)])
        """
        pairs = rotations.items() if isinstance(rotations, Mapping) else rotations
        result = self
        for axis, angle in pairs:
            result = Vec3.rotate_around_axis(axis, angle) * result
        return result

    @staticmethod
    def rotate_around_axis(axis, angle):
        """
        Матрица поворота (Mat3) на angle радиан вокруг произвольной оси
        по формуле Родрига. Ось нормализуется.
        """
        from game_engine_math.math.mat3 import Mat3

        n = resolve_axis(axis).normalize()
        c = rational_trig(math.cos, angle)
        s = rational_trig(math.sin, angle)
        t = 1 - c
        x, y, z = n.x, n.y, n.z

        return Mat3(
            Vec3(t * x * x + c,     t * x * y + s * z, t * x * z - s * y),
            Vec3(t * x * y - s * z, t * y * y + c,     t * y * z + s * x),
            Vec3(t * x * z + s * y, t * y * z - s * x, t * z * z + c),
        )

    def is_zero(self) -> bool:
        return self._x == 0 and self._y == 0 and self._z == 0

    # -------------------------------------------------
    # приведение к структурам
    # -------------------------------------------------
    def __iter__(self):
        return iter((self._x, self._y, self._z))

    def to_list(self):
        return [self._x, self._y, self._z]

    def to_tuple(self) -> Tuple[Fraction, Fraction, Fraction]:
        return (self._x, self._y, self._z)

    def to_dict(self):
        return {"x": self._x, "y": self._y, "z": self._z}

    def as_np(self) -> np.ndarray:
        """Копия 3‑элементного массива float64."""
        return np.array([float(self._x), float(self._y), float(self._z)], dtype=np.float64)

    # -------------------------------------------------
    # представление
    # -------------------------------------------------
    def __repr__(self):
        return f"Vec3({self._x}, {self._y}, {self._z})"

    def __str__(self):
        return format_table(["v"], [("x", [self._x]), ("y", [self._y]), ("z", [self._z])])


Vec3.ZERO = Vec3(0, 0, 0)
Vec3.UNIT_X = Vec3(1, 0, 0)
Vec3.UNIT_Y = Vec3(0, 1, 0)
Vec3.UNIT_Z = Vec3(0, 0, 1)

_NAMED_AXES = {"x": Vec3.UNIT_X, "y": Vec3.UNIT_Y, "z": Vec3.UNIT_Z}


def resolve_axis(axis) -> Vec3:
    """Ось как Vec3: имя "x"/"y"/"z", словарь {x, y, z} или Vec3."""
    if isinstance(axis, Vec3):
        return axis
    if isinstance(axis, str):
        try:
            return _NAMED_AXES[axis.lower()]
        except KeyError:
            raise InvalidAxisError(f"Unknown axis {axis!r}, expected one of x, y, z") from None
    if isinstance(axis, Mapping):
        return Vec3.from_dict(axis)
    raise TypeError(f"Unsupported axis type {type(axis).__name__}")
