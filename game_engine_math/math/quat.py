# game_engine_math/math/quat.py
# ---------------------------------------------------------------
# Кватернионы (x, y, z, w) на точной рациональной арифметике:
# - создание из оси/угла,
# - гамильтоново умножение,
# - сопряжение, обращение, нормализация,
# - преобразование в матрицу 3×3,
# - вращение вектора.
# ---------------------------------------------------------------

import math
from collections.abc import Mapping
from fractions import Fraction

import numpy as np

from game_engine_math.math.mat3 import Mat3
from game_engine_math.math.rational import (
    is_scalar, rational_sqrt, rational_trig, to_rational,
)
from game_engine_math.math.vec3 import Vec3, resolve_axis
from game_engine_math.utils.formatting import format_table


class Quat:
    __slots__ = ("_x", "_y", "_z", "_w")

    def __init__(self, x=0, y=0, z=0, w=0):
        self._x = to_rational(x)
        self._y = to_rational(y)
        self._z = to_rational(z)
        self._w = to_rational(w)

    @staticmethod
    def from_dict(data: Mapping) -> "Quat":
        return Quat(data.get("x", 0), data.get("y", 0), data.get("z", 0), data.get("w", 0))

    @staticmethod
    def from_vector(v: Vec3, w=0) -> "Quat":
        """Вектор как векторная часть, w – скалярная."""
        return Quat(v.x, v.y, v.z, w)

    @staticmethod
    def identity() -> "Quat":
        return Quat(0, 0, 0, 1)

    @staticmethod
    def rotation(axis, angle) -> "Quat":
        """
        Поворот на angle радиан вокруг axis (Vec3, имя оси или словарь).
        Ось нормализуется внутри.
        """
        half = float(angle) / 2.0
        unit = resolve_axis(axis).normalize()
        return Quat.from_vector(unit * rational_trig(math.sin, half),
                                rational_trig(math.cos, half))

    # -----------------------------------------------------------
    # компоненты
    # -----------------------------------------------------------
    @property
    def x(self) -> Fraction:
        return self._x

    @property
    def y(self) -> Fraction:
        return self._y

    @property
    def z(self) -> Fraction:
        return self._z

    @property
    def w(self) -> Fraction:
        return self._w

    @property
    def vector(self) -> Vec3:
        return Vec3(self._x, self._y, self._z)

    @property
    def scalar(self) -> Fraction:
        return self._w

    # -----------------------------------------------------------
    # арифметика
    # -----------------------------------------------------------
    def __add__(self, other):
        if isinstance(other, Quat):
            return Quat(self._x + other._x, self._y + other._y,
                        self._z + other._z, self._w + other._w)
        if is_scalar(other):
            s = to_rational(other)
            return Quat(self._x + s, self._y + s, self._z + s, self._w + s)
        return NotImplemented

    def __radd__(self, other):
        if is_scalar(other):
            return self + other
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, Quat):
            # гамильтоново произведение
            x = self._w * other._x + self._x * other._w + self._y * other._z - self._z * other._y
            y = self._w * other._y - self._x * other._z + self._y * other._w + self._z * other._x
            z = self._w * other._z + self._x * other._y - self._y * other._x + self._z * other._w
            w = self._w * other._w - self._x * other._x - self._y * other._y - self._z * other._z
            return Quat(x, y, z, w)
        if isinstance(other, Vec3):
            return self * Quat.from_vector(other)
        if is_scalar(other):
            s = to_rational(other)
            return Quat(self._x * s, self._y * s, self._z * s, self._w * s)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Vec3):
            return Quat.from_vector(other) * self
        if is_scalar(other):
            return self * other
        return NotImplemented

    def __truediv__(self, other):
        if is_scalar(other):
            s = to_rational(other)
            return Quat(self._x / s, self._y / s, self._z / s, self._w / s)
        return NotImplemented

    def __neg__(self):
        return Quat(-self._x, -self._y, -self._z, -self._w)

    def __eq__(self, other):
        if not isinstance(other, Quat):
            return NotImplemented
        return (self._x == other._x and self._y == other._y and
                self._z == other._z and self._w == other._w)

    def __hash__(self):
        return hash((Quat, self._x, self._y, self._z, self._w))

    # -----------------------------------------------------------
    # алгебра
    # -----------------------------------------------------------
    def conjugate(self) -> "Quat":
        return Quat(-self._x, -self._y, -self._z, self._w)

    def square(self) -> Fraction:
        return self.vector.square() + self._w * self._w

    def magnitude(self) -> Fraction:
        return rational_sqrt(self.square())

    def inverse(self) -> "Quat":
        sq = self.square()
        if sq == 0:
            raise ZeroDivisionError("Cannot invert a zero quaternion")
        return self.conjugate() / sq

    def normalize(self) -> "Quat":
        n = self.magnitude()
        if n == 0:
            raise ZeroDivisionError("Cannot normalize a zero quaternion")
        return self / n

    # -----------------------------------------------------------
    #  Преобразования
    # -----------------------------------------------------------
    def transform(self, v: Vec3) -> Vec3:
        """
        Поворот вектора в развёрнутом виде:
        v·(w² − b²) + 2·b·(b·v) + 2w·(b×v), где b – векторная часть.
        Совпадает с rotate() для единичного кватерниона.
        """
        b = self.vector
        w = self._w
        return v * (w * w - b.square()) + b * (2 * b.dot(v)) + b.cross(v) * (2 * w)

    def rotate(self, v: Vec3) -> Vec3:
        """Вращение «сэндвичем» q·v·q*, возвращает векторную часть."""
        return (self * v * self.conjugate()).vector

    def rotation_matrix(self) -> Mat3:
        """Матрица 3×3, для единичного q: M * v == q.transform(v)."""
        x, y, z, w = self._x, self._y, self._z, self._w
        xx, yy, zz = x * x, y * y, z * z
        xy, xz, yz = x * y, x * z, y * z
        wx, wy, wz = w * x, w * y, w * z

        # столбцы стандартной матрицы поворота
        return Mat3(
            Vec3(1 - 2 * (yy + zz), 2 * (xy + wz),     2 * (xz - wy)),
            Vec3(2 * (xy - wz),     1 - 2 * (xx + zz), 2 * (yz + wx)),
            Vec3(2 * (xz + wy),     2 * (yz - wx),     1 - 2 * (xx + yy)),
        )

    def is_zero(self) -> bool:
        return self._x == 0 and self._y == 0 and self._z == 0 and self._w == 0

    def is_pure(self) -> bool:
        return self._w == 0

    # -----------------------------------------------------------
    # приведение к структурам
    # -----------------------------------------------------------
    def to_list(self):
        return [self._x, self._y, self._z, self._w]

    def to_tuple(self):
        return (self._x, self._y, self._z, self._w)

    def to_dict(self):
        return {"x": self._x, "y": self._y, "z": self._z, "w": self._w}

    def as_np(self) -> np.ndarray:
        return np.array([float(c) for c in self.to_tuple()], dtype=np.float64)

    def __repr__(self):
        return f"Quat({self._x}, {self._y}, {self._z}, {self._w})"

    def __str__(self):
        return format_table(
            ["q"],
            [("x", [self._x]), ("y", [self._y]), ("z", [self._z]), ("w", [self._w])],
        )
