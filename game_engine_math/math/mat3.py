# game_engine_math/math/mat3.py
# ---------------------------------------------------------------
# Матрица 3×3, хранимая по столбцам (a, b, c).
# Строки x, y, z и их попарные векторные произведения yz, zx, xy
# вычисляются один раз в конструкторе (нужны для обращения).
# ---------------------------------------------------------------

from collections.abc import Mapping
from fractions import Fraction

import numpy as np

from game_engine_math.math.errors import SingularMatrixError
from game_engine_math.math.rational import is_scalar, to_rational
from game_engine_math.math.vec3 import Vec3
from game_engine_math.utils.formatting import format_table
from game_engine_math.utils.logger import logger

_ROWS = ("x", "y", "z")


def _as_column(value) -> Vec3:
    if value is None:
        return Vec3.ZERO
    if isinstance(value, Vec3):
        return value
    if isinstance(value, Mapping):
        return Vec3.from_dict(value)
    return Vec3.from_sequence(value)


class Mat3:
    __slots__ = ("_a", "_b", "_c", "_x", "_y", "_z", "_yz", "_zx", "_xy")

    def __init__(self, a=None, b=None, c=None):
        self._a = _as_column(a)
        self._b = _as_column(b)
        self._c = _as_column(c)

        self._x = Vec3(self._a.x, self._b.x, self._c.x)
        self._y = Vec3(self._a.y, self._b.y, self._c.y)
        self._z = Vec3(self._a.z, self._b.z, self._c.z)

        self._yz = self._y.cross(self._z)
        self._zx = self._z.cross(self._x)
        self._xy = self._x.cross(self._y)

    # -----------------------------------------------------------
    # фабрики
    # -----------------------------------------------------------
    @classmethod
    def from_dict(cls, data: Mapping) -> "Mat3":
        """Столбцы a, b, c – Vec3 или словари {x, y, z}."""
        return cls(data.get("a"), data.get("b"), data.get("c"))

    @classmethod
    def from_np(cls, array) -> "Mat3":
        """3×3 массив; столбцы массива становятся столбцами матрицы."""
        m = np.asarray(array)
        if m.shape != (3, 3):
            raise ValueError(f"Mat3 needs a 3x3 array, got shape {m.shape}")
        return cls(m[:, 0], m[:, 1], m[:, 2])

    @staticmethod
    def fill(i) -> "Mat3":
        v = Vec3(i, i, i)
        return Mat3(v, v, v)

    @staticmethod
    def diagonal(i, j=None, k=None) -> "Mat3":
        j = i if j is None else j
        k = i if k is None else k
        return Mat3(Vec3(i, 0, 0), Vec3(0, j, 0), Vec3(0, 0, k))

    @staticmethod
    def identity() -> "Mat3":
        return Mat3.diagonal(1)

    # -----------------------------------------------------------
    # столбцы / строки
    # -----------------------------------------------------------
    @property
    def a(self) -> Vec3:
        return self._a

    @property
    def b(self) -> Vec3:
        return self._b

    @property
    def c(self) -> Vec3:
        return self._c

    @property
    def x(self) -> Vec3:
        return self._x

    @property
    def y(self) -> Vec3:
        return self._y

    @property
    def z(self) -> Vec3:
        return self._z

    @property
    def yz(self) -> Vec3:
        return self._yz

    @property
    def zx(self) -> Vec3:
        return self._zx

    @property
    def xy(self) -> Vec3:
        return self._xy

    def row(self, name: str) -> Vec3:
        if name not in _ROWS:
            raise ValueError(f"Unknown row {name!r}, expected one of x, y, z")
        return getattr(self, name)

    def columns(self):
        return (self._a, self._b, self._c)

    def element(self, i: int, j: int) -> Fraction:
        """Элемент в строке i, столбце j (индексы 0..2)."""
        return self.columns()[j].to_tuple()[i]

    def __getitem__(self, index):
        i, j = index
        return self.element(i, j)

    # -----------------------------------------------------------
    # арифметика
    # -----------------------------------------------------------
    def __add__(self, other):
        if not isinstance(other, Mat3):
            return NotImplemented
        return Mat3(self._a + other._a, self._b + other._b, self._c + other._c)

    def __sub__(self, other):
        if not isinstance(other, Mat3):
            return NotImplemented
        return Mat3(self._a - other._a, self._b - other._b, self._c - other._c)

    def __mul__(self, other):
        if isinstance(other, Mat3):
            return Mat3(self * other._a, self * other._b, self * other._c)
        if isinstance(other, Vec3):
            return Vec3(self._x.dot(other), self._y.dot(other), self._z.dot(other))
        if is_scalar(other):
            return self * Mat3.diagonal(to_rational(other))
        return NotImplemented

    def __rmul__(self, other):
        # k * M == M * k
        if is_scalar(other):
            return self * other
        return NotImplemented

    def __matmul__(self, other):
        if isinstance(other, (Mat3, Vec3)):
            return self * other
        return NotImplemented

    def __neg__(self):
        return Mat3(-self._a, -self._b, -self._c)

    def __eq__(self, other):
        if not isinstance(other, Mat3):
            return NotImplemented
        return self._a == other._a and self._b == other._b and self._c == other._c

    def __hash__(self):
        return hash((Mat3, self._a, self._b, self._c))

    # -----------------------------------------------------------
    # линейная алгебра
    # -----------------------------------------------------------
    def determinant(self) -> Fraction:
        a, b, c = self._a, self._b, self._c
        i = a.x * (b.y * c.z - c.y * b.z)
        j = b.x * (a.y * c.z - c.y * a.z)
        k = c.x * (a.y * b.z - b.y * a.z)
        return i - j + k

    def is_invertible(self) -> bool:
        return self.determinant() != 0

    def inverse(self) -> "Mat3":
        """Обращение через присоединённую матрицу: столбцы yz, zx, xy / det."""
        det = self.determinant()
        if det == 0:
            logger.debug(f"[Mat3] Singular matrix, cannot invert: {self!r}")
            raise SingularMatrixError("Matrix is singular (determinant is zero)")
        inv_det = 1 / det
        return Mat3(self._yz * inv_det, self._zx * inv_det, self._xy * inv_det)

    def transpose(self) -> "Mat3":
        return Mat3(self._x, self._y, self._z)

    def trace(self) -> Fraction:
        return self._a.x + self._b.y + self._c.z

    # -----------------------------------------------------------
    # структурные предикаты
    # -----------------------------------------------------------
    def is_zero(self) -> bool:
        return self._a.is_zero() and self._b.is_zero() and self._c.is_zero()

    def is_diagonal(self) -> bool:
        a, b, c = self._a, self._b, self._c
        return (a.y == 0 and a.z == 0 and b.x == 0 and
                b.z == 0 and c.x == 0 and c.y == 0)

    def is_symmetric(self) -> bool:
        a, b, c = self._a, self._b, self._c
        return a.y == b.x and a.z == c.x and b.z == c.y

    def is_skew_symmetric(self) -> bool:
        a, b, c = self._a, self._b, self._c
        return a.y == -b.x and a.z == -c.x and b.z == -c.y

    # -----------------------------------------------------------
    # приведение к структурам
    # -----------------------------------------------------------
    def to_list(self):
        """Список столбцов."""
        return [self._a.to_list(), self._b.to_list(), self._c.to_list()]

    def to_dict(self):
        return {"a": self._a.to_dict(), "b": self._b.to_dict(), "c": self._c.to_dict()}

    def to_np(self) -> np.ndarray:
        """Массив 3×3 float64, столбцы – a, b, c."""
        return np.column_stack([self._a.as_np(), self._b.as_np(), self._c.as_np()])

    def __repr__(self):
        return f"Mat3({self._a!r}, {self._b!r}, {self._c!r})"

    def __str__(self):
        return format_table(
            ["a", "b", "c"],
            [(name, getattr(self, name).to_list()) for name in _ROWS],
        )


Mat3.ZERO = Mat3()
Mat3.IDENTITY = Mat3.identity()

Mat3.SAMPLE_A = Mat3.from_dict({
    "a": {"x": 1, "y": 2, "z": 3},
    "b": {"x": 4, "y": 5, "z": 6},
    "c": {"x": 7, "y": 2, "z": 9},
})

Mat3.SAMPLE_B = Mat3.from_dict({
    "a": {"x": 1, "y": 2, "z": 3},
    "b": {"x": 3, "y": 2, "z": 1},
    "c": {"x": 1, "y": 3, "z": 2},
})

# симметричная
Mat3.SAMPLE_C = Mat3.from_dict({
    "a": {"x": 1, "y": 3, "z": 1},
    "b": {"x": 3, "y": 2, "z": 3},
    "c": {"x": 1, "y": 3, "z": 2},
})

Mat3.SAMPLE_D = Mat3.from_dict({
    "a": {"x": 1, "y": -3, "z": 1},
    "b": {"x": 3, "y": 2, "z": 5},
    "c": {"x": -1, "y": -5, "z": 2},
})
