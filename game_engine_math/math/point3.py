# game_engine_math/math/point3.py
"""
Точка в пространстве. Та же раскладка (x, y, z), что и у Vec3, но
отдельный тип: разность двух точек – вектор, а distance() считается
только до прямой.
"""

from collections.abc import Mapping
from fractions import Fraction

import numpy as np

from game_engine_math.math.vec3 import Vec3


class Point3:
    __slots__ = ("_v",)

    def __init__(self, x=0, y=0, z=0):
        self._v = Vec3(x, y, z)

    @staticmethod
    def from_vector(v: Vec3) -> "Point3":
        return Point3(v.x, v.y, v.z)

    @staticmethod
    def from_dict(data: Mapping) -> "Point3":
        return Point3.from_vector(Vec3.from_dict(data))

    @property
    def x(self) -> Fraction:
        return self._v.x

    @property
    def y(self) -> Fraction:
        return self._v.y

    @property
    def z(self) -> Fraction:
        return self._v.z

    @property
    def vector(self) -> Vec3:
        """Радиус‑вектор точки."""
        return self._v

    # точка ± вектор = точка, точка − точка = вектор
    def __add__(self, other):
        if isinstance(other, Vec3):
            return Point3.from_vector(self._v + other)
        return NotImplemented

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        if isinstance(other, Point3):
            return self._v - other._v
        if isinstance(other, Vec3):
            return Point3.from_vector(self._v - other)
        return NotImplemented

    def __eq__(self, other):
        if not isinstance(other, Point3):
            return NotImplemented
        return self._v == other._v

    def __hash__(self):
        return hash((Point3, self._v))

    def distance(self, other) -> Fraction:
        from game_engine_math.math.line3 import Line3

        if isinstance(other, Line3):
            return other.distance(self)
        raise TypeError(f"Unknown object type {type(other).__name__} for Point3.distance")

    def __iter__(self):
        return iter(self._v)

    def to_list(self):
        return self._v.to_list()

    def to_tuple(self):
        return self._v.to_tuple()

    def to_dict(self):
        return self._v.to_dict()

    def as_np(self) -> np.ndarray:
        return self._v.as_np()

    def __repr__(self):
        return f"Point3({self.x}, {self.y}, {self.z})"

    def __str__(self):
        return str(self._v)
