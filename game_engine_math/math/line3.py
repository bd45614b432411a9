# game_engine_math/math/line3.py
"""
Прямая p + t·v и расстояния до точки и до другой прямой.
"""

from fractions import Fraction

from game_engine_math.math.point3 import Point3
from game_engine_math.math.rational import rational_sqrt
from game_engine_math.math.vec3 import Vec3
from game_engine_math.utils.logger import logger


def _as_point(value) -> Point3:
    if isinstance(value, Point3):
        return value
    if isinstance(value, Vec3):
        return Point3.from_vector(value)
    return Point3.from_vector(Vec3.from_sequence(value))


def _as_vector(value) -> Vec3:
    if isinstance(value, Vec3):
        return value
    return Vec3.from_sequence(value)


class Line3:
    __slots__ = ("_p", "_v")

    def __init__(self, p, v):
        self._p = _as_point(p)
        self._v = _as_vector(v)

    @staticmethod
    def through(p1, p2) -> "Line3":
        """Прямая через две точки."""
        p1 = _as_point(p1)
        return Line3(p1, _as_point(p2) - p1)

    @property
    def p(self) -> Point3:
        return self._p

    @property
    def v(self) -> Vec3:
        return self._v

    def point_at(self, t) -> Point3:
        return self._p + self._v * t

    def __eq__(self, other):
        if not isinstance(other, Line3):
            return NotImplemented
        return self._p == other._p and self._v == other._v

    def __hash__(self):
        return hash((Line3, self._p, self._v))

    def __repr__(self):
        return f"Line3({self._p!r}, {self._v!r})"

    # -----------------------------------------------------------
    # расстояния
    # -----------------------------------------------------------
    @staticmethod
    def distance_from_point(line: "Line3", point: Point3) -> Fraction:
        """‖(point − p) × v‖ / ‖v‖"""
        vv = line.v.square()
        if vv == 0:
            raise ZeroDivisionError("Line direction is a zero vector")
        a = (point - line.p).cross(line.v)
        return rational_sqrt(a.square() / vv)

    @staticmethod
    def distance_between_lines(l1: "Line3", l2: "Line3") -> Fraction:
        dp = l2.p - l1.p
        v11 = l1.v.square()
        v22 = l2.v.square()
        v12 = l1.v.dot(l2.v)
        if v11 == 0 or v22 == 0:
            raise ZeroDivisionError("Line direction is a zero vector")

        det = v12 * v12 - v11 * v22
        if det == 0:
            # параллельные прямые: расстояние от любой точки l2 до l1
            logger.debug("[Line3] Parallel lines, using point distance.")
            return Line3.distance_from_point(l1, l2.p)

        dpv1 = dp.dot(l1.v)
        dpv2 = dp.dot(l2.v)
        t1 = (v12 * dpv2 - v22 * dpv1) / det
        t2 = (v11 * dpv2 - v12 * dpv1) / det

        return (dp + l2.v * t2 - l1.v * t1).magnitude()

    def distance(self, other) -> Fraction:
        if isinstance(other, Point3):
            return Line3.distance_from_point(self, other)
        if isinstance(other, Line3):
            return Line3.distance_between_lines(self, other)
        raise TypeError(f"Unknown object type {type(other).__name__} for Line3.distance")
