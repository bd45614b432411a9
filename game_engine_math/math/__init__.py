"""
Математический суб‑пакет: Vec3, Mat3, Quat, Point3, Line3.
"""

from game_engine_math.math.errors import (
    InvalidAxisError, MathKernelError, SingularMatrixError,
)
from game_engine_math.math.rational import rational_sqrt, to_rational
from game_engine_math.math.vec3 import Vec3
from game_engine_math.math.mat3 import Mat3
from game_engine_math.math.quat import Quat
from game_engine_math.math.point3 import Point3
from game_engine_math.math.line3 import Line3

__all__ = [
    "Vec3",
    "Mat3",
    "Quat",
    "Point3",
    "Line3",
    "MathKernelError",
    "SingularMatrixError",
    "InvalidAxisError",
    "rational_sqrt",
    "to_rational",
]
