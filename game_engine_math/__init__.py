"""
GameEngineMath – точная 3‑D линейная алгебра для игрового движка:
векторы, матрицы 3×3, кватернионы, точки и прямые.
"""

from game_engine_math.utils import logger, Config, is_close
from game_engine_math.math import (
    Vec3,
    Mat3,
    Quat,
    Point3,
    Line3,
    MathKernelError,
    SingularMatrixError,
    InvalidAxisError,
)

__version__ = "0.1.0"

__all__ = [
    "Vec3",
    "Mat3",
    "Quat",
    "Point3",
    "Line3",
    "MathKernelError",
    "SingularMatrixError",
    "InvalidAxisError",
    "Config",
    "is_close",
    "logger",
]
