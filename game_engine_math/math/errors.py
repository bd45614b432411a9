# game_engine_math/math/errors.py
"""Исключения математического ядра."""


class MathKernelError(Exception):
    """Базовый класс ошибок ядра."""


class SingularMatrixError(MathKernelError, ZeroDivisionError):
    """Обращение матрицы с нулевым определителем."""


class InvalidAxisError(MathKernelError, ValueError):
    """Имя оси вне набора x / y / z."""
