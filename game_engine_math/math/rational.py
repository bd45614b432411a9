# game_engine_math/math/rational.py
# ---------------------------------------------------------------
# Точная рациональная арифметика:
# - приведение входных значений к Fraction,
# - проверка «скалярности» операнда,
# - квадратный корень с рациональным результатом.
# ---------------------------------------------------------------

import math
import numbers
from decimal import Decimal
from fractions import Fraction

from game_engine_math.utils.config import Config

# точность иррационального корня – как у мантиссы double
SQRT_PRECISION_BITS = 53


def is_scalar(value) -> bool:
    """int / Fraction / float / Decimal / numpy‑скаляр, но не bool."""
    if isinstance(value, bool):
        return False
    return isinstance(value, (numbers.Real, Decimal))


def to_rational(value) -> Fraction:
    """
    Привести значение к Fraction.

    float переводится точно (двоичное значение), строки разбираются
    конструктором Fraction ("1/3", "0.25").
    """
    if isinstance(value, Fraction):
        return value
    if isinstance(value, bool):
        raise TypeError("bool is not a valid component value")
    if isinstance(value, (int, str, Decimal)):
        return Fraction(value)
    if isinstance(value, numbers.Integral):
        return Fraction(int(value))
    if isinstance(value, numbers.Rational):
        return Fraction(value.numerator, value.denominator)
    if isinstance(value, numbers.Real):
        value = float(value)
        if not math.isfinite(value):
            raise ValueError(f"Cannot represent {value!r} as a rational number")
        return Fraction(value)
    raise TypeError(f"Unsupported component type {type(value).__name__}")


def rational_sqrt(value) -> Fraction:
    """
    Квадратный корень как Fraction.

    Точный результат, если числитель и знаменатель – полные квадраты,
    иначе корень, усечённый до SQRT_PRECISION_BITS значащих бит
    (считается в целых числах, без ограничений диапазона double),
    с опциональным limit_denominator из конфигурации.
    """
    q = to_rational(value)
    if q < 0:
        raise ValueError(f"Square root of negative value {q}")

    n, d = q.numerator, q.denominator
    num_root = math.isqrt(n)
    den_root = math.isqrt(d)
    if num_root * num_root == n and den_root * den_root == d:
        return Fraction(num_root, den_root)

    # sqrt(n / d) = sqrt(n * 4**k / d) / 2**k, k подбирается так, чтобы
    # целая часть корня содержала не меньше SQRT_PRECISION_BITS бит
    k = max(0, (2 * SQRT_PRECISION_BITS - (n.bit_length() - d.bit_length())) // 2 + 1)
    root = Fraction(math.isqrt((n << (2 * k)) // d), 1 << k)
    max_den = Config()["sqrt_max_denominator"]
    if max_den:
        root = root.limit_denominator(int(max_den))
    return root


def rational_trig(func, angle) -> Fraction:
    """sin / cos / tan от угла в радианах, результат – Fraction."""
    return Fraction(func(float(angle)))
