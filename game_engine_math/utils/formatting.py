# game_engine_math/utils/formatting.py
"""
Табличный вывод компонент для отладки (не предназначен для парсинга).

Первая колонка – метка строки шириной 1, далее значения фиксированной
ширины с двумя знаками после запятой, например для Vec3(1, 2, 3):

    x   1.00
    y   2.00
    z   3.00
"""

from decimal import Decimal
from fractions import Fraction
from typing import Iterable, Sequence, Tuple

from game_engine_math.utils.config import Config


def format_table(headers: Sequence[str],
                 rows: Iterable[Tuple[str, Sequence]]) -> str:
    """
    headers – подписи столбцов, rows – пары (метка строки, значения).
    Ширина и точность берутся из конфигурации.
    """
    cfg = Config()
    width = int(cfg["display_width"])
    precision = int(cfg["display_precision"])

    lines = [" ".join([f"{' ':1s}"] + [f"{h + '  ':>{width}s}" for h in headers])]
    for label, values in rows:
        cells = [f"{_as_decimal(v):{width}.{precision}f}" for v in values]
        lines.append(" ".join([f"{label:1s}"] + cells))
    return "\n".join(lines)


def _as_decimal(value) -> Decimal:
    # без float: компоненты могут выходить за диапазон double
    q = Fraction(value)
    return Decimal(q.numerator) / Decimal(q.denominator)
