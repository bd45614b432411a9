# game_engine_math/utils/compare.py
"""
Сравнение с допуском. Само ядро сравнивает точно (==); допуск нужен
там, где участвуют тригонометрия и корни (тесты, проверки поворотов).
"""

import numpy as np

from game_engine_math.utils.config import Config


def _is_structured(value) -> bool:
    return hasattr(value, "to_np") or hasattr(value, "as_np")


def _as_array(value) -> np.ndarray:
    if hasattr(value, "to_np"):
        return value.to_np()
    if hasattr(value, "as_np"):
        return value.as_np()
    return np.asarray(float(value), dtype=np.float64)


def is_close(a, b, tol: float = None) -> bool:
    """
    True, если все компоненты a и b отличаются не более чем на tol
    (по умолчанию – config["tolerance"]). Типы должны совпадать.
    """
    if (_is_structured(a) or _is_structured(b)) and type(a) is not type(b):
        raise TypeError(f"Cannot compare {type(a).__name__} with {type(b).__name__}")
    if tol is None:
        tol = float(Config()["tolerance"])
    return bool(np.allclose(_as_array(a), _as_array(b), rtol=0.0, atol=tol))
