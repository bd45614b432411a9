# game_engine_math/utils/__init__.py
"""
Пакет утилит.

Экспортируем:
    * logger        – готовый объект logging.Logger (с level INFO)
    * Config        – JSON‑конфигурация ядра
    * is_close      – сравнение значений ядра с допуском
    * format_table  – табличный вывод компонент
"""

from .logger import logger
from .config import Config, DEFAULT_CONFIG
from .compare import is_close
from .formatting import format_table

__all__ = ["logger", "Config", "DEFAULT_CONFIG", "is_close", "format_table"]
