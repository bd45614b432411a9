"""
Простой загрузчик/сохранитель конфигурации ядра в формате JSON.

Путь к файлу: аргумент Config(path), иначе переменная окружения
GAME_ENGINE_MATH_CONFIG, иначе game_engine_math.json в текущем рабочем
каталоге (относительно cwd на момент первого обращения к Config()).
Путь фиксируется как абсолютный при первой загрузке; загруженный файл и
переопределённые ключи пишутся в лог.
Если файл не найден – используются настройки по‑умолчанию
(файл создаётся только явным вызовом save()).
"""

import json
import os
from pathlib import Path
from game_engine_math.utils.logger import logger

DEFAULT_PATH = "game_engine_math.json"
ENV_VAR = "GAME_ENGINE_MATH_CONFIG"

DEFAULT_CONFIG = {
    # табличный вывод Vec3 / Mat3 / Quat
    "display_precision": 2,
    "display_width": 6,
    # абсолютный допуск для is_close
    "tolerance": 1e-9,
    # None – корень с точностью мантиссы double без сокращения знаменателя
    "sqrt_max_denominator": None,
}

class Config:
    """Singleton‑подобный объект конфигурации."""
    _instance = None

    def __new__(cls, path: str = None):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            if path is None:
                path = os.environ.get(ENV_VAR) or DEFAULT_PATH
            cls._instance.path = Path(path).resolve()
            cls._instance._load()
        return cls._instance

    @classmethod
    def reset(cls):
        """Сбросить singleton (следующий Config() перечитает файл)."""
        cls._instance = None

    def _load(self):
        self.data = DEFAULT_CONFIG.copy()
        if not self.path.is_file():
            logger.debug(f"[Config] No config file at {self.path} – using defaults.")
            return
        try:
            with self.path.open("r", encoding="utf-8") as f:
                loaded = json.load(f)
        except (OSError, ValueError) as exc:
            logger.error(f"[Config] Failed to read config: {exc}")
            return
        if not isinstance(loaded, dict):
            logger.error(f"[Config] Expected a JSON object in {self.path}, got {type(loaded).__name__}")
            return
        self.data.update(loaded)
        logger.info(f"[Config] Loaded configuration from {self.path}, overriding: {sorted(loaded)}")

    def save(self):
        try:
            with self.path.open("w", encoding="utf-8") as f:
                json.dump(self.data, f, indent=4)
            logger.info("[Config] Configuration saved.")
        except OSError as exc:
            logger.error(f"[Config] Unable to save config: {exc}")

    def __getitem__(self, key):
        return self.data.get(key, DEFAULT_CONFIG.get(key))

    def __setitem__(self, key, value):
        self.data[key] = value
        self.save()

    def get(self, key, default=None):
        return self.data.get(key, default)
