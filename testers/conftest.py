# -*- coding: utf-8 -*-
"""
conftest.py – общие фикстуры для тестов математического ядра.
"""

import pytest

from game_engine_math import Config, Quat, Vec3


# ----------------------------------------------------------------------
# Каждый тест получает «чистую» конфигурацию и пустой рабочий каталог,
# чтобы случайный game_engine_math.json не влиял на результат.
# ----------------------------------------------------------------------
@pytest.fixture(autouse=True)
def clean_config(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("GAME_ENGINE_MATH_CONFIG", raising=False)
    Config.reset()
    yield
    Config.reset()


@pytest.fixture
def abc():
    """Три «стандартных» вектора из тестов тождеств."""
    return Vec3(1, 2, 3), Vec3(4, 5, 6), Vec3(7, 8, 9)


@pytest.fixture
def pqr():
    """Три неединичных кватерниона с целыми компонентами."""
    return Quat(1, 2, 3, 4), Quat(5, 6, 7, 8), Quat(1, 5, 7, 9)
