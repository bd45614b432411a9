# game_engine_math/utils/logger.py
# ---------------------------------------------------------------
# Минимальный логгер для математического ядра.
# ---------------------------------------------------------------

import logging

LOGGER_NAME = "GameEngineMath"


def init_logger():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    return logging.getLogger(LOGGER_NAME)

logger = init_logger()
