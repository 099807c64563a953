"""
utils/logging.py

Централизованное логирование движка.
"""

import logging
import sys
from typing import Optional

LOGGER_NAME = "markov_pegs"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class GameLogger:
    """Логгер игрового движка."""

    def __init__(self, name: str = LOGGER_NAME, level: int = logging.INFO):
        """
        Инициализирует логгер.

        Args:
            name: имя логгера
            level: уровень логирования
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level)

        # Избегаем дублирования handlers
        if not self.logger.handlers:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setLevel(level)
            console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
            self.logger.addHandler(console_handler)

    def set_level(self, level: int):
        """Меняет уровень логгера и всех его handlers."""
        self.logger.setLevel(level)
        for handler in self.logger.handlers:
            handler.setLevel(level)

    def debug(self, message: str):
        self.logger.debug(message)

    def info(self, message: str):
        self.logger.info(message)

    def warning(self, message: str):
        self.logger.warning(message)

    def error(self, message: str, exc_info: bool = False):
        self.logger.error(message, exc_info=exc_info)


_default_logger: Optional[GameLogger] = None


def get_logger(level: Optional[int] = None) -> GameLogger:
    """
    Возвращает глобальный логгер или создаёт новый.

    Args:
        level: если указан, переустанавливает уровень логирования
    """
    global _default_logger
    if _default_logger is None:
        _default_logger = GameLogger(LOGGER_NAME, level if level is not None else logging.INFO)
    elif level is not None:
        _default_logger.set_level(level)
    return _default_logger
