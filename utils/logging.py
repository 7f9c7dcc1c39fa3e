"""
utils/logging.py

Централизованная система логирования.

Все модули пишут в один логгер "peg_puzzle". По умолчанию виден
только уровень WARNING и выше; подробный лог поиска (verbose)
включается через configure_logging.
"""

import logging
import sys
from typing import Optional

LOGGER_NAME = "peg_puzzle"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


class PuzzleLogger:
    """Логгер движка головоломки."""

    def __init__(self, level: int = logging.WARNING):
        self.logger = logging.getLogger(LOGGER_NAME)
        self.logger.setLevel(level)

        # Избегаем дублирования handlers
        if not self.logger.handlers:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
            self.logger.addHandler(console_handler)

    def set_level(self, level: int):
        self.logger.setLevel(level)

    def debug(self, message: str):
        self.logger.debug(message)

    def info(self, message: str):
        self.logger.info(message)

    def error(self, message: str, exc_info: bool = False):
        self.logger.error(message, exc_info=exc_info)


_default_logger: Optional[PuzzleLogger] = None


def get_logger() -> PuzzleLogger:
    """Возвращает общий логгер, создавая его при первом вызове."""
    global _default_logger
    if _default_logger is None:
        _default_logger = PuzzleLogger()
    return _default_logger


def configure_logging(verbose: bool = False, log_file: Optional[str] = None) -> PuzzleLogger:
    """
    Настраивает общий логгер для CLI.

    Args:
        verbose: писать ход поиска и ходы сессии (INFO), иначе только WARNING+
        log_file: дополнительно писать лог в этот файл

    Returns:
        PuzzleLogger
    """
    logger = get_logger()
    logger.set_level(logging.INFO if verbose else logging.WARNING)
    if log_file:
        setup_file_logging(log_file)
    return logger


def setup_file_logging(log_file: str = "peg_puzzle.log"):
    """
    Добавляет запись лога в файл.

    Уровень файла совпадает с уровнем логгера.
    """
    file_handler = logging.FileHandler(log_file, encoding='utf-8')
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    get_logger().logger.addHandler(file_handler)
    return file_handler
