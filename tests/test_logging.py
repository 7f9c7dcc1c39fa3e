"""
tests/test_logging.py

Тесты настройки логирования.
"""

import logging

from solvers import DFSMemoSolver
from utils.logging import configure_logging, get_logger


def test_configure_levels():
    """Тест: verbose включает INFO, без него виден только WARNING+."""
    logger = configure_logging(verbose=True)
    assert logger is get_logger()
    assert logger.logger.isEnabledFor(logging.INFO)

    configure_logging(verbose=False)
    assert not logger.logger.isEnabledFor(logging.INFO)
    assert logger.logger.isEnabledFor(logging.WARNING)


def test_verbose_solve_goes_to_file(tmp_path, square3):
    """Тест: ход поиска verbose-решателя попадает в файл лога."""
    log_file = tmp_path / "solve.log"
    logger = configure_logging(verbose=True, log_file=str(log_file))
    try:
        DFSMemoSolver(verbose=True).solve({1, 2, 6}, square3)
    finally:
        for handler in list(logger.logger.handlers):
            if isinstance(handler, logging.FileHandler):
                logger.logger.removeHandler(handler)
                handler.close()
        configure_logging(verbose=False)

    text = log_file.read_text(encoding='utf-8')
    assert "[DFSMemoSolver] Solution found: 2 moves" in text
