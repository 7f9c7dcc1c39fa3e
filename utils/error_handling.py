"""
utils/error_handling.py

Иерархия исключений движка и защитные проверки на границах.

"Решения нет" — это обычный результат (NO_SOLUTION), а не исключение.
"""

from typing import Any, Iterable, Optional

from .logging import get_logger


class SolverError(Exception):
    """Базовое исключение движка."""
    pass


class InvalidBoardError(SolverError):
    """Набор колышков или целевая лунка не соответствуют раскладке."""
    pass


class InvalidLayoutError(InvalidBoardError):
    """Некорректное описание формы доски."""
    pass


class InvalidMoveError(SolverError):
    """Ход нарушает правила: from/over пусты или to занята."""
    pass


class SolverTimeoutError(SolverError):
    """Поиск превысил отведённое время."""
    pass


class GameStateError(SolverError):
    """Операция недопустима в текущем состоянии сессии."""
    pass


def safe_solve(solver, pegs, layout, default: Any = None):
    """
    Безопасное выполнение solve с обработкой ошибок движка.

    Args:
        solver: решатель
        pegs: набор колышков
        layout: раскладка доски
        default: значение по умолчанию при ошибке

    Returns:
        Решение или default
    """
    try:
        return solver.solve(pegs, layout)
    except SolverError as e:
        get_logger().error(f"Ошибка решателя {solver.__class__.__name__}: {e}")
        return default


def validate_pegs(pegs: Iterable[int], layout) -> frozenset:
    """
    Проверяет, что все колышки стоят в лунках раскладки.

    Returns:
        frozenset колышков

    Raises:
        InvalidBoardError: если есть номер вне раскладки
    """
    if pegs is None:
        raise InvalidBoardError("Набор колышков не может быть None")

    pegs = frozenset(pegs)
    unknown = sorted(h for h in pegs if h not in layout)
    if unknown:
        raise InvalidBoardError(
            f"Лунки {unknown} отсутствуют на доске ({layout.hole_count} лунок)"
        )
    return pegs


def validate_target(target_hole: Optional[int], layout) -> Optional[int]:
    """Проверяет целевую лунку (None — любая)."""
    if target_hole is not None and target_hole not in layout:
        raise InvalidBoardError(f"Целевая лунка {target_hole} отсутствует на доске")
    return target_hole
