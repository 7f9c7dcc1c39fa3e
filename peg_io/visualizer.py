"""
peg_io/visualizer.py

Текстовая визуализация доски и решений.
"""

from typing import AbstractSet, List, Sequence

from core.board import Board
from core.layout import Layout
from core.moves import Move


def display_board(layout: Layout, pegs: AbstractSet[int], show_numbers: bool = False) -> str:
    """
    Форматирует текстовое представление доски.

    Args:
        layout: раскладка
        pegs: занятые лунки
        show_numbers: вместо символов печатать номера занятых лунок

    Returns:
        Строка для вывода
    """
    matrix = Board(layout, pegs).to_matrix()
    if not show_numbers:
        return "\n".join(" ".join(row).rstrip() for row in matrix)

    cell_width = len(str(max(layout.holes, default=0)))
    lines = []
    for symbols, cells in zip(matrix, layout.rows):
        parts = []
        for symbol, cell in zip(symbols, cells):
            if cell is not None and cell in pegs:
                parts.append(str(cell).rjust(cell_width))
            else:
                parts.append(symbol.rjust(cell_width))
        lines.append(" ".join(parts).rstrip())
    return "\n".join(lines)


def format_move(move: Move) -> str:
    """Ход "from→over→to"."""
    return '→'.join(str(h) for h in move)


def format_solution(moves: Sequence[Move]) -> str:
    """
    Форматирует решение для вывода.

    Пустое решение означает, что позиция уже решена.
    """
    if not moves:
        return "✅ Позиция уже решена"

    lines: List[str] = [f"✅ Найдено решение за {len(moves)} ходов:"]
    for i, move in enumerate(moves, 1):
        lines.append(f"  {i:2}. {format_move(move)}")
    return "\n".join(lines)
