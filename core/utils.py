"""
core/utils.py

Общие утилиты и константы для Peg Solitaire.
"""

from typing import Iterable, List, Tuple

# Направления прыжка в порядке перебора: вправо, влево, вниз, вверх
DIRECTIONS: List[Tuple[int, int]] = [(0, 1), (0, -1), (1, 0), (-1, 0)]

# Символы для отображения
PEG = '●'       # Колышек
HOLE = '○'      # Пустое место (можно прыгнуть)
EMPTY = ' '     # Клетки нет


def state_key(pegs: Iterable[int]) -> str:
    """
    Канонический ключ состояния: номера по возрастанию через запятую.

    Не зависит от порядка построения множества.
    """
    return ','.join(str(h) for h in sorted(pegs))


def index_to_pos(row: int, col: int) -> str:
    """Индекс (row, col) → шахматная нотация (A1, B2, ...)."""
    return f"{chr(col + ord('A'))}{row + 1}"


def is_valid_position(r: int, c: int, rows: int, cols: int) -> bool:
    """Проверяет, находится ли позиция в пределах доски."""
    return 0 <= r < rows and 0 <= c < cols
