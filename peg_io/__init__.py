"""
peg_io - Ввод/вывод для Peg Solitaire

Экспортирует:
- Парсинг форм досок, расстановок и ходов
- Текстовую визуализацию доски и решений
"""

from .parser import parse_shape, parse_pegs, parse_move
from .visualizer import display_board, format_move, format_solution

__all__ = [
    'parse_shape',
    'parse_pegs',
    'parse_move',
    'display_board',
    'format_move',
    'format_solution',
]
