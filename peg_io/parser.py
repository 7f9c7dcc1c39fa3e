"""
peg_io/parser.py

Парсинг текстовых описаний доски, расстановки и ходов.
"""

import re
from typing import FrozenSet

from core.layout import Layout, build_centered_layout, build_layout
from core.moves import Move
from core.patterns import get_pattern
from utils.error_handling import InvalidBoardError, InvalidLayoutError, validate_pegs


def _parse_ints(text: str) -> list:
    items = [item.strip() for item in text.split(',') if item.strip()]
    if not all(item.isdigit() for item in items):
        raise ValueError(f"Ожидается список номеров через запятую, получено {text!r}")
    return [int(item) for item in items]


def parse_shape(text: str) -> Layout:
    """
    Парсит описание формы доски.

    Форматы:
        centered=3,3,7,7,7,3,3   # ширины строк, центрирование
        rect=5x5                 # прямоугольник
        Plus 33                  # имя встроенной доски

    Raises:
        InvalidLayoutError: если формат не распознан
    """
    text = text.strip()
    centered = re.fullmatch(r'centered=([\d,\s]+)', text)
    if centered:
        try:
            return build_centered_layout(_parse_ints(centered.group(1)))
        except ValueError as e:
            raise InvalidLayoutError(str(e))

    rect = re.fullmatch(r'rect=(\d+\s*x\s*\d+)', text, flags=re.IGNORECASE)
    if rect:
        return build_layout(rect.group(1).replace(' ', ''))

    return get_pattern(text)


def parse_pegs(text: str, layout: Layout) -> FrozenSet[int]:
    """
    Парсит расстановку колышков.

    Форматы:
        all          # все лунки
        none         # пусто
        1,2,3        # перечисленные лунки
        all-17,18    # все, кроме перечисленных

    Raises:
        InvalidBoardError: номер вне доски или неверный формат
    """
    text = text.strip().lower()
    try:
        if text == 'all':
            return frozenset(layout.holes)
        if text in ('none', ''):
            return frozenset()
        if text.startswith('all-'):
            excluded = validate_pegs(_parse_ints(text[4:]), layout)
            return frozenset(layout.holes) - excluded
        return validate_pegs(_parse_ints(text), layout)
    except ValueError as e:
        raise InvalidBoardError(str(e))


def parse_move(text: str) -> Move:
    """Ход вида "1,2,3" или "1→2→3"."""
    parts = [p for p in re.split(r'[,\s→>-]+', text.strip()) if p]
    if len(parts) != 3 or not all(p.isdigit() for p in parts):
        raise ValueError(f"Ожидается ход from,over,to, получено {text!r}")
    f, over, to = (int(p) for p in parts)
    return f, over, to
