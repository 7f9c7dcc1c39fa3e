"""
solutions/verify.py

Проверка решений на произвольной раскладке.
"""

from typing import AbstractSet, Optional, Sequence

from core.layout import Layout
from core.moves import Move, legal_moves, apply_move


def verify_solution(layout: Layout, pegs: AbstractSet[int], moves: Sequence[Move],
                    target_hole: Optional[int] = None) -> bool:
    """
    Проверяет корректность решения.

    Правила:
    - все колышки стоят в лунках раскладки;
    - каждый ход допустим в текущей позиции (есть в legal_moves);
    - после всех ходов остаётся ровно один колышек;
    - если задан target_hole, он стоит именно там.
    """
    state = frozenset(pegs)
    if any(h not in layout for h in state):
        return False

    for move in moves:
        if tuple(move) not in legal_moves(state, layout):
            return False
        state = apply_move(state, tuple(move))

    if len(state) != 1:
        return False
    return target_hole is None or target_hole in state
