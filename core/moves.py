"""
core/moves.py

Генерация и применение ходов.

Набор колышков — frozenset номеров лунок. Ход — тройка
(from, over, to): прыгающий колышек, съедаемый колышек и лунка,
куда он приземляется.
"""

from typing import AbstractSet, FrozenSet, Iterable, List, Tuple

from .layout import Layout
from .utils import DIRECTIONS
from utils.error_handling import InvalidMoveError

PegSet = FrozenSet[int]
Move = Tuple[int, int, int]


def legal_moves(pegs: AbstractSet[int], layout: Layout) -> List[Move]:
    """
    Все допустимые ходы.

    Порядок: колышки по возрастанию номера, для каждого —
    направления вправо, влево, вниз, вверх. Первый ход в этом
    порядке используется для "автоматического хода".

    У frozenset нет порядка вставки, поэтому колышки сортируются.
    Это сознательное отличие от обхода в порядке вставки, где
    приземлившийся колышек идёт последним: после нескольких ходов
    первый допустимый ход может отличаться от такого обхода.

    Ход допустим, если over и to — лунки доски, over занята,
    to свободна. Диагональных прыжков нет.
    """
    moves: List[Move] = []
    positions = layout.position_index
    for f in sorted(pegs):
        r, c = positions[f]
        for dr, dc in DIRECTIONS:
            over = layout.hole_at(r + dr, c + dc)
            to = layout.hole_at(r + 2 * dr, c + 2 * dc)
            if over is None or to is None:
                continue
            if over in pegs and to not in pegs:
                moves.append((f, over, to))
    return moves


def validate_move(pegs: AbstractSet[int], move: Move) -> None:
    """
    Проверяет ход против текущего набора колышков.

    Raises:
        InvalidMoveError: from/over пусты или to занята
    """
    f, over, to = move
    if f not in pegs:
        raise InvalidMoveError(f"В лунке {f} нет колышка")
    if over not in pegs:
        raise InvalidMoveError(f"В лунке {over} нет колышка для прыжка")
    if to in pegs:
        raise InvalidMoveError(f"Лунка {to} занята")


def apply_move(pegs: AbstractSet[int], move: Move, check: bool = False) -> PegSet:
    """
    Применяет ход: pegs - {from, over} + {to}.

    Исходный набор не изменяется. По умолчанию ход не проверяется —
    ходы должны приходить из legal_moves().
    """
    if check:
        validate_move(pegs, move)
    f, over, to = move
    return frozenset(pegs).difference((f, over)).union((to,))


def replay(pegs: AbstractSet[int], moves: Iterable[Move], check: bool = False) -> PegSet:
    """Применяет последовательность ходов."""
    state = frozenset(pegs)
    for move in moves:
        state = apply_move(state, move, check=check)
    return state
