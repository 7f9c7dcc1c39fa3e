"""
core/board.py

Позиция: раскладка + frozenset занятых лунок.
"""

from typing import List, Optional, Iterable

from .layout import Layout
from .moves import Move, PegSet, apply_move, legal_moves
from .utils import PEG, HOLE, EMPTY, state_key
from utils.error_handling import validate_pegs


class Board:
    """
    Иммутабельная позиция.
    Хранит только номера занятых лунок — эффективно по памяти.
    """
    __slots__ = ('layout', 'pegs', '_hash')

    def __init__(self, layout: Layout, pegs: Iterable[int]):
        self.layout = layout
        self.pegs: PegSet = validate_pegs(pegs, layout)
        self._hash = hash(self.pegs)

    @classmethod
    def full(cls, layout: Layout) -> 'Board':
        """Все лунки заняты."""
        return cls(layout, layout.holes)

    @classmethod
    def with_empty(cls, layout: Layout, *empty: int) -> 'Board':
        """Все лунки заняты, кроме перечисленных."""
        return cls(layout, set(layout.holes).difference(empty))

    def peg_count(self) -> int:
        return len(self.pegs)

    def get_moves(self) -> List[Move]:
        return legal_moves(self.pegs, self.layout)

    def apply_move(self, move: Move, check: bool = False) -> 'Board':
        """Возвращает новую позицию после хода."""
        return Board(self.layout, apply_move(self.pegs, move, check=check))

    def is_solved(self, target_hole: Optional[int] = None) -> bool:
        if len(self.pegs) != 1:
            return False
        return target_hole is None or target_hole in self.pegs

    def is_dead(self) -> bool:
        """Тупик: больше одного колышка и нет ходов."""
        return len(self.pegs) > 1 and not self.get_moves()

    def key(self) -> str:
        return state_key(self.pegs)

    def to_matrix(self) -> List[List[str]]:
        """Матрица символов PEG/HOLE/EMPTY."""
        return [
            [EMPTY if cell is None else (PEG if cell in self.pegs else HOLE) for cell in row]
            for row in self.layout.rows
        ]

    def __hash__(self) -> int:
        return self._hash

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return False
        return self.layout == other.layout and self.pegs == other.pegs

    def __repr__(self) -> str:
        return f"Board({self.peg_count()} pegs)"
