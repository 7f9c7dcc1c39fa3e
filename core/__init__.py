"""
core - Ядро Peg Solitaire

Раскладки досок, генерация и применение ходов, игровая сессия.
"""

from .layout import (
    Layout, build_layout, build_centered_layout,
    build_rectangular_layout, build_grid_layout
)
from .patterns import PATTERNS, DEFAULT_PATTERN, get_pattern, pattern_names
from .moves import Move, PegSet, legal_moves, apply_move, validate_move, replay
from .board import Board
from .session import GameSession, HistoryEntry
from .utils import DIRECTIONS, PEG, HOLE, EMPTY, state_key

__all__ = [
    'Layout', 'build_layout', 'build_centered_layout',
    'build_rectangular_layout', 'build_grid_layout',
    'PATTERNS', 'DEFAULT_PATTERN', 'get_pattern', 'pattern_names',
    'Move', 'PegSet', 'legal_moves', 'apply_move', 'validate_move', 'replay',
    'Board', 'GameSession', 'HistoryEntry',
    'DIRECTIONS', 'PEG', 'HOLE', 'EMPTY', 'state_key',
]
