"""
solvers - Решатели Peg Solitaire

Экспортирует:
- DFSMemoSolver: поиск в глубину с мемоизацией
- solve: функциональная обёртка над DFSMemoSolver
- NO_SOLUTION: результат "решения нет"
"""

from .base import BaseSolver, SolverStats, NoSolution, NO_SOLUTION
from .dfs_memo import DFSMemoSolver, solve

__all__ = [
    'BaseSolver',
    'SolverStats',
    'NoSolution',
    'NO_SOLUTION',
    'DFSMemoSolver',
    'solve',
]
