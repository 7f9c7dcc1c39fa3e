"""
solvers/dfs_memo.py

DFS с мемоизацией по каноническому ключу состояния.
"""

from typing import AbstractSet, Dict, List, Optional
import time

from .base import BaseSolver, SolverStats, SolveResult, NO_SOLUTION
from core.layout import Layout
from core.moves import Move, PegSet, apply_move, legal_moves
from core.utils import state_key
from utils.error_handling import SolverTimeoutError, validate_pegs, validate_target


class DFSMemoSolver(BaseSolver):
    """
    Полный перебор в глубину с мемоизацией.

    Особенности:
    - Ходы перебираются в порядке генерации, первый успех завершает поиск
    - Мемо: ключ состояния → найденная цепочка ходов или None (решения нет)
    - Каждая различимая позиция раскрывается не более одного раза
    - Мемо живёт в пределах одного вызова solve()

    Число колышков строго убывает с каждым ходом, так что циклов нет,
    а глубина рекурсии не превышает (колышков - 1).
    """

    def __init__(self, target_hole: Optional[int] = None,
                 timeout: Optional[float] = None, verbose: bool = False):
        """
        Args:
            target_hole: лунка, где должен остаться последний колышек (None — любая)
            timeout: лимит времени в секундах (None — без ограничения)
            verbose: писать ход поиска в лог на уровне info
        """
        super().__init__(verbose=verbose)
        self.target_hole = target_hole
        self.timeout = timeout
        self.memo: Dict[str, Optional[List[Move]]] = {}
        self._layout: Optional[Layout] = None
        self._deadline: Optional[float] = None

    def solve(self, pegs: AbstractSet[int], layout: Layout) -> SolveResult:
        """
        Ищет последовательность ходов до одного колышка.

        Returns:
            Список ходов (пустой, если позиция уже решена) или NO_SOLUTION

        Raises:
            InvalidBoardError: колышки или целевая лунка вне доски
            SolverTimeoutError: превышен timeout
        """
        pegs = validate_pegs(pegs, layout)
        validate_target(self.target_hole, layout)

        self.stats = SolverStats()
        self.memo = {}
        self._layout = layout
        start = time.time()
        self._deadline = start + self.timeout if self.timeout is not None else None

        self._log(f"Starting DFS with memoization (pegs={len(pegs)}, target={self.target_hole})")

        try:
            # Пустая доска: одного оставшегося колышка не будет никогда
            result = self._dfs(pegs, 0) if pegs else None
        finally:
            self.stats.time_elapsed = time.time() - start
            self._layout = None

        if result is None:
            self._log(f"No solution found. Stats: {self.stats}")
            return NO_SOLUTION

        self.stats.solution_length = len(result)
        self._log(f"Solution found: {len(result)} moves. Stats: {self.stats}")
        return list(result)

    def _dfs(self, pegs: PegSet, depth: int) -> Optional[List[Move]]:
        """Рекурсивный поиск; None — из этой позиции решения нет."""
        key = state_key(pegs)
        if key in self.memo:
            self.stats.memo_hits += 1
            return self.memo[key]

        self.stats.nodes_visited += 1
        self.stats.max_depth = max(self.stats.max_depth, depth)
        if self._deadline is not None and time.time() > self._deadline:
            raise SolverTimeoutError(
                f"Поиск прерван по таймауту {self.timeout}s "
                f"({self.stats.nodes_visited} позиций)"
            )

        if len(pegs) == 1:
            if self.target_hole is None or self.target_hole in pegs:
                return []
            self.memo[key] = None
            return None

        for move in legal_moves(pegs, self._layout):
            path = self._dfs(apply_move(pegs, move), depth + 1)
            if path is not None:
                result = [move] + path
                self.memo[key] = result
                return result

        self.memo[key] = None
        return None


def solve(pegs: AbstractSet[int], layout: Layout,
          target_hole: Optional[int] = None,
          timeout: Optional[float] = None) -> SolveResult:
    """
    Решает позицию: список ходов или NO_SOLUTION.

    Args:
        pegs: занятые лунки
        layout: раскладка доски
        target_hole: где должен остаться последний колышек (None — где угодно)
        timeout: лимит времени в секундах
    """
    return DFSMemoSolver(target_hole=target_hole, timeout=timeout).solve(pegs, layout)
