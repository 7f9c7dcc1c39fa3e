"""
solvers/base.py

Базовый класс решателя и результат "решения нет".
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import AbstractSet, List, Union

from core.layout import Layout
from core.moves import Move
from utils.logging import get_logger


class NoSolution:
    """
    Результат "решения нет".

    Единственный экземпляр — NO_SOLUTION. Ложен в булевом контексте,
    но отличим от пустого решения [] через `is NO_SOLUTION`.
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NO_SOLUTION"


NO_SOLUTION = NoSolution()

SolveResult = Union[List[Move], NoSolution]


@dataclass
class SolverStats:
    """Статистика работы решателя."""
    nodes_visited: int = 0
    memo_hits: int = 0
    max_depth: int = 0
    time_elapsed: float = 0.0
    solution_length: int = 0

    def __str__(self) -> str:
        return (
            f"Nodes: {self.nodes_visited}, "
            f"Memo hits: {self.memo_hits}, "
            f"Depth: {self.max_depth}, "
            f"Time: {self.time_elapsed:.3f}s"
        )


class BaseSolver(ABC):
    """
    Базовый класс решателя.

    Наследники реализуют solve() и возвращают список ходов или NO_SOLUTION.
    """

    def __init__(self, verbose: bool = False):
        self.verbose = verbose
        self.stats = SolverStats()

    @abstractmethod
    def solve(self, pegs: AbstractSet[int], layout: Layout) -> SolveResult:
        """
        Решает головоломку.

        Args:
            pegs: начальный набор колышков
            layout: раскладка доски

        Returns:
            Список ходов (from, over, to) или NO_SOLUTION
        """
        pass

    def _log(self, message: str) -> None:
        """Пишет в лог на уровне debug, при verbose=True — на info."""
        logger = get_logger()
        if self.verbose:
            logger.info(f"[{self.__class__.__name__}] {message}")
        else:
            logger.debug(f"[{self.__class__.__name__}] {message}")

