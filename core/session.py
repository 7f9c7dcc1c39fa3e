"""
core/session.py

Игровая сессия: редактор начальной расстановки, линейная история
с undo/redo, автоматический ход и автоматическое решение.

Всё изменяемое состояние живёт здесь; движок (moves, solvers)
получает только явные снимки.
"""

from concurrent.futures import Executor, Future, ThreadPoolExecutor
from dataclasses import dataclass
from typing import List, Optional
import threading

from .board import Board
from .layout import Layout
from .moves import Move, PegSet, apply_move, legal_moves
from .patterns import DEFAULT_PATTERN, get_pattern
from utils.error_handling import GameStateError, InvalidBoardError, InvalidMoveError
from utils.logging import get_logger


@dataclass(frozen=True)
class HistoryEntry:
    """Снимок позиции и ход, который к ней привёл (None — начало)."""
    pegs: PegSet
    move: Optional[Move] = None

    def describe(self) -> str:
        if self.move is None:
            return "[start]"
        return '→'.join(str(h) for h in self.move)


class GameSession:
    """
    Сессия одной доски.

    До start() история пуста, а текущая позиция — расстановка
    из редактора. Любое изменение редактора сбрасывает историю.
    """

    def __init__(self, layout: Optional[Layout] = None, pattern_name: Optional[str] = None):
        if layout is None:
            pattern_name = pattern_name or DEFAULT_PATTERN
            layout = get_pattern(pattern_name)
        self.pattern_name = pattern_name
        self.layout = layout
        self.initial_pegs: PegSet = frozenset(layout.holes)
        self.history: List[HistoryEntry] = []
        self.index = 0
        self._solving = False
        self._lock = threading.Lock()

    # ------------------------------------------------------------------ #
    #                             Редактор                               #
    # ------------------------------------------------------------------ #
    def _ensure_idle(self) -> None:
        """Пока идёт авторешение, история и редактор заблокированы."""
        with self._lock:
            if self._solving:
                raise GameStateError("Идёт поиск решения, дождитесь результата")

    def select_pattern(self, name: str) -> None:
        """Выбор другой доски: расстановка — все лунки."""
        self._ensure_idle()
        self.layout = get_pattern(name)
        self.pattern_name = name
        self.initial_pegs = frozenset(self.layout.holes)
        self._reset_history()

    def toggle_hole(self, hole: int) -> None:
        self._ensure_idle()
        if hole not in self.layout:
            raise InvalidBoardError(f"Лунка {hole} отсутствует на доске")
        self.initial_pegs = self.initial_pegs.symmetric_difference((hole,))
        self._reset_history()

    def toggle_full_board(self) -> None:
        """Заполнить всё; если уже заполнено — очистить."""
        self._ensure_idle()
        if len(self.initial_pegs) == self.layout.hole_count:
            self.initial_pegs = frozenset()
        else:
            self.initial_pegs = frozenset(self.layout.holes)
        self._reset_history()

    def set_initial_pegs(self, pegs) -> None:
        self._ensure_idle()
        self.initial_pegs = Board(self.layout, pegs).pegs
        self._reset_history()

    def _reset_history(self) -> None:
        self.history = []
        self.index = 0

    # ------------------------------------------------------------------ #
    #                               Игра                                 #
    # ------------------------------------------------------------------ #
    @property
    def started(self) -> bool:
        return bool(self.history)

    def start(self) -> None:
        self._ensure_idle()
        if not self.initial_pegs:
            raise GameStateError("Нельзя начать игру без колышков")
        self.history = [HistoryEntry(self.initial_pegs)]
        self.index = 0

    @property
    def current(self) -> HistoryEntry:
        if not self.history:
            return HistoryEntry(self.initial_pegs)
        return self.history[self.index]

    @property
    def board(self) -> Board:
        return Board(self.layout, self.current.pegs)

    @property
    def legal_moves(self) -> List[Move]:
        return legal_moves(self.current.pegs, self.layout)

    @property
    def is_cleared(self) -> bool:
        return self.board.is_solved()

    @property
    def is_stuck(self) -> bool:
        return self.board.is_dead()

    def apply(self, move: Move) -> HistoryEntry:
        """
        Делает ход из текущей позиции.

        История после текущего индекса отбрасывается.
        """
        self._ensure_idle()
        if not self.history:
            raise GameStateError("Игра не начата")
        move = tuple(move)
        if move not in self.legal_moves:
            raise InvalidMoveError(f"Недопустимый ход {move}")

        entry = HistoryEntry(apply_move(self.current.pegs, move), move)
        self.history = self.history[:self.index + 1] + [entry]
        self.index = len(self.history) - 1
        get_logger().debug(f"Ход {entry.describe()}, колышков: {len(entry.pegs)}")
        return entry

    def auto_step(self) -> HistoryEntry:
        """Делает первый ход из legal_moves."""
        moves = self.legal_moves
        if not moves:
            raise InvalidMoveError("Нет допустимых ходов")
        return self.apply(moves[0])

    def auto_clear(self, timeout: Optional[float] = None):
        """
        Решает позицию из текущего снимка.

        При успехе история заменяется: текущий снимок + по записи
        на каждый ход решения, индекс — на последнюю запись.
        При неудаче история не меняется.

        Returns:
            список ходов или NO_SOLUTION
        """
        self._ensure_idle()
        return self._auto_clear(timeout)

    def _auto_clear(self, timeout: Optional[float]):
        # Импорт здесь: solvers зависит от core
        from solvers.base import NO_SOLUTION
        from solvers.dfs_memo import solve

        with self._lock:
            if not self.history:
                raise GameStateError("Игра не начата")
            start_pegs = self.current.pegs
            layout = self.layout

        result = solve(start_pegs, layout, timeout=timeout)
        if result is NO_SOLUTION:
            get_logger().info(f"Решение не найдено ({len(start_pegs)} колышков)")
            return result

        history = [HistoryEntry(start_pegs)]
        state = start_pegs
        for move in result:
            state = apply_move(state, move)
            history.append(HistoryEntry(state, move))
        with self._lock:
            self.history = history
            self.index = len(history) - 1
        get_logger().info(f"Решение найдено: {len(result)} ходов")
        return result

    def auto_clear_async(self, executor: Optional[Executor] = None,
                         timeout: Optional[float] = None) -> Future:
        """
        Запускает auto_clear в рабочем потоке.

        Повторный запрос, пока идёт поиск, отклоняется; ходы,
        undo/redo и редактор до завершения поиска тоже.
        """
        with self._lock:
            if self._solving:
                raise GameStateError("Поиск решения уже идёт")
            if not self.history:
                raise GameStateError("Игра не начата")
            self._solving = True

        own_executor = executor is None
        if own_executor:
            executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="peg-solver")

        def run():
            try:
                return self._auto_clear(timeout)
            finally:
                with self._lock:
                    self._solving = False

        try:
            future = executor.submit(run)
        except Exception:
            with self._lock:
                self._solving = False
            raise
        finally:
            if own_executor:
                executor.shutdown(wait=False)
        return future

    @property
    def solving(self) -> bool:
        return self._solving

    # ------------------------------------------------------------------ #
    #                            Undo / Redo                             #
    # ------------------------------------------------------------------ #
    @property
    def can_undo(self) -> bool:
        return self.index > 0

    @property
    def can_redo(self) -> bool:
        return self.index < len(self.history) - 1

    def undo(self) -> bool:
        self._ensure_idle()
        if not self.can_undo:
            return False
        self.index -= 1
        return True

    def redo(self) -> bool:
        self._ensure_idle()
        if not self.can_redo:
            return False
        self.index += 1
        return True

    def move_log(self) -> List[str]:
        return [entry.describe() for entry in self.history]
