#!/usr/bin/env python3
"""
main.py

Точка входа для Peg Solitaire.

Использование:
    python main.py                                # "Plus 33" без центральной лунки
    python main.py --pattern "Square 25" --pegs all-13
    python main.py --shape rect=3x3 --pegs 1,2,6 --target 9
    python main.py --step                         # один автоматический ход
    python main.py --list                         # список досок
"""

import sys
import argparse

from core.layout import Layout
from core.board import Board
from core.patterns import DEFAULT_PATTERN, PATTERNS
from peg_io import parse_shape, parse_pegs, display_board, format_move, format_solution
from solvers import DFSMemoSolver, NO_SOLUTION
from solutions.verify import verify_solution
from utils.error_handling import SolverError, SolverTimeoutError
from utils.logging import configure_logging

EXIT_SOLVED = 0
EXIT_NO_SOLUTION = 1
EXIT_BAD_INPUT = 2


def default_pegs(layout: Layout) -> str:
    """Все лунки, кроме центральной (если центр — лунка)."""
    center = layout.hole_at(layout.height // 2, layout.width // 2)
    return f"all-{center}" if center is not None else "all"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Peg Solitaire: ходы и автоматическое решение',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры:
  python main.py --pattern "Diamond 37" --pegs all-19
  python main.py --shape rect=3x3 --pegs 1,2,4
  python main.py --shape centered=3,3,7,7,7,3,3 --pegs all-17 --target 17
        """
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        '--pattern', '-p', default=DEFAULT_PATTERN,
        help=f'Встроенная доска (default: {DEFAULT_PATTERN})'
    )
    source.add_argument(
        '--shape',
        help='Своя форма: centered=3,5,7 или rect=5x5'
    )
    parser.add_argument(
        '--pegs',
        help='Расстановка: all, none, 1,2,3 или all-17 (default: все, кроме центра)'
    )
    parser.add_argument(
        '--target', '-t', type=int, default=None,
        help='Лунка, где должен остаться последний колышек'
    )
    parser.add_argument(
        '--timeout', type=float, default=None,
        help='Лимит времени поиска в секундах'
    )
    parser.add_argument(
        '--step', action='store_true',
        help='Сделать только один автоматический ход (первый допустимый)'
    )
    parser.add_argument(
        '--list', action='store_true',
        help='Показать встроенные доски'
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true',
        help='Подробный лог поиска'
    )
    parser.add_argument(
        '--log-file',
        help='Дополнительно писать лог в файл'
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logger = configure_logging(verbose=args.verbose, log_file=args.log_file)

    if args.list:
        for name, layout in PATTERNS.items():
            print(f"{name}: {layout.hole_count} лунок, {layout.height}x{layout.width}")
        return EXIT_SOLVED

    try:
        layout = parse_shape(args.shape) if args.shape else parse_shape(args.pattern)
        pegs = parse_pegs(args.pegs or default_pegs(layout), layout)
    except SolverError as e:
        print(f"❌ Ошибка: {e}")
        return EXIT_BAD_INPUT

    board = Board(layout, pegs)
    print("=" * 50)
    print(f"🎯 Peg Solitaire ({board.peg_count()} колышков)")
    print("=" * 50)
    print(display_board(layout, pegs, show_numbers=True))
    print()

    if args.step:
        moves = board.get_moves()
        if not moves:
            print("❌ Нет допустимых ходов")
            return EXIT_NO_SOLUTION
        board = board.apply_move(moves[0])
        print(f"Ход: {format_move(moves[0])}")
        print(display_board(layout, board.pegs, show_numbers=True))
        return EXIT_SOLVED

    solver = DFSMemoSolver(target_hole=args.target, timeout=args.timeout, verbose=args.verbose)
    try:
        result = solver.solve(pegs, layout)
    except SolverTimeoutError as e:
        print(f"⏱ {e}")
        return EXIT_NO_SOLUTION
    except SolverError as e:
        print(f"❌ Ошибка: {e}")
        return EXIT_BAD_INPUT

    if result is NO_SOLUTION:
        print("❌ Решение не найдено")
        print(f"📊 Статистика: {solver.stats}")
        return EXIT_NO_SOLUTION

    if not verify_solution(layout, pegs, result, target_hole=args.target):
        logger.error("Найдено некорректное решение (валидация не пройдена)")
        return EXIT_NO_SOLUTION

    print(format_solution(result))
    print(f"\n📊 Статистика: {solver.stats}")
    return EXIT_SOLVED


if __name__ == "__main__":
    sys.exit(main())
