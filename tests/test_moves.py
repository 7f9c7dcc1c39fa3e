"""
tests/test_moves.py

Тесты генерации и применения ходов.
"""

import pytest

from core.board import Board
from core.moves import legal_moves, apply_move, validate_move, replay
from core.utils import state_key
from utils.error_handling import InvalidMoveError, InvalidBoardError


def test_row_of_three_single_move(row3):
    """Тест: 1 2 3, колышки {1, 2} — ровно один ход (1, 2, 3)."""
    assert legal_moves({1, 2}, row3) == [(1, 2, 3)]


def test_apply_row_of_three(row3):
    """Тест: ход (1, 2, 3) из {1, 2} оставляет {3}."""
    assert apply_move(frozenset({1, 2}), (1, 2, 3)) == frozenset({3})


def test_direction_order(square5):
    """
    Тест: порядок направлений — вправо, влево, вниз, вверх.

    Колышек 13 в центре 5×5 окружён колышками 12, 14, 8, 18.
    """
    pegs = {13, 12, 14, 8, 18}

    assert legal_moves(pegs, square5) == [
        (13, 14, 15),
        (13, 12, 11),
        (13, 18, 23),
        (13, 8, 3),
    ]


def test_moves_ordered_by_peg_id(plus33):
    """Тест: на английской доске без центра — четыре хода в лунку 17."""
    pegs = set(plus33.holes) - {17}

    assert legal_moves(pegs, plus33) == [
        (5, 10, 17),
        (15, 16, 17),
        (19, 18, 17),
        (29, 24, 17),
    ]


def test_landed_peg_keeps_id_order(square5):
    """Тест: приземлившийся колышек не уходит в конец, порядок по номерам."""
    pegs = apply_move(frozenset({2, 3, 6, 9, 14}), (3, 2, 1))

    assert pegs == frozenset({1, 6, 9, 14})
    assert legal_moves(pegs, square5) == [(1, 6, 11), (9, 14, 19), (14, 9, 4)]


def test_no_diagonal_moves(square3):
    """Тест: диагональные прыжки недопустимы."""
    # 1 и 5 на диагонали, 9 свободна
    assert legal_moves({1, 5}, square3) == []


def test_no_moves_over_missing_cells(plus33):
    """Тест: прыжок через несуществующую клетку невозможен."""
    # Лунка 4 стоит в (1, 2), слева от неё клеток нет, так что 5 не прыгает влево
    assert legal_moves({4, 5}, plus33) == [(4, 5, 6)]


def test_full_board_has_no_moves(square5):
    """Тест: на полностью заполненной доске ходов нет."""
    assert legal_moves(set(square5.holes), square5) == []


def test_apply_is_pure(row3):
    """Тест: apply_move не меняет вход и детерминирован."""
    pegs = frozenset({1, 2})
    first = apply_move(pegs, (1, 2, 3))
    second = apply_move(pegs, (1, 2, 3))

    assert first == second
    assert pegs == frozenset({1, 2}), "Исходный набор не должен меняться"


def test_apply_does_not_mutate_plain_set(row3):
    pegs = {1, 2}
    result = apply_move(pegs, (1, 2, 3))

    assert pegs == {1, 2}
    assert isinstance(result, frozenset)


def test_generated_moves_always_apply(plus33):
    """Тест: любой сгенерированный ход проходит проверку правил."""
    state = frozenset(plus33.holes) - {17}
    for _ in range(10):
        moves = legal_moves(state, plus33)
        for move in moves:
            apply_move(state, move, check=True)
        if not moves:
            break
        state = apply_move(state, moves[-1])


@pytest.mark.parametrize("move", [
    (3, 2, 1),   # from пуста
    (1, 3, 2),   # over пуста
    (2, 1, 1),   # to занята
])
def test_apply_with_check_rejects_invalid(move):
    with pytest.raises(InvalidMoveError):
        apply_move({1, 2}, move, check=True)


def test_validate_move_accepts_legal():
    validate_move({1, 2}, (1, 2, 3))


def test_replay(square3):
    """Тест: replay применяет ходы последовательно."""
    assert replay({1, 2, 6}, [(1, 2, 3), (3, 6, 9)]) == frozenset({9})
    with pytest.raises(InvalidMoveError):
        replay({1, 2, 6}, [(3, 6, 9)], check=True)


def test_state_key_order_independent():
    """Тест: ключ состояния не зависит от порядка построения."""
    a = frozenset([10, 2, 33])
    b = frozenset([33, 10]) | {2}

    assert state_key(a) == state_key(b) == "2,10,33"
    assert state_key([]) == ""


def test_board_wrapper(square3):
    """Тест: Board хранит позицию и отклоняет лунки вне доски."""
    board = Board(square3, {1, 2, 6})

    assert board.peg_count() == 3
    assert board.get_moves() == [(1, 2, 3)]
    assert board.apply_move((1, 2, 3)).pegs == frozenset({3, 6})
    assert board.key() == "1,2,6"
    assert not board.is_solved()
    assert Board(square3, {9}).is_solved(target_hole=9)
    assert not Board(square3, {9}).is_solved(target_hole=1)
    assert Board(square3, {1, 9}).is_dead()

    with pytest.raises(InvalidBoardError):
        Board(square3, {1, 10})


def test_board_to_matrix(row3):
    board = Board(row3, {1, 3})

    assert board.to_matrix() == [['●', '○', '●']]
    assert Board.with_empty(row3, 2) == board
    assert Board.full(row3).peg_count() == 3
