from __future__ import annotations
import random

import pytest

from connectfour.config import COLS, ROWS
from connectfour.core.board import Board
from connectfour.errors import ContractViolation
from connectfour.types import Player

from conftest import drop_all


def _column_is_stacked(board: Board, col: int) -> bool:
    seen_piece = False
    for r in range(board.rows):
        cell = board.cell_at(r, col)
        if cell is not None:
            seen_piece = True
        elif seen_piece:
            return False
    return True


class TestNewBoard:
    def test_starts_empty(self, board):
        assert board.rows == ROWS and board.cols == COLS
        assert all(board.cell_at(r, c) is None for r in range(ROWS) for c in range(COLS))
        assert not board.is_full()
        assert board.playable_columns() == list(range(COLS))

    @pytest.mark.parametrize("col", [-1, 7, 100, -100])
    def test_out_of_range_columns_are_not_playable(self, board, col):
        assert board.is_column_playable(col) is False

    def test_out_of_range_columns_stay_unplayable_on_a_full_board(self, board):
        for c in range(COLS):
            drop_all(board, Player.A, [c] * ROWS)
        assert board.is_column_playable(7) is False
        assert board.is_column_playable(-1) is False


class TestDrop:
    def test_lands_on_bottom_row(self, board):
        assert board.drop(Player.A, 3) == ROWS - 1
        assert board.cell_at(ROWS - 1, 3) is Player.A

    def test_rows_decrease_as_column_fills(self, board):
        rows = drop_all(board, Player.B, [2] * ROWS)
        assert rows == list(range(ROWS - 1, -1, -1))
        assert not board.is_column_playable(2)

    def test_full_column_is_a_contract_violation(self, board):
        drop_all(board, Player.A, [0] * ROWS)
        with pytest.raises(ContractViolation, match="not playable"):
            board.drop(Player.B, 0)

    @pytest.mark.parametrize("col", [-1, COLS])
    def test_out_of_range_drop_is_a_contract_violation(self, board, col):
        with pytest.raises(ContractViolation):
            board.drop(Player.A, col)
        assert all(board.cell_at(ROWS - 1, c) is None for c in range(COLS))

    def test_gravity_holds_for_random_play(self):
        rng = random.Random(7)
        board = Board()
        player = Player.A
        while not board.is_full():
            board.drop(player, rng.choice(board.playable_columns()))
            player = player.other()
            assert all(_column_is_stacked(board, c) for c in range(COLS))


class TestFull:
    def test_full_iff_no_column_playable(self, board):
        for c in range(COLS):
            assert not board.is_full()
            drop_all(board, Player.A, [c] * ROWS)
            assert board.is_full() == (not any(board.is_column_playable(x) for x in range(COLS)))
        assert board.is_full()
        assert board.playable_columns() == []

    def test_not_full_with_one_slot_left(self, board):
        for c in range(COLS):
            drop_all(board, Player.B, [c] * (ROWS if c else ROWS - 1))
        assert not board.is_full()
        assert board.playable_columns() == [0]


class TestCellAt:
    @pytest.mark.parametrize("row,col", [(-1, 0), (0, -1), (ROWS, 0), (0, COLS)])
    def test_rejects_out_of_range(self, board, row, col):
        with pytest.raises(IndexError):
            board.cell_at(row, col)

    def test_size_is_not_configurable(self):
        with pytest.raises(TypeError):
            Board(rows=4, cols=4)

    def test_in_bounds(self, board):
        assert board.in_bounds(0, 0)
        assert board.in_bounds(ROWS - 1, COLS - 1)
        assert not board.in_bounds(-1, 0)
        assert not board.in_bounds(0, COLS)
