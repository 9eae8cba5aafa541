"""Tests for the Board grid and drop rule."""

import pytest

from multiconnect.game.board import Board
from multiconnect.utils import ContractViolation


class TestBoardInitialization:

    def test_empty_board(self):
        board = Board(4, 5)
        assert board.height == 4
        assert board.width == 5
        assert all(board.get_cell(r, c) is None for r in range(4) for c in range(5))
        assert not board.is_full()
        assert board.valid_columns() == [0, 1, 2, 3, 4]

    def test_default_size(self):
        board = Board()
        assert (board.height, board.width) == (6, 7)

    @pytest.mark.parametrize("height,width", [(0, 7), (6, 0), (-1, 3)])
    def test_non_positive_dimensions(self, height, width):
        with pytest.raises(ContractViolation):
            Board(height, width)


class TestGravity:

    def test_pieces_stack_from_the_bottom(self):
        board = Board(4, 3)
        for n in range(1, 5):
            row = board.find_landing_row(1)
            assert row == 4 - n
            board.place(row, 1, 1 + n % 2)
        assert board.find_landing_row(1) is None
        assert board.valid_columns() == [0, 2]

    def test_columns_are_independent(self):
        board = Board(3, 3)
        board.place(board.find_landing_row(0), 0, 1)
        assert board.find_landing_row(0) == 1
        assert board.find_landing_row(2) == 2

    @pytest.mark.parametrize("column", [-1, 3, 10])
    def test_out_of_range_column(self, column):
        board = Board(3, 3)
        with pytest.raises(ContractViolation):
            board.find_landing_row(column)


class TestPlacement:

    def test_place_sets_cell(self):
        board = Board(3, 3)
        board.place(2, 1, 2)
        assert board.get_cell(2, 1) == 2
        assert board.piece_count == 1

    def test_occupied_cell_is_a_contract_violation(self):
        board = Board(3, 3)
        board.place(2, 0, 1)
        with pytest.raises(ContractViolation):
            board.place(2, 0, 2)
        assert board.get_cell(2, 0) == 1

    @pytest.mark.parametrize("row,column", [(-1, 0), (3, 0), (0, -1), (0, 3)])
    def test_off_board_is_a_contract_violation(self, row, column):
        board = Board(3, 3)
        with pytest.raises(ContractViolation):
            board.place(row, column, 1)

    def test_player_id_must_be_positive(self):
        board = Board(3, 3)
        with pytest.raises(ContractViolation):
            board.place(2, 0, 0)

    def test_is_full(self):
        board = Board(2, 2)
        for col in range(2):
            for _ in range(2):
                assert not board.is_full()
                board.place(board.find_landing_row(col), col, 1)
        assert board.is_full()
        assert board.valid_columns() == []


class TestQueries:

    def test_get_state_is_a_copy(self):
        board = Board(2, 2)
        state = board.get_state()
        state[1, 1] = 9
        assert board.get_cell(1, 1) is None

    def test_render(self):
        board = Board(2, 3)
        board.place(1, 2, 1)
        lines = board.render().splitlines()
        assert lines[0] == "|-----|"
        assert lines[1] == "|. . .|"
        assert lines[2] == "|. . 1|"
        assert lines[-1] == "|0 1 2|"
        assert str(board) == board.render()
