"""Tests for the board helpers."""

import pytest

from engine import INDEX_TO_COORDS, Player, coords_to_index, index_to_coords
from engine.board import board_from_string, board_to_string, empty_cells


def test_index_to_coords_is_column_then_row():
    assert index_to_coords(0) == (0, 0)
    assert index_to_coords(5) == (2, 1)
    assert index_to_coords(7) == (1, 2)
    assert len(INDEX_TO_COORDS) == 9


def test_coords_round_trip():
    for index in range(9):
        col, row = index_to_coords(index)
        assert coords_to_index(col, row) == index


@pytest.mark.parametrize("col, row", [(-1, 0), (3, 0), (0, 3), (0, -1)])
def test_coords_out_of_range(col, row):
    with pytest.raises(ValueError):
        coords_to_index(col, row)


def test_board_string_and_empty_cells():
    board = board_from_string("X---O---X")
    assert board[4] == Player.PLAYER_TWO
    assert empty_cells(board) == [1, 2, 3, 5, 6, 7]
    assert board_to_string(board) == "X---O---X"

    with pytest.raises(ValueError):
        board_from_string("X---Z---X")
