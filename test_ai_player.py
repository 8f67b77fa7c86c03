"""Tests for the minimax AI."""

import numpy as np
import pytest

from engine import AIPlayer, GameConfig, GameOverError, Player
from engine.board import board_from_string, board_to_string

O = Player.PLAYER_TWO
X = Player.PLAYER_ONE


def test_ai_takes_immediate_win(rng):
    board = board_from_string("OO-XX---X")
    ai = AIPlayer(rng)

    assert ai.get_best_move(board, O) == 2
    assert ai.score_moves(board, O)[2] == 9


def test_ai_blocks_immediate_loss(rng):
    board = board_from_string("XX--O----")
    ai = AIPlayer(rng)

    assert ai.get_best_move(board, O) == 2


def test_ai_delays_a_forced_loss(rng):
    # X threatens 8; blocking there still loses to a fork, but two moves later
    board = board_from_string("XO--X----")
    ai = AIPlayer(rng)

    scores = ai.score_moves(board, O)
    assert scores[8] == -6
    assert all(score == -8 for index, score in scores.items() if index != 8)
    assert ai.get_best_move(board, O) == 8


def test_ai_avoids_losing_corner(rng):
    board = board_from_string("X---O---X")
    ai = AIPlayer(rng)

    scores = ai.score_moves(board, O)
    assert scores == {1: 0, 2: -6, 3: 0, 5: 0, 6: -6, 7: 0}
    for _ in range(10):
        assert ai.get_best_move(board, O) in (1, 3, 5, 7)


def test_ai_minimizes_for_player_one(rng):
    board = board_from_string("OO-XX----")
    ai = AIPlayer(rng)

    assert ai.get_best_move(board, X) == 5


def test_lost_position_still_returns_a_legal_move(rng):
    board = board_from_string("XOXOXO---")
    ai = AIPlayer(rng)

    assert ai.get_best_move(board, O) in (6, 7, 8)
    assert set(ai.score_moves(board, O).values()) == {-8}


def test_search_leaves_board_unchanged(rng):
    board = board_from_string("X---O----")
    before = board_to_string(board)
    ai = AIPlayer(rng)

    ai.get_best_move(board, X)
    ai.score_moves(board, X)

    assert board_to_string(board) == before
    assert ai.positions_evaluated > 0


def test_tie_break_uses_injected_random(always_flip, never_flip):
    board = board_from_string("X---O---X")

    # Equal moves are 1, 3, 5, 7: never flipping keeps the first,
    # always flipping ends on the last
    assert AIPlayer(never_flip).get_best_move(board, O) == 1
    assert AIPlayer(always_flip).get_best_move(board, O) == 7
    assert always_flip.calls > 0


def test_tie_break_can_be_turned_off(always_flip):
    config = GameConfig()
    config.RANDOM_TIE_BREAK = False
    ai = AIPlayer(always_flip, config)

    assert ai.get_best_move(board_from_string("X---O---X"), O) == 1
    assert always_flip.calls == 0


def test_opening_move_is_uniform():
    ai = AIPlayer(np.random.default_rng(7))
    board = [None] * 9

    moves = [ai.get_best_move(board, O) for _ in range(900)]
    counts = np.bincount(moves, minlength=9)

    assert len(counts) == 9
    assert counts.min() > 50
    assert counts.max() < 150
    assert ai.positions_evaluated == 0


def test_full_board_raises(rng):
    with pytest.raises(GameOverError):
        AIPlayer(rng).get_best_move(board_from_string("XOXXOOOXX"), O)


def test_move_suggestion(rng):
    ai = AIPlayer(rng)
    suggestion = ai.get_move_suggestion(board_from_string("OO-XX---X"), O)
    assert suggestion == "Place O at cell 2 (column 2, row 0)"
    assert ai.get_move_suggestion(board_from_string("XOXXOOOXX"), O) == "No moves available!"
