"""
AI player for TicTacToe.
Uses the Minimax algorithm to choose the best move.
"""

from typing import Dict, Optional, Tuple

import numpy as np

from .board import Board, Outcome, Player, empty_cells, index_to_coords
from .config import GameConfig
from .errors import GameOverError
from .win_checker import WinChecker


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    Scores are always from PLAYER_TWO's point of view (the computer):
    PLAYER_TWO maximizes, PLAYER_ONE minimizes. A win found at depth d
    scores WIN_SCORE - d, a loss d - WIN_SCORE, so quick wins and slow
    losses are preferred.

    Equally scored moves are chosen between with a coin flip from `rng`,
    which only needs a `random()` method returning a float in [0, 1).
    numpy's Generator (the default) and random.Random both work.
    """

    def __init__(self, rng=None, config: Optional[GameConfig] = None):
        """
        Initialize the AI player.

        Args:
            rng: Random source for the opening move and tie breaks.
            config: Game settings (default: GameConfig()).
        """
        self.rng = rng if rng is not None else np.random.default_rng()
        self.config = config or GameConfig()
        self.win_checker = WinChecker(self.config)

        # Keep track of how many positions we've evaluated (for debugging)
        self.positions_evaluated = 0

    def get_best_move(self, board: Board, player: Player) -> int:
        """
        Get the best move for `player` on the current board.

        The board is used as scratch space: every mark placed during the
        search is removed again before this returns.

        Args:
            board: The game's board (mutable list of 9 cells).
            player: The side to move.

        Returns:
            Index of the chosen cell.
        """
        self.positions_evaluated = 0

        available = empty_cells(board)
        if not available:
            raise GameOverError("No empty cells left to play")

        # Empty board: every first move scores 0, so any of them will do
        if self.config.RANDOM_OPENING and len(available) == len(board):
            move = int(self.rng.random() * len(board))
            if self.config.DEBUG_MODE:
                print(f"AI opening move: {move} (random)")
            return move

        score, move = self._minimax(board, 0, player, None)

        if self.config.DEBUG_MODE:
            print(f"AI evaluated {self.positions_evaluated} positions. "
                  f"Best move: {move} (score: {score})")

        return move

    def score_moves(self, board: Board, player: Player) -> Dict[int, int]:
        """
        Score every legal move for `player`.

        Args:
            board: The game's board (left unchanged).
            player: The side to move.

        Returns:
            {index: score} with scores from PLAYER_TWO's point of view.
        """
        scores = {}
        for index in empty_cells(board):
            board[index] = player
            try:
                scores[index] = self._minimax(board, 1, player.opposite(), index)[0]
            finally:
                board[index] = None
        return scores

    def _minimax(
        self,
        board: Board,
        depth: int,
        player: Player,
        last_index: Optional[int]
    ) -> Tuple[int, Optional[int]]:
        """
        Minimax search over the remaining game tree.

        Args:
            board: Scratch board.
            depth: Number of scratch moves made so far.
            player: Player to move at this node.
            last_index: Cell of the move that led here (None at the root).

        Returns:
            (score, best index). The index is None at terminal positions.
        """
        self.positions_evaluated += 1

        if depth > 0:
            result = self.win_checker.check(board, last_index)
            if result.outcome == Outcome.PLAYER_TWO_WINS:
                return self.config.WIN_SCORE - depth, None
            elif result.outcome == Outcome.PLAYER_ONE_WINS:
                return depth - self.config.WIN_SCORE, None
            elif result.outcome == Outcome.TIE:
                return 0, None  # Ties help no one

        maximizing = player == Player.PLAYER_TWO
        best_score: Optional[int] = None
        best_index: Optional[int] = None

        for index in empty_cells(board):
            board[index] = player
            try:
                score, _ = self._minimax(board, depth + 1, player.opposite(), index)
            finally:
                board[index] = None  # Clean up when we're done

            if best_score is None:
                better = True
            elif maximizing:
                better = score > best_score
            else:
                better = score < best_score

            # Equally good options, so randomly choose one
            if not better and score == best_score and self.config.RANDOM_TIE_BREAK:
                better = self.rng.random() < 0.5

            if better:
                best_score = score
                best_index = index

        return best_score, best_index

    def get_move_suggestion(self, board: Board, player: Player) -> str:
        """
        Get a human-readable move suggestion.

        Args:
            board: The game's board.
            player: The side to move.

        Returns:
            A string describing the suggested move.
        """
        if not empty_cells(board):
            return "No moves available!"

        move = self.get_best_move(board, player)
        col, row = index_to_coords(move)
        return f"Place {player.value} at cell {move} (column {col}, row {row})"



# Quick test
if __name__ == "__main__":
    from .board import board_from_string

    print("Testing AIPlayer...")

    ai = AIPlayer(np.random.default_rng(0))

    # Test 1: AI should block a winning move
    board = board_from_string("XX--O----")
    move = ai.get_best_move(board, Player.PLAYER_TWO)
    print(f"X is about to win with 2. AI's move: {move}")
    assert move == 2, f"Expected 2, got {move}"

    # Test 2: AI should take a winning move
    board = board_from_string("OO-XX---X")
    move = ai.get_best_move(board, Player.PLAYER_TWO)
    print(f"O can win with 2. AI's move: {move}")
    assert move == 2, f"Expected 2, got {move}"
    assert board_from_string("OO-XX---X") == board, "Search left marks behind"

    print("\nAIPlayer test done!")
