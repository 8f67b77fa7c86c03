"""
Win checker for TicTacToe.
Decides whether the last move won the game, tied it, or the game goes on.
"""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from .board import Cell, Outcome, index_to_coords
from .config import GameConfig


Line = Tuple[int, int, int]

# All possible winning lines (as cell indices)
WINNING_LINES: Tuple[Line, ...] = (
    # Rows
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    # Columns
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    # Diagonals
    (0, 4, 8),
    (2, 4, 6),
)

DIAGONAL = (0, 4, 8)
ANTI_DIAGONAL = (2, 4, 6)


@dataclass(frozen=True)
class WinResult:
    """Result of checking a move."""
    outcome: Outcome
    winning_line: Optional[Line] = None

    @property
    def is_terminal(self) -> bool:
        return self.outcome.is_terminal


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Only the lines running through the cell that was just played can have
    been completed by that move, so those are the only ones checked:
    the column, then the row, then the diagonals the cell lies on.
    That is at most 8 cell reads per move instead of a scan of all 8 lines.

    The checker keeps no state; the board is only read.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        self.config = config or GameConfig()

    def check(self, board: Sequence[Cell], new_index: int) -> WinResult:
        """
        Check the board after a mark was placed at new_index.

        Args:
            board: The 9 cells, read only.
            new_index: Index of the most recently placed mark.

        Returns:
            WinResult with the outcome and, for a win, the 3 winning indices.
        """
        player = board[new_index]
        if player is None:
            raise ValueError(f"Cell {new_index} is empty, nothing to check")

        size = self.config.BOARD_SIZE
        x, y = index_to_coords(new_index)

        line = self._match(board, (x, x + size, x + 2 * size), player)

        if line is None:
            line = self._match(board, (y * size, y * size + 1, y * size + 2), player)

        if line is None and new_index in DIAGONAL:
            line = self._match(board, DIAGONAL, player)

        if line is None and new_index in ANTI_DIAGONAL:
            line = self._match(board, ANTI_DIAGONAL, player)

        if line is not None:
            return WinResult(Outcome.win_for(player), line)

        if all(cell is not None for cell in board):
            return WinResult(Outcome.TIE)

        return WinResult(Outcome.CONTINUE)

    @staticmethod
    def _match(board: Sequence[Cell], line: Line, player: Cell) -> Optional[Line]:
        """Return the line if all 3 cells hold the player's mark."""
        a, b, c = line
        if board[a] == player and board[b] == player and board[c] == player:
            return line
        return None

    @staticmethod
    def is_winning_line(line: Sequence[int]) -> bool:
        """True if the indices form one of the 8 canonical lines."""
        return tuple(sorted(line)) in WINNING_LINES


# Quick test
if __name__ == "__main__":
    from .board import board_from_string

    print("Testing WinChecker...")

    checker = WinChecker()

    # Row win, last move on the right
    result = checker.check(board_from_string("XXXOO----"), 2)
    print(f"Row: {result}")
    assert result == WinResult(Outcome.PLAYER_ONE_WINS, (0, 1, 2))

    # Anti diagonal through the center
    result = checker.check(board_from_string("XXO-O-O--"), 4)
    print(f"Anti diagonal: {result}")
    assert result == WinResult(Outcome.PLAYER_TWO_WINS, (2, 4, 6))

    # Full board, no line
    result = checker.check(board_from_string("XOXXOOOXX"), 8)
    print(f"Full board: {result}")
    assert result == WinResult(Outcome.TIE)

    print("\nWinChecker test done!")
