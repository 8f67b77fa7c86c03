"""
Move validator for TicTacToe.
Validates that moves follow the rules and that saved state makes sense.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Optional

from .board import Outcome, Player
from .config import GameConfig
from .snapshot import GameSnapshot
from .win_checker import WinChecker

if TYPE_CHECKING:
    from .game_state import Game


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Game must not be over
    2. Index must be a cell on the board (0-8)
    3. Can only place on empty cells
    """

    def __init__(self, config: Optional[GameConfig] = None):
        self.config = config or GameConfig()

    def validate_move(self, game: "Game", index: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            game: Current game.
            index: Cell to place a mark on.

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if game.is_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        # bool is an int subclass, but True is not a cell
        if not isinstance(index, int) or isinstance(index, bool):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {index!r}. Must be an integer."
            )

        if not (0 <= index < self.config.GRID_SIZE):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {index}. Must be 0-{self.config.GRID_SIZE - 1}."
            )

        occupant = game.board[index]
        if occupant is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already occupied by {occupant.value}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, game: "Game") -> List[int]:
        """
        Get all valid moves for the current player.

        Args:
            game: Current game.

        Returns:
            List of cell indices, empty once the game is over.
        """
        if game.is_over:
            return []
        return game.get_empty_cells()

    def validate_snapshot(self, snapshot: GameSnapshot) -> ValidationResult:
        """
        Check that saved state describes a game that could exist.

        Args:
            snapshot: State to restore.

        Returns:
            ValidationResult.
        """
        board = snapshot.board

        if len(board) != self.config.GRID_SIZE:
            return ValidationResult(
                is_valid=False,
                error_message=f"Board must have {self.config.GRID_SIZE} cells, got {len(board)}"
            )

        for cell in board:
            if cell is not None and not isinstance(cell, Player):
                return ValidationResult(
                    is_valid=False,
                    error_message=f"Unknown mark {cell!r}"
                )

        if not isinstance(snapshot.current_player, Player):
            return ValidationResult(
                is_valid=False,
                error_message=f"Unknown player {snapshot.current_player!r}"
            )

        if not isinstance(snapshot.outcome, Outcome):
            return ValidationResult(
                is_valid=False,
                error_message=f"Unknown outcome {snapshot.outcome!r}"
            )

        # A game is over exactly when the outcome is a win or a tie
        if bool(snapshot.is_over) != snapshot.outcome.is_terminal:
            return ValidationResult(
                is_valid=False,
                error_message=f"is_over={snapshot.is_over} does not match {snapshot.outcome.name}"
            )

        winner = snapshot.outcome.winner
        line = snapshot.winning_line

        if winner is None:
            if line is not None:
                return ValidationResult(
                    is_valid=False,
                    error_message=f"Winning line {line} given without a winner"
                )
            if snapshot.outcome == Outcome.TIE and any(cell is None for cell in board):
                return ValidationResult(
                    is_valid=False,
                    error_message="A tie needs a full board"
                )
            return ValidationResult(is_valid=True)

        if line is None or len(set(line)) != 3 or not WinChecker.is_winning_line(line):
            return ValidationResult(
                is_valid=False,
                error_message=f"{snapshot.outcome.name} needs one of the 8 winning lines, got {line}"
            )

        if any(board[i] != winner for i in line):
            return ValidationResult(
                is_valid=False,
                error_message=f"Winning line {line} is not held by {winner.value}"
            )

        return ValidationResult(is_valid=True)


# Quick test
if __name__ == "__main__":
    from .game_state import Game

    print("Testing MoveValidator...")

    game = Game(starting_player=Player.PLAYER_ONE)
    validator = MoveValidator()

    result = validator.validate_move(game, 4)
    print(f"Move 4: valid={result.is_valid}, error={result.error_message}")

    game.make_move(4)

    result = validator.validate_move(game, 4)
    print(f"Move 4 again: valid={result.is_valid}, error={result.error_message}")

    result = validator.validate_move(game, 9)
    print(f"Move 9: valid={result.is_valid}, error={result.error_message}")

    result = validator.validate_snapshot(game.snapshot())
    print(f"Snapshot: valid={result.is_valid}, error={result.error_message}")

    print(f"Valid moves: {validator.get_valid_moves(game)}")

    print("\nMoveValidator test done!")
