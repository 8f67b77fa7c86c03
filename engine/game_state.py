"""
Game state management for TicTacToe.
Tracks the board, whose turn it is, and how the game ended.
"""

from typing import Callable, List, Optional, Sequence, Tuple

import numpy as np

from .ai_player import AIPlayer
from .board import Board, Cell, Outcome, Player, board_to_string, empty_cells, new_board
from .config import GameConfig
from .errors import GameOverError, InvalidMoveError, InvalidStateError
from .move_validator import MoveValidator
from .snapshot import GameSnapshot
from .win_checker import WinChecker, WinResult


# Called once when a game ends: (outcome, winning line or None for a tie)
GameOverCallback = Callable[[Outcome, Optional[Tuple[int, int, int]]], None]


class Game:
    """
    A game of TicTacToe between a human (PLAYER_ONE) and the computer (PLAYER_TWO).

    Tracks:
    - The 9 cell board
    - Current player
    - Whether the game is over, the outcome and the winning line
    - The last move computed for the computer

    The game owns its board. Callers read it through `board`, which
    returns a tuple copy, and change it through `make_move` or the
    restore setters.
    """

    def __init__(
        self,
        rng=None,
        config: Optional[GameConfig] = None,
        on_game_over: Optional[GameOverCallback] = None,
        starting_player: Optional[Player] = None
    ):
        """
        Create a new game with an empty board.

        Args:
            rng: Random source shared by the starting player roll and the AI
                (anything with a random() method; default numpy's Generator).
            config: Game settings (default: GameConfig()).
            on_game_over: Called once with (outcome, winning_line) when the game ends.
            starting_player: Who moves first. Random if None.
        """
        self.config = config or GameConfig()
        self.rng = rng if rng is not None else np.random.default_rng()
        self.on_game_over = on_game_over

        self.win_checker = WinChecker(self.config)
        self.validator = MoveValidator(self.config)
        self.ai = AIPlayer(self.rng, self.config)

        self._board: Board = new_board()
        self._current_player = starting_player or self._random_player()
        self._is_over = False
        self._outcome = Outcome.CONTINUE
        self._winning_line: Optional[Tuple[int, int, int]] = None
        self._next_automated_move: Optional[int] = None

    def _random_player(self) -> Player:
        return Player.PLAYER_ONE if self.rng.random() < 0.5 else Player.PLAYER_TWO

    # ==================== MOVES ====================

    def make_move(self, index: int) -> WinResult:
        """
        Place the current player's mark at `index`.

        Switches turns, then checks the lines through `index`. If the move
        ends the game, the game is marked over and on_game_over fires.

        Args:
            index: Cell index (0-8).

        Returns:
            The WinResult for this move.

        Raises:
            GameOverError: if the game is already over.
            InvalidMoveError: if the cell is out of range or occupied.
        """
        result = self.validator.validate_move(self, index)
        if not result.is_valid:
            if self._is_over:
                raise GameOverError(result.error_message)
            raise InvalidMoveError(result.error_message)

        self._board[index] = self._current_player
        self._current_player = self._current_player.opposite()

        win = self.win_checker.check(self._board, index)
        self._outcome = win.outcome
        self._winning_line = win.winning_line

        if win.is_terminal:
            self._end_game()

        return win

    def compute_move(self, player: Optional[Player] = None) -> int:
        """
        Work out the best move without playing it.

        This runs a full search and can take a noticeable moment early in
        the game, so front ends should call it away from their input loop.

        Args:
            player: Side to compute for (default: the current player).

        Returns:
            The chosen index, also kept in `next_automated_move`.

        Raises:
            GameOverError: if the game is already over.
        """
        if self._is_over:
            raise GameOverError("Game is already over!")

        self._next_automated_move = self.ai.get_best_move(
            self._board, player or self._current_player
        )
        return self._next_automated_move

    def play_automated_move(self) -> WinResult:
        """Compute the current player's best move and play it."""
        return self.make_move(self.compute_move())

    def restart(self):
        """Clear the board and re-roll who goes first."""
        for i in range(len(self._board)):
            self._board[i] = None
        self._is_over = False
        self._outcome = Outcome.CONTINUE
        self._winning_line = None
        self._next_automated_move = None
        self._current_player = self._random_player()

    def _end_game(self):
        self._is_over = True
        if self.config.DEBUG_MODE:
            print(f"Game over: {self._outcome.name}, line {self._winning_line}")
        if self.on_game_over is not None:
            self.on_game_over(self._outcome, self._winning_line)

    # ==================== QUERIES ====================

    def get_empty_cells(self) -> List[int]:
        """Get the indices of all empty cells."""
        return empty_cells(self._board)

    def is_board_empty(self) -> bool:
        return all(cell is None for cell in self._board)

    @property
    def next_automated_move(self) -> Optional[int]:
        """Index chosen by the last compute_move, or None."""
        return self._next_automated_move

    # ==================== STATE (restore setters never check for a win) ====================

    @property
    def board(self) -> Tuple[Cell, ...]:
        return tuple(self._board)

    @board.setter
    def board(self, cells: Sequence[Cell]):
        if len(cells) != self.config.GRID_SIZE:
            raise InvalidStateError(
                f"Board must have {self.config.GRID_SIZE} cells, got {len(cells)}"
            )
        for cell in cells:
            if cell is not None and not isinstance(cell, Player):
                raise InvalidStateError(f"Unknown mark {cell!r}")
        self._board[:] = cells

    @property
    def current_player(self) -> Player:
        return self._current_player

    @current_player.setter
    def current_player(self, player: Player):
        self._current_player = Player(player)

    @property
    def is_over(self) -> bool:
        return self._is_over

    @is_over.setter
    def is_over(self, value: bool):
        self._is_over = bool(value)

    @property
    def outcome(self) -> Outcome:
        return self._outcome

    @outcome.setter
    def outcome(self, outcome: Outcome):
        self._outcome = Outcome(outcome)

    @property
    def winning_line(self) -> Optional[Tuple[int, int, int]]:
        return self._winning_line

    @winning_line.setter
    def winning_line(self, line: Optional[Sequence[int]]):
        self._winning_line = tuple(line) if line is not None else None

    def snapshot(self) -> GameSnapshot:
        """Copy the state a front end needs to rebuild this game."""
        return GameSnapshot(
            board=self.board,
            current_player=self._current_player,
            is_over=self._is_over,
            outcome=self._outcome,
            winning_line=self._winning_line,
        )

    def restore(self, snapshot: GameSnapshot):
        """
        Put the game back into a saved state.

        Does not run the win checker or fire on_game_over.

        Raises:
            InvalidStateError: if the snapshot is inconsistent.
        """
        result = self.validator.validate_snapshot(snapshot)
        if not result.is_valid:
            raise InvalidStateError(result.error_message)

        self.board = snapshot.board
        self.current_player = snapshot.current_player
        self.is_over = snapshot.is_over
        self.outcome = snapshot.outcome
        self.winning_line = snapshot.winning_line
        self._next_automated_move = None

    @classmethod
    def from_snapshot(cls, snapshot: GameSnapshot, **kwargs) -> "Game":
        """Create a game already in a saved state."""
        game = cls(**kwargs)
        game.restore(snapshot)
        return game

    # ==================== DISPLAY ====================

    def print_board(self):
        """Print the board to console."""
        print(self.pretty())

        if self._is_over:
            winner = self._outcome.winner
            if winner:
                print(f"\n{winner.value} WINS! Line: {self._winning_line}")
            else:
                print("\nIt's a TIE!")
        else:
            print(f"\nCurrent turn: {self._current_player.value}")

    def pretty(self) -> str:
        """The board as 3 text rows, empty cells shown by their index."""
        cells = [str(i) if cell is None else cell.value for i, cell in enumerate(self._board)]
        size = self.config.BOARD_SIZE
        rows = [" | ".join(cells[i:i + size]) for i in range(0, len(cells), size)]
        return "\n---------\n".join(rows)

    def __str__(self) -> str:
        return (f"Game(current_player={self._current_player.value}, "
                f"board={board_to_string(self._board, self.config.EMPTY_CHAR)}, "
                f"outcome={self._outcome.name})")


# Quick test
if __name__ == "__main__":
    print("Testing Game...")

    game = Game(starting_player=Player.PLAYER_ONE,
                on_game_over=lambda outcome, line: print(f"\n>>> {outcome.name} {line}"))

    # X takes the top row
    for index in [0, 3, 1, 4, 2]:
        print(f"\n{game.current_player.value} moves to {index}")
        game.make_move(index)
        game.print_board()

    assert game.is_over and game.winning_line == (0, 1, 2)

    game.restart()
    print(f"\nRestarted, {game.current_player.value} goes first")

    print("\nGame test done!")
