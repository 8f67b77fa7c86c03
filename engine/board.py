"""
Board primitives for TicTacToe.

The board is a flat list of 9 cells, indexed 0-8 left to right, top to
bottom. Each cell holds a Player, or None when it is empty.

    0 | 1 | 2
    ---------
    3 | 4 | 5
    ---------
    6 | 7 | 8
"""

from enum import Enum
from typing import List, Optional, Sequence, Tuple

from .config import GameConfig


class Player(Enum):
    """The two players in the game. The value is the mark they place."""
    PLAYER_ONE = "X"
    PLAYER_TWO = "O"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.PLAYER_TWO if self == Player.PLAYER_ONE else Player.PLAYER_ONE


class Outcome(Enum):
    """Result of checking the board after a move."""
    CONTINUE = 0
    TIE = 1
    PLAYER_ONE_WINS = 2
    PLAYER_TWO_WINS = 3

    @classmethod
    def win_for(cls, player: Player) -> "Outcome":
        """Get the winning outcome for a player."""
        return cls.PLAYER_ONE_WINS if player == Player.PLAYER_ONE else cls.PLAYER_TWO_WINS

    @property
    def winner(self) -> Optional[Player]:
        """The winning player, or None for CONTINUE and TIE."""
        if self == Outcome.PLAYER_ONE_WINS:
            return Player.PLAYER_ONE
        if self == Outcome.PLAYER_TWO_WINS:
            return Player.PLAYER_TWO
        return None

    @property
    def is_terminal(self) -> bool:
        return self != Outcome.CONTINUE


Cell = Optional[Player]
Board = List[Cell]

# Index -> (column, row)
INDEX_TO_COORDS: Tuple[Tuple[int, int], ...] = tuple(
    (i % GameConfig.BOARD_SIZE, i // GameConfig.BOARD_SIZE)
    for i in range(GameConfig.GRID_SIZE)
)


def index_to_coords(index: int) -> Tuple[int, int]:
    """Convert a cell index to (column, row)."""
    return INDEX_TO_COORDS[index]


def coords_to_index(col: int, row: int) -> int:
    """Convert (column, row) to a cell index."""
    if not (0 <= col < GameConfig.BOARD_SIZE and 0 <= row < GameConfig.BOARD_SIZE):
        raise ValueError(f"Invalid position ({col}, {row}). Must be 0-2.")
    return row * GameConfig.BOARD_SIZE + col


def new_board() -> Board:
    """Create an empty board."""
    return [None] * GameConfig.GRID_SIZE


def empty_cells(board: Sequence[Cell]) -> List[int]:
    """Get the indices of all empty cells, in ascending order."""
    return [i for i, cell in enumerate(board) if cell is None]


def board_to_string(board: Sequence[Cell], empty_char: str = GameConfig.EMPTY_CHAR) -> str:
    """Serialize a board to a 9 character string, e.g. 'XO-------'."""
    return "".join(empty_char if cell is None else cell.value for cell in board)


def board_from_string(text: str, empty_char: str = GameConfig.EMPTY_CHAR) -> Board:
    """
    Parse a board written by board_to_string.

    Raises:
        ValueError: if the text is not 9 known marks.
    """
    if len(text) != GameConfig.GRID_SIZE:
        raise ValueError(f"Board must have {GameConfig.GRID_SIZE} cells, got {len(text)}")

    board: Board = []
    for char in text:
        if char == empty_char:
            board.append(None)
        else:
            try:
                board.append(Player(char))
            except ValueError:
                raise ValueError(f"Unknown mark {char!r}") from None
    return board
