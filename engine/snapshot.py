"""
Saved game state.

Holds the five values a front end needs to put a game back the way it was:
board, whose turn it is, the terminal flag, the outcome and the winning line.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from .board import Cell, Outcome, Player, board_from_string, board_to_string
from .errors import InvalidStateError


@dataclass(frozen=True)
class GameSnapshot:
    """Immutable copy of a game's restorable state."""
    board: Tuple[Cell, ...]
    current_player: Player
    is_over: bool = False
    outcome: Outcome = Outcome.CONTINUE
    winning_line: Optional[Tuple[int, int, int]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to plain JSON-compatible values."""
        return {
            "board": board_to_string(self.board),
            "current_player": self.current_player.value,
            "is_over": self.is_over,
            "outcome": self.outcome.name,
            "winning_line": list(self.winning_line) if self.winning_line else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GameSnapshot":
        """
        Build a snapshot from values written by to_dict.

        Raises:
            InvalidStateError: if a field is missing or unreadable.
        """
        try:
            line = data.get("winning_line")
            return cls(
                board=tuple(board_from_string(data["board"])),
                current_player=Player(data["current_player"]),
                is_over=bool(data.get("is_over", False)),
                outcome=Outcome[data.get("outcome", Outcome.CONTINUE.name)],
                winning_line=tuple(int(i) for i in line) if line else None,
            )
        except (KeyError, ValueError, TypeError) as e:
            raise InvalidStateError(f"Cannot read saved game: {e}") from e
