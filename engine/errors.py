"""
Errors raised by the TicTacToe engine.
These are caller mistakes (bad index, occupied cell, finished game),
not conditions the engine recovers from.
"""


class GameError(Exception):
    """Base class for all engine errors."""


class InvalidMoveError(GameError, ValueError):
    """A move was requested at an out-of-range or occupied cell."""


class GameOverError(InvalidMoveError):
    """A move or a search was requested after the game ended."""


class InvalidStateError(GameError, ValueError):
    """Restored state does not describe a consistent game."""
