"""
Logic module for TicTacToe.
Handles game state, rules, and the AI opponent.
"""

from .config import GameConfig
from .board import Player, Outcome, INDEX_TO_COORDS, index_to_coords, coords_to_index
from .errors import GameError, InvalidMoveError, GameOverError, InvalidStateError
from .win_checker import WinChecker, WinResult, WINNING_LINES
from .move_validator import MoveValidator, ValidationResult
from .ai_player import AIPlayer
from .snapshot import GameSnapshot
from .game_state import Game

__version__ = "1.0.0"
