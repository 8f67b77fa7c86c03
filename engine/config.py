"""
Configuration for the TicTacToe engine.
All the settings for the board, scoring and the computer opponent.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Change these values (or override them on an instance) to tune the engine.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3
    GRID_SIZE = BOARD_SIZE * BOARD_SIZE  # 9 cells

    # How an empty cell is written when the board is serialized
    EMPTY_CHAR = "-"

    # ==================== SEARCH SETTINGS ====================
    # Terminal scores are WIN_SCORE - depth (computer wins)
    # and depth - WIN_SCORE (human wins)
    WIN_SCORE = 10

    # Pick a random cell on an empty board instead of searching.
    # A full search from an empty board always scores 0 anyway.
    RANDOM_OPENING = True

    # Flip a coin between equally scored moves.
    # If False, the first best move (lowest index) is kept.
    RANDOM_TIE_BREAK = True

    # ==================== DEBUG SETTINGS ====================
    DEBUG_MODE = False
