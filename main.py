"""
Console game for TicTacToe.

This script ties the engine to a terminal:
- The human types a cell index to move
- The computer answers with the minimax AI
- The game over callback prints the result

Run this script to play TicTacToe against the computer!
"""

import sys
from typing import Optional, Tuple

import numpy as np

from engine import Game, GameConfig, InvalidMoveError, Outcome, Player


class TicTacToeConsole:
    """
    Main controller for a console game.

    Game flow:
    1. A random player goes first
    2. On the human's turn, read a cell index from the keyboard
    3. On the computer's turn, compute the best move and play it
    4. Repeat until someone wins or it's a tie
    """

    def __init__(
        self,
        computer_player: Player = Player.PLAYER_TWO,
        seed: Optional[int] = None,
        debug: bool = False
    ):
        """
        Initialize the console game.

        Args:
            computer_player: Which player the computer controls.
            seed: Seed for the random source, for repeatable games.
            debug: Print search statistics.
        """
        self.computer_player = computer_player
        self.human_player = computer_player.opposite()

        config = GameConfig()
        config.DEBUG_MODE = debug

        self.game = Game(
            rng=np.random.default_rng(seed),
            config=config,
            on_game_over=self._on_game_over
        )
        self.is_running = False

        print("\n" + "=" * 40)
        print("   TicTacToe")
        print(f"   Human plays:    {self.human_player.value}")
        print(f"   Computer plays: {self.computer_player.value}")
        print("=" * 40)
        print("Type a cell number (0-8), 'h' for a hint, 'r' to restart, 'q' to quit.\n")

    def start(self):
        """Start the game."""
        self.is_running = True
        while self.is_running:
            self._game_loop()
            if self.is_running:
                self._ask_play_again()

    def _game_loop(self):
        """Play one game."""
        self.game.print_board()

        while self.is_running and not self.game.is_over:
            if self.game.current_player == self.computer_player:
                self._computer_move()
            else:
                self._human_move()

    def _human_move(self):
        """Read and play the human's move."""
        command = input(f"\n{self.human_player.value} > ").strip().lower()

        if command == "q":
            print("\nGame quit by user.")
            self.is_running = False
            return
        if command == "r":
            self._reset_game()
            self.game.print_board()
            return
        if command == "h":
            print(self.game.ai.get_move_suggestion(list(self.game.board), self.human_player))
            return

        try:
            index = int(command)
        except ValueError:
            print(f"Not a cell number: {command!r}")
            return

        try:
            self.game.make_move(index)
        except InvalidMoveError as e:
            print(f"Invalid move: {e}")
            return

        self.game.print_board()

    def _computer_move(self):
        """Compute and play the computer's move."""
        print("\n>>> Computer is thinking...")
        move = self.game.compute_move(self.computer_player)
        print(f">>> Computer plays {move}")
        self.game.make_move(move)
        self.game.print_board()

    def _on_game_over(self, outcome: Outcome, winning_line: Optional[Tuple[int, int, int]]):
        """Show the final game result."""
        print("\n" + "=" * 40)
        print("   GAME OVER!")
        print("=" * 40)

        winner = outcome.winner
        if winner is None:
            print("It's a tie! Good game!")
        elif winner == self.human_player:
            print(f"Congratulations! You won with {list(winning_line)}!")
        else:
            print(f"Computer wins with {list(winning_line)}! Better luck next time!")

    def _ask_play_again(self):
        answer = input("\nPlay again? [y/N] ").strip().lower()
        if answer == "y":
            self._reset_game()
        else:
            self.is_running = False

    def _reset_game(self):
        """Reset the game for a new round."""
        print("\nResetting game...")
        self.game.restart()
        print(f"{self.game.current_player.value} goes first.")


def main(argv=None) -> int:
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Play TicTacToe against the computer")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed the random source (repeatable openings and tie breaks)"
    )
    parser.add_argument(
        "--cpu-plays",
        choices=[p.value for p in Player],
        default=Player.PLAYER_TWO.value,
        help="Which mark the computer plays (default: O)"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Print search statistics"
    )

    args = parser.parse_args(argv)

    console = TicTacToeConsole(
        computer_player=Player(args.cpu_plays),
        seed=args.seed,
        debug=args.debug
    )

    try:
        console.start()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")

    return 0


if __name__ == "__main__":
    sys.exit(main())
