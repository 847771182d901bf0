"""
Main orchestration script for TicTacToe.

This script ties together:
- The board (cells, win/tie detection)
- Move validation for the human's input
- The minimax AI that plays the computer's moves

Run this script to play TicTacToe against the computer in a terminal!
"""

import argparse
import logging
import random
from typing import Callable, Optional

from logic.config import GameConfig
from logic.game_state import Board
from logic.player import Outcome, Player
from logic.move_validator import MoveValidator
from logic.win_checker import WinChecker
from logic.ai_player import AIPlayer

logger = logging.getLogger(__name__)

QUIT_COMMANDS = ("q", "quit", "exit")


class TicTacToeGame:
    """
    Console controller for a game of TicTacToe.

    Game flow:
    1. Choose who starts (human or computer)
    2. Human (X) types the number of a free cell (1-9)
    3. Computer (O) answers with its minimax move
    4. Repeat until someone wins or it's a tie
    5. Offer a restart
    """

    def __init__(
        self,
        computer_first: bool = False,
        seed: Optional[int] = None,
        use_color: bool = GameConfig.USE_COLOR,
        input_func: Optional[Callable[[str], str]] = None
    ):
        """
        Initialize the game.

        Args:
            computer_first: If True, the computer opens the first game.
            seed: Seed for the computer's random opening move.
            use_color: Color the marks with ANSI escape codes.
            input_func: Where player input comes from (input() by default).
        """
        self.computer_first = computer_first
        self.use_color = use_color
        self.input_func = input_func or input

        self.board = Board()
        self.validator = MoveValidator()
        self.win_checker = WinChecker()
        self.ai = AIPlayer(Player.COMPUTER, rng=random.Random(seed))

        self.is_running = False
        self.games_played = 0

    def start(self):
        """Play games until the player quits."""
        print("\nTicTacToe - you are X, the computer is O.")
        print("Type a cell number to move, 'q' to quit.\n")

        self.is_running = True
        while self.is_running:
            self._start_new_game()
            self._game_loop()
            if not self.is_running:
                break
            self._show_game_result()
            self._ask_restart()

    def _start_new_game(self):
        """Clear the board and make the computer's opening move if it starts."""
        self.board.reset()
        self.games_played += 1
        logger.info(
            "Game %d started, %s moves first",
            self.games_played, "computer" if self.computer_first else "human"
        )
        if self.computer_first:
            self._computer_move()

    def _game_loop(self):
        """Main game loop."""
        while self.is_running and not self.board.winner().is_over:
            print(self.render_board())
            index = self._read_human_move()
            if index is None:
                print("\nGame quit by user.")
                self.is_running = False
                return
            self._process_human_move(index)

    def _read_human_move(self) -> Optional[int]:
        """
        Ask the human for a cell until a valid one is given.

        Returns:
            Cell index (0-8), or None if the human wants to quit.
        """
        while True:
            answer = self.input_func(f"Your move [1-{GameConfig.BOARD_SIZE}]: ").strip().lower()
            if answer in QUIT_COMMANDS:
                return None
            try:
                index = int(answer) - 1
            except ValueError:
                print(f"Please type a number 1-{GameConfig.BOARD_SIZE}.")
                continue

            result = self.validator.validate_move(self.board, index)
            if result.is_valid:
                return index
            print(result.error_message)

    def _process_human_move(self, index: int):
        """
        Apply the human's move, then let the computer answer.

        Args:
            index: A cell already checked by the validator.
        """
        self.board.apply_move(Player.HUMAN, index)
        logger.info("Human played %d", index)

        if not self.board.winner().is_over:
            self._computer_move()

    def _computer_move(self):
        """Ask the AI for a move and play it."""
        index = self.ai.get_best_move(self.board)
        self.board.apply_move(Player.COMPUTER, index)
        logger.info("Computer played %d", index)
        print(f"\n>>> Computer plays {index + 1}")

    def render_board(self) -> str:
        """
        Draw the board as text.

        Empty cells show their number, the winning line (if any) is
        highlighted.
        """
        winning_line = self.win_checker.get_winning_line(self.board.cells) or ()
        grid = self.board.to_grid()

        lines = []
        for row in range(GameConfig.BOARD_WIDTH):
            cells = []
            for col in range(GameConfig.BOARD_WIDTH):
                index = row * GameConfig.BOARD_WIDTH + col
                cells.append(self._render_cell(index, grid[row, col], index in winning_line))
            lines.append("|".join(cells))
        return "\n" + "\n---+---+---\n".join(lines) + "\n"

    def _render_cell(self, index: int, mark: str, is_winning: bool) -> str:
        if self.board.cells[index] is None:
            return f" {index + 1} "

        if not self.use_color:
            return f"[{mark}]" if is_winning else f" {mark} "

        if is_winning:
            color = GameConfig.WINNER_COLOR
        elif self.board.cells[index] == Player.HUMAN:
            color = GameConfig.HUMAN_COLOR
        else:
            color = GameConfig.COMPUTER_COLOR
        return f" {color}{mark}{GameConfig.RESET_COLOR} "

    def result_message(self) -> str:
        """User-facing message for the current outcome."""
        outcome = self.board.winner()
        if outcome == Outcome.HUMAN_WINS:
            return "You won! That was not supposed to happen."
        if outcome == Outcome.COMPUTER_WINS:
            return "Computer wins! Better luck next time!"
        if outcome == Outcome.TIE:
            return "It's a tie! The only winning move is not to play."
        return "Game in progress."

    def _show_game_result(self):
        """Show the final game result."""
        print("\n" + "=" * 40)
        print("   GAME OVER!")
        print("=" * 40)
        print(self.render_board())
        print(self.result_message())
        logger.info("Game %d finished: %s", self.games_played, self.board.winner().value)

    def _ask_restart(self):
        """Ask who starts the next game, or quit."""
        while True:
            answer = self.input_func(
                "\nPlay again? [h] you start, [c] computer starts, [q] quit: "
            ).strip().lower()
            if answer in QUIT_COMMANDS:
                self.is_running = False
                return
            if answer in ("h", "c"):
                self.computer_first = answer == "c"
                return
            print("Please type h, c or q.")


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(description="TicTacToe against a minimax computer")
    parser.add_argument(
        "--computer-first",
        action="store_true",
        help="Let the computer open the first game"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the computer's random opening move"
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Plain text board without ANSI colors"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show debug logging (search statistics)"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else GameConfig.LOG_LEVEL,
        format=GameConfig.LOG_FORMAT
    )

    game = TicTacToeGame(
        computer_first=args.computer_first,
        seed=args.seed,
        use_color=not args.no_color
    )

    try:
        game.start()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
