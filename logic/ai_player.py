"""
AI player for TicTacToe.
Uses the Minimax algorithm to choose the best move.
"""

import logging
import random
from typing import List, Optional, Tuple

from .config import GameConfig
from .game_state import Board
from .player import Outcome, Player

logger = logging.getLogger(__name__)


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The search is exhaustive (no pruning, no depth limit): the board has
    at most 9 cells, so every line of play is explored. The AI will win if
    possible, block the opponent if needed, and never lose.

    Scores are from the AI player's point of view:
    - a win found at depth d scores WIN_SCORE - d (prefer faster wins)
    - a loss found at depth d scores d - WIN_SCORE (prefer slower losses)
    - a tie or an unfinished position scores 0
    """

    def __init__(self, player: Player = Player.COMPUTER, rng: Optional[random.Random] = None):
        """
        Initialize the AI player.

        Args:
            player: Which player the AI controls (default: COMPUTER)
            rng: Random source for the opening move. Pass a seeded
                random.Random for reproducible games.
        """
        self.player = player
        self.rng = rng or random.Random()

        # How many positions the last search visited (for debugging)
        self.positions_evaluated = 0

    def get_best_move(self, board: Board) -> int:
        """
        Get the best move for the current position.

        On an empty board a random cell is chosen so the opening varies
        from game to game.

        Args:
            board: Current board. It is never modified.

        Returns:
            Index (0-8) of the chosen cell.
        """
        if not board.empty_cells():
            raise ValueError("No empty cells left, there is no move to make")
        if board.winner().is_over:
            raise ValueError("Game is already over, there is no move to make")

        if board.is_empty():
            move = self.rng.randrange(GameConfig.BOARD_SIZE)
            logger.debug("Empty board, random opening at %d", move)
            return move

        self.positions_evaluated = 0
        score, move = self.search(0, self.player, board)

        logger.debug(
            "AI evaluated %d positions. Best move: %s (score: %d)",
            self.positions_evaluated, move, score
        )
        return move

    def evaluate(self, depth: int, board: Board) -> int:
        """
        Score a board using depth.

        Args:
            depth: How many moves away from the real board this one is.
            board: The board to score.

        Returns:
            Positive if the AI has won, negative if its opponent has won,
            0 otherwise.
        """
        outcome = board.winner()
        if outcome == Outcome.win_for(self.player.opposite()):
            return depth - GameConfig.WIN_SCORE
        if outcome == Outcome.win_for(self.player):
            return GameConfig.WIN_SCORE - depth
        return 0

    def search(self, depth: int, player: Player, board: Board) -> Tuple[int, Optional[int]]:
        """
        Minimax over every possible future of the board.

        Each candidate move is tried on a copy of the board. Candidates are
        scanned in ascending cell order and only a strictly better score
        replaces the current best, so ties go to the lowest index.

        Args:
            depth: How many moves away from the real board this one is.
            player: The player to move on this board.
            board: One of the possible boards.

        Returns:
            (score, move) where move is the best cell for `player`, or
            None when the board is already decided.
        """
        self.positions_evaluated += 1

        score = self.evaluate(depth, board)
        if score != 0:
            return score, None  # Somebody has won

        depth += 1
        empty_cells = board.empty_cells()
        if not empty_cells:
            return 0, None  # Full board, tie

        results: List[Tuple[int, int]] = []
        for index in empty_cells:
            next_board = board.copy()
            next_board.apply_move(player, index)
            child_score, _ = self.search(depth, player.opposite(), next_board)
            results.append((child_score, index))

        best_score, best_move = results[0]
        maximizing = player == self.player
        for child_score, index in results[1:]:
            if maximizing and child_score > best_score:
                best_score, best_move = child_score, index
            elif not maximizing and child_score < best_score:
                best_score, best_move = child_score, index

        return best_score, best_move


def select_computer_move(board: Board, rng: Optional[random.Random] = None) -> int:
    """Pick the computer's next move on the given board."""
    return AIPlayer(Player.COMPUTER, rng=rng).get_best_move(board)
