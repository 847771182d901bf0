"""
Move validator for TicTacToe.
Validates that moves follow the rules before they reach the board.
"""

from dataclasses import dataclass
from typing import List, Optional

from .config import GameConfig
from .game_state import Board


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
    2. Index must be on the board (0-8)
    3. Can only place on empty cells
    """

    def validate_move(self, board: Board, index: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            index: Cell to place the mark in (0-8).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        if board.winner().is_over:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        if not 0 <= index < GameConfig.BOARD_SIZE:
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {index}. Must be 0-{GameConfig.BOARD_SIZE - 1}."
            )

        if board.cells[index] is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already taken by {board.mark_at(index)}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, board: Board) -> List[int]:
        """
        Get all valid moves on the board.

        Returns:
            List of empty cell indices, or an empty list if the game is over.
        """
        if board.winner().is_over:
            return []
        return board.empty_cells()
