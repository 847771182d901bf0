"""
Board model for TicTacToe.
Tracks the 9 cells of the grid and answers win/tie queries.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

import numpy as np

from .config import GameConfig
from .player import Outcome, Player
from .win_checker import WinChecker

logger = logging.getLogger(__name__)

_win_checker = WinChecker()


@dataclass
class Board:
    """
    The TicTacToe board.

    Cells are numbered 0-8 in row-major order:

        0 1 2
        3 4 5
        6 7 8

    None means empty, otherwise the Player whose mark is in the cell.
    Marks are only removed by a full reset().
    """

    cells: List[Optional[Player]] = field(
        default_factory=lambda: [None] * GameConfig.BOARD_SIZE
    )

    @classmethod
    def from_marks(cls, marks: Sequence[str]) -> "Board":
        """
        Build a board from display marks.

        Args:
            marks: 9 strings, "X" for human, "O" for computer,
                "" or " " for an empty cell.

        Returns:
            A new Board.
        """
        if len(marks) != GameConfig.BOARD_SIZE:
            raise ValueError(
                f"Expected {GameConfig.BOARD_SIZE} marks, got {len(marks)}"
            )
        cells = [None if mark.strip() == "" else Player.from_mark(mark) for mark in marks]
        return cls(cells=cells)

    def reset(self):
        """Clear the board so it can be used again."""
        for index in range(GameConfig.BOARD_SIZE):
            self.cells[index] = None
        logger.debug("Board reset")

    def apply_move(self, player: Player, index: int):
        """
        Record a player's move.

        The board does not check that the cell is empty; callers validate
        moves first (see MoveValidator).

        Args:
            player: The player making the move.
            index: Cell index (0-8).
        """
        if not isinstance(player, Player):
            raise TypeError(f"Expected a Player, got {player!r}")
        if not 0 <= index < GameConfig.BOARD_SIZE:
            raise IndexError(f"Cell index {index} out of range 0-{GameConfig.BOARD_SIZE - 1}")
        self.cells[index] = player

    def empty_cells(self) -> List[int]:
        """Indices of all empty cells, in ascending order."""
        return [index for index, cell in enumerate(self.cells) if cell is None]

    def is_empty(self) -> bool:
        return all(cell is None for cell in self.cells)

    def is_full(self) -> bool:
        return all(cell is not None for cell in self.cells)

    def is_line_win(self, player: Player) -> bool:
        """True if the player owns a full row, column or diagonal."""
        return _win_checker.is_line_win(self.cells, player)

    def winner(self) -> Outcome:
        """
        Find out how the game stands.

        Returns:
            HUMAN_WINS or COMPUTER_WINS if a line is complete, TIE if the
            board is full, IN_PROGRESS otherwise.
        """
        return _win_checker.check_outcome(self.cells)

    def copy(self) -> "Board":
        """Create an independent copy of the board."""
        return Board(cells=list(self.cells))

    def mark_at(self, index: int) -> str:
        """Display mark of a cell (EMPTY_MARK if empty)."""
        cell = self.cells[index]
        return GameConfig.EMPTY_MARK if cell is None else cell.mark

    def marks(self) -> List[str]:
        return [self.mark_at(index) for index in range(GameConfig.BOARD_SIZE)]

    def to_grid(self) -> np.ndarray:
        """The board as a 3x3 array of display marks."""
        return np.array(self.marks(), dtype=object).reshape(
            GameConfig.BOARD_WIDTH, GameConfig.BOARD_WIDTH
        )

    def __str__(self) -> str:
        rows = [" | ".join(row) for row in self.to_grid()]
        return "\n---------\n".join(rows)
