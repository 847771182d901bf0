"""
Win checker for TicTacToe.
Checks if a player has won or if the game is a tie.
"""

from typing import Optional, Sequence, Tuple

from .player import Outcome, Player

Cells = Sequence[Optional[Player]]
Line = Tuple[int, int, int]


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 marks of the same player in a row
    (horizontally, vertically, or diagonally).

    Works on the raw cell sequence of a board (index 0-8, row-major),
    so the board model and the presentation layer share one line table.
    """

    # All possible winning lines (as triples of cell indices)
    WINNING_LINES: Tuple[Line, ...] = (
        # Rows
        (0, 1, 2),
        (3, 4, 5),
        (6, 7, 8),
        # Columns
        (0, 3, 6),
        (1, 4, 7),
        (2, 5, 8),
        # Diagonals
        (0, 4, 8),
        (2, 4, 6),
    )

    # Scan order for get_winning_line: diagonals, rows, then columns
    HIGHLIGHT_ORDER: Tuple[Line, ...] = WINNING_LINES[6:] + WINNING_LINES[:6]

    def is_line_win(self, cells: Cells, player: Player) -> bool:
        """
        Check if a player owns any complete line.

        Args:
            cells: The board cells.
            player: Possible winner.

        Returns:
            True if all 3 cells of some line hold the player's mark.
        """
        return any(self._owns_line(cells, line, player) for line in self.WINNING_LINES)

    def check_winner(self, cells: Cells) -> Optional[Player]:
        """
        Check if there's a winner.

        Human is checked before Computer. On a legally played board at most
        one of them can own a line, so the order only matters for boards
        that could never come out of a real game.

        Returns:
            The winning Player, or None if no winner yet.
        """
        for player in (Player.HUMAN, Player.COMPUTER):
            if self.is_line_win(cells, player):
                return player
        return None

    def check_draw(self, cells: Cells) -> bool:
        """True if the board is full and nobody owns a line."""
        if self.check_winner(cells) is not None:
            return False
        return all(cell is not None for cell in cells)

    def check_outcome(self, cells: Cells) -> Outcome:
        """
        Derive the game outcome from the cells.

        Returns:
            HUMAN_WINS or COMPUTER_WINS if a line is complete (Human checked
            first), TIE if no cell is empty, IN_PROGRESS otherwise.
        """
        winner = self.check_winner(cells)
        if winner is not None:
            return Outcome.win_for(winner)
        if all(cell is not None for cell in cells):
            return Outcome.TIE
        return Outcome.IN_PROGRESS

    def get_winning_line(self, cells: Cells) -> Optional[Line]:
        """
        Get the winning line if there is one.

        Used by the presentation layer to highlight the three winning cells.
        When the last move completed two lines at once, a diagonal is
        reported before a row, and a row before a column.

        Returns:
            The winning line as a triple of indices, or None.
        """
        winner = self.check_winner(cells)
        if winner is None:
            return None
        for line in self.HIGHLIGHT_ORDER:
            if self._owns_line(cells, line, winner):
                return line
        return None

    def _owns_line(self, cells: Cells, line: Line, player: Player) -> bool:
        return all(cells[index] == player for index in line)
