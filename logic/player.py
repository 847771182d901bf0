"""
Players and game outcomes for TicTacToe.
"""

from enum import Enum

from .config import GameConfig


class Player(Enum):
    """The two players in the game."""
    HUMAN = "human"
    COMPUTER = "computer"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.COMPUTER if self == Player.HUMAN else Player.HUMAN

    @property
    def mark(self) -> str:
        """The symbol this player puts on the board."""
        return GameConfig.HUMAN_MARK if self == Player.HUMAN else GameConfig.COMPUTER_MARK

    @classmethod
    def from_mark(cls, mark: str) -> "Player":
        """Look up a player by board symbol ("X" or "O")."""
        for player in cls:
            if player.mark == mark:
                return player
        raise ValueError(f"Unknown mark: {mark!r}")


class Outcome(Enum):
    """Result of a game, derived from the board."""
    IN_PROGRESS = "in_progress"
    HUMAN_WINS = "human_wins"
    COMPUTER_WINS = "computer_wins"
    TIE = "tie"

    @property
    def is_over(self) -> bool:
        return self != Outcome.IN_PROGRESS

    @classmethod
    def win_for(cls, player: Player) -> "Outcome":
        return cls.HUMAN_WINS if player == Player.HUMAN else cls.COMPUTER_WINS
