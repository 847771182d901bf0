"""
Logic module for TicTacToe.
Handles the board, rules, and the minimax AI opponent.
"""

from .config import GameConfig
from .player import Player, Outcome
from .game_state import Board
from .move_validator import MoveValidator, ValidationResult
from .win_checker import WinChecker
from .ai_player import AIPlayer, select_computer_move

__version__ = "1.0.0"
