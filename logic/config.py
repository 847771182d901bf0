"""
Game configuration for TicTacToe.
All the settings for the board, scoring, console output and logging.
"""

import logging


class GameConfig:
    """
    Configuration class for game settings.
    The board is always 3x3; these values are not meant to be tuned per game.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid, cells numbered 0-8 in row-major order
    BOARD_WIDTH = 3
    BOARD_SIZE = BOARD_WIDTH * BOARD_WIDTH  # 9 cells

    # ==================== PLAYER MARKS ====================
    HUMAN_MARK = "X"
    COMPUTER_MARK = "O"
    EMPTY_MARK = " "

    # ==================== SCORING ====================
    # Base score for a win. Max depth is 9, so 10 keeps every win non-zero
    WIN_SCORE = 10

    # ==================== CONSOLE SETTINGS ====================
    USE_COLOR = True
    HUMAN_COLOR = "\033[32m"      # green
    COMPUTER_COLOR = "\033[35m"   # purple
    WINNER_COLOR = "\033[1;31m"   # bold red
    RESET_COLOR = "\033[0m"

    # ==================== LOGGING ====================
    LOG_LEVEL = logging.WARNING
    LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
