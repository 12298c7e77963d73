"""
Game configuration for Vanish TicTacToe.
All the settings for rule variants, the bot opponent, and round timing.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Change these values to tune the bot and the round timing.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3
    CELL_COUNT = BOARD_SIZE * BOARD_SIZE  # 9 cells, row-major

    # ==================== PLAYER SETTINGS ====================
    # In bot mode the human is always O and moves first
    HUMAN_PLAYER = "O"
    BOT_PLAYER = "X"

    # ==================== VANISH RULES ====================
    # A player's 4th mark removes their oldest one
    VANISH_MAX_MARKS = 3

    # ==================== BOT SETTINGS ====================
    # Minimax depth limit in vanish mode (classic searches to the end)
    VANISH_SEARCH_DEPTH = 5

    # Chance that Medium falls back to a full search instead of a random move
    CLASSIC_MEDIUM_SEARCH_PROBABILITY = 0.0
    VANISH_MEDIUM_SEARCH_PROBABILITY = 0.4

    DEFAULT_DIFFICULTY = "EASY"

    # ==================== TIMING (seconds) ====================
    # Pause before the bot's move is applied
    CLASSIC_BOT_MOVE_DELAY = 0.5
    VANISH_BOT_MOVE_DELAY = 0.7

    # Pause before a finished round is cleared for the next one
    CLASSIC_AUTO_RESET_DELAY = 2.0
    VANISH_AUTO_RESET_DELAY = 2.5

    # ==================== DEBUG SETTINGS ====================
    DEBUG_MODE = True
