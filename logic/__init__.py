"""
Logic module for Vanish TicTacToe.
Handles game state, rules, the AI opponent and the play session.
"""

from .config import GameConfig
from .game_state import GameState, Player, GameMode, RoundStatus, Variant, CLASSIC, VANISH
from .move_validator import MoveValidator, InvalidMove, apply_move
from .win_checker import WinChecker, Outcome, WINNING_LINES
from .ai_player import AIPlayer, Difficulty
from .scheduler import DeferredTask, Scheduler, ManualScheduler
from .game_session import GameSession

__version__ = "1.0.0"
