"""
Round and session control for Vanish TicTacToe.

Ties together the game state, win checker and AI:
- Strict turn order, out-of-turn or illegal input is ignored
- Bot moves after a short pause (bot mode)
- Scores survive from round to round; a finished round clears itself
  after a pause
"""

import random
from typing import Optional, List, Dict, Callable, Tuple

from .config import GameConfig
from .game_state import GameState, Player, GameMode, RoundStatus, Variant, CLASSIC, Board
from .move_validator import MoveValidator, apply_move, InvalidMove
from .win_checker import WinChecker
from .ai_player import AIPlayer, Difficulty
from .scheduler import Scheduler, ManualScheduler, DeferredTask


class GameSession:
    """
    Main controller for a play session.

    Game flow:
    1. The player to move selects a cell
    2. The move is applied and the board is checked for a result
    3. In bot mode, the bot answers after `bot_move_delay` seconds
    4. When a round ends, the winner scores and a new round starts
       after `auto_reset_delay` seconds
    """

    def __init__(
        self,
        variant: Variant = CLASSIC,
        mode: GameMode = GameMode.BOT,
        difficulty: Optional[Difficulty] = None,
        scheduler: Optional[Scheduler] = None,
        config: GameConfig = GameConfig(),
        rng: Optional[random.Random] = None
    ):
        """
        Initialize the session.

        Args:
            variant: Classic or vanish rules.
            mode: Bot or friend (two humans).
            difficulty: Bot level (defaults to config.DEFAULT_DIFFICULTY).
            scheduler: Runs the deferred bot move and round reset.
            config: Game settings.
            rng: Random source for the bot.
        """
        self.config = config
        self.variant = variant
        self.mode = mode
        self.difficulty = difficulty or Difficulty[config.DEFAULT_DIFFICULTY]
        self.scheduler = scheduler or ManualScheduler()
        self.verbose = config.DEBUG_MODE

        self.human_player = Player(config.HUMAN_PLAYER)
        self.bot_player = Player(config.BOT_PLAYER)

        self.validator = MoveValidator()
        self.win_checker = WinChecker()
        self.ai: Optional[AIPlayer] = None
        if mode == GameMode.BOT:
            self.ai = AIPlayer(self.bot_player, variant, rng, verbose=self.verbose)

        self.scores: Dict[Player, int] = {Player.O: 0, Player.X: 0}
        self.listeners: List[Callable[["GameSession"], None]] = []

        # Bumped on every new round; deferred tasks from older rounds are stale
        self.round_number = 0
        self._pending: List[DeferredTask] = []

        self.game_state = self._start_round(self.human_player)

    # ==================== READ-ONLY VIEW ====================

    @property
    def board(self) -> Board:
        return self.game_state.board

    @property
    def current_player(self) -> Player:
        return self.game_state.current_player

    @property
    def status(self) -> RoundStatus:
        return self.game_state.status

    @property
    def winner(self) -> Optional[Player]:
        return self.game_state.winner

    @property
    def winning_line(self) -> Optional[Tuple[int, int, int]]:
        return self.game_state.winning_line

    @property
    def is_game_over(self) -> bool:
        return self.game_state.is_game_over

    @property
    def difficulty_label(self) -> str:
        return f"{self.difficulty.label} Mode"

    @property
    def is_bot_turn(self) -> bool:
        return (
            self.mode == GameMode.BOT
            and not self.is_game_over
            and self.current_player == self.bot_player
        )

    @property
    def pending_tasks(self) -> List[DeferredTask]:
        return [t for t in self._pending if t.is_pending]

    def vanishing_cell(self) -> Optional[int]:
        return self.game_state.vanishing_cell()

    def valid_moves(self) -> List[int]:
        """Cells the player to move may take, [] once the round is over."""
        return self.validator.get_valid_moves(self.game_state)

    def status_text(self) -> str:
        """One-line status for the front-end."""
        state = self.game_state

        if self.mode == GameMode.BOT:
            if state.winner:
                who = "You Win" if state.winner == self.human_player else "Bot Wins"
                return f"{who} 🎉!"
            if state.is_draw:
                return "It's a Draw 😐"
            who = "Your" if state.current_player == self.human_player else "Bot's"
            return f"{who} Turn ({state.current_player.value})"

        if state.winner:
            return f"Player {state.winner.value} Wins 🎉!"
        if state.is_draw:
            return "It's a Draw 😐"
        return f"Player {state.current_player.value}'s Turn"

    # ==================== INPUT ====================

    def select_cell(self, index: int) -> bool:
        """
        Handle a human selecting a cell.

        Input on the bot's turn, on an occupied cell, or after the round
        ended is ignored.

        Returns:
            True if the move was played.
        """
        if self.mode == GameMode.BOT and self.current_player != self.human_player:
            self._log(f"Ignoring cell {index}: it's the bot's turn")
            return False

        return self._play_move(index, self.current_player)

    def reset(self, hard: bool = True):
        """
        Start a new round right away.

        Args:
            hard: Also clear the session scores.
        """
        if hard:
            self.scores = {Player.O: 0, Player.X: 0}
            starter = self.human_player
        else:
            starter = self._next_starter()

        self._log(f"{'Hard' if hard else 'Soft'} reset")
        self.game_state = self._start_round(starter)
        self._notify()

    def new_round(self):
        """Soft reset: new board, same scores."""
        self.reset(hard=False)

    def set_difficulty(self, difficulty: Difficulty):
        """Change the bot level. Always a hard reset."""
        self.difficulty = difficulty
        self._log(f"Difficulty set to: {difficulty.label}")
        self.reset(hard=True)

    def cycle_difficulty(self) -> Difficulty:
        """Easy -> Medium -> Hard -> Easy."""
        self.set_difficulty(self.difficulty.next())
        return self.difficulty

    # ==================== INTERNALS ====================

    def _start_round(self, starter: Player) -> GameState:
        self._cancel_pending()
        self.round_number += 1
        return GameState(variant=self.variant, current_player=starter)

    def _next_starter(self) -> Player:
        if self.mode == GameMode.BOT:
            return self.human_player
        state = self.game_state
        if not (state.o_moves or state.x_moves):
            return state.current_player
        # The player who made the last move goes first
        return state.current_player.opposite()

    def _play_move(self, index: int, player: Player) -> bool:
        try:
            state = apply_move(self.game_state, index, player)
        except InvalidMove as e:
            self._log(f"Ignoring move: {e}")
            return False

        self.game_state = self.win_checker.update_game_state(state)
        self._log(f">>> {player.value} placed at cell {index}")

        if self.game_state.is_game_over:
            self._finish_round()
        elif self.is_bot_turn:
            self._schedule(self.variant.bot_move_delay, self._bot_move, "bot_move")

        self._notify()
        return True

    def _bot_move(self):
        if not self.is_bot_turn:
            return

        move = self.ai.get_best_move(self.game_state, self.difficulty)
        if move is None:
            print("ERROR: AI could not find a move!")
            return

        self._play_move(move, self.bot_player)

    def _finish_round(self):
        state = self.game_state

        if state.status == RoundStatus.WON:
            self.scores[state.winner] += 1
            self._log(f"{state.winner.value} wins with line {list(state.winning_line)}")
        else:
            self._log("Round drawn")

        self._schedule(self.variant.auto_reset_delay, self.new_round, "auto_reset")

    def _schedule(self, delay: float, action: Callable[[], None], name: str):
        """Schedule `action` for the current round only."""
        token = self.round_number

        def run():
            if token != self.round_number:
                return
            action()

        task = self.scheduler.call_later(delay, run, name)
        self._pending = [t for t in self._pending if t.is_pending] + [task]

    def _cancel_pending(self):
        for task in self._pending:
            task.cancel()
        self._pending = []

    def _notify(self):
        for listener in list(self.listeners):
            listener(self)

    def _log(self, message: str):
        if self.verbose:
            print(message)
