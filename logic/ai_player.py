"""
AI player for Vanish TicTacToe.
Picks the bot's move according to the difficulty level.
"""

import random
from enum import Enum
from typing import Optional, Tuple, List, Dict

from .config import GameConfig
from .game_state import Board, Player, Variant, GameState, CLASSIC, place_mark, empty_cells
from .win_checker import WinChecker


class Difficulty(Enum):
    """AI difficulty levels."""
    EASY = 1      # Random moves
    MEDIUM = 2    # Take wins, block threats, otherwise mostly random
    HARD = 3      # Minimax

    @property
    def label(self) -> str:
        return self.name.capitalize()

    def next(self) -> "Difficulty":
        """The level after this one, wrapping from HARD back to EASY."""
        levels = list(Difficulty)
        return levels[(levels.index(self) + 1) % len(levels)]


# Memo key: (board, is_maximizing, depth, human_moves, bot_moves)
MemoKey = Tuple[Board, bool, int, Tuple[int, ...], Tuple[int, ...]]


class AIPlayer:
    """
    An AI that plays TicTacToe at one of three difficulty levels.

    - EASY picks any empty cell.
    - MEDIUM wins when it can, blocks when it must, and otherwise
      plays randomly (or, with the variant's search probability, like HARD).
    - HARD runs minimax with a per-search memo. In vanish mode every
      simulated move applies the vanish rule and the search stops after
      a fixed number of plies.
    """

    def __init__(
        self,
        player: Player = Player.X,
        variant: Variant = CLASSIC,
        rng: Optional[random.Random] = None,
        verbose: bool = GameConfig.DEBUG_MODE
    ):
        """
        Initialize the AI player.

        Args:
            player: Which player the AI controls (default: X)
            variant: Rule variant to play under.
            rng: Random source; pass a seeded one for repeatable games.
            verbose: Print search statistics.
        """
        self.player = player
        self.opponent = player.opposite()
        self.variant = variant
        self.rng = rng or random.Random()
        self.verbose = verbose
        self.win_checker = WinChecker()

        # Classic games never evict, so histories stay out of the search
        self.max_marks = variant.max_marks if variant.with_eviction else None
        self.max_depth = variant.search_depth

        # Keep track of how many positions we've evaluated (for debugging)
        self.moves_evaluated = 0

    def get_best_move(self, game_state: GameState, difficulty: Difficulty) -> Optional[int]:
        """
        Get the bot's move for the current round state.

        Returns:
            Cell index, or None if no moves are available.
        """
        if game_state.current_player != self.player:
            print(f"Warning: It's not {self.player.value}'s turn!")
            return None

        return self.choose_move(game_state.board, game_state.histories, difficulty)

    def choose_move(
        self,
        board: Board,
        histories: Optional[Dict[Player, Tuple[int, ...]]],
        difficulty: Difficulty
    ) -> Optional[int]:
        """
        Choose a cell for the AI.

        Args:
            board: Current board.
            histories: Each player's live marks, oldest first (vanish mode).
            difficulty: Which policy to use.

        Returns:
            Cell index, or None if the board has no empty cell.
        """
        if not empty_cells(board):
            print("Warning: No moves available!")
            return None

        histories = histories or {}
        bot_moves = tuple(histories.get(self.player, ()))
        human_moves = tuple(histories.get(self.opponent, ()))

        if difficulty == Difficulty.EASY:
            return self._get_easy_move(board)
        if difficulty == Difficulty.MEDIUM:
            return self._get_medium_move(board, human_moves, bot_moves)
        return self._find_best_move(board, human_moves, bot_moves)

    def _get_easy_move(self, board: Board) -> Optional[int]:
        """Get a random valid move (easy difficulty)."""
        cells = empty_cells(board)
        return self.rng.choice(cells) if cells else None

    def _get_medium_move(
        self,
        board: Board,
        human_moves: Tuple[int, ...],
        bot_moves: Tuple[int, ...]
    ) -> Optional[int]:
        """Win if possible, else block, else random or (sometimes) minimax."""
        move = self._find_winning_cell(board, bot_moves, self.player)
        if move is not None:
            return move

        move = self._find_winning_cell(board, human_moves, self.opponent)
        if move is not None:
            return move

        if self.rng.random() < self.variant.medium_search_probability:
            return self._find_best_move(board, human_moves, bot_moves)
        return self._get_easy_move(board)

    def _find_winning_cell(
        self,
        board: Board,
        history: Tuple[int, ...],
        player: Player
    ) -> Optional[int]:
        """First empty cell (in index order) that wins at once for `player`."""
        for index in empty_cells(board):
            new_board, _ = self._play(board, history, index, player)
            if self.win_checker.check_winner(new_board) == player:
                return index
        return None

    def _play(
        self,
        board: Board,
        history: Tuple[int, ...],
        index: int,
        player: Player
    ) -> Tuple[Board, Tuple[int, ...]]:
        """Simulate a move, vanishing the oldest mark when over the cap."""
        if self.max_marks is None:
            cells = list(board)
            cells[index] = player
            return tuple(cells), history
        return place_mark(board, history, index, player, self.max_marks)

    def _find_best_move(
        self,
        board: Board,
        human_moves: Tuple[int, ...],
        bot_moves: Tuple[int, ...]
    ) -> Optional[int]:
        """
        Get the best move with minimax (hard difficulty).

        Ties go to the lowest cell index.
        """
        self.moves_evaluated = 0
        memo: Dict[MemoKey, int] = {}

        best_score = float('-inf')
        best_move = None

        for index in empty_cells(board):
            new_board, new_bot_moves = self._play(board, bot_moves, index, self.player)
            score = self._minimax(new_board, human_moves, new_bot_moves, False, 1, memo)

            if score > best_score:
                best_score = score
                best_move = index

        if best_move is None:
            return self._get_easy_move(board)

        if self.verbose:
            print(f"AI evaluated {self.moves_evaluated} positions. "
                  f"Best move: {best_move} (score: {best_score})")

        return best_move

    def _minimax(
        self,
        board: Board,
        human_moves: Tuple[int, ...],
        bot_moves: Tuple[int, ...],
        is_maximizing: bool,
        depth: int,
        memo: Dict[MemoKey, int]
    ) -> int:
        """
        Minimax with memoization.

        Args:
            board: Position to score.
            human_moves: Opponent's live marks, oldest first.
            bot_moves: AI's live marks, oldest first.
            is_maximizing: True if it's the AI's turn.
            depth: Plies played since the root.
            memo: Scores already computed during this search.

        Returns:
            10 - depth for an AI win, depth - 10 for a loss, 0 otherwise.
        """
        key = (board, is_maximizing, depth, human_moves, bot_moves)
        if key in memo:
            return memo[key]

        self.moves_evaluated += 1

        winner = self.win_checker.check_winner(board)
        cells = empty_cells(board)

        if winner == self.player:
            score = 10 - depth
        elif winner == self.opponent:
            score = depth - 10
        elif not cells:
            score = 0  # Board full, no winner
        elif self.max_depth is not None and depth >= self.max_depth:
            score = 0  # Search horizon
        elif is_maximizing:
            score = max(self._score_children(board, human_moves, bot_moves, True, depth, memo, cells))
        else:
            score = min(self._score_children(board, human_moves, bot_moves, False, depth, memo, cells))

        memo[key] = score
        return score

    def _score_children(
        self,
        board: Board,
        human_moves: Tuple[int, ...],
        bot_moves: Tuple[int, ...],
        is_maximizing: bool,
        depth: int,
        memo: Dict[MemoKey, int],
        cells: List[int]
    ) -> List[int]:
        scores = []
        for index in cells:
            if is_maximizing:
                new_board, new_bot_moves = self._play(board, bot_moves, index, self.player)
                scores.append(self._minimax(new_board, human_moves, new_bot_moves, False, depth + 1, memo))
            else:
                new_board, new_human_moves = self._play(board, human_moves, index, self.opponent)
                scores.append(self._minimax(new_board, new_human_moves, bot_moves, True, depth + 1, memo))
        return scores
