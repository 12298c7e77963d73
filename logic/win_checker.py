"""
Win checker for Vanish TicTacToe.
Checks if a player has won or if the round is a draw.
"""

from typing import Optional, Tuple, Dict
from dataclasses import dataclass, replace

from .config import GameConfig
from .game_state import GameState, Player, RoundStatus, Board


# All possible winning lines, in scan order
WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
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


@dataclass(frozen=True)
class Outcome:
    """Result of evaluating a board."""
    status: RoundStatus
    winner: Optional[Player] = None
    line: Optional[Tuple[int, int, int]] = None


IN_PROGRESS = Outcome(RoundStatus.IN_PROGRESS)


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 marks of the same player in a row
    (horizontally, vertically, or diagonally)
    """

    WINNING_LINES = WINNING_LINES

    def check_winner(self, board: Board) -> Optional[Player]:
        line = self.get_winning_line(board)
        return board[line[0]] if line is not None else None

    def get_winning_line(self, board: Board) -> Optional[Tuple[int, int, int]]:
        """
        Get the first winning line in scan order (rows, columns, diagonals).

        Only one line is reported even if the board holds several.
        """
        for line in self.WINNING_LINES:
            a, b, c = line
            if board[a] is not None and board[a] == board[b] == board[c]:
                return line
        return None

    def check_draw(
        self,
        board: Board,
        histories: Optional[Dict[Player, Tuple[int, ...]]] = None,
        max_marks: int = GameConfig.VANISH_MAX_MARKS
    ) -> bool:
        """
        Check if the board is a draw.

        A draw occurs when there is no winner AND:
        - classic (no histories): every cell is filled
        - vanish (histories given): every cell is filled and both
          players hold exactly `max_marks` marks

        Args:
            board: The board to check.
            histories: Per-player live marks, only for vanish mode.
            max_marks: The vanish mark cap.

        Returns:
            True if the board is a draw.
        """
        if self.get_winning_line(board) is not None:
            return False

        if any(cell is None for cell in board):
            return False

        if histories is None:
            return True

        return all(len(moves) == max_marks for moves in histories.values())

    def evaluate(
        self,
        board: Board,
        histories: Optional[Dict[Player, Tuple[int, ...]]] = None,
        max_marks: int = GameConfig.VANISH_MAX_MARKS
    ) -> Outcome:
        """Evaluate a board: win (with line), draw, or still in progress."""
        line = self.get_winning_line(board)
        if line is not None:
            return Outcome(RoundStatus.WON, board[line[0]], line)

        if self.check_draw(board, histories, max_marks):
            return Outcome(RoundStatus.DRAW)

        return IN_PROGRESS

    def evaluate_state(self, game_state: GameState) -> Outcome:
        """Evaluate a round state using its variant's draw rule."""
        variant = game_state.variant
        if variant.with_eviction:
            return self.evaluate(game_state.board, game_state.histories, variant.max_marks)
        return self.evaluate(game_state.board)

    def update_game_state(self, game_state: GameState) -> GameState:
        """
        Return the game state with winner/draw information filled in.

        Args:
            game_state: The state right after a move.

        Returns:
            A new state carrying the round result.
        """
        outcome = self.evaluate_state(game_state)

        if outcome.status == RoundStatus.IN_PROGRESS:
            return game_state

        return replace(
            game_state,
            status=outcome.status,
            winner=outcome.winner,
            winning_line=outcome.line
        )
