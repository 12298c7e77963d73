"""
Move validator for Vanish TicTacToe.
Validates that moves follow the rules and applies them.
"""

from typing import Optional, List
from dataclasses import dataclass

from .config import GameConfig
from .game_state import GameState, Player


class InvalidMove(Exception):
    """Raised when a move targets an occupied cell or a finished round."""


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Can only place on empty cells
    2. Cell index must be 0-8
    3. Round must not be over

    Turn order is not checked here; the session enforces it.
    """

    def validate_move(self, game_state: GameState, index: int) -> ValidationResult:
        """
        Validate a move.

        Args:
            game_state: Current game state.
            index: Cell to place a mark on (0-8).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Check if round is over
        if game_state.is_game_over:
            return ValidationResult(
                is_valid=False,
                error_message="Round is already over!"
            )

        # Check if index is on the board
        if not (0 <= index < GameConfig.CELL_COUNT):
            return ValidationResult(
                is_valid=False,
                error_message=f"Invalid cell {index}. Must be 0-{GameConfig.CELL_COUNT - 1}."
            )

        # Check if cell is empty
        occupant = game_state.board[index]
        if occupant is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already occupied by {occupant.value}"
            )

        return ValidationResult(is_valid=True)

    def get_valid_moves(self, game_state: GameState) -> List[int]:
        """
        Get all valid moves for the current player.

        Args:
            game_state: Current game state.

        Returns:
            List of empty cell indices, or [] if the round is over.
        """
        if game_state.is_game_over:
            return []
        return game_state.get_empty_cells()


_validator = MoveValidator()


def apply_move(game_state: GameState, index: int, player: Player) -> GameState:
    """
    Apply a move and return the resulting state.

    In vanish mode a 4th mark removes the player's oldest mark in the
    same transition. The round result is NOT updated here; run
    WinChecker.update_game_state on the returned state.

    Raises:
        InvalidMove: The cell is taken, off the board, or the round is over.
    """
    result = _validator.validate_move(game_state, index)
    if not result.is_valid:
        raise InvalidMove(result.error_message)

    return game_state.place(index, player)
