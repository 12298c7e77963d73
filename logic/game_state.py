"""
Game state management for Vanish TicTacToe.
Tracks the board, current player, per-player move history and round result.
"""

from enum import Enum
from typing import Optional, List, Tuple, Dict
from dataclasses import dataclass, replace

from .config import GameConfig


class Player(Enum):
    """The two players in the game."""
    O = "O"
    X = "X"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.X if self == Player.O else Player.O


class RoundStatus(Enum):
    """Where a round stands."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


class GameMode(Enum):
    """Who sits on the other side of the board."""
    FRIEND = "friend"   # Two humans, same screen
    BOT = "bot"         # Human (O) against the computer (X)


Board = Tuple[Optional[Player], ...]


@dataclass(frozen=True)
class Variant:
    """
    Rule variant policy.

    Classic places marks forever; vanish caps each player at
    `max_marks` live marks and removes the oldest when a new one goes down.
    """
    name: str
    with_eviction: bool
    max_marks: Optional[int]            # None = no cap
    search_depth: Optional[int]         # None = search until the board is full
    medium_search_probability: float
    bot_move_delay: float               # seconds
    auto_reset_delay: float             # seconds

    @classmethod
    def classic(cls, config: GameConfig = GameConfig()) -> "Variant":
        return cls(
            name="classic",
            with_eviction=False,
            max_marks=None,
            search_depth=None,
            medium_search_probability=config.CLASSIC_MEDIUM_SEARCH_PROBABILITY,
            bot_move_delay=config.CLASSIC_BOT_MOVE_DELAY,
            auto_reset_delay=config.CLASSIC_AUTO_RESET_DELAY,
        )

    @classmethod
    def vanish(cls, config: GameConfig = GameConfig()) -> "Variant":
        return cls(
            name="vanish",
            with_eviction=True,
            max_marks=config.VANISH_MAX_MARKS,
            search_depth=config.VANISH_SEARCH_DEPTH,
            medium_search_probability=config.VANISH_MEDIUM_SEARCH_PROBABILITY,
            bot_move_delay=config.VANISH_BOT_MOVE_DELAY,
            auto_reset_delay=config.VANISH_AUTO_RESET_DELAY,
        )

    @classmethod
    def from_name(cls, name: str, config: GameConfig = GameConfig()) -> "Variant":
        """Look up a variant preset by name ("classic" or "vanish")."""
        presets = {"classic": cls.classic, "vanish": cls.vanish}
        if name not in presets:
            raise ValueError(f"Unknown variant '{name}'. Use one of: {', '.join(presets)}")
        return presets[name](config)


CLASSIC = Variant.classic()
VANISH = Variant.vanish()

EMPTY_BOARD: Board = (None,) * GameConfig.CELL_COUNT


def place_mark(
    board: Board,
    history: Tuple[int, ...],
    index: int,
    player: Player,
    max_marks: Optional[int] = None
) -> Tuple[Board, Tuple[int, ...]]:
    """
    Put a mark on the board and record it in the player's history.

    If the player now has more than `max_marks` marks, the oldest one is
    taken off the board in the same step, so nobody ever sees 4 marks.

    Args:
        board: Board before the move.
        history: The moving player's marks, oldest first.
        index: Cell to mark (0-8).
        player: Who is moving.
        max_marks: Mark cap, or None for no eviction.

    Returns:
        (new_board, new_history)
    """
    cells = list(board)
    cells[index] = player
    history = history + (index,)

    if max_marks is not None and len(history) > max_marks:
        oldest = history[0]
        cells[oldest] = None
        history = history[1:]

    return tuple(cells), history


def empty_cells(board: Board) -> List[int]:
    """Indices of all empty cells, in scan order."""
    return [i for i, cell in enumerate(board) if cell is None]


@dataclass(frozen=True)
class GameState:
    """
    The complete state of one round.

    Tracks:
    - The 9-cell board (row-major, None means empty)
    - Whose turn it is
    - Each player's live marks, oldest first (drives the vanish rule)
    - Round result (in progress, won, draw) and the winning line

    States are never changed in place: every move returns a new state.
    """

    variant: Variant = CLASSIC
    board: Board = EMPTY_BOARD
    current_player: Player = Player.O

    # Live marks per player, oldest first
    o_moves: Tuple[int, ...] = ()
    x_moves: Tuple[int, ...] = ()

    # Round result (filled in by WinChecker.update_game_state)
    status: RoundStatus = RoundStatus.IN_PROGRESS
    winner: Optional[Player] = None
    winning_line: Optional[Tuple[int, int, int]] = None

    @property
    def is_game_over(self) -> bool:
        return self.status != RoundStatus.IN_PROGRESS

    @property
    def is_draw(self) -> bool:
        return self.status == RoundStatus.DRAW

    def moves_for(self, player: Player) -> Tuple[int, ...]:
        """Get a player's live marks, oldest first."""
        return self.o_moves if player == Player.O else self.x_moves

    @property
    def histories(self) -> Dict[Player, Tuple[int, ...]]:
        return {Player.O: self.o_moves, Player.X: self.x_moves}

    def get_empty_cells(self) -> List[int]:
        return empty_cells(self.board)

    def place(self, index: int, player: Player) -> "GameState":
        """
        Place a mark for `player` and hand the turn to the other player.

        No validation happens here; see move_validator.apply_move.
        """
        board, history = place_mark(
            self.board,
            self.moves_for(player),
            index,
            player,
            self.variant.max_marks if self.variant.with_eviction else None
        )

        if player == Player.O:
            histories = {"o_moves": history}
        else:
            histories = {"x_moves": history}

        return replace(
            self,
            board=board,
            current_player=player.opposite(),
            **histories
        )

    def vanishing_cell(self) -> Optional[int]:
        """
        The mark that disappears on the current player's next move.

        Only meaningful in vanish mode, while the round is running, once
        the current player is at the cap.
        """
        if not self.variant.with_eviction or self.is_game_over:
            return None

        moves = self.moves_for(self.current_player)
        if len(moves) >= self.variant.max_marks:
            return moves[0]
        return None

    def print_board(self):
        """Print the board to console."""
        print("\n  " + "   ".join(str(c) for c in range(3)))
        print("┌───┬───┬───┐")

        for row in range(3):
            row_str = "│"
            for col in range(3):
                cell = self.board[row * 3 + col]
                row_str += f" {cell.value if cell else ' '} │"
            print(f"{row_str} {row}")

            if row < 2:
                print("├───┼───┼───┤")

        print("└───┴───┴───┘")

        if self.is_game_over:
            if self.winner:
                print(f"\n🏆 {self.winner.value} WINS! (line {list(self.winning_line)})")
            else:
                print("\n🤝 It's a DRAW!")
        else:
            print(f"\nCurrent turn: {self.current_player.value}")
            vanishing = self.vanishing_cell()
            if vanishing is not None:
                print(f"Will vanish next: cell {vanishing + 1}")
