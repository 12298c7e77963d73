"""
Board renderer for Vanish TicTacToe.
Draws the 3x3 grid, X and O marks, highlights and the winning line.
"""

import time
from pathlib import Path
from typing import Optional, Sequence, Tuple

import cv2
import numpy as np

from logic.game_state import Player
from .config import RenderConfig


Point = Tuple[float, float]


def line_endpoints(line: Sequence[int], edge: float = RenderConfig.LINE_EDGE_OFFSET) -> Tuple[Point, Point]:
    """
    Where to draw the stroke through a winning line.

    Args:
        line: Three cell indices (row, column or diagonal).
        edge: How far from the board edge the stroke starts and stops.

    Returns:
        ((x1, y1), (x2, y2)) as fractions of the board size.
    """
    r1, c1 = divmod(line[0], 3)
    r2, c2 = divmod(line[-1], 3)
    lo, hi = edge, 1.0 - edge

    def centre(i: int) -> float:
        return (2 * i + 1) / 6.0

    if r1 == r2:
        return (lo, centre(r1)), (hi, centre(r1))
    if c1 == c2:
        return (centre(c1), lo), (centre(c1), hi)
    if c1 < c2:
        return (lo, lo), (hi, hi)
    return (hi, lo), (lo, hi)


def cell_at(x: float, y: float, width: int, height: int) -> Optional[int]:
    """Map a click inside a width x height board to a cell index."""
    if not (0 <= x < width and 0 <= y < height):
        return None
    col = int(x * 3 // width)
    row = int(y * 3 // height)
    return row * 3 + col


class BoardRenderer:
    """
    Draws a board into a BGR image.
    """

    def __init__(self, config: Optional[RenderConfig] = None):
        self.config = config or RenderConfig()

    def render(
        self,
        board: Sequence[Optional[Player]],
        winning_line: Optional[Sequence[int]] = None,
        vanishing_cell: Optional[int] = None
    ) -> np.ndarray:
        """
        Draw the board.

        Args:
            board: 9 cells, row-major.
            winning_line: Cells to highlight and strike through.
            vanishing_cell: Mark that disappears on the next move (vanish mode).

        Returns:
            BGR image of size BOARD_OUTPUT_SIZE x BOARD_OUTPUT_SIZE.
        """
        cfg = self.config
        size = cfg.BOARD_OUTPUT_SIZE
        cell_size = cfg.CELL_OUTPUT_SIZE

        image = np.zeros((size, size, 3), dtype=np.uint8)
        image[:] = cfg.BACKGROUND_COLOR

        # Cell backgrounds first so the grid draws over them
        highlighted = set(winning_line or ())
        for index in range(9):
            if index in highlighted:
                self._fill_cell(image, index, cfg.WIN_CELL_COLOR)
            elif index == vanishing_cell:
                self._fill_cell(image, index, cfg.VANISHING_CELL_COLOR)

        for i in range(1, 3):
            offset = i * cell_size
            cv2.line(image, (offset, 0), (offset, size), cfg.GRID_COLOR, cfg.GRID_THICKNESS)
            cv2.line(image, (0, offset), (size, offset), cfg.GRID_COLOR, cfg.GRID_THICKNESS)

        for index, cell in enumerate(board):
            if cell is not None:
                self._draw_mark(image, index, cell)

        if winning_line:
            (x1, y1), (x2, y2) = line_endpoints(winning_line, cfg.LINE_EDGE_OFFSET)
            cv2.line(
                image,
                (int(x1 * size), int(y1 * size)),
                (int(x2 * size), int(y2 * size)),
                cfg.WIN_LINE_COLOR,
                cfg.WIN_LINE_THICKNESS,
                lineType=cv2.LINE_AA
            )

        return image

    def render_session(self, session) -> np.ndarray:
        """Draw the current board of a GameSession."""
        return self.render(session.board, session.winning_line, session.vanishing_cell())

    def _cell_origin(self, index: int) -> Tuple[int, int]:
        row, col = divmod(index, 3)
        return col * self.config.CELL_OUTPUT_SIZE, row * self.config.CELL_OUTPUT_SIZE

    def _fill_cell(self, image: np.ndarray, index: int, color):
        x, y = self._cell_origin(index)
        cell_size = self.config.CELL_OUTPUT_SIZE
        cv2.rectangle(image, (x, y), (x + cell_size, y + cell_size), color, -1)

    def _draw_mark(self, image: np.ndarray, index: int, player: Player):
        cfg = self.config
        x, y = self._cell_origin(index)
        half = cfg.CELL_OUTPUT_SIZE // 2
        cx, cy = x + half, y + half
        radius = int(half * (1.0 - 2 * cfg.MARK_MARGIN_RATIO))

        if player == Player.X:
            cv2.line(image, (cx - radius, cy - radius), (cx + radius, cy + radius),
                     cfg.X_COLOR, cfg.MARK_THICKNESS, lineType=cv2.LINE_AA)
            cv2.line(image, (cx + radius, cy - radius), (cx - radius, cy + radius),
                     cfg.X_COLOR, cfg.MARK_THICKNESS, lineType=cv2.LINE_AA)
        else:
            cv2.circle(image, (cx, cy), radius, cfg.O_COLOR, cfg.MARK_THICKNESS,
                       lineType=cv2.LINE_AA)

    @staticmethod
    def to_rgb(image: np.ndarray) -> np.ndarray:
        """Convert to RGB for Pillow."""
        return cv2.cvtColor(image, cv2.COLOR_BGR2RGB)

    def save_screenshot(self, image: np.ndarray, directory: Optional[str] = None) -> Path:
        """
        Save the image as a PNG.

        Returns:
            Path of the written file.
        """
        out_dir = Path(directory or self.config.SCREENSHOT_DIR)
        out_dir.mkdir(parents=True, exist_ok=True)

        filename = out_dir / f"tictactoe_{int(time.time() * 1000)}.png"
        if not cv2.imwrite(str(filename), image):
            raise IOError(f"Could not write screenshot to {filename}")
        return filename
