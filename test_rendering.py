"""
Tests for the board renderer.
"""

import cv2
import numpy as np
import pytest

from logic.game_state import Player
from rendering.config import RenderConfig
from rendering.board_renderer import BoardRenderer, line_endpoints, cell_at


O, X = Player.O, Player.X
EMPTY = (None,) * 9


def cell_region(image, index, inset=8):
    size = RenderConfig.CELL_OUTPUT_SIZE
    row, col = divmod(index, 3)
    return image[row * size + inset:(row + 1) * size - inset,
                 col * size + inset:(col + 1) * size - inset]


def has_color(region, color):
    return bool(np.any(np.all(region == np.array(color, dtype=np.uint8), axis=-1)))


class TestLineEndpoints:

    def test_rows(self):
        assert line_endpoints((0, 1, 2)) == ((0.05, pytest.approx(1 / 6)), (0.95, pytest.approx(1 / 6)))
        assert line_endpoints((6, 7, 8)) == ((0.05, pytest.approx(5 / 6)), (0.95, pytest.approx(5 / 6)))

    def test_columns(self):
        assert line_endpoints((1, 4, 7)) == ((pytest.approx(0.5), 0.05), (pytest.approx(0.5), 0.95))

    def test_diagonals(self):
        assert line_endpoints((0, 4, 8)) == ((0.05, 0.05), (0.95, 0.95))
        assert line_endpoints((2, 4, 6)) == ((0.95, 0.05), (0.05, 0.95))


class TestCellAt:

    def test_corners_and_center(self):
        assert cell_at(0, 0, 300, 300) == 0
        assert cell_at(299, 0, 300, 300) == 2
        assert cell_at(150, 150, 300, 300) == 4
        assert cell_at(299, 299, 300, 300) == 8

    def test_outside(self):
        assert cell_at(-1, 10, 300, 300) is None
        assert cell_at(10, 300, 300, 300) is None


class TestBoardRenderer:

    def test_image_shape(self):
        image = BoardRenderer().render(EMPTY)
        size = RenderConfig.BOARD_OUTPUT_SIZE
        assert image.shape == (size, size, 3)
        assert image.dtype == np.uint8

    def test_empty_cell_is_background(self):
        image = BoardRenderer().render(EMPTY)
        region = cell_region(image, 4)
        assert np.all(region == np.array(RenderConfig.BACKGROUND_COLOR, dtype=np.uint8))

    def test_marks_use_player_colors(self):
        board = (X, O) + (None,) * 7
        image = BoardRenderer().render(board)
        assert has_color(cell_region(image, 0), RenderConfig.X_COLOR)
        assert has_color(cell_region(image, 1), RenderConfig.O_COLOR)
        assert not has_color(cell_region(image, 1), RenderConfig.X_COLOR)

    def test_winning_cells_are_highlighted(self):
        board = (X, X, X, O, O) + (None,) * 4
        image = BoardRenderer().render(board, winning_line=(0, 1, 2))
        for index in (0, 1, 2):
            assert has_color(cell_region(image, index), RenderConfig.WIN_CELL_COLOR)
        assert not has_color(cell_region(image, 3), RenderConfig.WIN_CELL_COLOR)
        assert has_color(image, RenderConfig.WIN_LINE_COLOR)

    def test_vanishing_cell_is_highlighted(self):
        board = (O,) + (None,) * 8
        image = BoardRenderer().render(board, vanishing_cell=0)
        assert has_color(cell_region(image, 0), RenderConfig.VANISHING_CELL_COLOR)

    def test_to_rgb_swaps_channels(self):
        image = np.zeros((2, 2, 3), dtype=np.uint8)
        image[:] = (1, 2, 3)
        assert tuple(BoardRenderer.to_rgb(image)[0, 0]) == (3, 2, 1)

    def test_save_screenshot(self, tmp_path):
        renderer = BoardRenderer()
        path = renderer.save_screenshot(renderer.render(EMPTY), str(tmp_path))
        assert path.exists()
        assert cv2.imread(str(path)).shape == (RenderConfig.BOARD_OUTPUT_SIZE,) * 2 + (3,)
