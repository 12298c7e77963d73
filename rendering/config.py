"""
Rendering configuration for Vanish TicTacToe.
Sizes and colours used to draw the board image.

Colours are BGR, as OpenCV expects.
"""


class RenderConfig:
    """
    Configuration class for board rendering.
    Change these values to restyle the board.
    """

    # ==================== IMAGE SETTINGS ====================
    BOARD_OUTPUT_SIZE = 420                       # Pixels, square
    CELL_OUTPUT_SIZE = BOARD_OUTPUT_SIZE // 3     # 140 pixels per cell
    GRID_THICKNESS = 4
    MARK_THICKNESS = 10
    MARK_MARGIN_RATIO = 0.22                      # Gap between mark and cell edge

    # ==================== COLOURS ====================
    BACKGROUND_COLOR = (62, 33, 22)               # Dark navy
    GRID_COLOR = (96, 64, 48)
    X_COLOR = (113, 113, 248)                     # Red-ish
    O_COLOR = (129, 185, 16)                      # Green-ish
    WIN_CELL_COLOR = (0, 120, 0)
    VANISHING_CELL_COLOR = (30, 20, 15)
    WIN_LINE_COLOR = (195, 162, 153)
    WIN_LINE_THICKNESS = 12

    # Winning stroke runs from 5% to 95% of the board
    LINE_EDGE_OFFSET = 0.05

    # ==================== SCREENSHOTS ====================
    SCREENSHOT_DIR = "screenshots"
