"""
Rendering module for Vanish TicTacToe.
Draws the board, marks and winning line into an image.
"""

from .config import RenderConfig
from .board_renderer import BoardRenderer, line_endpoints
