"""Move sequences shared by the test modules."""

from boardgame.game.board import Board
from boardgame.utils import Player

# RED takes the bottom row 0-3 while BLUE stacks on top of it
HORIZONTAL_WIN = [0, 0, 1, 1, 2, 2, 3]

# RED builds (0,5) (1,4) (2,3) (3,2)
DIAGONAL_UP_WIN = [0, 1, 1, 2, 3, 2, 2, 3, 6, 3, 3]

# RED fills column 0 from the bottom; BLUE answers in column 1
VERTICAL_WIN = [0, 1, 0, 1, 0, 1, 0]

# Fills all 42 cells without ever making four in a row
DRAW_SEQUENCE = [0] * 6 + [1] * 6 + [4] + [2] * 6 + [3] * 6 + [4] * 5 + [5] + [6] * 6 + [5] * 5


def place(board: Board, cells, player: Player):
    """Write pieces straight into the grid, ignoring gravity."""
    for column, row in cells:
        board.grid[row, column] = player.value
