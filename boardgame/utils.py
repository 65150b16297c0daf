"""
utils.py - Shared enumerations and helpers for the Connect 4 core

Positions throughout the package are (column, row) pairs with row 0 at the
top of the board and row ROWS-1 at the bottom. The numpy grid itself is
indexed [row, column].
"""

from enum import Enum, auto
from typing import Iterable, NamedTuple, Optional

import numpy as np

from boardgame.config import COLS, ROWS


class Player(Enum):
    """Cell occupancy and player identity."""
    EMPTY = 0
    RED = 1    # moves first
    BLUE = 2

    def other(self) -> 'Player':
        """Get the opposing player."""
        if self == Player.RED:
            return Player.BLUE
        elif self == Player.BLUE:
            return Player.RED
        return Player.EMPTY

    def __str__(self):
        if self == Player.EMPTY:
            return "."
        elif self == Player.RED:
            return "R"
        return "B"


class GameStatus(Enum):
    """Outcome state of a session."""
    IN_PROGRESS = auto()
    WON = auto()
    DRAW = auto()

    def is_game_over(self) -> bool:
        return self != GameStatus.IN_PROGRESS


class Direction(Enum):
    """Axes along which a run of pieces can be formed."""
    HORIZONTAL = auto()
    VERTICAL = auto()
    DIAGONAL_DOWN = auto()  # top-left to bottom-right
    DIAGONAL_UP = auto()    # bottom-left to top-right


# (column, row) step for the positive direction of each axis, in scan order
DIRECTION_VECTORS = {
    Direction.HORIZONTAL: (1, 0),
    Direction.VERTICAL: (0, 1),
    Direction.DIAGONAL_DOWN: (1, 1),
    Direction.DIAGONAL_UP: (1, -1),
}


class Cell(NamedTuple):
    """A board position."""
    column: int
    row: int

    def __str__(self):
        return f"{self.column},{self.row}"


def is_valid_position(column: int, row: int) -> bool:
    """
    Check if a position is within the board boundaries.

    Args:
        column: Column index
        row: Row index

    Returns:
        True if the position lies on the board
    """
    return 0 <= column < COLS and 0 <= row < ROWS


def render_board_ascii(grid: np.ndarray, highlight: Optional[Iterable[Cell]] = None) -> str:
    """
    Render a grid as ASCII art.

    Args:
        grid: The [row, column] board array
        highlight: Cells to mark with '*' (e.g. a winning line)

    Returns:
        Multi-line string with column numbers underneath
    """
    marked = set(highlight or ())
    border = "+" + "-" * (COLS * 2 - 1) + "+"
    lines = [border]

    for row in range(ROWS):
        symbols = []
        for column in range(COLS):
            if (column, row) in marked:
                symbols.append("*")
            else:
                symbols.append(str(Player(int(grid[row, column]))))
        lines.append("|" + " ".join(symbols) + "|")

    lines.append(border)
    lines.append(" " + " ".join(str(column) for column in range(COLS)) + " ")
    return "\n".join(lines)
