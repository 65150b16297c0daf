"""
board.py - Board state for Connect 4

This module implements the Board class, which holds cell occupancy for the
fixed 7x6 grid, the per-column drop level used to resolve gravity, and the
count of pieces placed so far.
"""

from typing import List, NamedTuple, Optional

import numpy as np

from boardgame.config import COLS, ROWS, MAX_MOVES
from boardgame.debug import debug, DebugLevel
from boardgame.errors import InvalidColumnError
from boardgame.utils import Cell, Player, render_board_ascii


class DropResult(NamedTuple):
    """Result of dropping a piece into a column."""
    row: Optional[int]
    accepted: bool


class Board:
    """
    Represents a Connect 4 board.

    Pieces enter at the top of a column and fall to the lowest empty row.
    A board is never emptied again once a piece lands; a new game uses a
    new Board.
    """

    def __init__(self):
        """Initialize an empty board."""
        debug.debug("Initializing new Board", "board")
        self.grid = np.zeros((ROWS, COLS), dtype=int)
        self.drop_level = np.full(COLS, ROWS - 1, dtype=int)
        self.move_count = 0

    def copy(self) -> 'Board':
        """
        Create a deep copy of the board.

        Returns:
            A new Board with the same cells and counters
        """
        debug.trace("Creating board copy", "board")
        new_board = Board.__new__(Board)
        new_board.grid = self.grid.copy()
        new_board.drop_level = self.drop_level.copy()
        new_board.move_count = self.move_count
        return new_board

    def _check_column(self, column: int):
        if not (0 <= column < COLS):
            raise InvalidColumnError(column)

    def attempt_drop(self, column: int, player: Player) -> DropResult:
        """
        Drop a piece for a player into a column.

        Args:
            column: The column to drop into (0-indexed)
            player: The player who owns the piece

        Returns:
            DropResult with the landing row, or accepted=False if the column
            is already full (the board is left untouched in that case)

        Raises:
            InvalidColumnError: If the column is outside the board
        """
        self._check_column(column)
        if player == Player.EMPTY:
            raise ValueError("Cannot drop an empty piece")

        row = int(self.drop_level[column])
        if row < 0:
            debug.debug(f"Rejected drop: column {column} is full", "board")
            return DropResult(row=None, accepted=False)

        self.grid[row, column] = player.value
        self.drop_level[column] -= 1
        self.move_count += 1
        debug.trace(f"{player.name} piece landed at ({column}, {row}), "
                    f"move {self.move_count}", "board")
        return DropResult(row=row, accepted=True)

    def is_full(self) -> bool:
        """Check whether all 42 cells are occupied."""
        return self.move_count == MAX_MOVES

    def is_column_full(self, column: int) -> bool:
        self._check_column(column)
        return self.drop_level[column] < 0

    def column_height(self, column: int) -> int:
        """Number of pieces currently in a column."""
        self._check_column(column)
        return ROWS - 1 - int(self.drop_level[column])

    def get_valid_moves(self) -> List[int]:
        """
        Get the columns that can still take a piece.

        Returns:
            List of column indices, left to right
        """
        return [column for column in range(COLS) if self.drop_level[column] >= 0]

    def get_cell(self, column: int, row: int) -> Player:
        """Get the occupant of a cell."""
        return Player(int(self.grid[row, column]))

    def get_state(self) -> np.ndarray:
        """
        Get the current board as a numpy array.

        Returns:
            Copy of the [row, column] grid
        """
        return self.grid.copy()

    def render(self, highlight: Optional[List[Cell]] = None) -> str:
        """Render the board as ASCII text, optionally marking cells."""
        return render_board_ascii(self.grid, highlight)

    def __str__(self) -> str:
        return self.render()


if __name__ == "__main__":
    debug.configure(level=DebugLevel.TRACE)

    board = Board()
    for column in [3, 3, 3, 3, 3, 3, 3]:
        result = board.attempt_drop(column, Player.RED)
        print(f"Drop into column {column}: {result}")
    print(board)
