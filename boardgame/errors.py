"""
errors.py - Exceptions raised by the board game core
"""


class BoardGameError(ValueError):
    """Base class for errors raised by the game core."""


class InvalidColumnError(BoardGameError):
    """Raised when a column index lies outside the board."""

    def __init__(self, column):
        super().__init__(f"Column {column} is outside the board")
        self.column = column


class GameOverError(BoardGameError):
    """Raised when a move is attempted after the game has ended."""
