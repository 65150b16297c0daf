"""
boardgame.game - Core Connect 4 mechanics

This package contains the board state, the win evaluator and the session
state machine. Nothing here depends on a user interface.
"""

from boardgame.game.board import Board, DropResult
from boardgame.game.evaluator import WinCheck, check_win
from boardgame.game.rules import ConnectFourGame, MoveKind, MoveOutcome

__all__ = ['Board', 'DropResult', 'WinCheck', 'check_win',
           'ConnectFourGame', 'MoveKind', 'MoveOutcome']
