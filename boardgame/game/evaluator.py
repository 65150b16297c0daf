"""
evaluator.py - Four-in-a-row detection around a newly placed piece

Only runs through the most recent piece need to be examined: any new line of
four must contain it. Each axis is scanned outward from that piece, first in
the positive direction and then in the negative one, and the scan stops as
soon as four matching cells have been collected.
"""

from typing import List, NamedTuple, Optional, Tuple

from boardgame.config import CONNECT_N, ROWS
from boardgame.debug import debug
from boardgame.game.board import Board
from boardgame.utils import Cell, Direction, DIRECTION_VECTORS, Player, is_valid_position


class WinCheck(NamedTuple):
    """Result of a win check."""
    won: bool
    winning_cells: Optional[Tuple[Cell, ...]] = None
    direction: Optional[Direction] = None


NO_WIN = WinCheck(won=False)


def scan_run(board: Board, column: int, row: int, player: Player,
             step: Tuple[int, int]) -> List[Cell]:
    """
    Collect up to CONNECT_N contiguous cells owned by a player along one axis.

    Args:
        board: Board to read
        column: Column of the starting cell
        row: Row of the starting cell
        player: Owner whose cells are counted
        step: (column, row) step of the axis' positive direction

    Returns:
        The collected cells, positive side first
    """
    d_col, d_row = step
    cells = []

    c, r = column, row
    while (len(cells) < CONNECT_N and is_valid_position(c, r)
           and board.get_cell(c, r) == player):
        cells.append(Cell(c, r))
        c += d_col
        r += d_row

    c, r = column - d_col, row - d_row
    while (len(cells) < CONNECT_N and is_valid_position(c, r)
           and board.get_cell(c, r) == player):
        cells.append(Cell(c, r))
        c -= d_col
        r -= d_row

    return cells


def check_win(board: Board, column: int, row: int, player: Player,
              vertical_fast_path: bool = False) -> WinCheck:
    """
    Check whether the piece at (column, row) completes four in a row.

    Axes are tried in order horizontal, vertical, diagonal-down, diagonal-up
    and the first one holding a run of four is reported. The board is only
    read, never modified.

    Args:
        board: Board to inspect
        column: Column of the placed piece
        row: Row of the placed piece
        player: Owner of the placed piece
        vertical_fast_path: Skip the vertical axis when fewer than four cells
            lie at or below the piece. Only valid on gravity-filled boards.

    Returns:
        WinCheck with the four winning cells and the axis, or NO_WIN
    """
    if not is_valid_position(column, row) or player == Player.EMPTY:
        return NO_WIN
    if board.get_cell(column, row) != player:
        return NO_WIN

    for direction, step in DIRECTION_VECTORS.items():
        if (vertical_fast_path and direction == Direction.VERTICAL
                and row > ROWS - CONNECT_N):
            continue

        cells = scan_run(board, column, row, player, step)
        if len(cells) == CONNECT_N:
            debug.debug(f"{player.name} has four {direction.name.lower()} through "
                        f"({column}, {row})", "evaluator")
            return WinCheck(won=True, winning_cells=tuple(cells), direction=direction)

    return NO_WIN
