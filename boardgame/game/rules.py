"""
rules.py - Turn and outcome management for a Connect 4 session

ConnectFourGame is the single entry point a shell talks to: it takes a column
selection, resolves gravity through the Board, evaluates the new piece and
reports what happened. It holds no reference to any rendering code.
"""

from enum import Enum, auto
from typing import List, NamedTuple, Optional, Tuple

from boardgame.config import GameConfig
from boardgame.debug import debug, DebugLevel
from boardgame.errors import GameOverError
from boardgame.game.board import Board
from boardgame.game.evaluator import check_win
from boardgame.utils import Cell, GameStatus, Player


class MoveKind(Enum):
    """What a column selection resulted in."""
    ACCEPTED = auto()   # piece placed, game continues
    REJECTED = auto()   # column full, nothing changed
    WON = auto()
    DRAW = auto()


class MoveOutcome(NamedTuple):
    """
    Report of one processed column selection.

    `player` is the side that made the move; `row` is None for a rejected
    move; `winning_cells` is only set for a win.
    """
    kind: MoveKind
    player: Player
    column: int
    row: Optional[int] = None
    winning_cells: Optional[Tuple[Cell, ...]] = None

    @property
    def accepted(self) -> bool:
        return self.kind != MoveKind.REJECTED

    @property
    def is_terminal(self) -> bool:
        return self.kind in (MoveKind.WON, MoveKind.DRAW)


class ConnectFourGame:
    """
    One Connect 4 session between RED and BLUE.

    RED moves first. The session ends on the first win or when the board is
    full; after that no further moves are accepted and a new game needs a new
    ConnectFourGame.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        """
        Initialize a new session.

        Args:
            config: Session settings; defaults are used when omitted
        """
        debug.debug("Initializing ConnectFourGame", "game")
        self.config = config or GameConfig()
        self.board = Board()
        self.current_player = Player.RED
        self.status = GameStatus.IN_PROGRESS
        self.winner: Optional[Player] = None
        self.winning_cells: Optional[Tuple[Cell, ...]] = None
        self.last_move: Optional[Cell] = None

    def column_selected(self, column: int) -> MoveOutcome:
        """
        Process a column selection for the player whose turn it is.

        Args:
            column: Column the current player chose (0-indexed)

        Returns:
            MoveOutcome describing the result

        Raises:
            GameOverError: If the game has already been won or drawn
            InvalidColumnError: If the column is outside the board
        """
        if self.status.is_game_over():
            raise GameOverError(f"Game is over ({self.status.name}); start a new game")

        player = self.current_player
        debug.debug(f"{player.name} selected column {column}", "game")

        drop = self.board.attempt_drop(column, player)
        if not drop.accepted:
            debug.debug(f"Invalid move by {player.name}: column {column} is full", "game")
            return MoveOutcome(MoveKind.REJECTED, player, column)

        self.last_move = Cell(column, drop.row)

        debug.start_timer("win_check")
        result = check_win(self.board, column, drop.row, player,
                           vertical_fast_path=self.config.vertical_fast_path)
        debug.end_timer("win_check", "game")

        if result.won:
            self.status = GameStatus.WON
            self.winner = player
            self.winning_cells = result.winning_cells
            debug.info(f"{player.name} wins after move at {self.last_move} "
                       f"({result.direction.name.lower()})", "game")
            return MoveOutcome(MoveKind.WON, player, column, drop.row, result.winning_cells)

        if self.board.is_full():
            self.status = GameStatus.DRAW
            debug.info("Game ends in a draw", "game")
            return MoveOutcome(MoveKind.DRAW, player, column, drop.row)

        self.current_player = player.other()
        debug.trace(f"Turn passes to {self.current_player.name}", "game")
        return MoveOutcome(MoveKind.ACCEPTED, player, column, drop.row)

    def is_game_over(self) -> bool:
        return self.status.is_game_over()

    @property
    def move_count(self) -> int:
        return self.board.move_count

    def get_valid_moves(self) -> List[int]:
        """Columns that can still take a piece; empty once the game is over."""
        if self.is_game_over():
            return []
        return self.board.get_valid_moves()

    def render(self) -> str:
        """Render the board, marking the winning line if there is one."""
        return self.board.render(self.winning_cells)


if __name__ == "__main__":
    debug.configure(level=DebugLevel.DEBUG)

    game = ConnectFourGame()
    for column in [0, 6, 1, 6, 2, 6, 3]:
        outcome = game.column_selected(column)
        print(f"Column {column}: {outcome.kind.name}")
    print(game.render())
