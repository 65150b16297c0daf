"""
shell.py - Generic turn-based shell around a Connect 4 session

TurnBasedShell owns everything a front end shares: the title, the two player
names, whose turn it is, and the output log. It turns a column selection into
a call on ConnectFourGame and dispatches the outcome to rendering hooks that
concrete shells override.
"""

from typing import Dict, List, Optional, Sequence

from boardgame.config import COLS, ROWS, GameConfig
from boardgame.debug import debug
from boardgame.game.rules import ConnectFourGame, MoveKind, MoveOutcome
from boardgame.utils import Cell, Player


class TurnBasedShell:
    """
    Base class for Connect 4 front ends.

    Subclasses override the hook methods (render_piece, show_invalid_move,
    highlight, announce_game_over, output_line_added) to draw whatever their
    medium needs. The base class keeps an in-memory output log so that a
    shell with no display at all is still fully usable.
    """

    x_count = COLS
    y_count = ROWS

    def __init__(self, config: Optional[GameConfig] = None):
        self.config = config or GameConfig()
        self.title = self.config.title
        self.player_names: Dict[Player, str] = {
            Player.RED: self.config.red_name,
            Player.BLUE: self.config.blue_name,
        }
        self.output: List[str] = []
        self.game: Optional[ConnectFourGame] = None
        self.game_ended = False
        self.new_game()

    @property
    def current_player_name(self) -> str:
        return self.player_names[self.game.current_player]

    def name_of(self, player: Player) -> str:
        return self.player_names[player]

    def new_game(self):
        """Discard the current session and start a fresh one."""
        debug.info(f"Starting new game: {self.title}", "shell")
        self.game = ConnectFourGame(self.config)
        self.game_ended = False
        self.output = []
        self.init_game()

    def add_line_to_output(self, line: str):
        self.output.append(line)
        self.output_line_added(line)

    def select_column(self, column: int) -> Optional[MoveOutcome]:
        """
        Forward a column selection to the session and render the outcome.

        Args:
            column: Column chosen by the current player

        Returns:
            The MoveOutcome, or None if the session has already ended
        """
        if self.game_ended:
            debug.debug(f"Ignoring column {column}: game has ended", "shell")
            return None

        outcome = self.game.column_selected(column)

        if outcome.kind == MoveKind.REJECTED:
            self.show_invalid_move(column)
            return outcome

        name = self.name_of(outcome.player)
        self.render_piece(outcome.player, outcome.column, outcome.row)
        self.add_line_to_output(f"{name} piece at {Cell(outcome.column, outcome.row)}")

        if outcome.kind == MoveKind.WON:
            self.highlight(outcome.winning_cells)
            self.add_line_to_output(f"Winner is {name}!")
            self.end_game(f"Winner is {name}!")
        elif outcome.kind == MoveKind.DRAW:
            self.add_line_to_output("Draw Game!")
            self.end_game("Draw Game!")
        else:
            self.turn_changed(self.current_player_name)

        return outcome

    def end_game(self, message: str):
        self.game_ended = True
        self.add_line_to_output("Game ended!")
        self.announce_game_over(message)

    # Hooks for concrete shells

    def init_game(self):
        """Reset the display for a new session."""

    def render_piece(self, player: Player, column: int, row: int):
        """Draw a piece that has just landed."""

    def show_invalid_move(self, column: int):
        """Tell the user the chosen column is full."""

    def highlight(self, cells: Sequence[Cell]):
        """Mark the winning cells."""

    def turn_changed(self, player_name: str):
        """Show whose turn it is now."""

    def announce_game_over(self, message: str):
        """Announce a win or a draw."""

    def output_line_added(self, line: str):
        """Display a new output log line."""
