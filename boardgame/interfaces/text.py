"""
text.py - Terminal front end for Connect 4

Two people share one terminal and type column numbers in turn. The board is
redrawn after every accepted move and the winning four are marked with '*'.
"""

import sys
from typing import Callable, Optional, Sequence, TextIO

from boardgame.config import COLS, GameConfig
from boardgame.debug import debug
from boardgame.interfaces.shell import TurnBasedShell
from boardgame.utils import Cell, GameStatus, Player

QUIT_COMMANDS = ('q', 'quit', 'exit')


class TextShell(TurnBasedShell):
    """Plays a game over standard input and output."""

    def __init__(self, config: Optional[GameConfig] = None,
                 input_func: Optional[Callable[[str], str]] = None,
                 out: Optional[TextIO] = None):
        """
        Args:
            config: Session settings
            input_func: Prompt-and-read function, `input` by default
            out: Stream to write to, stdout by default
        """
        self._input = input_func or input
        self._out = out or sys.stdout
        super().__init__(config)

    def _print(self, text: str = ""):
        print(text, file=self._out)

    def init_game(self):
        self._print(f"=== {self.title}: {self.name_of(Player.RED)} vs "
                    f"{self.name_of(Player.BLUE)} ===")
        self._print(self.game.render())

    def render_piece(self, player: Player, column: int, row: int):
        # the winning render is drawn by highlight()
        if self.game.status != GameStatus.WON:
            self._print(self.game.render())

    def show_invalid_move(self, column: int):
        self._print(f"Invalid Move: column {column} is full")

    def highlight(self, cells: Sequence[Cell]):
        self._print(self.game.render())

    def announce_game_over(self, message: str):
        self._print(f"*** {message} ***")

    def output_line_added(self, line: str):
        self._print(line)

    def read_column(self) -> Optional[int]:
        """
        Prompt the current player until they enter a column or quit.

        Returns:
            Column index, or None if the player quit
        """
        while True:
            try:
                raw = self._input(f"{self.current_player_name}'s move "
                                  f"(0-{COLS - 1}, q to quit): ")
            except EOFError:
                return None

            choice = raw.strip().lower()
            if choice in QUIT_COMMANDS:
                return None

            try:
                column = int(choice)
            except ValueError:
                self._print("Please enter a column number.")
                continue

            if 0 <= column < COLS:
                return column
            self._print(f"Column must be between 0 and {COLS - 1}.")

    def play(self) -> Optional[Player]:
        """
        Run the game loop until the game ends or a player quits.

        Returns:
            The winning player, or None for a draw or an abandoned game
        """
        while not self.game_ended:
            column = self.read_column()
            if column is None:
                debug.info("Game abandoned", "shell")
                self._print("Quitting game.")
                return None
            self.select_column(column)

        return self.game.winner
