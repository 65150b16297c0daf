"""
cli.py - Command-line entry point for Connect 4

Subcommands:
    play   two players at one terminal
    gui    the slot grid window
    check  replay a list of columns and report the resulting position
"""

import argparse
import sys
from typing import List, Optional

from boardgame.config import DEFAULT_BLUE_NAME, DEFAULT_RED_NAME, GameConfig
from boardgame.debug import debug
from boardgame.errors import BoardGameError
from boardgame.game.rules import ConnectFourGame, MoveKind
from boardgame.interfaces.text import TextShell
from boardgame.utils import Player


class SimpleCLI:
    """Simple command-line interface for Connect 4."""

    def __init__(self, argv: Optional[List[str]] = None):
        self.argv = argv
        self.args = None
        self.config: Optional[GameConfig] = None

    @staticmethod
    def build_parser() -> argparse.ArgumentParser:
        parser = argparse.ArgumentParser(prog='boardgame', description='Connect 4')

        common = argparse.ArgumentParser(add_help=False)
        common.add_argument('--debug', action='store_true',
                            help='Enable debug logging (same as --debug_level debug)')
        common.add_argument('--debug_level',
                            choices=['none', 'error', 'warning', 'info', 'debug', 'trace'],
                            default='warning', help='Logging level')
        common.add_argument('--log_file', type=str, default=None,
                            help='Also write log messages to this file')
        common.add_argument('--red', type=str, default=DEFAULT_RED_NAME,
                            help='Name of the first player')
        common.add_argument('--blue', type=str, default=DEFAULT_BLUE_NAME,
                            help='Name of the second player')
        common.add_argument('--full_scan', action='store_true',
                            help='Always scan the full column in vertical win checks')

        subparsers = parser.add_subparsers(dest='command', help='Command to run')
        subparsers.add_parser('play', parents=[common], help='Play in the terminal')
        subparsers.add_parser('gui', parents=[common], help='Open the slot grid window')
        check_parser = subparsers.add_parser('check', parents=[common],
                                             help='Replay moves and report the position')
        check_parser.add_argument('--moves', type=str, required=True,
                                  help='Comma-separated columns, e.g. "3,3,4,4"')
        return parser

    def parse_args(self) -> None:
        """Parse command-line arguments and configure logging."""
        self.args = self.build_parser().parse_args(self.argv)
        if not self.args.command:
            return

        try:
            self.config = GameConfig.from_args(self.args)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(2)

        debug.configure(level=self.config.debug_level, log_file=self.config.log_file)
        debug.debug(f"Using {self.config!r}", "cli")

    def run(self) -> int:
        """Run the selected command and return an exit code."""
        if not self.args:
            self.parse_args()

        if self.args.command == 'play':
            TextShell(self.config).play()
            return 0
        elif self.args.command == 'gui':
            return self.run_gui()
        elif self.args.command == 'check':
            return self.check_moves()

        print("Please specify a command. Use --help for options.")
        return 1

    def run_gui(self) -> int:
        try:
            from boardgame.interfaces.gui import run_gui
        except ImportError as e:
            debug.error(f"tkinter is not available: {e}", "cli")
            print("The GUI needs tkinter, which is not installed for this Python.")
            return 1

        run_gui(self.config)
        return 0

    def check_moves(self) -> int:
        """Replay a comma-separated list of columns and print the result."""
        try:
            moves = [int(part) for part in self.args.moves.split(',') if part.strip()]
        except ValueError:
            print(f"Error parsing moves '{self.args.moves}'")
            return 1

        game = ConnectFourGame(self.config)
        names = {Player.RED: self.config.red_name, Player.BLUE: self.config.blue_name}

        for index, column in enumerate(moves, start=1):
            try:
                outcome = game.column_selected(column)
            except BoardGameError as e:
                print(f"Move {index} (column {column}): {e}")
                return 1

            if outcome.kind == MoveKind.REJECTED:
                print(f"Move {index}: Invalid Move, column {column} is full")

        print(game.render())
        if game.winner is not None:
            cells = " ".join(f"({cell})" for cell in game.winning_cells)
            print(f"Winner is {names[game.winner]}! Winning cells: {cells}")
        elif game.is_game_over():
            print("Draw Game!")
        else:
            print(f"In progress after {game.move_count} moves, "
                  f"{names[game.current_player]} to move")
        return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    cli = SimpleCLI(argv)
    return cli.run()


if __name__ == "__main__":
    sys.exit(main())
