"""
Tests for the generic turn-based shell using a recording subclass.
"""

from boardgame.config import GameConfig
from boardgame.game.rules import MoveKind
from boardgame.interfaces.shell import TurnBasedShell
from boardgame.utils import Player

from tests.helpers import DRAW_SEQUENCE, HORIZONTAL_WIN


class RecordingShell(TurnBasedShell):
    """Shell that records every hook call instead of drawing."""

    def __init__(self, config=None):
        self.calls = []
        super().__init__(config)

    def init_game(self):
        self.calls.append(("init",))

    def render_piece(self, player, column, row):
        self.calls.append(("piece", player, column, row))

    def show_invalid_move(self, column):
        self.calls.append(("invalid", column))

    def highlight(self, cells):
        self.calls.append(("highlight", set(cells)))

    def turn_changed(self, player_name):
        self.calls.append(("turn", player_name))

    def announce_game_over(self, message):
        self.calls.append(("over", message))

    def hooks(self, name):
        return [call for call in self.calls if call[0] == name]


class TestShellSetup:
    """Test shell construction."""

    def test_defaults(self):
        shell = RecordingShell()
        assert shell.title == "Connect 4"
        assert (shell.x_count, shell.y_count) == (7, 6)
        assert shell.current_player_name == "RED"
        assert shell.output == []
        assert shell.calls == [("init",)]

    def test_custom_names(self):
        shell = RecordingShell(GameConfig(red_name="Alice", blue_name="Bob"))
        shell.select_column(0)
        assert shell.current_player_name == "Bob"
        assert shell.output == ["Alice piece at 0,5"]


class TestShellMoves:
    """Test how outcomes are dispatched to hooks."""

    def test_accepted_move(self):
        shell = RecordingShell()
        outcome = shell.select_column(3)
        assert outcome.kind == MoveKind.ACCEPTED
        assert ("piece", Player.RED, 3, 5) in shell.calls
        assert ("turn", "BLUE") in shell.calls
        assert shell.output == ["RED piece at 3,5"]

    def test_rejected_move(self):
        shell = RecordingShell()
        for _ in range(6):
            shell.select_column(1)
        shell.calls.clear()

        outcome = shell.select_column(1)

        assert outcome.kind == MoveKind.REJECTED
        assert shell.calls == [("invalid", 1)]
        assert len(shell.output) == 6
        assert shell.current_player_name == "RED"

    def test_win(self):
        shell = RecordingShell()
        for column in HORIZONTAL_WIN:
            shell.select_column(column)

        assert shell.game_ended
        assert shell.hooks("highlight") == [("highlight", {(0, 5), (1, 5), (2, 5), (3, 5)})]
        assert shell.hooks("over") == [("over", "Winner is RED!")]
        assert shell.output[-3:] == ["RED piece at 3,5", "Winner is RED!", "Game ended!"]

    def test_draw(self):
        shell = RecordingShell()
        for column in DRAW_SEQUENCE:
            shell.select_column(column)

        assert shell.game_ended
        assert shell.hooks("highlight") == []
        assert shell.hooks("over") == [("over", "Draw Game!")]
        assert shell.output[-2:] == ["Draw Game!", "Game ended!"]
        assert len(shell.hooks("piece")) == 42

    def test_input_ignored_after_game_end(self):
        shell = RecordingShell()
        for column in HORIZONTAL_WIN:
            shell.select_column(column)
        calls = list(shell.calls)

        assert shell.select_column(5) is None
        assert shell.calls == calls

    def test_new_game(self):
        shell = RecordingShell()
        for column in HORIZONTAL_WIN:
            shell.select_column(column)

        shell.new_game()

        assert not shell.game_ended
        assert shell.output == []
        assert shell.game.move_count == 0
        assert shell.hooks("init") == [("init",), ("init",)]
        assert shell.select_column(0).kind == MoveKind.ACCEPTED
