"""
Tests for the debug manager.
"""

import logging

import pytest

from boardgame.debug import DebugLevel, DebugManager, debug
from boardgame.game.rules import ConnectFourGame

from tests.helpers import HORIZONTAL_WIN


@pytest.fixture
def records():
    """Capture everything the package logger emits."""
    captured = []

    class ListHandler(logging.Handler):
        def emit(self, record):
            captured.append(record.getMessage())

    handler = ListHandler()
    debug.logger.addHandler(handler)
    yield captured
    debug.logger.removeHandler(handler)


class TestDebugManager:
    """Test level handling, filtering and file output."""

    def test_level_filtering(self, records):
        debug.configure(level=DebugLevel.INFO)
        debug.info("shown", "game")
        debug.debug("hidden", "game")
        assert records == ["[game] shown"]

    def test_trace_prefix(self, records):
        debug.configure(level=DebugLevel.TRACE)
        debug.trace("step", "board")
        assert records == ["TRACE: [board] step"]

    def test_none_silences_errors(self, records):
        debug.configure(level=DebugLevel.NONE)
        debug.error("boom")
        assert records == []

    def test_disabled(self, records):
        debug.configure(enabled=False)
        debug.error("boom")
        assert records == []

    def test_component_filter(self, records):
        debug.configure(level=DebugLevel.DEBUG, components=["game"])
        debug.debug("kept", "game")
        debug.debug("dropped", "board")
        assert records == ["[game] kept"]

    def test_log_file(self, tmp_path):
        path = tmp_path / "session.log"
        debug.configure(level=DebugLevel.INFO, log_file=str(path))
        debug.info("written to file", "cli")
        debug.configure(log_file="")
        assert "[cli] written to file" in path.read_text()

    def test_set_from_string(self):
        debug.set_from_string("debug")
        assert debug.level == DebugLevel.DEBUG
        debug.set_from_string("bogus")
        assert debug.level == DebugLevel.DEBUG

    def test_timer(self):
        manager = DebugManager()
        manager.start_timer("work")
        assert manager.end_timer("work") >= 0
        assert manager.end_timer("work") is None

    def test_single_console_handler(self):
        DebugManager()
        DebugManager()
        consoles = [h for h in debug.logger.handlers if getattr(h, "_boardgame_console", False)]
        assert len(consoles) == 1


class TestGameLogging:
    """Test what the game logs while playing."""

    def test_win_logged_at_info(self, records):
        debug.configure(level=DebugLevel.INFO)
        game = ConnectFourGame()
        for column in HORIZONTAL_WIN:
            game.column_selected(column)
        assert any("RED wins" in message for message in records)

    def test_rejection_logged_at_debug(self, records):
        debug.configure(level=DebugLevel.DEBUG, components=["game"])
        game = ConnectFourGame()
        for column in [0] * 7:
            game.column_selected(column)
        assert "[game] Invalid move by RED: column 0 is full" in records
