"""
Tests for session configuration.
"""

import argparse

import pytest

from boardgame.config import COLS, CONNECT_N, MAX_MOVES, ROWS, GameConfig
from boardgame.debug import DebugLevel


class TestGameConfig:
    """Test GameConfig defaults, validation and argument parsing."""

    def test_fixed_board(self):
        assert (COLS, ROWS, CONNECT_N, MAX_MOVES) == (7, 6, 4, 42)

    def test_defaults(self):
        config = GameConfig()
        assert config.red_name == "RED"
        assert config.blue_name == "BLUE"
        assert config.title == "Connect 4"
        assert config.vertical_fast_path is True
        assert config.debug_level == DebugLevel.WARNING
        assert config.log_file is None

    @pytest.mark.parametrize("red,blue", [("", "BLUE"), ("RED", ""), ("Same", "Same")])
    def test_invalid_names(self, red, blue):
        with pytest.raises(ValueError):
            GameConfig(red_name=red, blue_name=blue)

    def test_from_args(self):
        args = argparse.Namespace(debug=False, debug_level="trace", red="Ann", blue="Ben",
                                  full_scan=True, log_file="game.log")
        config = GameConfig.from_args(args)
        assert config.red_name == "Ann"
        assert config.blue_name == "Ben"
        assert config.vertical_fast_path is False
        assert config.debug_level == DebugLevel.TRACE
        assert config.log_file == "game.log"

    def test_from_args_debug_flag_wins(self):
        args = argparse.Namespace(debug=True, debug_level="error")
        assert GameConfig.from_args(args).debug_level == DebugLevel.DEBUG

    def test_from_partial_args(self):
        config = GameConfig.from_args(argparse.Namespace())
        assert config.red_name == "RED"
        assert config.debug_level == DebugLevel.WARNING

    def test_repr(self):
        assert "red_name='RED'" in repr(GameConfig())
