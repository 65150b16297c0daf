"""
config.py - Fixed board dimensions and session configuration

The board is always 7 columns by 6 rows. The names, title and logging
options are the only things a session can change.
"""

from typing import Optional

from boardgame.debug import DebugLevel

# Board constants
COLS = 7
ROWS = 6
CONNECT_N = 4  # pieces in a row needed to win
MAX_MOVES = COLS * ROWS

# Shell defaults
DEFAULT_TITLE = "Connect 4"
DEFAULT_RED_NAME = "RED"
DEFAULT_BLUE_NAME = "BLUE"


class GameConfig:
    """
    Settings for one game session.

    Args:
        red_name: Display name of the first player
        blue_name: Display name of the second player
        title: Window / banner title
        vertical_fast_path: Skip the vertical scan when too few cells lie
            below the new piece (valid only for gravity-filled boards)
        debug_level: Logging level for the session
        log_file: Optional path for file logging
    """

    def __init__(self,
                 red_name: str = DEFAULT_RED_NAME,
                 blue_name: str = DEFAULT_BLUE_NAME,
                 title: str = DEFAULT_TITLE,
                 vertical_fast_path: bool = True,
                 debug_level: DebugLevel = DebugLevel.WARNING,
                 log_file: Optional[str] = None):
        if not red_name or not blue_name:
            raise ValueError("Player names must not be empty")
        if red_name == blue_name:
            raise ValueError(f"Player names must differ, got '{red_name}' twice")

        self.red_name = red_name
        self.blue_name = blue_name
        self.title = title
        self.vertical_fast_path = vertical_fast_path
        self.debug_level = debug_level
        self.log_file = log_file

    @classmethod
    def from_args(cls, args) -> 'GameConfig':
        """Build a config from an argparse namespace."""
        if getattr(args, 'debug', False):
            level = DebugLevel.DEBUG
        else:
            level = DebugLevel[getattr(args, 'debug_level', 'warning').upper()]

        return cls(
            red_name=getattr(args, 'red', DEFAULT_RED_NAME),
            blue_name=getattr(args, 'blue', DEFAULT_BLUE_NAME),
            vertical_fast_path=not getattr(args, 'full_scan', False),
            debug_level=level,
            log_file=getattr(args, 'log_file', None),
        )

    def __repr__(self) -> str:
        return (f"GameConfig(red_name={self.red_name!r}, blue_name={self.blue_name!r}, "
                f"title={self.title!r}, vertical_fast_path={self.vertical_fast_path}, "
                f"debug_level={self.debug_level.name}, log_file={self.log_file!r})")
