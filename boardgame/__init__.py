"""
boardgame - Two-player Connect 4

This package provides the Connect 4 core (board, win detection, turn and
outcome handling) together with terminal and tkinter shells that drive it.
"""

# Version number
__version__ = '0.1.0'
