"""
boardgame.interfaces - Front ends for Connect 4

This package contains the generic turn-based shell and the terminal,
tkinter and command-line front ends built on it.
"""

# The GUI module imports tkinter; import it only where it is needed
__all__ = []
