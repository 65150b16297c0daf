#!/usr/bin/env python3
"""
run.py - Main entry point for Connect 4

Examples:
    python run.py play
    python run.py gui --red Alice --blue Bob
    python run.py check --moves 0,6,1,6,2,6,3
"""

import os
import sys

# Add the project root to Python path so the package imports without installing
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from boardgame.interfaces.cli import main

if __name__ == "__main__":
    sys.exit(main())
