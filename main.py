#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py [--rows N] [--columns N] [--mines N] [--seed N] [--verbose]

Commands during play:
    <x> <y> free    claim cell (column x, row y) as free
    <x> <y> mine    set or unset a mine mark on the cell
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / "src"))

from minesweeper.shell import main


if __name__ == "__main__":
    sys.exit(main())
