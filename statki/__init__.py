"""Battleship rules, touch calibration, bitmap fonts, board rendering and game-flow helpers."""

__version__ = "0.1.0"