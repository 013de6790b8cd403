"""Dice Dash: a pass-the-die push-your-luck game for 3-4 players."""

__version__ = "0.1.0"
