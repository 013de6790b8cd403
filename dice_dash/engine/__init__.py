"""
Dice Dash Game Engine.

Pure Python game logic with zero UI dependencies.
Handles dice rolling, turn accumulation, busting, banking and winning.
"""

from dice_dash.engine.base import (
    DEFAULT_PLAYERS,
    DEFAULT_TARGET,
    MAX_PLAYERS,
    MAX_TARGET,
    MIN_PLAYERS,
    MIN_TARGET,
    DiceRoll,
    GameConfig,
    GameState,
)
from dice_dash.engine.turn import TurnEngine

__all__ = [
    # Data Classes
    "DiceRoll",
    "GameConfig",
    "GameState",
    # Limits
    "MIN_PLAYERS",
    "MAX_PLAYERS",
    "DEFAULT_PLAYERS",
    "MIN_TARGET",
    "MAX_TARGET",
    "DEFAULT_TARGET",
    # Engine
    "TurnEngine",
]
