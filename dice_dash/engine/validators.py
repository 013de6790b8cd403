"""
Dice Dash - Input Validation Utilities

Normalizes raw values from user-editable inputs. Unlike the value objects in
``base``, these never raise: anything unusable falls back to a default and
everything else is clamped into range.
"""

import re

from dice_dash.engine.base import (
    DEFAULT_PLAYERS,
    DEFAULT_TARGET,
    MAX_PLAYERS,
    MAX_TARGET,
    MIN_PLAYERS,
    MIN_TARGET,
)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def clamp(value: int, low: int, high: int) -> int:
    """Clamp value into the closed range [low, high]."""
    return max(low, min(high, value))


def parse_int(raw: object, default: int) -> int:
    """
    Leniently read an integer from user input.

    Accepts ints, floats (truncated) and strings with a leading integer
    (``" 120pts"`` reads as 120). Empty, unparseable and zero values fall
    back to ``default``.

    Args:
        raw: Value from a form input
        default: Value used when nothing usable was entered

    Returns:
        Parsed integer or the default
    """
    if isinstance(raw, bool) or raw is None:
        return default

    if isinstance(raw, int):
        value = raw
    elif isinstance(raw, float):
        if raw != raw or raw in (float("inf"), float("-inf")):
            return default
        value = int(raw)
    else:
        match = _LEADING_INT.match(str(raw))
        if match is None:
            return default
        value = int(match.group(1))

    return value or default


def validate_player_count(raw: object) -> int:
    """
    Normalize the number of players.

    Args:
        raw: Raw player count input

    Returns:
        Player count clamped to 3-4
    """
    return clamp(parse_int(raw, DEFAULT_PLAYERS), MIN_PLAYERS, MAX_PLAYERS)


def validate_target_score(raw: object) -> int:
    """
    Normalize the target score.

    Args:
        raw: Raw target score input

    Returns:
        Target score clamped to 20-300
    """
    return clamp(parse_int(raw, DEFAULT_TARGET), MIN_TARGET, MAX_TARGET)
