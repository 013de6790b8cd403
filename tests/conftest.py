"""
Dice Dash - Test Configuration and Fixtures

Common fixtures and test data for all test modules.
"""

import pytest

from dice_dash.engine.base import GameConfig, GameState


# =============================================================================
# ENGINE FIXTURES
# =============================================================================

@pytest.fixture
def config() -> GameConfig:
    """Three players racing to 100."""
    return GameConfig(player_count=3, target_score=100)


@pytest.fixture
def fresh_state(config) -> GameState:
    """A game that has just started."""
    return GameState(config=config)


@pytest.fixture
def make_state(config):
    """Factory for mid-game states on the default config."""

    def _make(**overrides) -> GameState:
        return GameState(config=overrides.pop("config", config), **overrides)

    return _make


@pytest.fixture
def non_bust_faces() -> list[int]:
    """Faces that add to the turn score."""
    return [2, 3, 4, 5, 6]


# =============================================================================
# PRESENTATION FIXTURES
# =============================================================================

class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class ScriptedRandom:
    """Stands in for ``random.Random``; ``randint`` returns scripted values in order."""

    def __init__(self, values):
        self._values = list(values)

    def push(self, *values: int) -> None:
        self._values.extend(values)

    def randint(self, a, b):
        return self._values.pop(0)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def scripted_rng() -> ScriptedRandom:
    return ScriptedRandom([])
