"""
Dice Dash - Game Engine Base Classes

This module defines the foundational data structures used by the turn
engine. All classes are immutable (frozen dataclasses): every transition
produces a new value instead of mutating the old one.
"""

from dataclasses import dataclass, field


MIN_PLAYERS = 3
MAX_PLAYERS = 4
DEFAULT_PLAYERS = 3

MIN_TARGET = 20
MAX_TARGET = 300
DEFAULT_TARGET = 100

DIE_FACES = 6
BUST_FACE = 1


@dataclass(frozen=True)
class DiceRoll:
    """
    Immutable representation of a single D6 roll.

    Attributes:
        value: Face value shown (1-6)
    """
    value: int

    def __post_init__(self) -> None:
        """Validate the face is on the die."""
        if not isinstance(self.value, int) or not (1 <= self.value <= DIE_FACES):
            raise ValueError(
                f"Invalid die value {self.value!r}. "
                f"Must be between 1 and {DIE_FACES}."
            )

    @property
    def is_bust(self) -> bool:
        """Returns True if this roll ends the turn."""
        return self.value == BUST_FACE


@dataclass(frozen=True)
class GameConfig:
    """
    Configuration for a game session.

    Attributes:
        player_count: Number of players (3-4)
        target_score: Banked score needed to win (20-300)
    """
    player_count: int = DEFAULT_PLAYERS
    target_score: int = DEFAULT_TARGET

    def __post_init__(self) -> None:
        """Validate configuration."""
        if not isinstance(self.player_count, int) or not (
            MIN_PLAYERS <= self.player_count <= MAX_PLAYERS
        ):
            raise ValueError(
                f"Number of players must be between {MIN_PLAYERS} and {MAX_PLAYERS}, "
                f"got {self.player_count!r}."
            )
        if not isinstance(self.target_score, int) or not (
            MIN_TARGET <= self.target_score <= MAX_TARGET
        ):
            raise ValueError(
                f"Target score must be between {MIN_TARGET} and {MAX_TARGET}, "
                f"got {self.target_score!r}."
            )

    @classmethod
    def clamped(cls, player_count: object = None, target_score: object = None) -> "GameConfig":
        """Build a config from raw input, clamping each value into range."""
        # Local import keeps validators free to depend on the constants above.
        from dice_dash.engine.validators import validate_player_count, validate_target_score

        return cls(
            player_count=validate_player_count(player_count),
            target_score=validate_target_score(target_score),
        )


@dataclass(frozen=True)
class GameState:
    """
    Complete state of a game in progress (or just finished).

    Attributes:
        config: Settings the game was started with
        scores: Banked total per player, indexed by seat
        current_player: Seat whose turn it is
        turn_score: Points accumulated this turn (not yet banked)
        is_playing: False once someone has reached the target
        winner: Seat of the winning player, set only when the game ends
    """
    config: GameConfig
    scores: tuple[int, ...] = field(default_factory=tuple)
    current_player: int = 0
    turn_score: int = 0
    is_playing: bool = True
    winner: int | None = None

    def __post_init__(self) -> None:
        """Validate state invariants."""
        if not self.scores:
            object.__setattr__(self, "scores", (0,) * self.config.player_count)
        else:
            object.__setattr__(self, "scores", tuple(self.scores))
        if len(self.scores) != self.config.player_count:
            raise ValueError(
                f"Expected {self.config.player_count} scores, got {len(self.scores)}."
            )
        for i, score in enumerate(self.scores):
            if score < 0:
                raise ValueError(f"Score for player {i} cannot be negative, got {score}.")
        if not 0 <= self.current_player < self.config.player_count:
            raise ValueError(
                f"Current player {self.current_player} is out of range. "
                f"Must be between 0 and {self.config.player_count - 1}."
            )
        if self.turn_score < 0:
            raise ValueError(f"Turn score cannot be negative, got {self.turn_score}.")
        if self.is_playing and self.winner is not None:
            raise ValueError("A game in progress cannot have a winner.")
        if self.winner is not None and not 0 <= self.winner < self.config.player_count:
            raise ValueError(f"Winner {self.winner} is out of range.")
        if self.winner is not None and self.scores[self.winner] < self.config.target_score:
            raise ValueError(
                f"Winner {self.winner} has {self.scores[self.winner]} points, "
                f"short of the target {self.config.target_score}."
            )

    @property
    def player_count(self) -> int:
        return self.config.player_count

    @property
    def target_score(self) -> int:
        return self.config.target_score

    @property
    def is_game_over(self) -> bool:
        return not self.is_playing

    @property
    def current_total(self) -> int:
        """Banked score of the player whose turn it is."""
        return self.scores[self.current_player]

    @property
    def leader(self) -> int:
        """Seat with the highest banked score (lowest seat on ties)."""
        return self.standings()[0][0]

    def standings(self) -> list[tuple[int, int]]:
        """Seats and scores, best first; ties keep seat order."""
        return sorted(enumerate(self.scores), key=lambda item: (-item[1], item[0]))
