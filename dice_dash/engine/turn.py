"""
Dice Dash - Turn Engine

Single-die push-your-luck rules. Roll a D6: 2-6 adds face value to the turn
score, rolling 1 = bust (lose the turn score, next player). Hold to bank the
turn score. First to reach the target wins.

All methods are stateless class methods operating on immutable data.
Invalid actions (rolling after the game ended, holding with nothing to bank)
return the state unchanged instead of raising.
"""

import logging
import random
from dataclasses import replace

from dice_dash.engine.base import DIE_FACES, DiceRoll, GameConfig, GameState

logger = logging.getLogger(__name__)


class TurnEngine:
    """
    Stateless engine for Dice Dash.

    All methods are class methods operating on immutable data.
    State is passed in and returned, never stored.
    """

    @classmethod
    def new_game(
        cls,
        config: GameConfig | None = None,
        *,
        player_count: object = None,
        target_score: object = None,
    ) -> GameState:
        """Start a fresh game.

        Args:
            config: A ready-made config. When omitted, one is built from
                ``player_count`` and ``target_score``, clamped into range.
            player_count: Raw player count (used only without ``config``)
            target_score: Raw target score (used only without ``config``)

        Returns:
            GameState with zeroed scores and player 0 to roll
        """
        if config is None:
            config = GameConfig.clamped(player_count, target_score)

        logger.info(
            "New game: %d players, first to %d",
            config.player_count,
            config.target_score,
        )
        return GameState(config=config)

    @classmethod
    def roll_die(cls, rng: random.Random | None = None) -> DiceRoll:
        """Roll a single D6.

        Args:
            rng: Optional random source (defaults to the module RNG)

        Returns:
            DiceRoll with a random value (1-6)
        """
        source = rng if rng is not None else random
        return DiceRoll(value=source.randint(1, DIE_FACES))

    @classmethod
    def is_bust(cls, roll: DiceRoll | int) -> bool:
        """Check if a roll is a bust (rolled a 1)."""
        if isinstance(roll, int):
            roll = DiceRoll(value=roll)
        return roll.is_bust

    @classmethod
    def next_player(cls, state: GameState) -> int:
        """Seat that plays after the current one."""
        return (state.current_player + 1) % state.player_count

    @classmethod
    def can_roll(cls, state: GameState) -> bool:
        return state.is_playing

    @classmethod
    def can_hold(cls, state: GameState) -> bool:
        return state.is_playing and state.turn_score > 0

    @classmethod
    def can_reset_turn(cls, state: GameState) -> bool:
        return state.is_playing and state.turn_score > 0

    @classmethod
    def roll(
        cls,
        state: GameState,
        roll: DiceRoll | int | None = None,
        rng: random.Random | None = None,
    ) -> tuple[GameState, DiceRoll | None]:
        """Roll the die for the current player.

        Args:
            state: Current game state
            roll: Optional pre-determined roll (for testing, or when the
                value was drawn before animating it)
            rng: Optional random source used when ``roll`` is omitted

        Returns:
            Tuple of (new_state, dice_roll). When the game is over the
            state is returned unchanged with ``None`` for the roll.
        """
        if not cls.can_roll(state):
            logger.debug("Roll ignored: game is over")
            return state, None

        if roll is None:
            roll = cls.roll_die(rng)
        elif isinstance(roll, int):
            roll = DiceRoll(value=roll)

        if roll.is_bust:
            logger.debug(
                "Player %d busted, losing %d turn points",
                state.current_player,
                state.turn_score,
            )
            return cls._advance_turn(state), roll

        logger.debug("Player %d rolled %d", state.current_player, roll.value)
        return replace(state, turn_score=state.turn_score + roll.value), roll

    @classmethod
    def hold(cls, state: GameState) -> GameState:
        """Bank the turn score, then end the game or pass the turn.

        Args:
            state: Current game state

        Returns:
            New game state (or the same state if holding is not allowed)
        """
        if not cls.can_hold(state):
            logger.debug("Hold ignored: playing=%s turn_score=%d", state.is_playing, state.turn_score)
            return state

        seat = state.current_player
        new_total = state.scores[seat] + state.turn_score
        scores = state.scores[:seat] + (new_total,) + state.scores[seat + 1:]
        banked = replace(state, scores=scores, turn_score=0)

        if new_total >= state.target_score:
            logger.info("Player %d wins with %d points", seat, new_total)
            return replace(banked, is_playing=False, winner=seat)

        logger.debug("Player %d banked %d (total %d)", seat, state.turn_score, new_total)
        return cls._advance_turn(banked)

    @classmethod
    def reset_turn(cls, state: GameState) -> GameState:
        """Discard the current turn's progress without passing the turn."""
        if not cls.can_reset_turn(state):
            logger.debug("Reset ignored: playing=%s turn_score=%d", state.is_playing, state.turn_score)
            return state

        logger.debug("Player %d reset their turn", state.current_player)
        return replace(state, turn_score=0)

    @classmethod
    def _advance_turn(cls, state: GameState) -> GameState:
        """Shared by bust and hold-below-target."""
        return replace(state, current_player=cls.next_player(state), turn_score=0)
