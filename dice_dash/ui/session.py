"""
Dice Dash - Game Session

The presentation adapter's controller. Holds the current ``GameState``,
forwards user triggers to the ``TurnEngine`` and keeps the bits the board
needs that the engine does not care about: which die face to show, which
player to spotlight, the status line, and the cosmetic delays that gate
input while the die spins or the turn is handed over.

Nothing here imports Streamlit, so the whole flow is testable with a fake
clock.
"""

from __future__ import annotations

import logging
import random
import time
from collections import deque
from dataclasses import dataclass
from typing import Callable

from dice_dash.config.settings import Settings
from dice_dash.engine.base import DiceRoll, GameState
from dice_dash.engine.turn import TurnEngine
from dice_dash.engine.validators import validate_player_count, validate_target_score
from dice_dash.ui.scheduler import Clock, ScheduledDelay

logger = logging.getLogger(__name__)

HISTORY_SIZE = 50
RESTING_FACE = 6


@dataclass(frozen=True)
class ControlStates:
    """Which turn controls are enabled."""
    roll: bool
    hold: bool
    reset_turn: bool


class GameSession:
    """One browser session's game, plus its presentation-only state."""

    def __init__(
        self,
        player_count: object = None,
        target_score: object = None,
        *,
        roll_animation_s: float = 0.6,
        bust_delay_s: float = 0.35,
        hold_delay_s: float = 0.25,
        rng: random.Random | None = None,
        clock: Clock = time.monotonic,
    ) -> None:
        self.roll_animation_s = roll_animation_s
        self.bust_delay_s = bust_delay_s
        self.hold_delay_s = hold_delay_s
        self._rng = rng
        self._clock = clock

        self.player_input = validate_player_count(player_count)
        self.target_input = validate_target_score(target_score)

        self.history: deque[str] = deque(maxlen=HISTORY_SIZE)
        self.message = ""
        self._pending: ScheduledDelay | None = None
        self._handoff_from: int | None = None

        self.new_game()

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        rng: random.Random | None = None,
        clock: Clock = time.monotonic,
    ) -> "GameSession":
        return cls(
            settings.default_player_count,
            settings.default_target_score,
            roll_animation_s=settings.roll_animation_s,
            bust_delay_s=settings.bust_delay_s,
            hold_delay_s=settings.hold_delay_s,
            rng=rng,
            clock=clock,
        )

    # ------------------------------------------------------------------
    # Read-only view
    # ------------------------------------------------------------------

    @property
    def busy(self) -> bool:
        """True while a cosmetic delay is pending; input is ignored."""
        return self._pending is not None and self._pending.pending

    @property
    def spotlight_player(self) -> int:
        """Seat highlighted on the board.

        Lags the engine's current player while a turn handoff is pending.
        """
        if self._handoff_from is not None and self.busy:
            return self._handoff_from
        return self.state.current_player

    @property
    def controls(self) -> ControlStates:
        idle = not self.busy
        return ControlStates(
            roll=idle and TurnEngine.can_roll(self.state),
            hold=idle and TurnEngine.can_hold(self.state),
            reset_turn=idle and TurnEngine.can_reset_turn(self.state),
        )

    @property
    def title(self) -> str:
        return f"Dice Dash — {self.state.player_count} Player"

    def turn_display(self, seat: int) -> int:
        """Turn score shown on a player's card (0 for everyone but the roller)."""
        return self.state.turn_score if seat == self.state.current_player else 0

    def take_celebration(self) -> bool:
        """True exactly once after a win, so the confetti only bursts once."""
        celebrate, self.celebrate = self.celebrate, False
        return celebrate

    # ------------------------------------------------------------------
    # Triggers
    # ------------------------------------------------------------------

    def new_game(self, player_count: object = None, target_score: object = None) -> GameState:
        """Start over, superseding any in-flight animation."""
        if player_count is not None:
            self.player_input = validate_player_count(player_count)
        if target_score is not None:
            self.target_input = validate_target_score(target_score)

        if self._pending is not None:
            self._pending.cancel()
        self._pending = None
        self._handoff_from = None

        self.state = TurnEngine.new_game(
            player_count=self.player_input,
            target_score=self.target_input,
        )
        self.last_roll = DiceRoll(value=RESTING_FACE)
        self.rolling = False
        self.celebrate = False
        self.bust_shown = False
        self._say(f"Game on! First to {self.state.target_score}. Player 1 starts.")
        return self.state

    def set_player_count(self, raw: object) -> GameState:
        """Changing the number of players always restarts."""
        return self.new_game(player_count=raw)

    def set_target(self, raw: object) -> int:
        """Record a new target; the running game keeps its own."""
        self.target_input = validate_target_score(raw)
        self._say(f"Target set to {self.target_input}. Applies to the next game.")
        return self.target_input

    def roll(self) -> bool:
        """Start a roll. The outcome lands after the spin animation.

        Returns:
            True if the roll was accepted
        """
        if self.busy or not TurnEngine.can_roll(self.state):
            logger.debug("Roll input ignored (busy=%s)", self.busy)
            return False

        drawn = TurnEngine.roll_die(self._rng)
        self.last_roll = drawn
        self.rolling = True
        self._schedule(self.roll_animation_s, lambda: self._resolve_roll(drawn))
        return True

    def hold(self) -> bool:
        """Bank the turn score. Returns True if the hold was accepted."""
        if self.busy or not TurnEngine.can_hold(self.state):
            logger.debug("Hold input ignored (busy=%s)", self.busy)
            return False

        seat = self.state.current_player
        banked = self.state.turn_score
        self.state = TurnEngine.hold(self.state)

        if self.state.is_game_over:
            total = self.state.current_total
            self.celebrate = True
            self._say(f"🎉 Player {seat + 1} wins! Total {total} points.")
            return True

        self._say(f"Player {seat + 1} holds. +{banked} points.")
        self._handoff(seat, self.hold_delay_s)
        return True

    def reset_turn(self) -> bool:
        """Throw away this turn's points and keep rolling."""
        if self.busy or not TurnEngine.can_reset_turn(self.state):
            logger.debug("Reset input ignored (busy=%s)", self.busy)
            return False

        self.state = TurnEngine.reset_turn(self.state)
        self._say(f"Turn reset. Player {self.state.current_player + 1}, roll again.")
        return True

    def poll(self, now: float | None = None) -> bool:
        """Fire any delay that has come due.

        Returns:
            True if the displayed state changed
        """
        changed = False
        while self._pending is not None and self._pending.fire_if_due(now):
            changed = True
        return changed

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _resolve_roll(self, drawn: DiceRoll) -> None:
        seat = self.state.current_player
        self.rolling = False
        self.state, _ = TurnEngine.roll(self.state, roll=drawn)

        if drawn.is_bust:
            self.bust_shown = True
            self._say(f"Oops! Player {seat + 1} rolled a 1. Turn lost.")
            self._handoff(seat, self.bust_delay_s)
            return

        self._say(
            f"Player {seat + 1} rolled a {drawn.value}. Turn: {self.state.turn_score}."
        )

    def _handoff(self, from_seat: int, delay_s: float) -> None:
        """Keep ``from_seat`` spotlighted for a moment, then announce the next player."""
        self._handoff_from = from_seat
        self._schedule(delay_s, self._finish_handoff)

    def _finish_handoff(self) -> None:
        self._handoff_from = None
        self.bust_shown = False
        self._say(f"Player {self.state.current_player + 1}'s turn.")

    def _schedule(self, delay_s: float, callback: Callable[[], None]) -> None:
        if delay_s <= 0:
            self._pending = None
            callback()
            return
        self._pending = ScheduledDelay(delay_s, callback, clock=self._clock)

    def _say(self, message: str) -> None:
        self.message = message
        self.history.append(message)
        logger.debug("Status: %s", message)
