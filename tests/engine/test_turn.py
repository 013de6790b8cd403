"""
Dice Dash - Turn Engine Tests

Tests for the roll / hold / reset-turn state machine.
"""

import random

import pytest
from dice_dash.engine.base import DiceRoll, GameConfig, GameState
from dice_dash.engine.turn import TurnEngine


# === New Game ===


class TestNewGame:
    """Tests for TurnEngine.new_game()."""

    @pytest.mark.parametrize("players", [3, 4])
    @pytest.mark.parametrize("target", [20, 100, 300])
    def test_fresh_state(self, players, target):
        state = TurnEngine.new_game(GameConfig(player_count=players, target_score=target))
        assert state.scores == (0,) * players
        assert state.current_player == 0
        assert state.turn_score == 0
        assert state.is_playing is True
        assert state.winner is None

    def test_clamps_raw_inputs(self):
        state = TurnEngine.new_game(player_count=10, target_score=1000)
        assert state.player_count == 4
        assert state.target_score == 300

    def test_clamps_low_inputs(self):
        state = TurnEngine.new_game(player_count=1, target_score=5)
        assert state.player_count == 3
        assert state.target_score == 20

    def test_defaults_without_inputs(self):
        state = TurnEngine.new_game()
        assert state.player_count == 3
        assert state.target_score == 100

    def test_config_takes_precedence(self, config):
        state = TurnEngine.new_game(config, player_count=4, target_score=300)
        assert state.config is config


# === Roll Die ===


class TestRollDie:
    """Tests for TurnEngine.roll_die()."""

    def test_returns_dice_roll(self):
        assert isinstance(TurnEngine.roll_die(), DiceRoll)

    def test_value_range(self):
        """Roll 200 times; every value should be 1-6."""
        for _ in range(200):
            assert 1 <= TurnEngine.roll_die().value <= 6

    def test_randomness(self):
        """Rolling many times should produce more than one unique value."""
        values = {TurnEngine.roll_die().value for _ in range(100)}
        assert len(values) > 1

    def test_seeded_rng_is_repeatable(self):
        first = [TurnEngine.roll_die(random.Random(7)).value for _ in range(5)]
        second = [TurnEngine.roll_die(random.Random(7)).value for _ in range(5)]
        assert first == second

    def test_uses_supplied_rng(self, scripted_rng):
        scripted_rng.push(4)
        assert TurnEngine.roll_die(scripted_rng).value == 4


# === Is Bust / Next Player ===


class TestHelpers:
    """Tests for is_bust() and next_player()."""

    def test_1_is_bust(self):
        assert TurnEngine.is_bust(1) is True

    @pytest.mark.parametrize("value", [2, 3, 4, 5, 6])
    def test_2_through_6_not_bust(self, value):
        assert TurnEngine.is_bust(value) is False

    def test_accepts_dice_roll(self):
        assert TurnEngine.is_bust(DiceRoll(value=1)) is True

    @pytest.mark.parametrize("seat, expected", [(0, 1), (1, 2), (2, 0)])
    def test_next_player_wraps(self, make_state, seat, expected):
        assert TurnEngine.next_player(make_state(current_player=seat)) == expected

    def test_next_player_four_seats(self):
        state = GameState(config=GameConfig(player_count=4), current_player=3)
        assert TurnEngine.next_player(state) == 0


# === Roll ===


class TestRoll:
    """Tests for TurnEngine.roll()."""

    @pytest.mark.parametrize("seat", [0, 1, 2])
    def test_bust_resets_and_advances(self, make_state, seat):
        state = make_state(scores=(10, 20, 30), current_player=seat, turn_score=17)
        new_state, roll = TurnEngine.roll(state, roll=1)
        assert roll == DiceRoll(value=1)
        assert new_state.turn_score == 0
        assert new_state.current_player == (seat + 1) % 3
        assert new_state.scores == (10, 20, 30)
        assert new_state.is_playing is True

    @pytest.mark.parametrize("value", [2, 3, 4, 5, 6])
    def test_non_bust_accumulates(self, make_state, value):
        state = make_state(scores=(10, 20, 30), current_player=1, turn_score=8)
        new_state, roll = TurnEngine.roll(state, roll=DiceRoll(value=value))
        assert roll.value == value
        assert new_state.turn_score == 8 + value
        assert new_state.current_player == 1
        assert new_state.scores == (10, 20, 30)

    def test_does_not_mutate_input(self, fresh_state):
        TurnEngine.roll(fresh_state, roll=5)
        assert fresh_state.turn_score == 0

    def test_random_roll_when_none_given(self, fresh_state):
        new_state, roll = TurnEngine.roll(fresh_state)
        assert 1 <= roll.value <= 6
        if roll.is_bust:
            assert new_state.current_player == 1
        else:
            assert new_state.turn_score == roll.value

    def test_uses_rng(self, fresh_state, scripted_rng):
        scripted_rng.push(3)
        new_state, roll = TurnEngine.roll(fresh_state, rng=scripted_rng)
        assert roll.value == 3
        assert new_state.turn_score == 3

    def test_no_roll_after_game_over(self, make_state):
        state = make_state(scores=(120, 0, 0), is_playing=False, winner=0)
        new_state, roll = TurnEngine.roll(state, roll=6)
        assert new_state is state
        assert roll is None

    def test_invalid_roll_value_raises(self, fresh_state):
        with pytest.raises(ValueError, match="Invalid die value 9"):
            TurnEngine.roll(fresh_state, roll=9)

    def test_scenario_six_then_one(self):
        """3 players to 100: roll 6 stays with player 0, roll 1 passes to player 1."""
        state = TurnEngine.new_game(GameConfig(player_count=3, target_score=100))

        state, _ = TurnEngine.roll(state, roll=6)
        assert (state.turn_score, state.current_player) == (6, 0)

        state, _ = TurnEngine.roll(state, roll=1)
        assert (state.turn_score, state.current_player) == (0, 1)


# === Hold ===


class TestHold:
    """Tests for TurnEngine.hold()."""

    def test_zero_turn_score_is_noop(self, fresh_state):
        assert TurnEngine.hold(fresh_state) is fresh_state

    def test_banks_and_advances(self, make_state):
        state = make_state(scores=(10, 20, 30), current_player=1, turn_score=15)
        new_state = TurnEngine.hold(state)
        assert new_state.scores == (10, 35, 30)
        assert new_state.turn_score == 0
        assert new_state.current_player == 2
        assert new_state.is_playing is True
        assert new_state.winner is None

    def test_last_seat_wraps_to_first(self, make_state):
        state = make_state(current_player=2, turn_score=4)
        assert TurnEngine.hold(state).current_player == 0

    def test_reaching_target_exactly_wins(self, make_state):
        state = make_state(scores=(90, 0, 0), turn_score=10)
        new_state = TurnEngine.hold(state)
        assert new_state.scores[0] == 100
        assert new_state.is_playing is False
        assert new_state.winner == 0

    def test_scenario_overshoot_wins_without_advancing(self, make_state):
        state = make_state(scores=(95, 0, 0), turn_score=10)
        new_state = TurnEngine.hold(state)
        assert new_state.scores[0] == 105
        assert new_state.is_playing is False
        assert new_state.winner == 0
        assert new_state.current_player == 0
        assert new_state.turn_score == 0

    def test_one_short_of_target_continues(self, make_state):
        state = make_state(scores=(0, 90, 0), current_player=1, turn_score=9)
        new_state = TurnEngine.hold(state)
        assert new_state.scores[1] == 99
        assert new_state.is_playing is True
        assert new_state.current_player == 2

    def test_no_hold_after_game_over(self, make_state):
        state = make_state(scores=(100, 0, 0), turn_score=5, is_playing=False, winner=0)
        assert TurnEngine.hold(state) is state


# === Reset Turn ===


class TestResetTurn:
    """Tests for TurnEngine.reset_turn()."""

    def test_clears_turn_score_only(self, make_state):
        state = make_state(scores=(10, 20, 30), current_player=2, turn_score=12)
        new_state = TurnEngine.reset_turn(state)
        assert new_state.turn_score == 0
        assert new_state.current_player == 2
        assert new_state.scores == (10, 20, 30)

    def test_zero_turn_score_is_noop(self, fresh_state):
        assert TurnEngine.reset_turn(fresh_state) is fresh_state

    def test_no_reset_after_game_over(self, make_state):
        state = make_state(turn_score=5, is_playing=False)
        assert TurnEngine.reset_turn(state) is state


# === Guards ===


class TestGuards:
    """Tests for can_roll / can_hold / can_reset_turn."""

    def test_fresh_game(self, fresh_state):
        assert TurnEngine.can_roll(fresh_state) is True
        assert TurnEngine.can_hold(fresh_state) is False
        assert TurnEngine.can_reset_turn(fresh_state) is False

    def test_with_turn_points(self, make_state):
        state = make_state(turn_score=7)
        assert TurnEngine.can_hold(state) is True
        assert TurnEngine.can_reset_turn(state) is True

    def test_game_over_blocks_everything(self, make_state):
        state = make_state(turn_score=7, is_playing=False)
        assert TurnEngine.can_roll(state) is False
        assert TurnEngine.can_hold(state) is False
        assert TurnEngine.can_reset_turn(state) is False


# === Long Runs ===


class TestInvariants:
    """Random play never breaks the state invariants."""

    @pytest.mark.parametrize("seed", range(10))
    def test_random_play_keeps_invariants(self, seed):
        rng = random.Random(seed)
        state = TurnEngine.new_game(GameConfig(player_count=4, target_score=50))

        for _ in range(2000):
            if not state.is_playing:
                break
            action = rng.choice(["roll", "roll", "roll", "hold", "reset"])
            before = state
            if action == "roll":
                state, roll = TurnEngine.roll(state, rng=rng)
                assert state.scores == before.scores
            elif action == "hold":
                state = TurnEngine.hold(state)
            else:
                state = TurnEngine.reset_turn(state)

            assert all(score >= 0 for score in state.scores)
            assert state.turn_score >= 0
            assert 0 <= state.current_player < state.player_count

        assert state.is_playing is False
        assert state.winner is not None
        assert state.scores[state.winner] >= state.target_score
