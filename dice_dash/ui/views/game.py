"""Game page — board, die, turn controls and status line."""

from __future__ import annotations

import streamlit as st

from dice_dash.config.settings import Settings
from dice_dash.ui.components.board import render_board
from dice_dash.ui.components.config_panel import render_config_panel
from dice_dash.ui.components.die import render_die
from dice_dash.ui.components.shortcuts import render_keyboard_shortcuts
from dice_dash.ui.components.turn_controls import render_turn_controls
from dice_dash.ui.session import GameSession
from dice_dash.ui.themes.animations import (
    render_bust_animation,
    render_confetti,
    render_victory_animation,
)

SESSION_KEY = "game_session"
POLL_INTERVAL_S = 0.1


def get_session(settings: Settings) -> GameSession:
    """The session's game, created on first page load."""
    ss = st.session_state
    if SESSION_KEY not in ss:
        ss[SESSION_KEY] = GameSession.from_settings(settings)
    return ss[SESSION_KEY]


def render_game_page(settings: Settings) -> None:
    """Render the main game page."""
    session = get_session(settings)

    if render_config_panel(session):
        st.rerun()

    st.title(session.title)

    state = session.state
    board_col, die_col = st.columns([3, 2])

    with board_col:
        render_board(state, session.spotlight_player, session.turn_display)

    with die_col:
        render_die(session.last_roll.value, rolling=session.rolling)

        action = render_turn_controls(session.controls, state.turn_score)
        if action is not None:
            _handle_action(session, action)

        st.markdown(
            f'<div class="log" role="status" aria-live="polite">{session.message}</div>',
            unsafe_allow_html=True,
        )

    if session.bust_shown:
        render_bust_animation(session.spotlight_player + 1)

    if state.winner is not None:
        render_victory_animation(state.winner + 1, state.current_total, state.standings())
        if session.take_celebration() and settings.enable_confetti:
            render_confetti()

    with st.expander("Game Log", expanded=False):
        for line in reversed(session.history):
            st.markdown(f"- {line}")

    if settings.enable_shortcuts:
        render_keyboard_shortcuts()

    if session.busy:
        _poll_pending_delays()


def _handle_action(session: GameSession, action: str) -> None:
    """Forward a control click to the session and redraw."""
    if action == "roll":
        accepted = session.roll()
    elif action == "hold":
        accepted = session.hold()
    elif action == "reset_turn":
        accepted = session.reset_turn()
    else:
        accepted = False

    if accepted:
        st.rerun()


@st.fragment(run_every=POLL_INTERVAL_S)
def _poll_pending_delays() -> None:
    """Fire cosmetic delays as they come due.

    Triggers a full-app rerun when the die lands or the turn is handed over,
    so the board reflects the new state.
    """
    session = st.session_state.get(SESSION_KEY)
    if session is None:
        return

    if session.poll():
        st.rerun(scope="app")
