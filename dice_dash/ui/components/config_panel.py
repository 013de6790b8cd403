"""Sidebar game setup — player count, target score, New Game."""

from __future__ import annotations

import streamlit as st

from dice_dash.engine.base import MAX_PLAYERS, MAX_TARGET, MIN_PLAYERS, MIN_TARGET
from dice_dash.ui.session import GameSession

NEW_GAME_LABEL = "New Game"


def _on_players_change(session: GameSession) -> None:
    session.set_player_count(st.session_state["_players_widget"])


def _on_target_change(session: GameSession) -> None:
    value = session.set_target(st.session_state["_target_widget"])
    # Write the clamped value back so the input shows what will be used.
    st.session_state["_target_widget"] = value


def render_config_panel(session: GameSession) -> bool:
    """Render setup controls in the sidebar.

    Returns:
        True if New Game was pressed
    """
    with st.sidebar:
        st.header("Game Setup")

        st.session_state.setdefault("_players_widget", session.player_input)
        st.session_state.setdefault("_target_widget", session.target_input)

        st.selectbox(
            "Players",
            options=list(range(MIN_PLAYERS, MAX_PLAYERS + 1)),
            key="_players_widget",
            on_change=_on_players_change,
            args=(session,),
        )
        st.number_input(
            "Target score",
            min_value=MIN_TARGET,
            max_value=MAX_TARGET,
            step=10,
            key="_target_widget",
            on_change=_on_target_change,
            args=(session,),
        )

        if st.button(NEW_GAME_LABEL, key="btn_new_game", use_container_width=True, help="Shortcut: N"):
            session.new_game(
                player_count=st.session_state.get("_players_widget"),
                target_score=st.session_state.get("_target_widget"),
            )
            return True

    return False
