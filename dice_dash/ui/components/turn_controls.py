"""Turn control buttons — Roll, Hold, Reset Turn."""

from __future__ import annotations

import streamlit as st

from dice_dash.ui.session import ControlStates

ROLL_LABEL = "Roll"
HOLD_LABEL = "Hold"
RESET_LABEL = "Reset Turn"


def render_turn_controls(controls: ControlStates, turn_score: int) -> str | None:
    """Render the turn-action buttons.

    Returns:
        ``"roll"``, ``"hold"``, ``"reset_turn"``, or ``None`` if no action taken.
    """
    cols = st.columns(3)

    with cols[0]:
        if st.button(
            ROLL_LABEL,
            key="btn_roll",
            use_container_width=True,
            disabled=not controls.roll,
            type="primary",
            help="Shortcut: Space",
        ):
            return "roll"

    with cols[1]:
        if st.button(
            f"{HOLD_LABEL} +{turn_score}" if controls.hold else HOLD_LABEL,
            key="btn_hold",
            use_container_width=True,
            disabled=not controls.hold,
            help="Shortcut: H",
        ):
            return "hold"

    with cols[2]:
        if st.button(
            RESET_LABEL,
            key="btn_reset_turn",
            use_container_width=True,
            disabled=not controls.reset_turn,
        ):
            return "reset_turn"

    return None
