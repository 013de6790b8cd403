"""Dice Dash — Streamlit Application Entrypoint."""

from __future__ import annotations

import streamlit as st

from dice_dash.config import configure_logging, get_settings

_RULES = """\
**Goal:** First to the target score wins!

- **Roll** a single die. 2-6 adds the face value to your turn score.
- Roll a **1** and you **bust**: the turn score is lost and play passes on.
- **Hold** to bank your turn score into your total and pass the die.
- **Reset Turn** throws away this turn's points but keeps the die with you.

**Shortcuts:** Space = Roll, H = Hold, N = New Game
"""


def _render_sidebar_rules() -> None:
    """Show the rules in the sidebar."""
    with st.sidebar:
        st.divider()
        st.markdown("### Rules")
        st.markdown(_RULES)


def main() -> None:
    """Application entrypoint. Must call ``st.set_page_config`` first."""
    st.set_page_config(
        page_title="Dice Dash",
        page_icon="🎲",
        layout="wide",
    )

    settings = get_settings()
    configure_logging(settings)

    # Lazy imports so set_page_config runs before any widget code is imported
    from dice_dash.ui.themes import load_css
    from dice_dash.ui.views.game import render_game_page

    load_css()
    render_game_page(settings)
    _render_sidebar_rules()


if __name__ == "__main__":
    main()
