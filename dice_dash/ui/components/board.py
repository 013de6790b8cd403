"""Board component — one card per player with banked and turn scores."""

from __future__ import annotations

from typing import Callable

import streamlit as st

from dice_dash.engine.base import GameState


def build_board_html(
    state: GameState,
    spotlight: int,
    turn_display: Callable[[int], int],
) -> str:
    """Build the board markup.

    Args:
        state: Current game state.
        spotlight: Seat to highlight as "Your Turn" (ignored once the game ends).
        turn_display: Turn score to show for a seat.
    """
    html = ['<section class="board">']
    html.append(f'<div class="board-title">First to {state.target_score} wins</div>')

    # No leader until someone has banked points.
    leader = state.leader if state.is_playing and any(state.scores) else None

    for seat, total in enumerate(state.scores):
        is_active = state.is_playing and seat == spotlight

        classes = ["player"]
        if is_active:
            classes.append("active")
        if state.winner == seat:
            classes.append("winner")

        badge = '<span class="badge">Your Turn</span>' if is_active else ""
        if seat == leader:
            badge += '<span class="badge leader">Leader</span>'

        html.append(
            f'<article class="{" ".join(classes)}" id="p{seat}">'
            f'<header><div class="name">Player {seat + 1}</div>{badge}</header>'
            '<div class="scores" role="group" aria-label="Scores">'
            '<div class="pill" aria-label="Total score">'
            f'<span class="label">Total</span> <span id="t{seat}">{total}</span></div>'
            '<div class="pill" aria-label="Current turn score">'
            f'<span class="label">Turn</span> <span id="c{seat}">{turn_display(seat)}</span></div>'
            "</div>"
            "</article>"
        )

    html.append("</section>")
    return "".join(html)


def render_board(state: GameState, spotlight: int, turn_display: Callable[[int], int]) -> None:
    """Render the player board."""
    st.markdown(build_board_html(state, spotlight, turn_display), unsafe_allow_html=True)
