"""CSS injection and HTML animation helpers for the Dice Dash theme."""

from __future__ import annotations

import random
from pathlib import Path

import streamlit as st

CONFETTI_PIECES = 140


def load_css() -> None:
    """Inject the Dice Dash CSS theme into the Streamlit app."""
    css_path = Path(__file__).parent / "dice_dash.css"
    css_text = css_path.read_text(encoding="utf-8")
    st.markdown(f"<style>{css_text}</style>", unsafe_allow_html=True)


def build_confetti_svg(
    pieces: int = CONFETTI_PIECES,
    rng: random.Random | None = None,
) -> str:
    """Build a full-screen SVG of falling confetti rectangles.

    Each piece gets a random column, size (6-16px, 0.6 aspect), hue in the
    blue-to-pink band, and a 6-12s fall starting within the first second.
    """
    rng = rng or random.Random()
    rects = []
    for _ in range(pieces):
        x = rng.random() * 100
        size = 6 + rng.random() * 10
        hue = int(200 + rng.random() * 160)
        duration = 6 + rng.random() * 6
        delay = rng.random()
        rects.append(
            f'<rect x="{x:.2f}vw" y="-10" width="{size:.2f}" height="{size * 0.6:.2f}" '
            f'fill="hsl({hue}, 90%, 60%)" '
            f'style="animation: fall {duration:.2f}s {delay:.2f}s '
            f'cubic-bezier(.3,.7,.2,1) forwards"/>'
        )
    return (
        '<svg class="confetti" xmlns="http://www.w3.org/2000/svg" aria-hidden="true">'
        + "".join(rects)
        + "</svg>"
    )


def render_confetti(rng: random.Random | None = None) -> None:
    """Burst confetti over the page."""
    st.markdown(build_confetti_svg(rng=rng), unsafe_allow_html=True)


def build_victory_html(
    player_number: int,
    total: int,
    standings: list[tuple[int, int]] | None = None,
) -> str:
    """Victory overlay markup, with final standings when given."""
    html = [
        '<div class="victory-overlay">',
        '<span class="crown">&#127942;</span>',
        f"<h2>Player {player_number} Wins!</h2>",
        f"<p>Total {total} points. Start a new game to play again.</p>",
    ]
    if standings:
        html.append('<ol class="standings">')
        for seat, score in standings:
            html.append(f"<li>Player {seat + 1}: {score}</li>")
        html.append("</ol>")
    html.append("</div>")
    return "".join(html)


def render_victory_animation(
    player_number: int,
    total: int,
    standings: list[tuple[int, int]] | None = None,
) -> None:
    """Render the victory overlay with glow animation."""
    st.markdown(build_victory_html(player_number, total, standings), unsafe_allow_html=True)


def render_bust_animation(player_number: int) -> None:
    """Render the bust overlay with shake animation."""
    st.markdown(
        '<div class="bust-overlay">'
        "<h3>BUST!</h3>"
        f"<p>Player {player_number} rolled a 1 and lost the turn.</p>"
        "</div>",
        unsafe_allow_html=True,
    )
