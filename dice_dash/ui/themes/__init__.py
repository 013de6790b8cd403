"""Visual theme for Dice Dash."""

from dice_dash.ui.themes.animations import (
    load_css,
    render_bust_animation,
    render_confetti,
    render_victory_animation,
)

__all__ = [
    "load_css",
    "render_bust_animation",
    "render_confetti",
    "render_victory_animation",
]
