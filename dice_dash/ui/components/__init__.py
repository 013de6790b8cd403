"""UI components for Dice Dash."""

from dice_dash.ui.components.board import render_board
from dice_dash.ui.components.config_panel import render_config_panel
from dice_dash.ui.components.die import render_die
from dice_dash.ui.components.shortcuts import render_keyboard_shortcuts
from dice_dash.ui.components.turn_controls import render_turn_controls

__all__ = [
    "render_board",
    "render_config_panel",
    "render_die",
    "render_keyboard_shortcuts",
    "render_turn_controls",
]
