"""Page renderers for Dice Dash."""

from dice_dash.ui.views.game import render_game_page

__all__ = ["render_game_page"]
