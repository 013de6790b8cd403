"""
Dice Dash Configuration.

Environment variables, settings, and logging configuration.
"""

from dice_dash.config.logging_config import configure_logging
from dice_dash.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings", "configure_logging"]
