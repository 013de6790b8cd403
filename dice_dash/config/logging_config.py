"""Logging setup for the ``dice_dash`` logger tree."""

import logging

from dice_dash.config.settings import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_HANDLER_NAME = "dice_dash"


def configure_logging(settings: Settings) -> logging.Logger:
    """Attach a stream handler to the package logger and set its level.

    Safe to call on every Streamlit rerun: the handler is only added once.
    """
    logger = logging.getLogger("dice_dash")
    level = logging.DEBUG if settings.debug else logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO
    logger.setLevel(level)

    if not any(h.get_name() == _HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
