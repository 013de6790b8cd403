"""
Dice Dash - Application Settings

Loads configuration from environment variables using Pydantic Settings.
On Streamlit Cloud, bridges st.secrets into env vars so Pydantic can read them.
"""

import logging
import os
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

_ENV_PREFIX = "DICE_DASH_"

_SECRET_KEYS = (
    "DEBUG",
    "LOG_LEVEL",
    "DEFAULT_PLAYER_COUNT",
    "DEFAULT_TARGET_SCORE",
    "ROLL_ANIMATION_MS",
    "BUST_DELAY_MS",
    "HOLD_DELAY_MS",
    "ENABLE_CONFETTI",
    "ENABLE_SHORTCUTS",
)


def _load_streamlit_secrets() -> None:
    """Bridge Streamlit Cloud secrets into environment variables."""
    try:
        import streamlit as st

        if not st.secrets.load_if_toml_exists():
            return

        for key in _SECRET_KEYS:
            env_key = _ENV_PREFIX + key
            if env_key not in os.environ and key in st.secrets:
                os.environ[env_key] = str(st.secrets[key])
    except Exception:
        # No secrets.toml outside Streamlit Cloud; env vars still apply.
        logger.debug("Streamlit secrets unavailable", exc_info=True)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    debug: bool = False
    log_level: str = "INFO"

    # New game defaults (clamped by the engine)
    default_player_count: int = 3
    default_target_score: int = 100

    # Cosmetic delays
    roll_animation_ms: int = Field(default=600, ge=0)
    bust_delay_ms: int = Field(default=350, ge=0)
    hold_delay_ms: int = Field(default=250, ge=0)

    # Presentation
    enable_confetti: bool = True
    enable_shortcuts: bool = True

    model_config = SettingsConfigDict(
        env_prefix=_ENV_PREFIX,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def roll_animation_s(self) -> float:
        return self.roll_animation_ms / 1000

    @property
    def bust_delay_s(self) -> float:
        return self.bust_delay_ms / 1000

    @property
    def hold_delay_s(self) -> float:
        return self.hold_delay_ms / 1000


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    _load_streamlit_secrets()
    return Settings()
