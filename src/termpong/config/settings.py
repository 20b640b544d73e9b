"""
Application settings using Pydantic.

Settings are loaded from environment variables with .env file support.
Game rules (arena size, paddle height, serve lock) are fixed constants
in termpong.game and are not exposed here.
"""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from termpong.game.arena import MIN_HEIGHT, MIN_WIDTH


class DisplaySettings(BaseSettings):
    """Display-related settings."""

    model_config = SettingsConfigDict(env_prefix="TERMPONG_DISPLAY_")

    # Smallest window the arena is drawn in
    min_width: int = Field(default=MIN_WIDTH, ge=1)
    min_height: int = Field(default=MIN_HEIGHT, ge=1)

    # Foreground color for every glyph
    foreground: str = "white"
    bold: bool = False


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_prefix="TERMPONG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    debug: bool = False

    # Append-only simulation log
    log_file: Path = Path("app.log")

    # Simulation clock
    tick_period_ms: int = Field(default=75, gt=0)

    # How long the input thread blocks on the keyboard before re-checking
    input_poll_ms: int = Field(default=50, gt=0)

    display: DisplaySettings = Field(default_factory=DisplaySettings)

    @property
    def tick_period(self) -> float:
        """Tick period in seconds."""
        return self.tick_period_ms / 1000

    @property
    def input_poll_timeout(self) -> float:
        return self.input_poll_ms / 1000


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
