"""
Farkle - Application Settings

Loads configuration from environment variables (prefixed with FARKLE_)
or a .env file using Pydantic Settings.
"""

import logging
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings

from farkle.engine.base import GameConfig
from farkle.engine.dice import RandomFaceSource

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    debug: bool = False
    log_level: str = "INFO"

    # Game
    player_count: int = Field(default=1, ge=GameConfig.MIN_PLAYERS, le=GameConfig.MAX_PLAYERS)
    turn_count: int = Field(default=5, ge=GameConfig.MIN_TURNS, le=GameConfig.MAX_TURNS)
    seed: int | None = None

    model_config = {
        "env_prefix": "FARKLE_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    def game_config(self) -> GameConfig:
        return GameConfig(player_count=self.player_count, turn_count=self.turn_count)

    def face_source(self) -> RandomFaceSource:
        """Dice source, reproducible when a seed is configured."""
        return RandomFaceSource(self.seed)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Install a root handler at the configured level."""
    if settings is None:
        settings = get_settings()
    level = logging.DEBUG if settings.debug else settings.log_level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("farkle").setLevel(level)
