"""
Farkle - Application Settings

Loads configuration from environment variables using Pydantic Settings,
and configures logging for the process.
"""

import logging
from functools import lru_cache

from pydantic_settings import BaseSettings

from farkle.engine.base import DEFAULT_WIN_TARGET, GameSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Supabase (only needed for saved games)
    supabase_url: str | None = None
    supabase_anon_key: str | None = None
    saved_games_table: str = "saved_games"

    # Application
    debug: bool = False
    log_level: str = "INFO"

    # Game defaults
    default_win_target: int = DEFAULT_WIN_TARGET
    default_exact_win: bool = False

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    def game_settings(self) -> GameSettings:
        """Engine rules built from the configured defaults."""
        return GameSettings(
            win_target=self.default_win_target,
            exact_win=self.default_exact_win,
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached singleton settings instance."""
    return Settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Configure root logging from settings. DEBUG wins over log_level."""
    settings = settings or get_settings()
    level = logging.DEBUG if settings.debug else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
