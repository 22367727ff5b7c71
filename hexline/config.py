from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Board
    grid_radius: int = 4

    # Logging
    log_level: str = "INFO"

    # Arena / simulation
    arena_games: int = 20
    arena_seed: int = 0
    max_session_turns: int = 10000

    model_config = SettingsConfigDict(
        env_prefix="HEXLINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


settings = Settings()
