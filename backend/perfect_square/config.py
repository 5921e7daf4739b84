"""Application configuration from environment variables."""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    perfect_square_env: str = "development"
    perfect_square_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:5173"]

    # Score store; None keeps records beside the storage package
    data_dir: Path | None = None
    leaderboard_limit: int = 10

    # Samples required before a stroke is scored
    min_points: int = 20

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
