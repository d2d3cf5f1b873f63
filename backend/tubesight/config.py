"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    tubesight_env: str = "development"
    tubesight_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Control point loading
    points_fetch_timeout: float = 10.0

    # Analysis defaults
    default_samples: int = 200
    default_degree_samples: int = 100
    default_tension: float = 0.5

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
