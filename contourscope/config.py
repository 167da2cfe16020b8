"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    contourscope_env: str = "development"
    contourscope_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:1234"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
