"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    wktedit_env: str = "development"
    wktedit_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Files
    default_file_name: str = "Unnamed Geometry.wkt"
    file_encoding: str = "utf-8"

    # Interaction
    hit_tolerance: float = 3.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
