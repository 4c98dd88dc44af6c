"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    sigilworks_env: str = "development"
    sigilworks_log_level: str = "debug"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Store persistence: empty = in-memory only
    sigilworks_data_file: str = ""

    # Resonance dynamics
    initial_resonance: float = 0.5
    charge_boost: float = 0.1
    resonance_half_life_days: float = 30.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
