"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    pixelpoly_env: str = "development"
    pixelpoly_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Largest grid (columns x rows) the API will extract
    max_grid_cells: int = 1_000_000

    # Keep the alpha channel when decoding images (cells then match on alpha too)
    keep_alpha: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
