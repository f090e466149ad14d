"""Application configuration from environment variables."""

from __future__ import annotations

import logging

from pydantic_settings import BaseSettings

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


class Settings(BaseSettings):
    shapedraw_env: str = "development"
    shapedraw_log_level: str = "info"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()


def configure_logging(level: str | None = None) -> int:
    """Apply the package log format. Returns the numeric level in use."""
    name = (level or settings.shapedraw_log_level).upper()
    numeric = getattr(logging, name, logging.INFO)
    logging.basicConfig(level=numeric, format=LOG_FORMAT)
    logging.getLogger("shapedraw").setLevel(numeric)
    return numeric
