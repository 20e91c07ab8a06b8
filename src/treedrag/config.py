"""Application configuration.

Configuration is loaded from environment variables. For local development, you can provide a
`.env` file and set `TREEDRAG_ENV_FILE` to point to it.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_GUTTER_SIZE = 8.0


class Settings(BaseSettings):
    """treedrag settings.

    All fields are environment-configurable. Prefix is `TREEDRAG_`.
    """

    model_config = SettingsConfigDict(
        env_prefix="TREEDRAG_",
        env_file=None,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Core
    app_env: Literal["dev", "prod"] = Field(default="dev")
    log_level: str = Field(default="INFO")

    # Drop zones, in the same units as row geometry
    gutter_size: float = Field(default=DEFAULT_GUTTER_SIZE, ge=0.0)

    # Recording
    events_path: Path | None = Field(default=None)


def load_settings() -> Settings:
    """Load settings from env.

    Returns:
        Settings: Parsed settings.
    """

    env_file_override = os.getenv("TREEDRAG_ENV_FILE")
    if env_file_override:
        env_path = Path(env_file_override)
        return Settings(_env_file=env_path)

    default_env = Path.cwd() / ".env"
    if default_env.exists():
        return Settings(_env_file=default_env)

    return Settings()
