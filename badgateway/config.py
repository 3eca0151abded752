"""
Configuration for BadGateway.

Settings are read from BADGATEWAY_* environment variables. The history
directory is always injected here so the engine never computes a
platform-specific path on its own.
"""

import os
from functools import lru_cache
from pathlib import Path
from typing import Mapping

from pydantic import BaseModel, field_validator


ENV_PREFIX = "BADGATEWAY_"


class Settings(BaseModel):
    """Runtime settings for the request engine and its local API."""
    history_dir: Path = Path(".")
    log_level: str = "INFO"
    log_json: bool = False
    request_timeout: float | None = None

    @field_validator("request_timeout", mode="before")
    @classmethod
    def blank_timeout_is_none(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        """
        Build settings from environment variables.

        Args:
            environ: Mapping to read from, defaults to os.environ

        Returns:
            Validated Settings instance

        Example:
            BADGATEWAY_HISTORY_DIR=/tmp/bg -> Settings(history_dir=Path("/tmp/bg"))
        """
        if environ is None:
            environ = os.environ

        values = {}
        for field_name in cls.model_fields:
            env_name = ENV_PREFIX + field_name.upper()
            if env_name in environ:
                values[field_name] = environ[env_name]
        return cls(**values)


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings, loaded once from the environment."""
    return Settings.from_env()
