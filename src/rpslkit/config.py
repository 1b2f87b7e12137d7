"""Runtime settings for the rpslkit command line.

Loaded from ``RPSLKIT_``-prefixed environment variables and an optional
``.env`` file. The record model and decoder never read settings; only the
CLI does.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Logging
    log_level: str = Field("WARNING")
    json_logs: bool = Field(False)

    # Output
    output_format: Literal["text", "json"] = Field("text")
    encoding: str = Field("utf-8")  # used to read input files

    model_config = SettingsConfigDict(
        env_prefix="RPSLKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached settings instance, so the environment is parsed once."""
    return Settings()


__all__ = ["Settings", "get_settings"]
