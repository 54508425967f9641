"""Configuration management using pydantic-settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TOKENSIGN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Log level for the root logger",
    )
    log_json: bool = Field(
        default=False,
        description="Render log events as JSON instead of console output",
    )

    # Signing
    default_algorithm: Literal["HS256", "HS384", "HS512"] = Field(
        default="HS256",
        description="Algorithm name resolved by default_signing_method()",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
