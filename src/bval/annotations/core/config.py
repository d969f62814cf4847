# bval/annotations/core/config.py
"""
Central configuration for the annotation builder.

Environment variables override defaults.
"""
from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven settings with sensible defaults."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    # Constraint mapping files (glob patterns)
    mapping_config_paths: list[str] = Field(
        default_factory=lambda: ["config/constraints.yaml"]
    )

    proxy_class_cache: bool = Field(
        default=True,
        description="Reuse generated proxy classes per annotation type",
    )


settings = Settings()
