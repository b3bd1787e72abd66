"""Centralized configuration using Pydantic Settings

Library-level knobs only. The config mapping handed to a Model is opaque
and never validated here.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from MODEL_API_* environment variables"""

    model_config = SettingsConfigDict(
        env_prefix="MODEL_API_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Entry point group scanned by discover_extensions()
    extension_entry_point_group: str = "model_api.extensions"

    # Log a warning whenever a forwarder replaces an existing Model attribute
    warn_on_replace: bool = True


# Global settings instance
settings = Settings()
