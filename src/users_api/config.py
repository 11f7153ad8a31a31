"""Configuration management for the Users API."""

import os
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from users_api import __version__


def _get_env_file_path() -> str:
    """Get the path to the .env file.

    Checks for ENV_FILE environment variable first, then defaults to
    .env in the project root.

    Returns:
        Path to the .env file
    """
    env_file = os.getenv("ENV_FILE")
    if env_file:
        return env_file

    # src/users_api/config.py -> project root
    project_dir = Path(__file__).resolve().parent.parent.parent
    return str(project_dir / ".env")


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # Application
    app_name: str = "API de Usuarios"
    app_version: str = __version__
    environment: str = "development"
    log_level: Literal["critical", "error", "warning", "info", "debug"] = "info"

    # API
    api_host: str = "localhost"
    api_port: int = 3000
    docs_url: str = "/api-docs"

    # UI
    ui_url: str | None = None

    # Registry
    seed_users: bool = True

    model_config = SettingsConfigDict(
        env_file=_get_env_file_path(),
        case_sensitive=False,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: object) -> object:
        """Accept any case and the common "warn" alias."""
        if isinstance(value, str):
            value = value.strip().lower()
            return "warning" if value == "warn" else value
        return value

    @property
    def public_url(self) -> str:
        """Base URL advertised in the OpenAPI document."""
        return f"http://{self.api_host}:{self.api_port}"


@lru_cache
def get_settings() -> Settings:
    """Get application settings."""
    return Settings()
