"""Runtime configuration for the Tomcat manager client."""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration values mapped from ``TOMCATMGR_*`` environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="TOMCATMGR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = Field("Tomcat Manager API")
    version: str = Field("1.0.0")
    log_level: str = Field("INFO")

    # Feature switches
    switch_deploy: bool = Field(True)

    # Tomcat manager endpoint
    manager_url: str = Field("http://localhost:8080/manager/text")
    manager_username: Optional[str] = Field("admin")
    manager_password: Optional[str] = Field("")
    manager_charset: str = Field("ISO-8859-1")
    manager_user_agent: Optional[str] = Field(None)
    # None keeps uploads of large archives from timing out.
    manager_timeout: Optional[float] = Field(None)


@lru_cache
def get_settings() -> Settings:
    """Return a cached Settings instance for dependency injection."""
    return Settings()
