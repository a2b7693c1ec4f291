# app/config.py
from __future__ import annotations
from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from repositories.sql_model_game_repository import DEFAULT_DATABASE_URL


class Settings(BaseSettings):
    """Process-wide configuration, read once at startup."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", frozen=True)

    APP_NAME: str = "Game Catalog API"
    DB_BACKEND: str = "sqlmodel"
    DATABASE_URL: str = DEFAULT_DATABASE_URL
    ADMIN_SECRET_KEY: Optional[str] = None
    HOST: str = "0.0.0.0"
    PORT: int = Field(3000, ge=1, le=65535)
    CORS_ORIGINS: str = "*"
    DB_TIMEOUT: float = Field(10.0, gt=0)
    EXPOSE_ERROR_DETAILS: bool = False
    LOG_LEVEL: str = "info"

    @field_validator("ADMIN_SECRET_KEY")
    @classmethod
    def _blank_secret_is_unset(cls, v: Optional[str]) -> Optional[str]:
        # An empty secret would let an empty header through
        return v or None

    @property
    def cors_origins(self) -> List[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


def get_settings() -> Settings:
    return Settings()
