"""Request and response models for the catalog API."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictStr, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from app.errors import BadRequest

ALL_FIELDS_REQUIRED = "All fields are required."


class GameCreate(BaseModel):
    """Body of ``POST /api/games``. All four fields are non-empty strings."""

    model_config = ConfigDict(extra="ignore")

    title: StrictStr = Field(min_length=1)
    image: StrictStr = Field(min_length=1)
    platform: StrictStr = Field(min_length=1)
    link: StrictStr = Field(min_length=1)

    @classmethod
    def from_payload(cls, raw: Any) -> "GameCreate":
        """Validate a decoded JSON body, or raise ``BadRequest`` without naming the field."""
        if not isinstance(raw, dict):
            raise BadRequest(ALL_FIELDS_REQUIRED)
        try:
            return cls.model_validate(raw)
        except ValidationError as exc:
            raise BadRequest(ALL_FIELDS_REQUIRED) from exc


class GameOut(BaseModel):
    """A stored game as returned to clients (camelCase timestamps)."""

    model_config = ConfigDict(from_attributes=True, alias_generator=to_camel, populate_by_name=True)

    id: int
    title: str
    image: str
    platform: str
    link: str
    created_at: datetime
    updated_at: datetime

    @field_validator("created_at", "updated_at")
    @classmethod
    def _assume_utc(cls, v: datetime) -> datetime:
        # SQLite hands back naive datetimes; everything is stored in UTC
        if v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


class GameCreated(BaseModel):
    message: str
    game: GameOut


class ErrorOut(BaseModel):
    message: str
    error: str | None = None
