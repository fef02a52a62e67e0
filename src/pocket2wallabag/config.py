"""Run configuration models and enums for pocket2wallabag."""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from dateutil import tz
from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_CHUNK_SIZE = 1000
RUN_TAG_PREFIX = "pocket2wallabag"


class Partition(str, Enum):
    ARCHIVE = "archive"
    UNREAD = "unread"


def new_run_tag(now: datetime | None = None) -> str:
    """Build a time-derived tag that names one conversion run."""

    moment = now if now is not None else datetime.now(tz.UTC)
    return f"{RUN_TAG_PREFIX}-{moment:%Y%m%d-%H%M%S}"


class RunContext(BaseModel):
    """Settings shared by every stage of a single conversion run."""

    model_config = ConfigDict(frozen=True)

    run_tag: str = Field(default_factory=new_run_tag, min_length=1, pattern=r"^[A-Za-z0-9._-]+$")
    favorite_tag: str | None = None
    chunk_size: int = Field(default=DEFAULT_CHUNK_SIZE, ge=1)

    @field_validator("favorite_tag")
    @classmethod
    def blank_favorite_tag_is_none(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.strip()
        if "|" in value or "," in value:
            raise ValueError("favorite_tag must be a single tag token")
        return value or None
