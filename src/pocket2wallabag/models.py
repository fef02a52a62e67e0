"""Domain models used by pocket2wallabag."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

WALLABAG_MIMETYPE = "text/html; charset=UTF-8"
WALLABAG_LANGUAGE = "en_US"


class ParsedItem(BaseModel):
    """One Pocket export record split into its five fields."""

    model_config = ConfigDict(frozen=True)

    title: str
    url: str
    time_added: str = Field(pattern=r"^\d+$")
    tags: str = ""
    status: Literal["unread", "archive"]


class WallabagEntry(BaseModel):
    """An entry in wallabag's JSON import format."""

    model_config = ConfigDict(frozen=True)

    is_archived: Literal[0, 1]
    is_starred: Literal[0, 1]
    tags: list[str] = Field(default_factory=list)
    title: str
    url: str
    created_at: str
    content: str = ""
    mimetype: str = WALLABAG_MIMETYPE
    language: str = WALLABAG_LANGUAGE


class ConversionReport(BaseModel):
    """Final conversion summary returned by convert_export."""

    run_tag: str
    output_dir: Path
    files_read: int
    records: int
    parsed: int
    dropped: int
    total: int
    archived: int
    unread: int
    starred: int | None = None
    outputs: list[Path] = Field(default_factory=list)
