"""Core task models for Taskwarrior Server."""

from __future__ import annotations

import re
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, field_validator

from taskwarrior_server.enums import Priority, TaskStatus

UUID_PATTERN = r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}$"
PROJECT_PATTERN = r"^[a-zA-Z0-9 ._-]+$"
TAG_PATTERN = r"^[a-zA-Z0-9_-]+$"

Tag = Annotated[str, Field(pattern=TAG_PATTERN)]

_UUID_RE = re.compile(UUID_PATTERN)


def is_valid_uuid(value: str) -> bool:
    """Return True if value is a UUID in canonical 8-4-4-4-12 hex form."""
    return bool(_UUID_RE.fullmatch(value))


class TaskAnnotation(BaseModel):
    """Model for task annotations (notes)."""

    entry: str
    description: str


class TaskModel(BaseModel):
    """Model representing a Taskwarrior task as returned by `task export`."""

    model_config = ConfigDict(extra="allow")

    id: int
    uuid: str = Field(pattern=UUID_PATTERN)
    description: str
    status: TaskStatus
    entry: str
    modified: str | None = None
    start: str | None = None
    due: str | None = None
    priority: Priority | None = None
    project: str | None = Field(default=None, pattern=PROJECT_PATTERN)
    tags: list[Tag] | None = None
    annotations: list[TaskAnnotation] | None = None
    urgency: float | None = None

    @field_validator("tags")
    @classmethod
    def dedupe_tags(cls, v: list[str] | None) -> list[str] | None:
        if v is None:
            return v
        # Tags are a set in Taskwarrior; keep the first occurrence of each.
        return list(dict.fromkeys(v))

    def has_annotation(self, text: str) -> bool:
        """Return True if an annotation's text matches exactly."""
        return any(a.description == text for a in self.annotations or [])
