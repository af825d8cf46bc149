"""Immutable value objects: authors, documents and search requests"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Treat naive datetimes as UTC; convert aware ones to UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class Author(BaseModel):
    """Document author, embedded in a Document."""
    model_config = ConfigDict(frozen=True)

    id: str
    name: str


class Document(BaseModel):
    """A stored content unit. id, title and created are None on create input."""
    model_config = ConfigDict(frozen=True)

    id: Optional[str] = None
    title: Optional[str] = None
    content: str
    author: Optional[Author] = None
    created: Optional[datetime] = None

    @field_validator("created")
    @classmethod
    def _created_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc(value)


class SearchRequest(BaseModel):
    """Filter specification; a None field places no constraint on that dimension."""
    model_config = ConfigDict(frozen=True)

    title_prefixes:    Optional[list[str]] = None
    contains_contents: Optional[list[str]] = None
    author_ids:        Optional[list[str]] = None
    created_from:      Optional[datetime] = None    # exclusive
    created_to:        Optional[datetime] = None    # exclusive

    @field_validator("created_from", "created_to")
    @classmethod
    def _bounds_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return as_utc(value)
