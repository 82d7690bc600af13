"""Project Schemas - create/patch bodies and the project record."""

from pydantic import Field

from portfolio.schemas.base import (
    INT32_MAX, INT32_MIN, PatchSchema, TimestampedRecord, WriteSchema,
)


class ProjectCreate(WriteSchema):
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    long_description: str | None = None
    image_url: str | None = None
    technologies: list[str] = Field(default_factory=list)
    categories: list[str] = Field(default_factory=list)
    github_url: str | None = None
    live_url: str | None = None
    featured: bool = False
    sort_order: int = Field(0, ge=INT32_MIN, le=INT32_MAX)


class ProjectUpdate(PatchSchema):
    non_nullable = frozenset({
        "title", "description", "technologies", "categories",
        "featured", "sort_order",
    })

    title: str | None = Field(None, min_length=1)
    description: str | None = Field(None, min_length=1)
    long_description: str | None = None
    image_url: str | None = None
    technologies: list[str] | None = None
    categories: list[str] | None = None
    github_url: str | None = None
    live_url: str | None = None
    featured: bool | None = None
    sort_order: int | None = Field(None, ge=INT32_MIN, le=INT32_MAX)


class ProjectRecord(TimestampedRecord):
    title: str
    description: str
    long_description: str | None
    image_url: str | None
    technologies: list[str]
    categories: list[str]
    github_url: str | None
    live_url: str | None
    featured: bool
    sort_order: int
