"""Blog Post Schemas - create/patch bodies and the post record.

Invariants:
    - slug is URL-safe: lowercase letters, digits and single hyphens
"""

from datetime import datetime

from pydantic import Field

from portfolio.schemas.base import (
    INT32_MAX, PatchSchema, TimestampedRecord, WriteSchema,
)

SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"


class BlogPostCreate(WriteSchema):
    title: str = Field(min_length=1)
    slug: str = Field(min_length=1, max_length=200, pattern=SLUG_PATTERN)
    excerpt: str = Field(min_length=1)
    content: str = Field(min_length=1)
    image_url: str | None = None
    categories: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    read_time_minutes: int = Field(5, ge=0, le=INT32_MAX)
    published: bool = False
    featured: bool = False
    published_at: datetime | None = None


class BlogPostUpdate(PatchSchema):
    non_nullable = frozenset({
        "title", "slug", "excerpt", "content", "categories", "tags",
        "read_time_minutes", "published", "featured",
    })

    title: str | None = Field(None, min_length=1)
    slug: str | None = Field(
        None, min_length=1, max_length=200, pattern=SLUG_PATTERN,
    )
    excerpt: str | None = Field(None, min_length=1)
    content: str | None = Field(None, min_length=1)
    image_url: str | None = None
    categories: list[str] | None = None
    tags: list[str] | None = None
    read_time_minutes: int | None = Field(None, ge=0, le=INT32_MAX)
    published: bool | None = None
    featured: bool | None = None
    published_at: datetime | None = None


class BlogPostRecord(TimestampedRecord):
    title: str
    slug: str
    excerpt: str
    content: str
    image_url: str | None
    categories: list[str]
    tags: list[str]
    read_time_minutes: int
    published: bool
    featured: bool
    published_at: datetime | None
