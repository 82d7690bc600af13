"""Service Schemas."""

from pydantic import Field

from portfolio.schemas.base import (
    INT32_MAX, INT32_MIN, PatchSchema, TimestampedRecord, WriteSchema,
)


class ServiceCreate(WriteSchema):
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    icon: str = Field(min_length=1)
    features: list[str] = Field(default_factory=list)
    color: str = Field(min_length=1)
    sort_order: int = Field(0, ge=INT32_MIN, le=INT32_MAX)
    active: bool = True


class ServiceUpdate(PatchSchema):
    non_nullable = frozenset({
        "title", "description", "icon", "features", "color",
        "sort_order", "active",
    })

    title: str | None = Field(None, min_length=1)
    description: str | None = Field(None, min_length=1)
    icon: str | None = Field(None, min_length=1)
    features: list[str] | None = None
    color: str | None = Field(None, min_length=1)
    sort_order: int | None = Field(None, ge=INT32_MIN, le=INT32_MAX)
    active: bool | None = None


class ServiceRecord(TimestampedRecord):
    title: str
    description: str
    icon: str
    features: list[str]
    color: str
    sort_order: int
    active: bool
