"""Schema Bases - shared pydantic configuration for write and record schemas.

Invariants:
    - WriteSchema.to_record() yields ORM attribute names (snake_case)
    - PatchSchema.to_changes() yields only the fields the caller supplied
    - A PatchSchema rejects explicit null for columns that are NOT NULL
    - int fields are bounded to the 32-bit column range, so oversized values
      are a 400 instead of a store failure
"""

from datetime import datetime
from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel

# Range of the 32-bit INTEGER columns behind every int field
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


class WriteSchema(BaseModel):
    """Body accepted on create."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="forbid",
    )

    def to_record(self) -> dict[str, Any]:
        return self.model_dump()


class PatchSchema(WriteSchema):
    """Body accepted on partial update: every field optional, none defaulted."""
    non_nullable: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="after")
    def reject_null_required(self):
        nulls = sorted(
            name for name in self.model_fields_set
            if name in self.non_nullable and getattr(self, name) is None
        )
        if nulls:
            raise ValueError(f"{', '.join(nulls)} cannot be null")
        return self

    def to_changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class RecordSchema(BaseModel):
    """Full stored record, read from ORM attributes."""
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True,
    )

    id: str
    created_at: datetime


class TimestampedRecord(RecordSchema):
    updated_at: datetime
