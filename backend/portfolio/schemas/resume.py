"""Resume Schemas - experience, education and certification bodies/records.

Dates are free-form strings ("2021-03", "Present" is expressed as
current=True with no end date).
"""

from pydantic import Field

from portfolio.schemas.base import (
    INT32_MAX, INT32_MIN, PatchSchema, TimestampedRecord, WriteSchema,
)


# --- Experience ---------------------------------------------------------------

class ExperienceCreate(WriteSchema):
    company: str = Field(min_length=1)
    position: str = Field(min_length=1)
    description: str = Field(min_length=1)
    start_date: str = Field(min_length=1)
    end_date: str | None = None
    current: bool = False
    sort_order: int = Field(0, ge=INT32_MIN, le=INT32_MAX)


class ExperienceUpdate(PatchSchema):
    non_nullable = frozenset({
        "company", "position", "description", "start_date",
        "current", "sort_order",
    })

    company: str | None = Field(None, min_length=1)
    position: str | None = Field(None, min_length=1)
    description: str | None = Field(None, min_length=1)
    start_date: str | None = Field(None, min_length=1)
    end_date: str | None = None
    current: bool | None = None
    sort_order: int | None = Field(None, ge=INT32_MIN, le=INT32_MAX)


class ExperienceRecord(TimestampedRecord):
    company: str
    position: str
    description: str
    start_date: str
    end_date: str | None
    current: bool
    sort_order: int


# --- Education ----------------------------------------------------------------

class EducationCreate(WriteSchema):
    institution: str = Field(min_length=1)
    degree: str = Field(min_length=1)
    field: str | None = None
    description: str | None = None
    start_date: str = Field(min_length=1)
    end_date: str = Field(min_length=1)
    grade: str | None = None
    sort_order: int = Field(0, ge=INT32_MIN, le=INT32_MAX)


class EducationUpdate(PatchSchema):
    non_nullable = frozenset({
        "institution", "degree", "start_date", "end_date", "sort_order",
    })

    institution: str | None = Field(None, min_length=1)
    degree: str | None = Field(None, min_length=1)
    field: str | None = None
    description: str | None = None
    start_date: str | None = Field(None, min_length=1)
    end_date: str | None = Field(None, min_length=1)
    grade: str | None = None
    sort_order: int | None = Field(None, ge=INT32_MIN, le=INT32_MAX)


class EducationRecord(TimestampedRecord):
    institution: str
    degree: str
    field: str | None
    description: str | None
    start_date: str
    end_date: str
    grade: str | None
    sort_order: int


# --- Certifications -----------------------------------------------------------

class CertificationCreate(WriteSchema):
    title: str = Field(min_length=1)
    issuer: str = Field(min_length=1)
    issue_date: str = Field(min_length=1)
    expiry_date: str | None = None
    credential_id: str | None = None
    credential_url: str | None = None
    sort_order: int = Field(0, ge=INT32_MIN, le=INT32_MAX)


class CertificationUpdate(PatchSchema):
    non_nullable = frozenset({"title", "issuer", "issue_date", "sort_order"})

    title: str | None = Field(None, min_length=1)
    issuer: str | None = Field(None, min_length=1)
    issue_date: str | None = Field(None, min_length=1)
    expiry_date: str | None = None
    credential_id: str | None = None
    credential_url: str | None = None
    sort_order: int | None = Field(None, ge=INT32_MIN, le=INT32_MAX)


class CertificationRecord(TimestampedRecord):
    title: str
    issuer: str
    issue_date: str
    expiry_date: str | None
    credential_id: str | None
    credential_url: str | None
    sort_order: int
