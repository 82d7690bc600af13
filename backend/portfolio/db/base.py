"""SQLAlchemy Declarative Base - shared base class for all ORM models.

Invariants:
    - All models inherit from Base
    - Base is the single source of truth for table metadata
    - Identifiers are server-generated UUID strings, never supplied by clients
    - Timestamps are timezone-aware UTC

Design Decisions:
    - Separate file for Base: avoids circular imports between models
    - String primary keys: any client-supplied path segment can be looked up
      (an unknown id is a 404, never a type error)
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Base class for all portfolio ORM models."""
    pass


def new_id() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
