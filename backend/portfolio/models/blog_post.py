"""BlogPost ORM - an article, addressable by id or by its unique slug.

Invariants:
    - slug is unique at the store level; a duplicate insert fails the write
    - published_at is nullable (drafts have none)
    - categories and tags are ordered JSON arrays of strings
"""

from datetime import datetime

from sqlalchemy import String, Text, Integer, Boolean, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column

from portfolio.db.base import Base, new_id, utcnow


class BlogPost(Base):
    """Blog post entity."""
    __tablename__ = "blog_posts"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=new_id,
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    slug: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    excerpt: Mapped[str] = mapped_column(Text, nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    image_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    categories: Mapped[list] = mapped_column(
        JSON, nullable=False, default=list,
    )
    tags: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    read_time_minutes: Mapped[int] = mapped_column(
        Integer, nullable=False, default=5,
    )
    published: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    featured: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    published_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow,
    )
