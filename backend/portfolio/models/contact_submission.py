"""ContactSubmission ORM - an inbound message from the contact form.

Invariants:
    - Immutable event record except for the processed flag
    - No updated_at column: marking processed is the only mutation
    - ip_address and user_agent are captured by the server, never by the client
"""

from datetime import datetime

from sqlalchemy import String, Text, Boolean, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from portfolio.db.base import Base, new_id, utcnow


class ContactSubmission(Base):
    """Contact form submission."""
    __tablename__ = "contact_submissions"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=new_id,
    )
    first_name: Mapped[str] = mapped_column(Text, nullable=False)
    last_name: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(Text, nullable=False)
    subject: Mapped[str] = mapped_column(Text, nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    ip_address: Mapped[str | None] = mapped_column(Text, nullable=True)
    user_agent: Mapped[str | None] = mapped_column(Text, nullable=True)
    processed: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow,
    )
