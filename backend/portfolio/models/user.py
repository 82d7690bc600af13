"""User ORM - site owner account, looked up by its unique username.

Invariants:
    - username is unique at the store level
    - No HTTP surface: accounts are provisioned from scripts
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from portfolio.db.base import Base, new_id


class User(Base):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(
        String(36), primary_key=True, default=new_id,
    )
    username: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    password: Mapped[str] = mapped_column(Text, nullable=False)
