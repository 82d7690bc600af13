"""Initial schema - users, projects, blog posts, services, contact, resume tables.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-17

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _id() -> sa.Column:
    return sa.Column("id", sa.String(36), primary_key=True)


def _timestamps(with_updated: bool = True) -> list[sa.Column]:
    columns = [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    ]
    if with_updated:
        columns.append(
            sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        )
    return columns


def _sort_order() -> sa.Column:
    return sa.Column("sort_order", sa.Integer, nullable=False, server_default="0")


def upgrade() -> None:
    op.create_table(
        "users",
        _id(),
        sa.Column("username", sa.Text, nullable=False, unique=True),
        sa.Column("password", sa.Text, nullable=False),
    )

    op.create_table(
        "projects",
        _id(),
        sa.Column("title", sa.Text, nullable=False),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("long_description", sa.Text, nullable=True),
        sa.Column("image_url", sa.Text, nullable=True),
        sa.Column("technologies", sa.JSON, nullable=False, server_default="[]"),
        sa.Column("categories", sa.JSON, nullable=False, server_default="[]"),
        sa.Column("github_url", sa.Text, nullable=True),
        sa.Column("live_url", sa.Text, nullable=True),
        sa.Column("featured", sa.Boolean, nullable=False, server_default=sa.false()),
        _sort_order(),
        *_timestamps(),
    )

    op.create_table(
        "blog_posts",
        _id(),
        sa.Column("title", sa.Text, nullable=False),
        sa.Column("slug", sa.Text, nullable=False, unique=True),
        sa.Column("excerpt", sa.Text, nullable=False),
        sa.Column("content", sa.Text, nullable=False),
        sa.Column("image_url", sa.Text, nullable=True),
        sa.Column("categories", sa.JSON, nullable=False, server_default="[]"),
        sa.Column("tags", sa.JSON, nullable=False, server_default="[]"),
        sa.Column("read_time_minutes", sa.Integer, nullable=False, server_default="5"),
        sa.Column("published", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("featured", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("published_at", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
    )

    op.create_table(
        "services",
        _id(),
        sa.Column("title", sa.Text, nullable=False),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("icon", sa.Text, nullable=False),
        sa.Column("features", sa.JSON, nullable=False, server_default="[]"),
        sa.Column("color", sa.Text, nullable=False),
        _sort_order(),
        sa.Column("active", sa.Boolean, nullable=False, server_default=sa.true()),
        *_timestamps(),
    )

    op.create_table(
        "contact_submissions",
        _id(),
        sa.Column("first_name", sa.Text, nullable=False),
        sa.Column("last_name", sa.Text, nullable=False),
        sa.Column("email", sa.Text, nullable=False),
        sa.Column("subject", sa.Text, nullable=False),
        sa.Column("message", sa.Text, nullable=False),
        sa.Column("ip_address", sa.Text, nullable=True),
        sa.Column("user_agent", sa.Text, nullable=True),
        sa.Column("processed", sa.Boolean, nullable=False, server_default=sa.false()),
        *_timestamps(with_updated=False),
    )

    op.create_table(
        "experiences",
        _id(),
        sa.Column("company", sa.Text, nullable=False),
        sa.Column("position", sa.Text, nullable=False),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("start_date", sa.Text, nullable=False),
        sa.Column("end_date", sa.Text, nullable=True),
        sa.Column("current", sa.Boolean, nullable=False, server_default=sa.false()),
        _sort_order(),
        *_timestamps(),
    )

    op.create_table(
        "education",
        _id(),
        sa.Column("institution", sa.Text, nullable=False),
        sa.Column("degree", sa.Text, nullable=False),
        sa.Column("field", sa.Text, nullable=True),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("start_date", sa.Text, nullable=False),
        sa.Column("end_date", sa.Text, nullable=False),
        sa.Column("grade", sa.Text, nullable=True),
        _sort_order(),
        *_timestamps(),
    )

    op.create_table(
        "certifications",
        _id(),
        sa.Column("title", sa.Text, nullable=False),
        sa.Column("issuer", sa.Text, nullable=False),
        sa.Column("issue_date", sa.Text, nullable=False),
        sa.Column("expiry_date", sa.Text, nullable=True),
        sa.Column("credential_id", sa.Text, nullable=True),
        sa.Column("credential_url", sa.Text, nullable=True),
        _sort_order(),
        *_timestamps(),
    )


def downgrade() -> None:
    for table in (
        "certifications", "education", "experiences", "contact_submissions",
        "services", "blog_posts", "projects", "users",
    ):
        op.drop_table(table)
