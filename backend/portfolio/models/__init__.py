"""ORM Models - SQLAlchemy declarative models for all portfolio entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Entities are siblings: no foreign keys, no relationships

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete for create_all/alembic
"""

from portfolio.models.user import User  # noqa: F401
from portfolio.models.project import Project  # noqa: F401
from portfolio.models.blog_post import BlogPost  # noqa: F401
from portfolio.models.service import Service  # noqa: F401
from portfolio.models.contact_submission import ContactSubmission  # noqa: F401
from portfolio.models.experience import Experience  # noqa: F401
from portfolio.models.education import Education  # noqa: F401
from portfolio.models.certification import Certification  # noqa: F401
