"""Data Access Layer - one repository per entity over an injected AsyncSession.

Invariants:
    - Repositories never raise on absence: lookups return None, delete returns False
    - Every SQLAlchemy failure leaves this layer as StoreError
    - Each public method is one logical store operation (no cross-entity work)

Design Decisions:
    - Session injected at construction: no global store client, tests pass
      their own in-memory session
"""

from portfolio.repositories.base import BaseRepository  # noqa: F401
from portfolio.repositories.users import UserRepository  # noqa: F401
from portfolio.repositories.projects import ProjectRepository  # noqa: F401
from portfolio.repositories.blog_posts import BlogPostRepository  # noqa: F401
from portfolio.repositories.services import ServiceRepository  # noqa: F401
from portfolio.repositories.contact_submissions import (  # noqa: F401
    ContactSubmissionRepository,
)
from portfolio.repositories.resume import (  # noqa: F401
    ExperienceRepository, EducationRepository, CertificationRepository,
)
