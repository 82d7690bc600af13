"""Route Dependencies - build one repository per request over the request's session."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from portfolio.infrastructure.database import get_db
from portfolio.repositories import (
    BlogPostRepository,
    CertificationRepository,
    ContactSubmissionRepository,
    EducationRepository,
    ExperienceRepository,
    ProjectRepository,
    ServiceRepository,
)


def get_project_repository(
    db: AsyncSession = Depends(get_db),
) -> ProjectRepository:
    return ProjectRepository(db)


def get_blog_post_repository(
    db: AsyncSession = Depends(get_db),
) -> BlogPostRepository:
    return BlogPostRepository(db)


def get_service_repository(
    db: AsyncSession = Depends(get_db),
) -> ServiceRepository:
    return ServiceRepository(db)


def get_contact_repository(
    db: AsyncSession = Depends(get_db),
) -> ContactSubmissionRepository:
    return ContactSubmissionRepository(db)


def get_experience_repository(
    db: AsyncSession = Depends(get_db),
) -> ExperienceRepository:
    return ExperienceRepository(db)


def get_education_repository(
    db: AsyncSession = Depends(get_db),
) -> EducationRepository:
    return EducationRepository(db)


def get_certification_repository(
    db: AsyncSession = Depends(get_db),
) -> CertificationRepository:
    return CertificationRepository(db)
