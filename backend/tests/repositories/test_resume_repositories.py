"""Resume Repositories - verifies per-entity default ordering.

Invariants:
    - experiences: sort_order asc, start_date desc
    - education: sort_order asc, end_date desc
    - certifications: sort_order asc, issue_date desc
"""

from portfolio.repositories import (
    CertificationRepository, EducationRepository, ExperienceRepository,
)
from tests.repositories.factories import (
    certification_data, education_data, experience_data,
)


async def test_experiences_order(test_db):
    repo = ExperienceRepository(test_db)
    await repo.create(experience_data(company="old", start_date="2015-01"))
    await repo.create(experience_data(company="pinned", start_date="2010-01", sort_order=-1))
    await repo.create(experience_data(company="recent", start_date="2022-06"))

    assert [e.company for e in await repo.list()] == ["pinned", "recent", "old"]


async def test_education_order(test_db):
    repo = EducationRepository(test_db)
    await repo.create(education_data(degree="BSc", end_date="2015-06"))
    await repo.create(education_data(degree="MSc", end_date="2017-06"))
    await repo.create(education_data(degree="PhD", end_date="2022-06", sort_order=1))

    assert [e.degree for e in await repo.list()] == ["MSc", "BSc", "PhD"]


async def test_certifications_order(test_db):
    repo = CertificationRepository(test_db)
    await repo.create(certification_data(title="a", issue_date="2019-01"))
    await repo.create(certification_data(title="b", issue_date="2023-01"))

    assert [c.title for c in await repo.list()] == ["b", "a"]


async def test_experience_update_and_delete(test_db):
    repo = ExperienceRepository(test_db)
    created = await repo.create(experience_data(current=True))

    updated = await repo.update(created.id, {"current": False, "end_date": "2024-01"})

    assert updated.current is False
    assert updated.end_date == "2024-01"
    assert updated.company == "Acme"
    assert await repo.delete(created.id) is True
    assert await repo.list() == []
