"""Resume Repositories - experience, education and certifications.

All three order by manual sort_order, then by their most meaningful date
descending. Dates are stored as text ("2021-03"), so the secondary sort is
lexical; ISO-like values sort chronologically.
"""

from portfolio.models.certification import Certification
from portfolio.models.education import Education
from portfolio.models.experience import Experience
from portfolio.repositories.base import BaseRepository


class ExperienceRepository(BaseRepository[Experience]):
    model = Experience
    entity = "experience"
    order_by = (Experience.sort_order.asc(), Experience.start_date.desc())


class EducationRepository(BaseRepository[Education]):
    model = Education
    entity = "education"
    order_by = (Education.sort_order.asc(), Education.end_date.desc())


class CertificationRepository(BaseRepository[Certification]):
    model = Certification
    entity = "certification"
    order_by = (Certification.sort_order.asc(), Certification.issue_date.desc())
