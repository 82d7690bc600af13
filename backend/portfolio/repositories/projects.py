"""Project Repository - manual sort order first, newest first within a slot."""

from portfolio.core.filters import ProjectFilters, contains_any
from portfolio.models.project import Project
from portfolio.repositories.base import BaseRepository


class ProjectRepository(BaseRepository[Project]):
    model = Project
    entity = "project"
    order_by = (Project.sort_order.asc(), Project.created_at.desc())

    async def list(self, filters: ProjectFilters | None = None) -> list[Project]:
        filters = filters or ProjectFilters()
        conditions = []
        if filters.featured is not None:
            conditions.append(Project.featured == filters.featured)
        rows = await self._select(*conditions)
        if filters.categories:
            # JSON arrays are matched element-wise after the ordered SELECT
            rows = [p for p in rows if contains_any(p.categories, filters.categories)]
        return rows
