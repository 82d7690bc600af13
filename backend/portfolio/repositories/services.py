"""Service Repository - ordered by sort_order only."""

from portfolio.core.filters import ServiceFilters
from portfolio.models.service import Service
from portfolio.repositories.base import BaseRepository


class ServiceRepository(BaseRepository[Service]):
    model = Service
    entity = "service"
    order_by = (Service.sort_order.asc(),)

    async def list(self, filters: ServiceFilters | None = None) -> list[Service]:
        filters = filters or ServiceFilters()
        if filters.active_only:
            return await self._select(Service.active.is_(True))
        return await self._select()
