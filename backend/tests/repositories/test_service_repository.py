"""Service Repository - verifies active filter and sort order."""

from portfolio.core.filters import ServiceFilters
from portfolio.repositories import ServiceRepository
from tests.repositories.factories import service_data


async def test_active_only_returns_active_services_in_sort_order(test_db):
    repo = ServiceRepository(test_db)
    await repo.create(service_data(title="third", sort_order=3))
    await repo.create(service_data(title="hidden", sort_order=0, active=False))
    await repo.create(service_data(title="first", sort_order=1))

    result = await repo.list(ServiceFilters(active_only=True))

    assert [s.title for s in result] == ["first", "third"]
    assert all(s.active for s in result)


async def test_without_filter_returns_inactive_too(test_db):
    repo = ServiceRepository(test_db)
    await repo.create(service_data(title="on", sort_order=2))
    await repo.create(service_data(title="off", sort_order=1, active=False))

    assert [s.title for s in await repo.list()] == ["off", "on"]


async def test_service_features_round_trip(test_db):
    repo = ServiceRepository(test_db)
    created = await repo.create(service_data(features=["a", "b", "c"]))
    fetched = await repo.get_by_id(created.id)
    assert fetched.features == ["a", "b", "c"]
