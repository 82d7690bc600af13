"""Services - offered services, optionally narrowed to active ones."""

from fastapi import APIRouter, Depends, status

from portfolio.api.dependencies import get_service_repository
from portfolio.core.errors import RecordNotFoundError
from portfolio.core.filters import ServiceFilters
from portfolio.repositories import ServiceRepository
from portfolio.schemas.services import ServiceCreate, ServiceRecord, ServiceUpdate

router = APIRouter(prefix="/services", tags=["services"])


@router.get("", response_model=list[ServiceRecord])
async def list_services(
    active: str | None = None,
    repo: ServiceRepository = Depends(get_service_repository),
):
    """active=true returns active services only; anything else returns all."""
    return await repo.list(ServiceFilters.from_query(active))


@router.get("/{service_id}", response_model=ServiceRecord)
async def get_service(
    service_id: str, repo: ServiceRepository = Depends(get_service_repository),
):
    service = await repo.get_by_id(service_id)
    if service is None:
        raise RecordNotFoundError("Service")
    return service


@router.post(
    "", response_model=ServiceRecord, status_code=status.HTTP_201_CREATED,
)
async def create_service(
    body: ServiceCreate,
    repo: ServiceRepository = Depends(get_service_repository),
):
    return await repo.create(body.to_record())


@router.patch("/{service_id}", response_model=ServiceRecord)
async def update_service(
    service_id: str,
    body: ServiceUpdate,
    repo: ServiceRepository = Depends(get_service_repository),
):
    service = await repo.update(service_id, body.to_changes())
    if service is None:
        raise RecordNotFoundError("Service")
    return service


@router.delete("/{service_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_service(
    service_id: str, repo: ServiceRepository = Depends(get_service_repository),
):
    if not await repo.delete(service_id):
        raise RecordNotFoundError("Service")
