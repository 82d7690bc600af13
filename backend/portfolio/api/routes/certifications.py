"""Certifications - credentials, ordered by sort order then issue date (newest first)."""

from fastapi import APIRouter, Depends, status

from portfolio.api.dependencies import get_certification_repository
from portfolio.core.errors import RecordNotFoundError
from portfolio.repositories import CertificationRepository
from portfolio.schemas.resume import CertificationCreate, CertificationRecord, CertificationUpdate

router = APIRouter(prefix="/certifications", tags=["certifications"])


@router.get("", response_model=list[CertificationRecord])
async def list_certifications(
    repo: CertificationRepository = Depends(get_certification_repository),
):
    return await repo.list()


@router.get("/{certification_id}", response_model=CertificationRecord)
async def get_certification(
    certification_id: str, repo: CertificationRepository = Depends(get_certification_repository),
):
    record = await repo.get_by_id(certification_id)
    if record is None:
        raise RecordNotFoundError("Certification")
    return record


@router.post(
    "", response_model=CertificationRecord, status_code=status.HTTP_201_CREATED,
)
async def create_certification(
    body: CertificationCreate, repo: CertificationRepository = Depends(get_certification_repository),
):
    return await repo.create(body.to_record())


@router.patch("/{certification_id}", response_model=CertificationRecord)
async def update_certification(
    certification_id: str,
    body: CertificationUpdate,
    repo: CertificationRepository = Depends(get_certification_repository),
):
    record = await repo.update(certification_id, body.to_changes())
    if record is None:
        raise RecordNotFoundError("Certification")
    return record


@router.delete("/{certification_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_certification(
    certification_id: str, repo: CertificationRepository = Depends(get_certification_repository),
):
    if not await repo.delete(certification_id):
        raise RecordNotFoundError("Certification")
