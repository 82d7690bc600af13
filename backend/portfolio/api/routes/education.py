"""Education - degrees, ordered by sort order then end date (newest first)."""

from fastapi import APIRouter, Depends, status

from portfolio.api.dependencies import get_education_repository
from portfolio.core.errors import RecordNotFoundError
from portfolio.repositories import EducationRepository
from portfolio.schemas.resume import EducationCreate, EducationRecord, EducationUpdate

router = APIRouter(prefix="/education", tags=["education"])


@router.get("", response_model=list[EducationRecord])
async def list_education(
    repo: EducationRepository = Depends(get_education_repository),
):
    return await repo.list()


@router.get("/{education_id}", response_model=EducationRecord)
async def get_education(
    education_id: str, repo: EducationRepository = Depends(get_education_repository),
):
    record = await repo.get_by_id(education_id)
    if record is None:
        raise RecordNotFoundError("Education")
    return record


@router.post(
    "", response_model=EducationRecord, status_code=status.HTTP_201_CREATED,
)
async def create_education(
    body: EducationCreate, repo: EducationRepository = Depends(get_education_repository),
):
    return await repo.create(body.to_record())


@router.patch("/{education_id}", response_model=EducationRecord)
async def update_education(
    education_id: str,
    body: EducationUpdate,
    repo: EducationRepository = Depends(get_education_repository),
):
    record = await repo.update(education_id, body.to_changes())
    if record is None:
        raise RecordNotFoundError("Education")
    return record


@router.delete("/{education_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_education(
    education_id: str, repo: EducationRepository = Depends(get_education_repository),
):
    if not await repo.delete(education_id):
        raise RecordNotFoundError("Education")
