"""Experience - work history, ordered by sort order then start date (newest first)."""

from fastapi import APIRouter, Depends, status

from portfolio.api.dependencies import get_experience_repository
from portfolio.core.errors import RecordNotFoundError
from portfolio.repositories import ExperienceRepository
from portfolio.schemas.resume import ExperienceCreate, ExperienceRecord, ExperienceUpdate

router = APIRouter(prefix="/experience", tags=["experience"])


@router.get("", response_model=list[ExperienceRecord])
async def list_experiences(
    repo: ExperienceRepository = Depends(get_experience_repository),
):
    return await repo.list()


@router.get("/{experience_id}", response_model=ExperienceRecord)
async def get_experience(
    experience_id: str, repo: ExperienceRepository = Depends(get_experience_repository),
):
    record = await repo.get_by_id(experience_id)
    if record is None:
        raise RecordNotFoundError("Experience")
    return record


@router.post(
    "", response_model=ExperienceRecord, status_code=status.HTTP_201_CREATED,
)
async def create_experience(
    body: ExperienceCreate, repo: ExperienceRepository = Depends(get_experience_repository),
):
    return await repo.create(body.to_record())


@router.patch("/{experience_id}", response_model=ExperienceRecord)
async def update_experience(
    experience_id: str,
    body: ExperienceUpdate,
    repo: ExperienceRepository = Depends(get_experience_repository),
):
    record = await repo.update(experience_id, body.to_changes())
    if record is None:
        raise RecordNotFoundError("Experience")
    return record


@router.delete("/{experience_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_experience(
    experience_id: str, repo: ExperienceRepository = Depends(get_experience_repository),
):
    if not await repo.delete(experience_id):
        raise RecordNotFoundError("Experience")
