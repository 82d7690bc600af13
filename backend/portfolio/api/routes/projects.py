"""Projects - portfolio project cards.

Invariants:
    - GET list never 404s; an empty collection is []
    - featured filter applies only when the param is present ("true" or not)
    - categories accepts repeated params and comma-separated values (any-of)
"""

from fastapi import APIRouter, Depends, Query, status

from portfolio.api.dependencies import get_project_repository
from portfolio.core.errors import RecordNotFoundError
from portfolio.core.filters import ProjectFilters
from portfolio.repositories import ProjectRepository
from portfolio.schemas.projects import ProjectCreate, ProjectRecord, ProjectUpdate

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get("", response_model=list[ProjectRecord])
async def list_projects(
    featured: str | None = None,
    categories: list[str] | None = Query(None),
    repo: ProjectRepository = Depends(get_project_repository),
):
    """List projects by sort order, newest first within equal sort order."""
    return await repo.list(ProjectFilters.from_query(featured, categories))


@router.get("/{project_id}", response_model=ProjectRecord)
async def get_project(
    project_id: str, repo: ProjectRepository = Depends(get_project_repository),
):
    project = await repo.get_by_id(project_id)
    if project is None:
        raise RecordNotFoundError("Project")
    return project


@router.post(
    "", response_model=ProjectRecord, status_code=status.HTTP_201_CREATED,
)
async def create_project(
    body: ProjectCreate,
    repo: ProjectRepository = Depends(get_project_repository),
):
    return await repo.create(body.to_record())


@router.patch("/{project_id}", response_model=ProjectRecord)
async def update_project(
    project_id: str,
    body: ProjectUpdate,
    repo: ProjectRepository = Depends(get_project_repository),
):
    project = await repo.update(project_id, body.to_changes())
    if project is None:
        raise RecordNotFoundError("Project")
    return project


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(
    project_id: str, repo: ProjectRepository = Depends(get_project_repository),
):
    if not await repo.delete(project_id):
        raise RecordNotFoundError("Project")
