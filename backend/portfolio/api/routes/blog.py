"""Blog - posts addressable by id or by unique slug.

Invariants:
    - /slug/{slug} is an exact lookup; absence is a 404
    - A duplicate slug on create/update surfaces as a 500 StoreError
"""

from fastapi import APIRouter, Depends, Query, status

from portfolio.api.dependencies import get_blog_post_repository
from portfolio.core.errors import RecordNotFoundError
from portfolio.core.filters import BlogPostFilters
from portfolio.repositories import BlogPostRepository
from portfolio.schemas.blog import BlogPostCreate, BlogPostRecord, BlogPostUpdate

router = APIRouter(prefix="/blog", tags=["blog"])

NOT_FOUND = "Blog post"


@router.get("", response_model=list[BlogPostRecord])
async def list_blog_posts(
    published: str | None = None,
    featured: str | None = None,
    categories: list[str] | None = Query(None),
    repo: BlogPostRepository = Depends(get_blog_post_repository),
):
    """List posts, most recently published first."""
    filters = BlogPostFilters.from_query(published, featured, categories)
    return await repo.list(filters)


@router.get("/slug/{slug}", response_model=BlogPostRecord)
async def get_blog_post_by_slug(
    slug: str, repo: BlogPostRepository = Depends(get_blog_post_repository),
):
    post = await repo.get_by_slug(slug)
    if post is None:
        raise RecordNotFoundError(NOT_FOUND)
    return post


@router.get("/{post_id}", response_model=BlogPostRecord)
async def get_blog_post(
    post_id: str, repo: BlogPostRepository = Depends(get_blog_post_repository),
):
    post = await repo.get_by_id(post_id)
    if post is None:
        raise RecordNotFoundError(NOT_FOUND)
    return post


@router.post(
    "", response_model=BlogPostRecord, status_code=status.HTTP_201_CREATED,
)
async def create_blog_post(
    body: BlogPostCreate,
    repo: BlogPostRepository = Depends(get_blog_post_repository),
):
    return await repo.create(body.to_record())


@router.patch("/{post_id}", response_model=BlogPostRecord)
async def update_blog_post(
    post_id: str,
    body: BlogPostUpdate,
    repo: BlogPostRepository = Depends(get_blog_post_repository),
):
    post = await repo.update(post_id, body.to_changes())
    if post is None:
        raise RecordNotFoundError(NOT_FOUND)
    return post


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_blog_post(
    post_id: str, repo: BlogPostRepository = Depends(get_blog_post_repository),
):
    if not await repo.delete(post_id):
        raise RecordNotFoundError(NOT_FOUND)
