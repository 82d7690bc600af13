"""Blog Post Repository - newest publication first, drafts last.

Invariants:
    - slug lookups are exact and case-sensitive
    - Posts without published_at sort after every published post
"""

from portfolio.core.filters import BlogPostFilters, contains_any
from portfolio.models.blog_post import BlogPost
from portfolio.repositories.base import BaseRepository


class BlogPostRepository(BaseRepository[BlogPost]):
    model = BlogPost
    entity = "blog post"
    order_by = (
        BlogPost.published_at.desc().nulls_last(),
        BlogPost.created_at.desc(),
    )

    async def list(self, filters: BlogPostFilters | None = None) -> list[BlogPost]:
        filters = filters or BlogPostFilters()
        conditions = []
        if filters.published is not None:
            conditions.append(BlogPost.published == filters.published)
        if filters.featured is not None:
            conditions.append(BlogPost.featured == filters.featured)
        rows = await self._select(*conditions)
        if filters.categories:
            rows = [p for p in rows if contains_any(p.categories, filters.categories)]
        return rows

    async def get_by_slug(self, slug: str) -> BlogPost | None:
        return await self._get_one(BlogPost.slug == slug)
