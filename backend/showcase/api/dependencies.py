"""Route Dependencies — repository providers bound to the request's DB session."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from showcase.infrastructure.database import get_db
from showcase.infrastructure.document_repository import (
    BlogPostRepository, ProjectRepository,
)


async def get_blog_post_repository(
    db: AsyncSession = Depends(get_db),
) -> BlogPostRepository:
    return BlogPostRepository(db)


async def get_project_repository(
    db: AsyncSession = Depends(get_db),
) -> ProjectRepository:
    return ProjectRepository(db)
