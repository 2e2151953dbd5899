"""Document Repository — generic async data access over one collection.

Invariants:
    - One repository instance per request, bound to that request's AsyncSession
    - save() commits and refreshes — the returned entity carries generated id/created_at
    - Read-all ordering is insertion order (created_at, then id as tiebreak)
    - stream_all() pulls rows through a server-side cursor, never materializes the result

Design Decisions:
    - Generic base + one-line subclasses: BlogPostRepository and ProjectRepository differ
      only in the bound model
    - author_id filter is the only derived query; everything else is by key or full scan
"""

import logging
from typing import AsyncIterator, Generic, TypeVar
from uuid import UUID

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from showcase.db.base import Base
from showcase.models.blog_post import BlogPost
from showcase.models.project import Project

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Base)


class DocumentRepository(Generic[T]):
    """Async CRUD subset (create, read-all, read-by-id) for a single model.

    Usage:
        class BlogPostRepository(DocumentRepository[BlogPost]):
            model = BlogPost

        repo = BlogPostRepository(session)
        post = await repo.find_by_id(post_id)
    """

    model: type[T]

    def __init__(self, session: AsyncSession):
        self.session = session

    def _select(self, author_id: str | None) -> Select:
        query = select(self.model).order_by(
            self.model.created_at, self.model.id,  # type: ignore[attr-defined]
        )
        if author_id is not None:
            query = query.where(self.model.author_id == author_id)  # type: ignore[attr-defined]
        return query

    async def save(self, **fields: object) -> T:
        """Insert a new document and return it with generated fields populated."""
        instance = self.model(**fields)
        self.session.add(instance)
        await self.session.commit()
        await self.session.refresh(instance)
        logger.info(
            "Saved %s", self.model.__tablename__,
            extra={"resource": self.model.__tablename__, "resource_id": str(instance.id)},  # type: ignore[attr-defined]
        )
        return instance

    async def find_all(
        self, limit: int = 100, offset: int = 0, author_id: str | None = None,
    ) -> list[T]:
        """Get one page of documents, optionally filtered by author."""
        result = await self.session.execute(
            self._select(author_id).limit(limit).offset(offset),
        )
        return list(result.scalars().all())

    async def stream_all(self, author_id: str | None = None) -> AsyncIterator[T]:
        """Yield every document, optionally filtered by author, one row at a time."""
        result = await self.session.stream_scalars(self._select(author_id))
        async for row in result:
            yield row

    async def find_by_id(self, id: UUID) -> T | None:
        """Get a single document by key."""
        return await self.session.get(self.model, id)

    async def count(self, author_id: str | None = None) -> int:
        """Count documents, optionally filtered by author."""
        query = select(func.count()).select_from(self.model)
        if author_id is not None:
            query = query.where(self.model.author_id == author_id)  # type: ignore[attr-defined]
        result = await self.session.execute(query)
        return result.scalar_one()


class BlogPostRepository(DocumentRepository[BlogPost]):
    model = BlogPost


class ProjectRepository(DocumentRepository[Project]):
    model = Project
