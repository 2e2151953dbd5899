"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - stream_all is an async iterator, not a coroutine: rows are pulled one by one
      by the consumer, so a slow SSE client never forces the full result into memory
"""

from datetime import datetime
from typing import AsyncIterator, Protocol
from uuid import UUID

from showcase.core.domain_types import AuthorId, BlogPostId, ProjectId


class BlogPostLike(Protocol):
    """Structural contract for blog post records returned by a store."""
    id: UUID
    title: str
    content: str
    author_id: str
    created_at: datetime


class ProjectLike(Protocol):
    """Structural contract for project records returned by a store."""
    id: UUID
    name: str
    description: str
    author_id: str
    created_at: datetime


class BlogPostStore(Protocol):
    """Contract for blog post persistence — implemented by shell."""
    async def save(self, **fields: object) -> BlogPostLike: ...
    async def find_all(
        self, limit: int, offset: int, author_id: AuthorId | None = None,
    ) -> list[BlogPostLike]: ...
    def stream_all(
        self, author_id: AuthorId | None = None,
    ) -> AsyncIterator[BlogPostLike]: ...
    async def find_by_id(self, post_id: BlogPostId) -> BlogPostLike | None: ...
    async def count(self, author_id: AuthorId | None = None) -> int: ...


class ProjectStore(Protocol):
    """Contract for project persistence — implemented by shell."""
    async def save(self, **fields: object) -> ProjectLike: ...
    async def find_all(
        self, limit: int, offset: int, author_id: AuthorId | None = None,
    ) -> list[ProjectLike]: ...
    def stream_all(
        self, author_id: AuthorId | None = None,
    ) -> AsyncIterator[ProjectLike]: ...
    async def find_by_id(self, project_id: ProjectId) -> ProjectLike | None: ...
    async def count(self, author_id: AuthorId | None = None) -> int: ...
