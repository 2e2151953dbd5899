"""Blog Post Schemas — Pydantic models for the blog post collection.

Invariants:
    - BlogPostCreate: title, content, author_id required, stripped, non-empty
    - Unknown fields (including a client-supplied id) are ignored
    - BlogPostResponse is built straight from the ORM row (from_attributes)
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from showcase.schemas.common import Pagination


class BlogPostCreate(BaseModel):
    """Blog post creation — presence and whitespace checks only."""
    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1, max_length=100_000)
    author_id: str = Field(min_length=1, max_length=100)

    @field_validator("title", "content", "author_id")
    @classmethod
    def strip_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("field cannot be empty or whitespace")
        return v


class BlogPostResponse(BaseModel):
    """Blog post response — public-facing document."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    content: str
    author_id: str
    created_at: datetime


class BlogPostPage(BaseModel):
    """Read-all response — one page of posts plus pagination metadata."""
    items: list[BlogPostResponse]
    pagination: Pagination
