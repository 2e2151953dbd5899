"""Project Schemas — Pydantic models for the project collection."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from showcase.schemas.common import Pagination


class ProjectCreate(BaseModel):
    """Project creation — presence and whitespace checks only."""
    name: str = Field(min_length=1, max_length=200)
    description: str = Field(min_length=1, max_length=100_000)
    author_id: str = Field(min_length=1, max_length=100)

    @field_validator("name", "description", "author_id")
    @classmethod
    def strip_text(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("field cannot be empty or whitespace")
        return v


class ProjectResponse(BaseModel):
    """Project response — public-facing document."""
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    description: str
    author_id: str
    created_at: datetime


class ProjectPage(BaseModel):
    """Read-all response — one page of projects plus pagination metadata."""
    items: list[ProjectResponse]
    pagination: Pagination
