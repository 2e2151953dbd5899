"""Projects — create, read-all (JSON or SSE), read-by-id over the project store.

Invariants:
    - Every handler is a single repository call plus response shaping
    - Read-all negotiates on Accept: text/event-stream streams, anything else pages JSON
    - Unknown id → 404 RESOURCE_NOT_FOUND; malformed id → 400 VALIDATION_ERROR

Design Decisions:
    - Repository injected as ProjectStore protocol: route never names the ORM
    - Page size clamped to settings.max_page_size rather than rejected
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, status

from showcase.api.dependencies import get_project_repository
from showcase.api.routes.stream_helpers import (
    event_stream_response, stream_documents, wants_event_stream,
)
from showcase.config import get_settings
from showcase.core.domain_types import (
    EVENT_STREAM_MEDIA_TYPE, AuthorId, ProjectId, ResourceKind,
)
from showcase.core.errors import ResourceNotFoundError
from showcase.core.repository_protocols import ProjectStore
from showcase.schemas.project import ProjectCreate, ProjectPage, ProjectResponse
from showcase.schemas.common import Pagination

router = APIRouter(prefix="/api/v1/projects", tags=["projects"])


def _serialize(project) -> dict:
    return ProjectResponse.model_validate(project).model_dump(mode="json")


@router.post(
    "", response_model=ProjectResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_project(
    body: ProjectCreate,
    repo: ProjectStore = Depends(get_project_repository),
):
    """Create a project."""
    project = await repo.save(**body.model_dump())
    return ProjectResponse.model_validate(project)


@router.get(
    "", response_model=ProjectPage,
    responses={200: {"content": {EVENT_STREAM_MEDIA_TYPE: {}}}},
)
async def list_projects(
    request: Request,
    limit: int | None = Query(None, ge=1),
    offset: int = Query(0, ge=0),
    author_id: str | None = Query(None, min_length=1, max_length=100),
    repo: ProjectStore = Depends(get_project_repository),
):
    """List projects — paged JSON, or every project as SSE."""
    settings = get_settings()
    author_id = author_id.strip() if author_id else None
    author = AuthorId(author_id) if author_id else None
    if wants_event_stream(request):
        return event_stream_response(stream_documents(
            repo.stream_all(author),
            ResourceKind.PROJECT,
            _serialize,
            interval_ms=settings.stream_interval_ms,
        ))

    limit = min(limit or settings.default_page_size, settings.max_page_size)
    projects = await repo.find_all(limit=limit, offset=offset, author_id=author)
    total = await repo.count(author)
    return ProjectPage(
        items=[ProjectResponse.model_validate(p) for p in projects],
        pagination=Pagination(limit=limit, offset=offset, total=total),
    )


@router.get("/{project_id}", response_model=ProjectResponse)
async def get_project(
    project_id: UUID,
    repo: ProjectStore = Depends(get_project_repository),
):
    """Get a single project."""
    project = await repo.find_by_id(ProjectId(project_id))
    if project is None:
        raise ResourceNotFoundError("Project", str(project_id))
    return ProjectResponse.model_validate(project)
