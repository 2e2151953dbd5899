"""Blog Posts — create, read-all (JSON or SSE), read-by-id over the blog post store.

Invariants:
    - Every handler is a single repository call plus response shaping
    - Read-all negotiates on Accept: text/event-stream streams, anything else pages JSON
    - Unknown id → 404 RESOURCE_NOT_FOUND; malformed id → 400 VALIDATION_ERROR

Design Decisions:
    - Repository injected as BlogPostStore protocol: route never names the ORM
    - Page size clamped to settings.max_page_size rather than rejected
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, status

from showcase.api.dependencies import get_blog_post_repository
from showcase.api.routes.stream_helpers import (
    event_stream_response, stream_documents, wants_event_stream,
)
from showcase.config import get_settings
from showcase.core.domain_types import (
    EVENT_STREAM_MEDIA_TYPE, AuthorId, BlogPostId, ResourceKind,
)
from showcase.core.errors import ResourceNotFoundError
from showcase.core.repository_protocols import BlogPostStore
from showcase.schemas.blog_post import BlogPostCreate, BlogPostPage, BlogPostResponse
from showcase.schemas.common import Pagination

router = APIRouter(prefix="/api/v1/blogposts", tags=["blogposts"])


def _serialize(post) -> dict:
    return BlogPostResponse.model_validate(post).model_dump(mode="json")


@router.post(
    "", response_model=BlogPostResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_blog_post(
    body: BlogPostCreate,
    repo: BlogPostStore = Depends(get_blog_post_repository),
):
    """Create a blog post."""
    post = await repo.save(**body.model_dump())
    return BlogPostResponse.model_validate(post)


@router.get(
    "", response_model=BlogPostPage,
    responses={200: {"content": {EVENT_STREAM_MEDIA_TYPE: {}}}},
)
async def list_blog_posts(
    request: Request,
    limit: int | None = Query(None, ge=1),
    offset: int = Query(0, ge=0),
    author_id: str | None = Query(None, min_length=1, max_length=100),
    repo: BlogPostStore = Depends(get_blog_post_repository),
):
    """List blog posts — paged JSON, or every post as SSE."""
    settings = get_settings()
    author_id = author_id.strip() if author_id else None
    author = AuthorId(author_id) if author_id else None
    if wants_event_stream(request):
        return event_stream_response(stream_documents(
            repo.stream_all(author),
            ResourceKind.BLOG_POST,
            _serialize,
            interval_ms=settings.stream_interval_ms,
        ))

    limit = min(limit or settings.default_page_size, settings.max_page_size)
    posts = await repo.find_all(limit=limit, offset=offset, author_id=author)
    total = await repo.count(author)
    return BlogPostPage(
        items=[BlogPostResponse.model_validate(p) for p in posts],
        pagination=Pagination(limit=limit, offset=offset, total=total),
    )


@router.get("/{post_id}", response_model=BlogPostResponse)
async def get_blog_post(
    post_id: UUID,
    repo: BlogPostStore = Depends(get_blog_post_repository),
):
    """Get a single blog post."""
    post = await repo.find_by_id(BlogPostId(post_id))
    if post is None:
        raise ResourceNotFoundError("BlogPost", str(post_id))
    return BlogPostResponse.model_validate(post)
