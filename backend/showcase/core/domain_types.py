"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - BlogPostId, ProjectId wrap UUIDs — never use bare UUID in domain logic
    - AuthorId wraps str — author reference is opaque, never resolved
    - All valid resource kinds and stream event names encoded as Enums

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON and SSE event names without custom encoders
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

BlogPostId = NewType("BlogPostId", UUID)
ProjectId = NewType("ProjectId", UUID)
AuthorId = NewType("AuthorId", str)


# ─── Enums ───────────────────────────────────────────────────────

class ResourceKind(str, Enum):
    """Exposed collections — value doubles as SSE event name for items."""
    BLOG_POST = "blogpost"
    PROJECT = "project"


class StreamEvent(str, Enum):
    """Control events closing or aborting an SSE stream."""
    DONE = "done"
    ERROR = "error"


EVENT_STREAM_MEDIA_TYPE = "text/event-stream"
