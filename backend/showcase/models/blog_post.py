"""BlogPost ORM — one document of the blog post collection.

Invariants:
    - id is UUID primary key (generated client-side on insert)
    - title, content, author_id are non-nullable
    - created_at drives read-all ordering (insertion order)

Design Decisions:
    - author_id is plain text, not a ForeignKey: documents reference authors
      by key without the store enforcing it
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, Text, DateTime, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from showcase.db.base import Base


class BlogPost(Base):
    """Blog post document."""
    __tablename__ = "blog_posts"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    author_id: Mapped[str] = mapped_column(
        String(100), nullable=False, index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
