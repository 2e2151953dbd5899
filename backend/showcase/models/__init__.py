"""ORM Models — SQLAlchemy declarative models for the exposed collections.

Invariants:
    - All models inherit from Base (db/base.py)
    - Collections are independent; author_id is an opaque reference, not a FK

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata is complete before create_all / autogenerate
"""

from showcase.models.blog_post import BlogPost  # noqa: F401
from showcase.models.project import Project  # noqa: F401
