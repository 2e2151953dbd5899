"""Create Schemas — field presence and whitespace rules at the API boundary."""

import pytest
from pydantic import ValidationError

from showcase.schemas.blog_post import BlogPostCreate
from showcase.schemas.project import ProjectCreate


def test_blog_post_create_strips_fields():
    post = BlogPostCreate(title=" t ", content=" c ", author_id=" a ")
    assert (post.title, post.content, post.author_id) == ("t", "c", "a")


@pytest.mark.parametrize("field", ["title", "content", "author_id"])
def test_blog_post_create_requires_every_field(field):
    data = {"title": "t", "content": "c", "author_id": "a"}
    del data[field]
    with pytest.raises(ValidationError):
        BlogPostCreate(**data)


def test_blog_post_create_drops_unknown_fields():
    post = BlogPostCreate(title="t", content="c", author_id="a", id="x")
    assert "id" not in post.model_dump()


def test_project_create_rejects_whitespace_name():
    with pytest.raises(ValidationError):
        ProjectCreate(name="   ", description="d", author_id="a")


def test_project_create_title_length_limit():
    with pytest.raises(ValidationError):
        ProjectCreate(name="x" * 201, description="d", author_id="a")
