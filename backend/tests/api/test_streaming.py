"""Event Streams — SSE rendition of the read-all endpoints.

Invariants:
    - Accept: text/event-stream switches read-all to an SSE response
    - One named event per document in insertion order, then a done event with the count
    - author_id filter applies to streams; limit/offset do not
    - Streams carry anti-buffering headers
"""

import json
from datetime import datetime, timedelta, timezone

from showcase.models.blog_post import BlogPost
from showcase.models.project import Project

SSE = {"Accept": "text/event-stream"}


def _parse_events(raw: str) -> list[tuple[str, dict]]:
    events = []
    for block in raw.strip().split("\n\n"):
        name, data = None, None
        for line in block.splitlines():
            if line.startswith("event: "):
                name = line[len("event: "):]
            elif line.startswith("data: "):
                data = json.loads(line[len("data: "):])
        events.append((name, data))
    return events


async def test_blog_post_stream_emits_each_post_then_done(client, test_db):
    start = datetime(2026, 1, 1, tzinfo=timezone.utc)
    test_db.add_all([
        BlogPost(
            title=f"Post {i}", content="c", author_id="alice",
            created_at=start + timedelta(seconds=i),
        )
        for i in range(3)
    ])
    await test_db.commit()

    res = await client.get("/api/v1/blogposts", headers=SSE)
    assert res.status_code == 200
    assert res.headers["content-type"].startswith("text/event-stream")
    assert res.headers["cache-control"] == "no-cache"
    assert res.headers["x-accel-buffering"] == "no"

    events = _parse_events(res.text)
    assert [name for name, _ in events] == [
        "blogpost", "blogpost", "blogpost", "done",
    ]
    assert [data["title"] for _, data in events[:3]] == [
        "Post 0", "Post 1", "Post 2",
    ]
    assert events[-1][1] == {"count": 3}


async def test_empty_stream_sends_only_done(client):
    res = await client.get("/api/v1/projects", headers=SSE)
    assert _parse_events(res.text) == [("done", {"count": 0})]


async def test_stream_honours_author_filter(client, test_db):
    test_db.add_all([
        Project(name="mine", description="d", author_id="alice"),
        Project(name="theirs", description="d", author_id="bob"),
    ])
    await test_db.commit()

    res = await client.get(
        "/api/v1/projects", params={"author_id": "alice"}, headers=SSE,
    )
    events = _parse_events(res.text)
    assert [(n, d.get("name")) for n, d in events[:-1]] == [("project", "mine")]
    assert events[-1] == ("done", {"count": 1})


async def test_stream_ignores_paging(client, test_db):
    test_db.add_all([
        Project(name=f"P{i}", description="d", author_id="a") for i in range(3)
    ])
    await test_db.commit()

    res = await client.get(
        "/api/v1/projects", params={"limit": 1, "offset": 1}, headers=SSE,
    )
    assert _parse_events(res.text)[-1] == ("done", {"count": 3})


async def test_accept_list_with_event_stream_selects_stream(client):
    res = await client.get(
        "/api/v1/blogposts",
        headers={"Accept": "application/json;q=0.5, text/event-stream"},
    )
    assert res.headers["content-type"].startswith("text/event-stream")


async def test_stream_author_filter_ignores_surrounding_whitespace(client, test_db):
    test_db.add_all([
        Project(name="mine", description="d", author_id="alice"),
        Project(name="theirs", description="d", author_id="bob"),
    ])
    await test_db.commit()

    res = await client.get(
        "/api/v1/projects", params={"author_id": "  alice "}, headers=SSE,
    )
    events = _parse_events(res.text)
    assert [(n, d.get("name")) for n, d in events[:-1]] == [("project", "mine")]
    assert events[-1] == ("done", {"count": 1})
