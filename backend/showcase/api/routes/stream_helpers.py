"""Stream Helpers — content negotiation and SSE wiring shared by list endpoints.

Invariants:
    - One SSE event per document, named after its ResourceKind
    - Every completed stream ends with a done event carrying the item count
    - Any failure mid-stream becomes an error event; the HTTP status is already sent
    - Unexpected failures get a generic INTERNAL_ERROR event, never their own message
    - Client disconnect ends the stream quietly (logged, never raised to the server)

Design Decisions:
    - Negotiation on the Accept header only: a text/event-stream entry wins, anything
      else falls back to JSON
    - Pacing interval applied between items, never before the first one
"""

import asyncio
import json
import logging
from typing import Any, AsyncIterator, Callable

from fastapi import Request
from fastapi.responses import StreamingResponse
from sqlalchemy.exc import SQLAlchemyError

from showcase.core.domain_types import (
    EVENT_STREAM_MEDIA_TYPE, ResourceKind, StreamEvent,
)
from showcase.core.errors import ErrorSeverity, ShowcaseError
from showcase.infrastructure.database import to_database_error

logger = logging.getLogger(__name__)

# SSE headers prevent proxy/browser buffering of streamed events.
SSE_HEADERS = {
    "Cache-Control": "no-cache",
    "X-Accel-Buffering": "no",
    "Connection": "keep-alive",
}

INTERNAL_ERROR_EVENT = {
    "code": "INTERNAL_ERROR",
    "message": "An unexpected error occurred",
    "severity": ErrorSeverity.CRITICAL.value,
    "recoverable": False,
}


def wants_event_stream(request: Request) -> bool:
    """True when the client's Accept header lists text/event-stream."""
    accept = request.headers.get("accept", "")
    return any(
        part.split(";", 1)[0].strip().lower() == EVENT_STREAM_MEDIA_TYPE
        for part in accept.split(",")
    )


def sse_line(event: str, data: dict) -> str:
    """Format one named SSE event."""
    return f"event: {event}\ndata: {json.dumps(data, ensure_ascii=False)}\n\n"


async def stream_documents(
    rows: AsyncIterator[Any],
    kind: ResourceKind,
    serialize: Callable[[Any], dict],
    interval_ms: int = 0,
) -> AsyncIterator[str]:
    """Turn an async row iterator into SSE lines."""
    count = 0
    try:
        async for row in rows:
            if count and interval_ms > 0:
                await asyncio.sleep(interval_ms / 1000)
            yield sse_line(kind.value, serialize(row))
            count += 1
        yield sse_line(StreamEvent.DONE.value, {"count": count})
        logger.info(
            f"Streamed {count} {kind.value} document(s)",
            extra={"resource": kind.value, "count": count},
        )
    except asyncio.CancelledError:
        logger.info(
            f"Client disconnected from {kind.value} stream after {count} item(s)",
            extra={"resource": kind.value, "count": count},
        )
        return
    except SQLAlchemyError as e:
        error = to_database_error(e)
        logger.error(
            f"DB error during {kind.value} stream: {e}",
            extra={"error_code": error.code, "resource": kind.value, "count": count},
        )
        yield sse_line(StreamEvent.ERROR.value, error.to_sse_event()["data"])
    except ShowcaseError as e:
        logger.error(
            f"Stream aborted: {e.message}", extra={"error_code": e.code},
        )
        yield sse_line(StreamEvent.ERROR.value, e.to_sse_event()["data"])
    except Exception as e:
        logger.error(
            f"Unhandled error during {kind.value} stream: {e}",
            extra={"error_code": "INTERNAL_ERROR", "resource": kind.value, "count": count},
            exc_info=True,
        )
        yield sse_line(StreamEvent.ERROR.value, INTERNAL_ERROR_EVENT)


def event_stream_response(body: AsyncIterator[str]) -> StreamingResponse:
    return StreamingResponse(
        body, media_type=EVENT_STREAM_MEDIA_TYPE, headers=SSE_HEADERS,
    )
