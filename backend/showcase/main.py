"""Showcase API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ShowcaseError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup and disposed on shutdown via lifespan

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers live in api/error_handlers.py, registered once here
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from showcase.api.error_handlers import register_error_handlers
from showcase.api.routes import blog_posts, health, projects
from showcase.config import get_settings
from showcase.infrastructure.database import close_db, init_db
from showcase.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings)
    init_db(settings)
    logger.info("Showcase API started")
    yield
    await close_db()
    logger.info("Showcase API shut down")


app = FastAPI(
    title="Reactive Showcase API", version=health.SERVICE_VERSION, lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(blog_posts.router)
app.include_router(projects.router)

register_error_handlers(app)
