"""Events API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map EventsApiError -> JSON responses
    - CORS configured from settings (all origins by default)
    - Datastore manager created on startup, disposed on shutdown (lifespan)

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Manager lives on app.state and reaches routes through Depends(get_db)
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from events_api.api.error_handlers import register_error_handlers
from events_api.api.routes import attendees, events, health, users
from events_api.config import get_settings
from events_api.infrastructure.database import DatabaseSessionManager
from events_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    app.state.db = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Events API started")
    try:
        yield
    finally:
        await app.state.db.close()
        logger.info("Events API shutting down")


app = FastAPI(title="Events API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(events.router)
app.include_router(attendees.router)
app.include_router(users.router)

register_error_handlers(app)
