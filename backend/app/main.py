"""Dogs API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map KennelError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - The database manager lives on app.state for exactly the lifespan of the app

Design Decisions:
    - Lifespan over @app.on_event: startup builds the store client, shutdown disposes it
    - Three error handler layers: KennelError (domain), RequestValidationError
      (Pydantic), Exception (catch-all) — never leaks internal details
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.api.routes import dogs, health
from app.config import get_settings
from app.infrastructure.database import DatabaseSessionManager
from app.infrastructure.observability import setup_logging
from app.schemas.dog import MessageResponse

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db_manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_create_schema:
        await db_manager.create_schema()
    app.state.db_manager = db_manager
    logger.info(f"{settings.app_name} started ({settings.environment})")
    yield
    logger.info(f"{settings.app_name} shutting down")
    app.state.db_manager = None
    await db_manager.dispose()


settings = get_settings()
app = FastAPI(
    title=settings.app_name, version=settings.app_version, lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(dogs.router)

register_error_handlers(app)


@app.get("/", response_model=MessageResponse)
async def hello():
    return MessageResponse(message="Hello World!")
