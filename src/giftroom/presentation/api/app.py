"""GiftRoom HTTP API.

Room and participant endpoints live under ``/api/v1``; ``/health`` is
unversioned.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from giftroom.infrastructure.persistence.sqlalchemy.init_db import create_tables
from giftroom.presentation.api.dependencies import get_engine
from giftroom.presentation.api.exception_handlers import setup_exception_handlers
from giftroom.presentation.api.routers import rooms_router, users_router
from giftroom.presentation.api.schemas import HealthResponse
from giftroom_config.logging_setup import configure_logging
from giftroom_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"
API_V1_PREFIX = "/api/v1"

OPENAPI_TAGS = [
    {
        "name": "Rooms",
        "description": "Rooms and their participants, resolved by a user code.",
    },
    {
        "name": "Users",
        "description": """Participant management.

Only the room's admin (identified by their personal user code) may remove
participants. The admin cannot remove themselves.
""",
    },
    {
        "name": "Health",
        "description": "Service health check.",
    },
]


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
    """Ensure the schema exists on startup and release the pool on shutdown."""
    logger.info("Starting GiftRoom API v%s...", API_VERSION)
    engine = get_engine()
    try:
        await create_tables(engine)
    except ConnectionRefusedError:
        logger.critical("Database unreachable at startup, exiting")
        raise SystemExit(1) from None
    yield

    logger.info("Shutting down GiftRoom API...")
    await engine.dispose()


def create_v1_router() -> APIRouter:
    """Create the v1 API router with all endpoints."""
    v1_router = APIRouter()
    v1_router.include_router(rooms_router, tags=["Rooms"])
    v1_router.include_router(users_router, tags=["Users"])
    return v1_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the app; ``settings`` defaults to the cached process settings."""
    configure_logging()

    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Gift-exchange rooms and their participants.",
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    setup_exception_handlers(app)

    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check() -> HealthResponse:
        """Health check endpoint (unversioned)."""
        return HealthResponse(status="healthy", version=API_VERSION)

    return app


# Imported by `giftroom serve` and `uvicorn giftroom.presentation.api.app:app`
app = create_app()
