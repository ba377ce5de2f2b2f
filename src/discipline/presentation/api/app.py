"""Discipline HTTP API.

Versioned routes live under ``/api/v1``; ``/health`` stays outside the
version prefix so load balancer checks never have to change. Start it with::

    uvicorn discipline.presentation.api.app:create_app --factory
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.ext.asyncio import AsyncEngine

from discipline.infrastructure.persistence.sqlalchemy.init_db import create_tables
from discipline.presentation.api.config import get_api_settings
from discipline.presentation.api.dependencies import get_engine
from discipline.presentation.api.exception_handlers import setup_exception_handlers
from discipline.presentation.api.middleware import (
    RequestContextFilter,
    RequestIDMiddleware,
)
from discipline.presentation.api.routers import auth_router, habits_router
from discipline_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"
API_V1_PREFIX = "/api/v1"

_APP_LOGGERS = ("discipline", "discipline_identity")
_CHATTY_LOGGERS = ("httpx", "httpcore", "sqlalchemy.engine", "aiosqlite")

LOG_FORMAT = (
    "%(asctime)s | %(levelname)-8s | rid=%(request_id)s uid=%(user_id)s | "
    "%(name)s | %(message)s"
)

OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": (
            "Create an account, exchange name and password for a bearer "
            "token, change the password or close the account. Tokens are "
            "HS256 JWTs; passwords are stored as bcrypt hashes."
        ),
    },
    {
        "name": "Habits",
        "description": (
            "Habits belong to the caller and have a unique title per user. "
            "Each habit can be checked once per UTC day, never for a future "
            "day. Statistics report total checks, the current and the "
            "longest streak."
        ),
    },
    {
        "name": "Health",
        "description": "Liveness check.",
    },
]


def _configure_logging(level_name: str) -> None:
    """Send log records to stdout with one format for the whole process."""
    level = getattr(logging, level_name.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    # On the handler, so records from every logger pass through it
    for handler in logging.getLogger().handlers:
        handler.addFilter(RequestContextFilter())
    for name in _APP_LOGGERS:
        logging.getLogger(name).setLevel(level)
    for name in _CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


async def _prepare_schema(engine: AsyncEngine) -> None:
    try:
        await create_tables(engine)
    except (ConnectionRefusedError, OSError):
        logger.critical("Database is unreachable, refusing to start")
        raise SystemExit(1) from None


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
    engine = get_engine()
    logger.info("Discipline API %s starting", API_VERSION)
    await _prepare_schema(engine)
    try:
        yield
    finally:
        await engine.dispose()
        logger.info("Discipline API stopped, connection pool disposed")


def create_v1_router() -> APIRouter:
    router = APIRouter()
    router.include_router(auth_router, prefix="/auth", tags=["Authentication"])
    router.include_router(habits_router, prefix="/habits", tags=["Habits"])
    return router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application.

    Parameters
    ----------
    settings
        Configuration for this instance. Logging, docs, CORS and every route
        dependency (token lifetime and secret, bcrypt rounds, timeouts) use
        it. The database engine is process-wide and always follows
        ``get_settings()``; tests override ``get_db_session`` instead.

    Returns
    -------
    A FastAPI instance with routers, middleware and error handlers installed.
    """
    explicit = settings is not None
    settings = settings or get_settings()
    _configure_logging(settings.log_level)

    # Interactive docs only in debug mode
    docs_enabled = settings.api_debug
    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Track habits, check them off daily and follow your streaks.",
        version=API_VERSION,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan,
    )

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    # Added last, so it wraps CORS and sees every request first
    app.add_middleware(RequestIDMiddleware)

    setup_exception_handlers(app)
    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    if explicit:
        app.dependency_overrides[get_api_settings] = lambda: settings

    @app.get("/health", tags=["Health"])
    async def health() -> dict:
        return {"status": "healthy", "version": API_VERSION, "api_versions": ["v1"]}

    return app
