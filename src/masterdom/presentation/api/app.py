"""FastAPI application factory.

Versioned endpoints live under ``/api/v1``. ``/health`` and ``/`` stay
unversioned so load balancers and humans find them without a prefix.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.ext.asyncio import AsyncEngine

from masterdom.infrastructure.persistence.sqlalchemy.models import Base
from masterdom.presentation.api.dependencies import get_engine
from masterdom.presentation.api.exception_handlers import setup_exception_handlers
from masterdom.presentation.api.middleware import add_request_timeout
from masterdom.presentation.api.routers import (
    admin_router,
    auth_router,
    categories_router,
    chats_router,
    offers_router,
    profile_router,
)
from masterdom.presentation.api.schemas.common import ErrorResponse, HealthResponse
from masterdom_config.settings import Settings, get_settings

_OWN_LOGGERS = ("masterdom", "masterdom_auth", "masterdom_config")
_QUIET_LOGGERS = ("httpx", "httpcore", "sqlalchemy.engine", "aiosqlite")


@lru_cache(maxsize=4)
def _configure_logging(level_name: str) -> None:
    """Send log records to stdout, one line each.

    Our own packages log at ``level_name``. Chatty libraries are held at
    WARNING.
    """
    level = getattr(logging, level_name.upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    for name in _OWN_LOGGERS:
        logging.getLogger(name).setLevel(level)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"
API_V1_PREFIX = "/api/v1"

OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": """Registration and login.

- Register with email, password and a first name
- Login returns a bearer token (JWT, HS256)
- Unknown email and wrong password fail identically
""",
    },
    {
        "name": "Offers",
        "description": """Marketplace catalog.

**Offer Types:**
- `service_request`: someone is looking for a master
- `master_offer`: a master advertises their services

Anonymous visitors can browse active offers. Authenticated users
additionally see whether they already responded.
""",
    },
    {
        "name": "Categories",
        "description": "Service categories offers can be filed under.",
    },
    {
        "name": "Profile",
        "description": "The caller's own profile. Absent keys are left untouched.",
    },
    {
        "name": "Chats",
        "description": """One conversation per offer and pair of users.

Initiating twice returns the same conversation. Only participants can
read or post messages.
""",
    },
    {
        "name": "Admin",
        "description": """Back-office management of users, offers and categories.

Nobody can demote themself, and only the super-admin demotes other admins.
Admin accounts cannot be deleted.
""",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
    {
        "name": "Info",
        "description": "API information and discovery.",
    },
]


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
    """Create missing tables on startup and release the pool on shutdown."""
    logger.info("Masterdom API %s starting", API_VERSION)
    engine = get_engine()
    await _ensure_schema(engine)
    yield
    await engine.dispose()
    logger.info("Masterdom API stopped, connection pool disposed")


async def _ensure_schema(engine: AsyncEngine) -> None:
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    except OSError:
        logger.critical("Database unreachable, refusing to start")
        raise SystemExit(1) from None
    logger.info("Database schema ready")


def create_v1_router() -> APIRouter:
    """Every versioned router, to be mounted under ``API_V1_PREFIX``."""
    v1_router = APIRouter(
        responses={
            code: {"model": ErrorResponse}
            for code in (400, 401, 403, 404, 409, 504)
        },
    )

    v1_router.include_router(auth_router, prefix="/auth", tags=["Authentication"])
    v1_router.include_router(offers_router, prefix="/offers", tags=["Offers"])
    v1_router.include_router(
        categories_router,
        prefix="/categories",
        tags=["Categories"],
    )
    v1_router.include_router(profile_router, prefix="/profile", tags=["Profile"])
    v1_router.include_router(chats_router, prefix="/chats", tags=["Chats"])
    v1_router.include_router(admin_router, tags=["Admin"])

    return v1_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the ASGI application.

    Parameters
    ----------
    settings
        Used instead of the environment when given. Interactive docs are
        only served with ``api_debug`` on.
    """
    if settings is None:
        settings = get_settings()
    _configure_logging(settings.log_level)

    app_name = settings.app_name

    app = FastAPI(
        title=f"{app_name} API",
        description=(
            "A **services marketplace** connecting people who need work done "
            "with the masters who do it."
        ),
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
    add_request_timeout(app, settings.api_request_timeout_seconds)

    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check() -> HealthResponse:
        """Health check endpoint, unversioned for load balancers."""
        return HealthResponse(status="healthy", version=API_VERSION)

    @app.get("/", tags=["Info"])
    async def root() -> dict:
        """API root endpoint with version information."""
        return {
            "name": f"{app_name} API",
            "version": API_VERSION,
            "docs": "/docs" if settings.api_debug else None,
            "api_base": API_V1_PREFIX,
            "endpoints": {
                "health": "/health",
                "auth": f"{API_V1_PREFIX}/auth",
                "offers": f"{API_V1_PREFIX}/offers",
                "categories": f"{API_V1_PREFIX}/categories",
                "profile": f"{API_V1_PREFIX}/profile",
                "chats": f"{API_V1_PREFIX}/chats",
                "admin": f"{API_V1_PREFIX}/admin",
            },
        }

    return app


# Application instance for uvicorn
app = create_app()
