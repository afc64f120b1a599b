"""
Main Application Entry Point.

This module initializes the FastAPI application, configures middleware
(CORS, signed-cookie sessions, optional HTTPS redirect, request monitoring),
registers exception handlers and includes all API routers.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.httpsredirect import HTTPSRedirectMiddleware
from starlette.middleware.sessions import SessionMiddleware

from airbb import __version__
from airbb.core.database import engine, init_db
from airbb.core.logging_config import get_logger, setup_logging
from airbb.core.monitoring import initialize_logfire

from .api.v1 import health, home, reservations
from .api.v1.admin import locations as admin_locations
from .api.v1.admin import residences as admin_residences
from .api.v1.admin import users as admin_users
from .core import constant
from .core.config import settings
from .exception_handlers import setup_exception_handlers
from .middleware import RequestMonitoringMiddleware

# Initialize logging
setup_logging(log_level=settings.log_level)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifespan events.

    Creates missing tables on startup when ``APPLY_MIGRATIONS`` is set.
    """
    logger.info(f"Starting up {constant.PROJECT_NAME} Server ({settings.environment})...")
    if settings.apply_migrations:
        try:
            await init_db()
            logger.info("Database initialized successfully")
        except Exception as e:
            logger.error(f"Database initialization failed: {e}", exc_info=True)

    yield

    logger.info(f"Shutting down {constant.PROJECT_NAME} Server...")
    await engine.dispose()


app = FastAPI(
    title=constant.PROJECT_NAME,
    description="""
    AirBB Server API

    Guests browse residences by location, party size and stay dates, stage
    reservations in their session and confirm them. Administrators manage
    locations, users and residences.
    """,
    version=__version__,
    openapi_url=f"{constant.API_V1_STR}/openapi.json",
    docs_url=f"{constant.API_V1_STR}/docs",
    redoc_url=f"{constant.API_V1_STR}/redoc",
    lifespan=lifespan,
)

setup_exception_handlers(app)

app.add_middleware(RequestMonitoringMiddleware)

session_config = settings.session
app.add_middleware(
    SessionMiddleware,
    secret_key=session_config.secret_key,
    session_cookie=session_config.cookie_name,
    max_age=session_config.max_age_seconds,
    same_site="lax",
    https_only=session_config.https_only,
)

cors_config = settings.cors
app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_config.origins,
    allow_credentials=cors_config.allow_credentials,
    allow_methods=cors_config.allow_methods,
    allow_headers=cors_config.allow_headers,
)

if settings.https_redirect:
    app.add_middleware(HTTPSRedirectMiddleware)

initialize_logfire(app=app, engine=engine)

app.include_router(health.router, tags=["health"])
app.include_router(home.router, prefix=constant.API_V1_STR, tags=["home"])
app.include_router(reservations.router, prefix=f"{constant.API_V1_STR}/reservations", tags=["reservations"])
app.include_router(admin_locations.router, prefix=f"{constant.ADMIN_PREFIX}/locations", tags=["admin"])
app.include_router(admin_users.router, prefix=f"{constant.ADMIN_PREFIX}/users", tags=["admin"])
app.include_router(admin_residences.router, prefix=f"{constant.ADMIN_PREFIX}/residences", tags=["admin"])
