"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.config import get_settings
from shared.logging import setup_logging
from .errors import register_exception_handlers
from .models import ERROR_RESPONSES
from .routes import auth, health
from modules.admin.routes import router as admin_router
from modules.applications.routes import router as applications_router
from modules.dashboards.routes import router as dashboard_router
from modules.jobs.routes import router as jobs_router
from modules.messages.routes import router as messages_router
from modules.profiles.routes import router as profile_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    # Startup
    setup_logging()
    settings = get_settings()
    logger.info("Starting %s on %s:%s", settings.app_name, settings.host, settings.port)
    yield
    # Shutdown
    logger.info("Shutting down %s", settings.app_name)


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Role-based job board: job seekers, employers and administrators",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    register_exception_handlers(app)

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    routers = (
        (auth.router, "/api/auth", "auth"),
        (dashboard_router, "/api/dashboard", "dashboard"),
        (jobs_router, "/api/jobs", "jobs"),
        (applications_router, "/api/applications", "applications"),
        (messages_router, "/api/messages", "messages"),
        (profile_router, "/api/profile", "profile"),
        (admin_router, "/api/admin", "admin"),
    )
    for router, prefix, tag in routers:
        app.include_router(router, prefix=prefix, tags=[tag], responses=ERROR_RESPONSES)

    return app


# Application instance for uvicorn
app = create_app()
