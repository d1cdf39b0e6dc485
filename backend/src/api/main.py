"""FastAPI application entry point."""
import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from api.routers import (
    auth,
    children,
    growth,
    health,
    health_notes,
    journal,
    milestones,
    nutrition,
    sleep,
    subscription,
    vaccinations,
)
from core.config import get_settings
from core.logging import configure_logging
from db.session import Database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """
    Manage application lifespan - startup and shutdown.

    Creates the database engine once and disposes of it on shutdown. A
    Database already attached to ``app.state`` (tests) is used as-is.
    """
    app_settings = get_settings()
    configure_logging(app_settings.log_level)

    owns_database = getattr(app.state, "database", None) is None
    if owns_database:
        app.state.database = Database.from_settings(app_settings)
    logger.info("BabySteps API starting")

    yield

    if owns_database:
        await app.state.database.dispose()
        app.state.database = None
    logger.info("BabySteps API stopped")


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Add security headers to all responses."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint,
    ) -> Response:
        """Process request and add security headers to response."""
        response = await call_next(request)
        # Prevent MIME type sniffing
        response.headers["X-Content-Type-Options"] = "nosniff"
        # API responses are never framed
        response.headers["X-Frame-Options"] = "DENY"
        return response


app_settings = get_settings()

app = FastAPI(
    title="BabySteps API",
    description="Baby tracking backend: accounts, child profiles, growth, health and daily logs.",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(SecurityHeadersMiddleware)

# Credentials must be allowed for the web client's session cookie
app.add_middleware(
    CORSMiddleware,
    allow_origins=app_settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(auth.router)
app.include_router(children.router, prefix="/api")
app.include_router(growth.router, prefix="/api")
app.include_router(milestones.router, prefix="/api")
app.include_router(vaccinations.router, prefix="/api")
app.include_router(nutrition.router, prefix="/api")
app.include_router(sleep.router, prefix="/api")
app.include_router(health_notes.router, prefix="/api")
app.include_router(journal.router, prefix="/api")
app.include_router(subscription.router, prefix="/api")
