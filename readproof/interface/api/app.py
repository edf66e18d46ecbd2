"""FastAPI application."""

import asyncio

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from readproof.config import Settings
from readproof.interface.api.errors import register_error_handlers, timeout_response
from readproof.interface.api.routes import comments, health, signatures, votes
from readproof.util.di.container import create_container, setup_di
from readproof.util.observability import instrument_fastapi


def add_timeout_middleware(app: FastAPI, timeout_seconds: float) -> None:
    """Bound the handling time of every request.

    Must wrap the DI middleware: the cancelled handler then closes its
    request container without committing, so the session is rolled back.
    """

    @app.middleware("http")
    async def enforce_request_timeout(request: Request, call_next):
        try:
            return await asyncio.wait_for(call_next(request), timeout=timeout_seconds)
        except asyncio.TimeoutError:
            logfire.warn(
                "Request timed out",
                path=request.url.path,
                timeout_seconds=timeout_seconds,
            )
            return timeout_response()


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to serve requests from; the production
            container is built when omitted
    """
    settings = Settings()

    app_instance = FastAPI(
        title="readproof API",
        description="Signed read receipts, threaded comments and votes authenticated by wallet signatures",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=False,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=["Content-Type", "Accept", "Origin"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    # Setup dependency injection
    setup_di(app_instance, container or create_container())

    # Added last so it is the outermost middleware
    add_timeout_middleware(app_instance, settings.api.request_timeout_seconds)

    register_error_handlers(app_instance)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(votes.router)
    app_instance.include_router(signatures.router)

    return app_instance
