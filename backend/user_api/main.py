"""User Records API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map UserApiError → envelope JSON responses
    - CORS configured from settings (not hardcoded)
    - One UserStore per app, created here and exposed through app.state

Design Decisions:
    - create_app factory over a bare module-level app: tests build isolated
      apps with their own store and settings
    - Lifespan over @app.on_event: FastAPI recommended pattern
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from user_api.api.error_handlers import register_error_handlers
from user_api.api.routes import health, users
from user_api.config import Settings, get_settings
from user_api.core.user_store import UserStore
from user_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    base = f"http://localhost:{settings.port}"
    logger.info(
        f"{settings.app_name} started (next user id {app.state.user_store.next_id})",
    )
    logger.info(f"Health check: {base}/health")
    logger.info(f"API Base URL: {base}/api/users")
    yield
    logger.info(f"{settings.app_name} shutting down")


def create_app(
    settings: Settings | None = None, store: UserStore | None = None,
) -> FastAPI:
    """Build a configured FastAPI app with its own UserStore."""
    settings = settings or get_settings()
    if store is None:
        store = UserStore() if settings.seed_default_users else UserStore(seed=())

    app = FastAPI(
        title=settings.app_name, version=settings.app_version, lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.user_store = store

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(users.router)

    register_error_handlers(app)
    return app


app = create_app()
