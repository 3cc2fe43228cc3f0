"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from student_admin.config import get_settings
from student_admin.infrastructure.logging.log_config import setup_logging
from student_admin.infrastructure.session import SessionRegistry, ViewStateRegistry
from student_admin.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging and report the store in use."""
    settings = get_settings()
    setup_logging()
    logger.info(
        "Student admin started (env=%s) — student store at %s",
        settings.app_env,
        settings.student_api_base_url,
    )

    yield

    logger.info(
        "Student admin stopping — dropping %d session(s)",
        app.state.session_registry.session_count,
    )


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # Per-process session state; lost on restart like browser session storage
    app.state.session_registry = SessionRegistry()
    app.state.view_registry = ViewStateRegistry()

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "student_admin.main:app",
        host="0.0.0.0",
        port=8020,
        reload=True,
    )
