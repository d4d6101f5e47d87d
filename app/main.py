"""FastAPI entrypoint for the Yojana answer pipeline."""

import logging

from fastapi import FastAPI

from app.api.routes_answer import router as answer_router
from app.api.routes_health import router as health_router
from app.config import get_settings


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    application = FastAPI(
        title="Yojana Answer Pipeline",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )
    application.include_router(health_router)
    application.include_router(answer_router)

    # Store settings on state for future use.
    application.state.settings = settings
    return application


app = create_app()
