"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from trivia_service.infrastructure.config import Settings, get_settings
from trivia_service.interface.dependencies import shutdown, startup
from trivia_service.interface.error_handlers import register_error_handlers
from trivia_service.interface.routes import router


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage startup / shutdown of the shared model gateway."""
    await startup(app.state.settings)
    yield
    await shutdown()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build and wire the FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title="Trivia Game API",
        version="1.0.0",
        description=(
            "Serves LLM-generated trivia questions and grades submitted "
            "answers with feedback and a related fact."
        ),
        lifespan=_lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    app.include_router(router)

    return app
