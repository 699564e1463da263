"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from loc_aggregator.interface.dependencies import shutdown, startup
from loc_aggregator.interface.error_handlers import register_error_handlers
from loc_aggregator.interface.routes import router


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage startup / shutdown of shared resources."""
    await startup()
    yield
    await shutdown()


def create_app() -> FastAPI:
    """Build and wire the FastAPI application."""
    app = FastAPI(
        title="GitHub Lines-of-Code Aggregator",
        version="1.0.0",
        description=(
            "Totals lines of code per language across a GitHub user's "
            "repositories, caching per-repository counts until the "
            "repository is pushed again."
        ),
        lifespan=_lifespan,
    )

    register_error_handlers(app)
    app.include_router(router)

    @app.get("/health", include_in_schema=False)
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app
