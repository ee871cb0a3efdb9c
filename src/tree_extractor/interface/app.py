"""FastAPI application factory."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from tree_extractor.interface.dependencies import shutdown, startup
from tree_extractor.interface.error_handlers import register_error_handlers
from tree_extractor.interface.routes import router


@asynccontextmanager
async def _lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage startup / shutdown of the shared HTTP client."""
    await startup()
    yield
    await shutdown()


def create_app() -> FastAPI:
    """Build and wire the FastAPI application."""
    app = FastAPI(
        title="GitHub Repo Tree Extractor",
        version="1.0.0",
        description=(
            "Fetches the public/static folders and the source folder of a "
            "GitHub repository and returns them as a normalised directory "
            "tree, ready to be bundled."
        ),
        lifespan=_lifespan,
    )

    register_error_handlers(app)
    app.include_router(router)

    @app.get("/health", include_in_schema=False)
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app
