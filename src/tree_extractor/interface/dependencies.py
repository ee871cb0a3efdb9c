"""FastAPI dependency injection wiring."""

from __future__ import annotations

import httpx

from tree_extractor.infrastructure.config import get_settings
from tree_extractor.infrastructure.github_contents_adapter import GitHubContentsAdapter
from tree_extractor.services.extract_project import ExtractProjectUseCase

_http_client: httpx.AsyncClient | None = None


async def startup() -> None:
    """Initialise shared resources — called from the lifespan context manager."""
    global _http_client  # noqa: PLW0603

    settings = get_settings()
    _http_client = httpx.AsyncClient(timeout=httpx.Timeout(settings.http_timeout_seconds))


async def shutdown() -> None:
    """Release shared resources."""
    global _http_client  # noqa: PLW0603

    if _http_client:
        await _http_client.aclose()
        _http_client = None


def get_use_case() -> ExtractProjectUseCase:
    """Build the use case with the GitHub adapter injected."""
    settings = get_settings()

    assert _http_client is not None, "startup() was not called"

    token = settings.github_token.get_secret_value() if settings.github_token else None
    github_adapter = GitHubContentsAdapter(
        client=_http_client,
        token=token,
        api_url=settings.github_api_url,
    )

    return ExtractProjectUseCase(
        fetcher=github_adapter,
        max_directory_budget=settings.max_directory_budget,
        max_file_count=settings.max_file_count,
    )
