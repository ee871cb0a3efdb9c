"""Tests for infrastructure/github_contents_adapter.py."""

from __future__ import annotations

import httpx
import pytest

from tree_extractor.domain.entities import Entry, EntryType
from tree_extractor.domain.exceptions import (
    ContentFetchError,
    ContentsNotFoundError,
    GitHubRateLimitError,
    RepositoryAccessDeniedError,
)
from tree_extractor.domain.value_objects import RepoCoordinates
from tree_extractor.infrastructure.github_contents_adapter import GitHubContentsAdapter

_LISTING = [
    {"name": "App.js", "path": "src/App.js", "type": "file", "size": 120},
    {"name": "lib", "path": "src/lib", "type": "symlink", "size": 7},
    {"name": "components", "path": "src/components", "type": "dir", "size": 0},
    {"name": "vendor", "path": "src/vendor", "type": "submodule", "size": 0},
]


def _adapter(handler, token: str | None = None) -> GitHubContentsAdapter:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return GitHubContentsAdapter(client=client, token=token)


@pytest.mark.asyncio
async def test_fetch_contents_maps_files_and_dirs(coords: RepoCoordinates) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=_LISTING)

    entries = await _adapter(handler, token="t0k").fetch_contents(coords, "src")

    assert entries == [
        Entry(path="src/App.js", name="App.js", type=EntryType.FILE),
        Entry(path="src/components", name="components", type=EntryType.DIR),
    ]
    request = seen[0]
    assert request.url.path == "/repos/octocat/hello-react/contents/src"
    assert request.url.params["ref"] == "master"
    assert request.headers["Authorization"] == "Bearer t0k"


@pytest.mark.asyncio
async def test_empty_path_lists_repository_root(coords: RepoCoordinates) -> None:
    seen: list[str] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request.url.path)
        return httpx.Response(200, json=[])

    adapter = _adapter(handler)
    await adapter.fetch_contents(coords, "")
    await adapter.fetch_contents(coords, "/")

    assert seen == ["/repos/octocat/hello-react/contents"] * 2


@pytest.mark.asyncio
async def test_no_authorization_header_without_token(coords: RepoCoordinates) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert "Authorization" not in request.headers
        return httpx.Response(200, json=[])

    assert await _adapter(handler).fetch_contents(coords, "src") == []


@pytest.mark.asyncio
async def test_file_path_is_rejected(coords: RepoCoordinates) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"name": "package.json", "type": "file"})

    with pytest.raises(ContentFetchError):
        await _adapter(handler).fetch_contents(coords, "package.json")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("status", "headers", "expected"),
    [
        (404, {}, ContentsNotFoundError),
        (403, {}, RepositoryAccessDeniedError),
        (403, {"x-ratelimit-remaining": "0", "x-ratelimit-reset": "1700000000"}, GitHubRateLimitError),
        (429, {}, GitHubRateLimitError),
        (500, {}, ContentFetchError),
    ],
)
async def test_status_translation(
    coords: RepoCoordinates,
    status: int,
    headers: dict[str, str],
    expected: type[Exception],
) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status, headers=headers, json={"message": "nope"})

    with pytest.raises(expected):
        await _adapter(handler).fetch_contents(coords, "src")


@pytest.mark.asyncio
async def test_network_error_is_wrapped(coords: RepoCoordinates) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(ContentFetchError):
        await _adapter(handler).fetch_contents(coords, "src")
