"""GitHub REST API adapter — implements the ContentsFetcher port."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any
from urllib.parse import quote

import httpx

from tree_extractor.domain.entities import Entry, EntryType
from tree_extractor.domain.exceptions import (
    ContentFetchError,
    ContentsNotFoundError,
    GitHubRateLimitError,
    RepositoryAccessDeniedError,
)
from tree_extractor.domain.value_objects import RepoCoordinates

logger = logging.getLogger(__name__)

_GITHUB_API = "https://api.github.com"
_ENTRY_TYPES = {t.value: t for t in EntryType}


class GitHubContentsAdapter:
    """Concrete ContentsFetcher backed by the GitHub v3 contents API."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        token: str | None = None,
        api_url: str = _GITHUB_API,
    ) -> None:
        self._client = client
        self._api_url = api_url.rstrip("/")
        self._api_headers: dict[str, str] = {
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": "repo-tree-extractor/1.0",
        }
        if token:
            self._api_headers["Authorization"] = f"Bearer {token}"

    async def fetch_contents(self, coords: RepoCoordinates, path: str) -> list[Entry]:
        """GET /repos/{owner}/{repo}/contents/{path}?ref={branch} → [Entry]."""
        clean = path.strip("/")
        endpoint = f"/repos/{coords.owner}/{coords.repo}/contents"
        if clean:
            endpoint = f"{endpoint}/{quote(clean)}"

        resp = await self._api_get(endpoint, params={"ref": coords.branch})
        data = resp.json()

        if not isinstance(data, list):
            raise ContentFetchError(
                f"'{clean or '/'}' in {coords.full_name} is not a directory."
            )

        return [entry for entry in map(_to_entry, data) if entry is not None]

    async def _api_get(
        self,
        endpoint: str,
        params: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Perform a GitHub API GET request with error translation."""
        url = f"{self._api_url}{endpoint}"
        try:
            resp = await self._client.get(
                url, headers=self._api_headers, params=params
            )
        except httpx.HTTPError as exc:
            raise ContentFetchError(
                f"Network error fetching {url}: {exc}"
            ) from exc

        if resp.status_code == 200:
            return resp

        if resp.status_code == 404:
            raise ContentsNotFoundError(
                "Repository, branch or path not found. "
                "Make sure the repository is public and the branch exists."
            )

        if resp.status_code == 403:
            remaining = resp.headers.get("x-ratelimit-remaining", "")
            if remaining == "0":
                reset_raw = resp.headers.get("x-ratelimit-reset", "")
                try:
                    reset_str = datetime.fromtimestamp(int(reset_raw), tz=timezone.utc).strftime(
                        "%Y-%m-%d %H:%M:%S UTC"
                    )
                except (ValueError, OSError):
                    reset_str = reset_raw or "unknown"
                raise GitHubRateLimitError(
                    f"GitHub API rate limit exceeded. Resets at {reset_str}. "
                    "Set the GITHUB_TOKEN environment variable to increase the limit."
                )
            raise RepositoryAccessDeniedError(
                "Access denied. The repository may be private."
            )

        if resp.status_code == 429:
            raise GitHubRateLimitError("GitHub API rate limit exceeded (HTTP 429).")

        raise ContentFetchError(
            f"GitHub API returned HTTP {resp.status_code} for {url}"
        )


def _to_entry(item: dict[str, Any]) -> Entry | None:
    entry_type = _ENTRY_TYPES.get(item.get("type", ""))
    if entry_type is None:
        # symlinks and submodules are not part of the tree
        logger.debug("Skipping %s of type %s", item.get("path"), item.get("type"))
        return None
    return Entry(path=item["path"], name=item["name"], type=entry_type)
