"""Port: contents fetcher — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Protocol

from tree_extractor.domain.entities import Entry
from tree_extractor.domain.value_objects import RepoCoordinates


class ContentsFetcher(Protocol):
    """Abstract contract for listing one directory of a repository."""

    async def fetch_contents(self, coords: RepoCoordinates, path: str) -> list[Entry]:
        """Return the entries directly inside *path* (``""`` is the root)."""
        ...
