"""Recursive directory expansion over the contents API.

Children of a directory are expanded concurrently with ``asyncio.gather``:
results come back in listing order, the first failure fails the whole
expansion, and siblings still in flight are left to finish on their own
(nothing cancels them, their results are discarded).
"""

from __future__ import annotations

import asyncio
import logging
import posixpath

from tree_extractor.domain.entities import Entry, EntryType, NormalizedDirectory
from tree_extractor.domain.exceptions import ProjectTooLargeError
from tree_extractor.domain.ports.contents_fetcher import ContentsFetcher
from tree_extractor.domain.value_objects import RepoCoordinates

logger = logging.getLogger(__name__)

MAX_DIRECTORY_BUDGET = 40


class TreeWalker:
    """Expands one directory into a fully normalised subtree.

    Parameters
    ----------
    fetcher:
        Adapter that lists a single directory.
    max_budget:
        Expansion is refused once the budget passed to :meth:`expand`
        exceeds this value.
    """

    def __init__(
        self,
        fetcher: ContentsFetcher,
        max_budget: int = MAX_DIRECTORY_BUDGET,
    ) -> None:
        self._fetcher = fetcher
        self._max_budget = max_budget

    async def expand(
        self,
        coords: RepoCoordinates,
        path: str,
        budget: int = 0,
    ) -> NormalizedDirectory:
        """Fetch *path* and every directory below it.

        *budget* is the fan-out cost accumulated by the ancestors: each
        level adds the number of sibling directories it contains, so wide
        trees trip the guard sooner than deep narrow ones.
        """
        if budget > self._max_budget:
            raise ProjectTooLargeError(
                f"This project is too big, it has more than "
                f"{self._max_budget} directories.",
                limit=self._max_budget,
            )

        logger.info("Unpacking %s", path)
        contents = await self._fetcher.fetch_contents(coords, path)

        files, directories = partition(contents)
        child_budget = budget + len(directories)
        children = await asyncio.gather(
            *(self.expand(coords, d.path, child_budget) for d in directories)
        )

        return NormalizedDirectory(
            path=path,
            name=posixpath.basename(path),
            files=files,
            directories=list(children),
        )


def partition(entries: list[Entry]) -> tuple[list[Entry], list[Entry]]:
    """Split a listing into ``(files, directories)``, keeping listing order."""
    files = [e for e in entries if e.type is EntryType.FILE]
    directories = [e for e in entries if e.type is EntryType.DIR]
    return files, directories
