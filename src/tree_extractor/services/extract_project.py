"""Extract-project use case — builds the tree handed to the packaging step.

The root listing is checked for a manifest, the ``public`` / ``static``
directories and the configured source folder are expanded with
:class:`TreeWalker`, and the source subtree is renamed to ``src`` and
checked against the file-count ceiling.
"""

from __future__ import annotations

import asyncio
import logging

from tree_extractor.domain.entities import NormalizedDirectory, ProjectTree
from tree_extractor.domain.exceptions import MissingSourceFolderError
from tree_extractor.domain.ports.contents_fetcher import ContentsFetcher
from tree_extractor.domain.value_objects import RepoCoordinates
from tree_extractor.services.tree_validator import (
    MAX_FILE_COUNT,
    enforce_file_count_ceiling,
    require_marker_file,
)
from tree_extractor.services.tree_walker import (
    MAX_DIRECTORY_BUDGET,
    TreeWalker,
    partition,
)

logger = logging.getLogger(__name__)

STATIC_DIRECTORIES: frozenset[str] = frozenset({"public", "static"})
SOURCE_FOLDER = "src"


class ExtractProjectUseCase:
    """Orchestrates root listing → expanded, validated :class:`ProjectTree`."""

    def __init__(
        self,
        fetcher: ContentsFetcher,
        max_directory_budget: int = MAX_DIRECTORY_BUDGET,
        max_file_count: int = MAX_FILE_COUNT,
    ) -> None:
        self._fetcher = fetcher
        self._walker = TreeWalker(fetcher, max_budget=max_directory_budget)
        self._max_files = max_file_count

    async def execute(
        self,
        coords: RepoCoordinates,
        root_path: str = "",
        source_folder: str | None = SOURCE_FOLDER,
    ) -> ProjectTree:
        """Run the extraction; any failure aborts with no partial result."""
        logger.info("Extracting %s@%s", coords.full_name, coords.branch)

        root_contents = await self._fetcher.fetch_contents(coords, root_path)
        require_marker_file(root_contents)

        files, root_dirs = partition(root_contents)
        static_dirs = [d for d in root_dirs if d.name in STATIC_DIRECTORIES]

        directories = list(
            await asyncio.gather(
                *(self._walker.expand(coords, d.path) for d in static_dirs)
            )
        )
        if not source_folder:
            return ProjectTree(files=files, directories=directories)

        # public/static must settle before the source folder is walked
        source_dir = await self._walker.expand(coords, source_folder)
        _rename_to_src(source_dir)

        tree = ProjectTree(files=files, directories=[*directories, source_dir])

        located = tree.find_directory(SOURCE_FOLDER)
        if located is None:
            raise MissingSourceFolderError(
                f"The project should include a {SOURCE_FOLDER} folder."
            )
        enforce_file_count_ceiling(located, self._max_files)

        return tree


def _rename_to_src(directory: NormalizedDirectory) -> None:
    directory.name = SOURCE_FOLDER
    directory.path = SOURCE_FOLDER


async def extract(
    fetcher: ContentsFetcher,
    owner: str,
    repo: str,
    branch: str,
    root_path: str = "",
    source_folder: str | None = SOURCE_FOLDER,
) -> ProjectTree:
    """Validate the coordinates and run :class:`ExtractProjectUseCase` once."""
    coords = RepoCoordinates.create(owner, repo, branch)
    return await ExtractProjectUseCase(fetcher).execute(coords, root_path, source_folder)
