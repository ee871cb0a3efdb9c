"""Structural checks on listings and expanded trees."""

from __future__ import annotations

from tree_extractor.domain.entities import (
    Entry,
    EntryType,
    NormalizedDirectory,
    count_files,
)
from tree_extractor.domain.exceptions import MissingManifestError, ProjectTooLargeError

MARKER_FILE = "package.json"
MAX_FILE_COUNT = 90


def require_marker_file(entries: list[Entry], marker: str = MARKER_FILE) -> None:
    """Fail unless the flat listing contains a file named *marker*.

    Only the given listing is inspected; nothing is fetched or recursed into.
    """
    if not any(e.type is EntryType.FILE and e.name == marker for e in entries):
        raise MissingManifestError(f"The path doesn't contain a {marker}.")


def enforce_file_count_ceiling(
    tree: NormalizedDirectory, max_files: int = MAX_FILE_COUNT
) -> None:
    """Fail when *tree* holds more than *max_files* files in total."""
    file_count = count_files(tree)
    if file_count > max_files:
        raise ProjectTooLargeError(
            f"This repository has more than {max_files} files "
            f"({file_count}), it's too big.",
            limit=max_files,
        )
