"""Domain entities — pure data structures with no external dependencies."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class EntryType(str, Enum):
    """Kind of item returned by the contents listing."""

    FILE = "file"
    DIR = "dir"


@dataclass(frozen=True, slots=True)
class Entry:
    """A single item from a directory listing."""

    path: str
    name: str
    type: EntryType


@dataclass(slots=True)
class NormalizedDirectory:
    """A directory with every descendant fetched and expanded.

    Only ``name`` and ``path`` are ever reassigned, and only on the source
    subtree root (see :class:`ExtractProjectUseCase`).
    """

    path: str
    name: str
    files: list[Entry] = field(default_factory=list)
    directories: list[NormalizedDirectory] = field(default_factory=list)


@dataclass(slots=True)
class ProjectTree:
    """The final extraction result handed to the packaging step."""

    files: list[Entry] = field(default_factory=list)
    directories: list[NormalizedDirectory] = field(default_factory=list)

    def find_directory(self, path: str) -> NormalizedDirectory | None:
        for directory in self.directories:
            if directory.path == path:
                return directory
        return None


def count_files(node: NormalizedDirectory | ProjectTree) -> int:
    """Return the number of files in *node* and all of its descendants."""
    return len(node.files) + sum(count_files(child) for child in node.directories)
