"""Domain exception hierarchy.

Each exception maps to a specific HTTP status code at the interface layer.
Inner layers raise these; the outermost error-handler translates them.
"""

from __future__ import annotations


class TreeExtractorError(Exception):
    """Base exception for the entire application."""


# ── Input validation ────────────────────────────────────────────────────────


class InvalidRepositoryError(TreeExtractorError):
    """The supplied owner / repo / branch coordinates are malformed."""


# ── Extraction errors ───────────────────────────────────────────────────────


class ProjectTooLargeError(TreeExtractorError):
    """The project exceeds the directory budget or the file-count ceiling."""

    def __init__(self, message: str, limit: int) -> None:
        super().__init__(message)
        self.limit = limit


class MissingManifestError(TreeExtractorError):
    """The root listing has no ``package.json``."""


class MissingSourceFolderError(TreeExtractorError):
    """No ``src`` subtree is present after expansion."""


# ── GitHub API errors ───────────────────────────────────────────────────────


class ContentsNotFoundError(TreeExtractorError):
    """The repository, branch or path does not exist (404)."""


class RepositoryAccessDeniedError(TreeExtractorError):
    """Access to the repository was denied (403)."""


class GitHubRateLimitError(TreeExtractorError):
    """GitHub API rate limit exceeded (429 / 403 with rate-limit header)."""


class ContentFetchError(TreeExtractorError):
    """Failed to fetch or decode a contents listing."""
