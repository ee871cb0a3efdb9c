"""Value objects — self-validating domain primitives."""

from __future__ import annotations

import re
from dataclasses import dataclass

from tree_extractor.domain.exceptions import InvalidRepositoryError

_GITHUB_NAME_RE = re.compile(r"^[A-Za-z0-9\-_.]+$")


@dataclass(frozen=True, slots=True)
class RepoCoordinates:
    """Validated location of a branch inside a GitHub repository.

    *owner* and *repo* must look like GitHub names (``psf`` / ``requests``);
    *branch* may be any non-empty ref, slashes included.
    """

    owner: str
    repo: str
    branch: str

    @classmethod
    def create(cls, owner: str, repo: str, branch: str) -> RepoCoordinates:
        """Strip and validate raw coordinate strings."""
        owner, repo, branch = owner.strip(), repo.strip(), branch.strip()
        for label, value in (("owner", owner), ("repository", repo)):
            if not _GITHUB_NAME_RE.match(value):
                raise InvalidRepositoryError(
                    f"Invalid GitHub {label} name: '{value}'."
                )
        if not branch:
            raise InvalidRepositoryError("Branch must not be empty.")
        return cls(owner=owner, repo=repo, branch=branch)

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"
