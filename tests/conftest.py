"""Shared pytest fixtures."""

from __future__ import annotations

import pytest

from tree_extractor.domain.value_objects import RepoCoordinates


@pytest.fixture
def coords() -> RepoCoordinates:
    return RepoCoordinates.create("octocat", "hello-react", "master")
