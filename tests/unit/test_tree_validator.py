"""Tests for services/tree_validator.py."""

from __future__ import annotations

import pytest

from tests.fakes.fake_contents_fetcher import file, folder
from tree_extractor.domain.entities import NormalizedDirectory, count_files
from tree_extractor.domain.exceptions import MissingManifestError, ProjectTooLargeError
from tree_extractor.services.tree_validator import (
    enforce_file_count_ceiling,
    require_marker_file,
)


def _flat(count: int) -> NormalizedDirectory:
    return NormalizedDirectory(
        path="src",
        name="src",
        files=[file(f"src/f{i}.js") for i in range(count)],
    )


class TestRequireMarkerFile:
    def test_missing_package_json_fails(self) -> None:
        with pytest.raises(MissingManifestError):
            require_marker_file([file("index.js")])

    def test_package_json_passes(self) -> None:
        require_marker_file([file("package.json")])

    def test_directory_named_package_json_does_not_count(self) -> None:
        with pytest.raises(MissingManifestError):
            require_marker_file([folder("package.json")])

    def test_name_must_match_exactly(self) -> None:
        with pytest.raises(MissingManifestError):
            require_marker_file([file("package.json.bak"), file("Package.json")])

    def test_empty_listing_fails(self) -> None:
        with pytest.raises(MissingManifestError):
            require_marker_file([])


class TestFileCountCeiling:
    def test_ninety_files_pass(self) -> None:
        enforce_file_count_ceiling(_flat(90))

    def test_ninety_one_files_fail(self) -> None:
        with pytest.raises(ProjectTooLargeError) as excinfo:
            enforce_file_count_ceiling(_flat(91))

        assert excinfo.value.limit == 90

    def test_counts_files_in_descendants(self) -> None:
        tree = NormalizedDirectory(
            path="src",
            name="src",
            files=[file("src/a.js")],
            directories=[
                _flat(45),
                NormalizedDirectory(
                    path="src/b",
                    name="b",
                    directories=[_flat(45)],
                ),
            ],
        )

        assert count_files(tree) == 91
        with pytest.raises(ProjectTooLargeError):
            enforce_file_count_ceiling(tree)

    def test_custom_ceiling(self) -> None:
        with pytest.raises(ProjectTooLargeError):
            enforce_file_count_ceiling(_flat(3), max_files=2)
