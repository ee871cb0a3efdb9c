"""Pydantic request / response DTOs for the API boundary."""

from __future__ import annotations

from pydantic import BaseModel, Field

from tree_extractor.domain.entities import (
    Entry,
    EntryType,
    NormalizedDirectory,
    ProjectTree,
)


class ExtractRequest(BaseModel):
    """Request body for ``POST /extract``."""

    owner: str = Field(min_length=1)
    repo: str = Field(min_length=1)
    branch: str | None = None
    path: str = ""
    source_folder: str | None = "src"


class EntrySchema(BaseModel):
    path: str
    name: str
    type: EntryType

    @classmethod
    def from_domain(cls, entry: Entry) -> EntrySchema:
        return cls(path=entry.path, name=entry.name, type=entry.type)


class DirectorySchema(BaseModel):
    """A fully expanded directory."""

    path: str
    name: str
    files: list[EntrySchema]
    directories: list[DirectorySchema]

    @classmethod
    def from_domain(cls, directory: NormalizedDirectory) -> DirectorySchema:
        return cls(
            path=directory.path,
            name=directory.name,
            files=[EntrySchema.from_domain(f) for f in directory.files],
            directories=[cls.from_domain(d) for d in directory.directories],
        )


DirectorySchema.model_rebuild()


class ExtractResponse(BaseModel):
    """Successful response from ``POST /extract``."""

    files: list[EntrySchema]
    directories: list[DirectorySchema]

    @classmethod
    def from_domain(cls, tree: ProjectTree) -> ExtractResponse:
        return cls(
            files=[EntrySchema.from_domain(f) for f in tree.files],
            directories=[DirectorySchema.from_domain(d) for d in tree.directories],
        )


class ErrorResponse(BaseModel):
    """Standard error envelope returned on all failure paths."""

    status: str = "error"
    message: str
