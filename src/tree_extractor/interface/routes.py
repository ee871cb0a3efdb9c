"""API routes — thin controllers that delegate to the use case."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from tree_extractor.domain.value_objects import RepoCoordinates
from tree_extractor.infrastructure.config import get_settings
from tree_extractor.interface.dependencies import get_use_case
from tree_extractor.interface.schemas import ExtractRequest, ExtractResponse
from tree_extractor.services.extract_project import ExtractProjectUseCase

router = APIRouter()


@router.post(
    "/extract",
    response_model=ExtractResponse,
    responses={
        422: {"description": "Invalid coordinates, missing package.json or src folder"},
        413: {"description": "Too many directories or files"},
        403: {"description": "Repository is private"},
        404: {"description": "Repository, branch or path not found"},
        429: {"description": "GitHub API rate limit exceeded"},
        502: {"description": "GitHub API error"},
    },
)
async def extract(
    body: ExtractRequest,
    use_case: ExtractProjectUseCase = Depends(get_use_case),
) -> ExtractResponse:
    """Fetch and normalise the directory tree of a GitHub repository."""
    branch = body.branch or get_settings().default_branch
    coords = RepoCoordinates.create(body.owner, body.repo, branch)
    tree = await use_case.execute(coords, body.path, body.source_folder)
    return ExtractResponse.from_domain(tree)
