"""API routes — thin controllers that delegate to the use cases."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from repo_similarity.interface.dependencies import (
    get_compare_use_case,
    get_fetch_repo_use_case,
    get_similar_repos_use_case,
)
from repo_similarity.interface.schemas import (
    CompareData,
    CompareRequest,
    CompareResponse,
    ErrorResponse,
    FetchRepoData,
    FetchRepoRequest,
    FetchRepoResponse,
    SimilarReposData,
    SimilarReposRequest,
    SimilarReposResponse,
)
from repo_similarity.services.compare_repos import CompareReposUseCase
from repo_similarity.services.fetch_repo import FetchRepoUseCase
from repo_similarity.services.similar_repos import SimilarReposUseCase

router = APIRouter(prefix="/api/github")

_GITHUB_ERRORS = {
    400: {"model": ErrorResponse, "description": "Invalid repository URL"},
    403: {"model": ErrorResponse, "description": "GitHub API rate limit exceeded or access denied"},
    404: {"model": ErrorResponse, "description": "Repository not found"},
    500: {"model": ErrorResponse, "description": "GitHub API or processing failure"},
}


@router.post("/compare", response_model=CompareResponse, responses=_GITHUB_ERRORS)
async def compare(
    body: CompareRequest,
    use_case: CompareReposUseCase = Depends(get_compare_use_case),
) -> CompareResponse:
    """Compare the code files of two public GitHub repositories."""
    report = await use_case.execute(body.repo1_url, body.repo2_url)
    return CompareResponse(data=CompareData.from_domain(report))


@router.post("/fetch-repo", response_model=FetchRepoResponse, responses=_GITHUB_ERRORS)
async def fetch_repo(
    body: FetchRepoRequest,
    use_case: FetchRepoUseCase = Depends(get_fetch_repo_use_case),
) -> FetchRepoResponse:
    """Return repository metadata and the contents of its first code files."""
    fetched = await use_case.execute(body.repo_url)
    return FetchRepoResponse(data=FetchRepoData.from_domain(fetched))


@router.post("/similar-repos", response_model=SimilarReposResponse, responses=_GITHUB_ERRORS)
async def similar_repos(
    body: SimilarReposRequest,
    use_case: SimilarReposUseCase = Depends(get_similar_repos_use_case),
) -> SimilarReposResponse:
    """Search GitHub for popular repositories resembling the given one."""
    result = await use_case.execute(
        body.repo_url,
        keywords=body.keywords,
        language=body.language,
        limit=body.limit,
    )
    return SimilarReposResponse(data=SimilarReposData.from_domain(result))
