"""Pydantic request / response DTOs for the API boundary.

Field names are snake_case in Python and camelCase on the wire.
"""

from __future__ import annotations

from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from repo_similarity.domain.entities import (
    ComparedRepository,
    ComparisonReport,
    FetchedRepository,
    RepositoryInfo,
    SimilarReposResult,
)


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _not_blank(v: str) -> str:
    stripped = v.strip()
    if not stripped:
        msg = "Repository URL must not be empty."
        raise ValueError(msg)
    return stripped


RepoUrl = Annotated[str, AfterValidator(_not_blank)]


# ── Requests ────────────────────────────────────────────────────────────────


class CompareRequest(_CamelModel):
    """Request body for ``POST /api/github/compare``."""

    repo1_url: RepoUrl
    repo2_url: RepoUrl


class FetchRepoRequest(_CamelModel):
    """Request body for ``POST /api/github/fetch-repo``."""

    repo_url: RepoUrl


class SimilarReposRequest(_CamelModel):
    """Request body for ``POST /api/github/similar-repos``."""

    repo_url: RepoUrl
    language: str | None = None
    keywords: list[str] | None = None
    limit: int = Field(default=5, ge=1, le=100)


# ── Compare ─────────────────────────────────────────────────────────────────


class RepoSummary(_CamelModel):
    name: str
    full_name: str
    description: str
    language: str
    stars: int
    file_count: int

    @classmethod
    def from_domain(cls, repo: ComparedRepository) -> RepoSummary:
        return cls(
            name=repo.info.name,
            full_name=repo.info.full_name,
            description=repo.info.description or "",
            language=repo.info.language or "Unknown",
            stars=repo.info.stars,
            file_count=repo.file_count,
        )


class FilePair(_CamelModel):
    file1: str
    file2: str
    similarity: float


class SimilaritySummary(_CamelModel):
    overall: float
    matched_files: int
    total_files1: int
    total_files2: int
    top_matches: list[FilePair]


class CompareData(_CamelModel):
    repo1: RepoSummary
    repo2: RepoSummary
    similarity: SimilaritySummary

    @classmethod
    def from_domain(cls, report: ComparisonReport) -> CompareData:
        result = report.similarity
        return cls(
            repo1=RepoSummary.from_domain(report.repo1),
            repo2=RepoSummary.from_domain(report.repo2),
            similarity=SimilaritySummary(
                overall=result.overall_similarity,
                matched_files=result.matched_files,
                total_files1=result.total_files1,
                total_files2=result.total_files2,
                top_matches=[
                    FilePair(file1=p.file1, file2=p.file2, similarity=p.similarity)
                    for p in result.file_pairs
                ],
            ),
        )


class CompareResponse(_CamelModel):
    success: bool = True
    data: CompareData


# ── Fetch repository ────────────────────────────────────────────────────────


class RepoDetails(_CamelModel):
    name: str
    full_name: str
    owner: str
    default_branch: str
    html_url: str
    description: str | None


class RepoFileOut(_CamelModel):
    path: str
    content: str
    size: int


class RepoStatsOut(_CamelModel):
    total_files: int
    languages: dict[str, int]
    top_language: str


class FetchRepoData(_CamelModel):
    repo: RepoDetails
    files: list[RepoFileOut]
    total_files: int
    stats: RepoStatsOut

    @classmethod
    def from_domain(cls, fetched: FetchedRepository) -> FetchRepoData:
        info = fetched.info
        return cls(
            repo=RepoDetails(
                name=info.name,
                full_name=info.full_name,
                owner=info.owner,
                default_branch=info.default_branch,
                html_url=info.html_url,
                description=info.description,
            ),
            files=[RepoFileOut(path=f.path, content=f.content, size=f.size) for f in fetched.files],
            total_files=fetched.total_files,
            stats=RepoStatsOut(
                total_files=fetched.stats.total_files,
                languages=fetched.stats.languages,
                top_language=fetched.stats.top_language,
            ),
        )


class FetchRepoResponse(_CamelModel):
    success: bool = True
    data: FetchRepoData


# ── Similar repositories ────────────────────────────────────────────────────


class OriginalRepo(_CamelModel):
    name: str
    full_name: str
    description: str
    language: str


class SimilarRepo(_CamelModel):
    name: str
    full_name: str
    description: str
    language: str
    stars: int
    url: str
    topics: list[str]

    @classmethod
    def from_domain(cls, info: RepositoryInfo) -> SimilarRepo:
        return cls(
            name=info.name,
            full_name=info.full_name,
            description=info.description or "",
            language=info.language or "Unknown",
            stars=info.stars,
            url=info.html_url,
            topics=info.topics,
        )


class SimilarReposData(_CamelModel):
    original_repo: OriginalRepo
    search_query: str
    similar_repos: list[SimilarRepo]
    count: int

    @classmethod
    def from_domain(cls, result: SimilarReposResult) -> SimilarReposData:
        original = result.original
        similar = [SimilarRepo.from_domain(r) for r in result.repositories]
        return cls(
            original_repo=OriginalRepo(
                name=original.name,
                full_name=original.full_name,
                description=original.description or "",
                language=original.language or "Unknown",
            ),
            search_query=result.query,
            similar_repos=similar,
            count=len(similar),
        )


class SimilarReposResponse(_CamelModel):
    success: bool = True
    data: SimilarReposData


class ErrorResponse(BaseModel):
    """Standard error envelope returned on all failure paths."""

    success: bool = False
    error: str
