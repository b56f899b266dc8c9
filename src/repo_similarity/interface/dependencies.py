"""FastAPI dependency injection wiring.

Every request gets its own HTTP client and adapter; nothing is shared
between concurrent requests.
"""

from __future__ import annotations

from typing import AsyncIterator

import httpx
from fastapi import Depends

from repo_similarity.domain.ports.repo_fetcher import RepoFetcher
from repo_similarity.infrastructure.config import Settings, get_settings
from repo_similarity.infrastructure.github_rest_adapter import GitHubRestAdapter
from repo_similarity.services.compare_repos import CompareReposUseCase
from repo_similarity.services.fetch_repo import FetchRepoUseCase
from repo_similarity.services.similar_repos import SimilarReposUseCase


async def get_http_client(
    settings: Settings = Depends(get_settings),
) -> AsyncIterator[httpx.AsyncClient]:
    """Yield a request-scoped ``httpx.AsyncClient``."""
    async with httpx.AsyncClient(timeout=httpx.Timeout(settings.request_timeout)) as client:
        yield client


def get_repo_fetcher(
    client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
) -> RepoFetcher:
    return GitHubRestAdapter(client=client, config=settings.github_config())


def get_compare_use_case(
    fetcher: RepoFetcher = Depends(get_repo_fetcher),
    settings: Settings = Depends(get_settings),
) -> CompareReposUseCase:
    return CompareReposUseCase(
        repo_fetcher=fetcher,
        max_files=settings.max_files_per_repo,
        max_concurrency=settings.max_concurrent_fetches,
    )


def get_fetch_repo_use_case(
    fetcher: RepoFetcher = Depends(get_repo_fetcher),
    settings: Settings = Depends(get_settings),
) -> FetchRepoUseCase:
    return FetchRepoUseCase(
        repo_fetcher=fetcher,
        max_files=settings.max_files_per_repo,
        max_concurrency=settings.max_concurrent_fetches,
    )


def get_similar_repos_use_case(
    fetcher: RepoFetcher = Depends(get_repo_fetcher),
) -> SimilarReposUseCase:
    return SimilarReposUseCase(repo_fetcher=fetcher)
