"""GitHub REST API adapter — implements the RepoFetcher port."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any
from urllib.parse import quote

import httpx

from repo_similarity.domain.entities import FileContent, RepositoryInfo, TreeEntry
from repo_similarity.domain.exceptions import (
    GitHubApiError,
    GitHubRateLimitError,
    RepositoryAccessDeniedError,
    RepositoryNotFoundError,
)
from repo_similarity.domain.value_objects import RepositoryReference
from repo_similarity.infrastructure.config import GitHubConfig

logger = logging.getLogger(__name__)


class GitHubRestAdapter:
    """Concrete RepoFetcher backed by the GitHub v3 REST API."""

    def __init__(self, client: httpx.AsyncClient, config: GitHubConfig) -> None:
        self._client = client
        self._base_url = config.api_url.rstrip("/")
        self._api_headers: dict[str, str] = {
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": "repo-similarity/1.0",
        }
        if config.token:
            self._api_headers["Authorization"] = f"token {config.token}"

    async def fetch_repo_info(self, ref: RepositoryReference) -> RepositoryInfo:
        """GET /repos/{owner}/{repo} → RepositoryInfo."""
        resp = await self._api_get(
            f"/repos/{ref.owner}/{ref.name}",
            what=f"Repository {ref.full_name}",
        )
        return _repository_info(resp.json())

    async def fetch_tree(self, ref: RepositoryReference, branch: str) -> list[TreeEntry]:
        """GET /repos/{owner}/{repo}/git/trees/{branch}?recursive=1 → [TreeEntry]."""
        resp = await self._api_get(
            f"/repos/{ref.owner}/{ref.name}/git/trees/{branch}",
            params={"recursive": "1"},
            what=f"Branch '{branch}' of {ref.full_name}",
        )
        data = resp.json()
        if data.get("truncated"):
            logger.warning("Tree listing for %s@%s was truncated by GitHub", ref.full_name, branch)

        return [
            TreeEntry(
                path=item["path"],
                type=item.get("type", "blob"),
                size=item.get("size"),
            )
            for item in data.get("tree", [])
        ]

    async def fetch_file_content(self, ref: RepositoryReference, path: str) -> FileContent:
        """GET /repos/{owner}/{repo}/contents/{path} → FileContent (still encoded)."""
        resp = await self._api_get(
            f"/repos/{ref.owner}/{ref.name}/contents/{quote(path)}",
            what=f"File '{path}' in {ref.full_name}",
        )
        data = resp.json()
        if isinstance(data, list):
            raise GitHubApiError(f"'{path}' in {ref.full_name} is a directory.")
        return FileContent(
            path=path,
            content=data.get("content") or "",
            encoding=data.get("encoding"),
        )

    async def search_repositories(self, query: str, limit: int) -> list[RepositoryInfo]:
        """GET /search/repositories sorted by stars, descending."""
        resp = await self._api_get(
            "/search/repositories",
            params={
                "q": query,
                "sort": "stars",
                "order": "desc",
                "per_page": str(limit),
            },
            what="Repository search",
        )
        return [_repository_info(item) for item in resp.json().get("items", [])]

    async def _api_get(
        self,
        endpoint: str,
        *,
        what: str,
        params: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Perform a GitHub API GET request with error translation."""
        url = f"{self._base_url}{endpoint}"
        try:
            resp = await self._client.get(
                url, headers=self._api_headers, params=params
            )
        except httpx.HTTPError as exc:
            raise GitHubApiError(f"Network error fetching {url}: {exc}") from exc

        if resp.status_code == 200:
            return resp

        if resp.status_code == 404:
            raise RepositoryNotFoundError(f"{what} not found.")

        if resp.status_code == 403:
            remaining = resp.headers.get("x-ratelimit-remaining", "")
            if remaining == "0":
                reset_raw = resp.headers.get("x-ratelimit-reset", "")
                try:
                    reset_str = datetime.fromtimestamp(int(reset_raw), tz=timezone.utc).strftime(
                        "%Y-%m-%d %H:%M:%S UTC"
                    )
                except (ValueError, OSError):
                    reset_str = reset_raw or "unknown"
                raise GitHubRateLimitError(
                    f"GitHub API rate limit exceeded. Resets at {reset_str}. "
                    "Set the GITHUB_TOKEN environment variable to increase the limit."
                )
            raise RepositoryAccessDeniedError(
                f"Access denied to {what}. The repository may be private."
            )

        if resp.status_code == 429:
            raise GitHubRateLimitError(
                "GitHub API rate limit exceeded (HTTP 429).", status_code=429
            )

        raise GitHubApiError(
            f"GitHub API returned HTTP {resp.status_code} for {url}",
            status_code=resp.status_code,
        )


def _repository_info(data: dict[str, Any]) -> RepositoryInfo:
    owner = data.get("owner") or {}
    return RepositoryInfo(
        name=data.get("name", ""),
        full_name=data.get("full_name", ""),
        owner=owner.get("login", ""),
        default_branch=data.get("default_branch") or "main",
        description=data.get("description"),
        language=data.get("language"),
        stars=data.get("stargazers_count") or 0,
        html_url=data.get("html_url", ""),
        topics=list(data.get("topics") or []),
    )
