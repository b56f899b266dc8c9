"""Port: repository fetcher — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Protocol

from repo_similarity.domain.entities import FileContent, RepositoryInfo, TreeEntry
from repo_similarity.domain.value_objects import RepositoryReference


class RepoFetcher(Protocol):
    """Abstract contract for fetching GitHub repository data."""

    async def fetch_repo_info(self, ref: RepositoryReference) -> RepositoryInfo:
        """Return repository metadata."""
        ...

    async def fetch_tree(self, ref: RepositoryReference, branch: str) -> list[TreeEntry]:
        """Return the flat recursive tree for *branch* (no fallback)."""
        ...

    async def fetch_file_content(self, ref: RepositoryReference, path: str) -> FileContent:
        """Return a file's raw content together with its transport encoding."""
        ...

    async def search_repositories(self, query: str, limit: int) -> list[RepositoryInfo]:
        """Return up to *limit* repositories matching *query*, most stars first."""
        ...
