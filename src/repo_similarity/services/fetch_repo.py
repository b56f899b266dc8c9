"""Fetch-repository use case — metadata plus the first code files of one repo."""

from __future__ import annotations

import logging

from repo_similarity.domain.entities import FetchedRepository
from repo_similarity.domain.ports.repo_fetcher import RepoFetcher
from repo_similarity.domain.value_objects import RepositoryReference
from repo_similarity.services.content_fetcher import fetch_contents
from repo_similarity.services.file_filter import filter_code_files, repo_stats
from repo_similarity.services.tree_fetcher import fetch_tree

logger = logging.getLogger(__name__)


class FetchRepoUseCase:
    def __init__(
        self,
        repo_fetcher: RepoFetcher,
        max_files: int = 20,
        max_concurrency: int = 20,
    ) -> None:
        self._fetcher = repo_fetcher
        self._max_files = max_files
        self._max_concurrency = max_concurrency

    async def execute(self, repo_url: str) -> FetchedRepository:
        """Return repository info, fetched code files and the total code-file count."""
        ref = RepositoryReference.from_string(repo_url)

        info = await self._fetcher.fetch_repo_info(ref)
        tree = await fetch_tree(self._fetcher, ref, info.default_branch)

        code_files = filter_code_files(tree)
        selected = code_files[: self._max_files]
        logger.info(
            "Fetching %d of %d code files from %s", len(selected), len(code_files), ref.full_name
        )

        files = await fetch_contents(
            self._fetcher,
            ref,
            [e.path for e in selected],
            sizes={e.path: e.size or 0 for e in selected},
            max_concurrency=self._max_concurrency,
        )
        return FetchedRepository(
            info=info,
            files=files,
            total_files=len(code_files),
            stats=repo_stats(tree),
        )
