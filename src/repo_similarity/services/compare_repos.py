"""Compare-repositories use case — the main orchestration pipeline.

Depends only on the :class:`RepoFetcher` port and the pure service modules.
The interface layer injects a concrete adapter per request.
"""

from __future__ import annotations

import logging

from repo_similarity.domain.entities import (
    ComparedRepository,
    ComparisonReport,
    FetchedFile,
    RepositoryInfo,
    TreeEntry,
)
from repo_similarity.domain.ports.repo_fetcher import RepoFetcher
from repo_similarity.domain.value_objects import RepositoryReference
from repo_similarity.services.concurrency import gather_or_cancel
from repo_similarity.services.content_fetcher import fetch_contents
from repo_similarity.services.file_filter import filter_code_files
from repo_similarity.services.similarity import calculate_repo_similarity
from repo_similarity.services.tree_fetcher import fetch_tree

logger = logging.getLogger(__name__)


class CompareReposUseCase:
    """Orchestrates the repo pair → similarity report pipeline.

    Parameters
    ----------
    repo_fetcher:
        Adapter that can fetch metadata, trees and file content from GitHub.
    max_files:
        Number of code files (in tree order) fetched from each repository.
    max_concurrency:
        Upper bound on in-flight content requests per repository.
    """

    def __init__(
        self,
        repo_fetcher: RepoFetcher,
        max_files: int = 20,
        max_concurrency: int = 20,
    ) -> None:
        self._fetcher = repo_fetcher
        self._max_files = max_files
        self._max_concurrency = max_concurrency

    async def execute(self, repo1_url: str, repo2_url: str) -> ComparisonReport:
        """Run the full pipeline and return the comparison report."""
        ref1 = RepositoryReference.from_string(repo1_url)
        ref2 = RepositoryReference.from_string(repo2_url)
        logger.info("Comparing %s with %s", ref1.full_name, ref2.full_name)

        # 1. Metadata + tree of both repositories, concurrently
        (info1, tree1), (info2, tree2) = await gather_or_cancel(
            self._load(ref1),
            self._load(ref2),
        )

        # 2. Filter & truncate
        selected1 = filter_code_files(tree1)[: self._max_files]
        selected2 = filter_code_files(tree2)[: self._max_files]

        # 3. Fetch contents of both repositories concurrently
        files1, files2 = await gather_or_cancel(
            self._fetch(ref1, selected1),
            self._fetch(ref2, selected2),
        )

        # 4. Score
        result = calculate_repo_similarity(files1, files2)
        logger.info(
            "%s vs %s: %.2f%% over %d matched file(s)",
            ref1.full_name,
            ref2.full_name,
            result.overall_similarity,
            result.matched_files,
        )

        return ComparisonReport(
            repo1=ComparedRepository(info=info1, file_count=len(selected1)),
            repo2=ComparedRepository(info=info2, file_count=len(selected2)),
            similarity=result,
        )

    async def _load(
        self, ref: RepositoryReference
    ) -> tuple[RepositoryInfo, list[TreeEntry]]:
        info, tree = await gather_or_cancel(
            self._fetcher.fetch_repo_info(ref),
            fetch_tree(self._fetcher, ref),
        )
        return info, tree

    async def _fetch(
        self, ref: RepositoryReference, entries: list[TreeEntry]
    ) -> list[FetchedFile]:
        return await fetch_contents(
            self._fetcher,
            ref,
            [e.path for e in entries],
            sizes={e.path: e.size or 0 for e in entries},
            max_concurrency=self._max_concurrency,
        )
