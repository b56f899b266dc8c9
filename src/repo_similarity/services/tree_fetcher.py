"""Tree retrieval with a bounded branch-name fallback."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from repo_similarity.domain.entities import TreeEntry
from repo_similarity.domain.exceptions import RepositoryNotFoundError
from repo_similarity.domain.ports.repo_fetcher import RepoFetcher
from repo_similarity.domain.value_objects import RepositoryReference

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class BranchFallbackPolicy:
    """Retry a not-found *primary* branch once against *fallback*."""

    primary: str = "main"
    fallback: str = "master"

    def alternate_for(self, branch: str) -> str | None:
        return self.fallback if branch == self.primary else None


DEFAULT_BRANCH_POLICY = BranchFallbackPolicy()


async def fetch_tree(
    fetcher: RepoFetcher,
    ref: RepositoryReference,
    branch: str = "main",
    policy: BranchFallbackPolicy = DEFAULT_BRANCH_POLICY,
) -> list[TreeEntry]:
    """Fetch the recursive tree of *branch*, falling back at most once.

    Only a not-found on the policy's primary branch triggers the retry; any
    error from the retry itself propagates unchanged.
    """
    try:
        return await fetcher.fetch_tree(ref, branch)
    except RepositoryNotFoundError:
        alternate = policy.alternate_for(branch)
        if alternate is None:
            raise
        logger.info(
            "Branch '%s' not found in %s — retrying with '%s'", branch, ref.full_name, alternate
        )

    return await fetcher.fetch_tree(ref, alternate)
