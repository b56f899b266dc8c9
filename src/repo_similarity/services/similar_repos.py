"""Similar-repositories use case — GitHub search seeded from a source repo."""

from __future__ import annotations

import logging
from typing import Sequence

from repo_similarity.domain.entities import RepositoryInfo, SimilarReposResult
from repo_similarity.domain.ports.repo_fetcher import RepoFetcher
from repo_similarity.domain.value_objects import RepositoryReference

logger = logging.getLogger(__name__)

MIN_STARS_QUALIFIER = "stars:>10"
_MAX_DESCRIPTION_TERMS = 5
_MIN_TERM_LENGTH = 4


def build_search_query(
    source: RepositoryInfo,
    keywords: Sequence[str] | None = None,
    language: str | None = None,
) -> str:
    """Build a GitHub search query for repositories resembling *source*.

    Terms come from *keywords* when given, else from the first words of the
    description longer than three characters, else from the bare repo name.
    """
    if keywords:
        query = " ".join(keywords)
    elif source.description:
        terms = [w for w in source.description.split(" ") if len(w) >= _MIN_TERM_LENGTH]
        query = " ".join(terms[:_MAX_DESCRIPTION_TERMS])
    else:
        query = source.name

    search_language = language or source.language
    if search_language:
        query += f" language:{search_language}"

    return f"{query} {MIN_STARS_QUALIFIER}"


class SimilarReposUseCase:
    def __init__(self, repo_fetcher: RepoFetcher) -> None:
        self._fetcher = repo_fetcher

    async def execute(
        self,
        repo_url: str,
        *,
        keywords: Sequence[str] | None = None,
        language: str | None = None,
        limit: int = 5,
    ) -> SimilarReposResult:
        ref = RepositoryReference.from_string(repo_url)
        original = await self._fetcher.fetch_repo_info(ref)

        query = build_search_query(original, keywords, language)
        logger.info("Searching repositories similar to %s: %r", original.full_name, query)

        # One extra result so that dropping the source repo still leaves `limit`.
        candidates = await self._fetcher.search_repositories(query, limit + 1)
        similar = [r for r in candidates if r.full_name != original.full_name][:limit]

        return SimilarReposResult(original=original, query=query, repositories=similar)
