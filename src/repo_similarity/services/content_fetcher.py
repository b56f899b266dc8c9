"""Concurrent file-content retrieval with per-file failure isolation."""

from __future__ import annotations

import asyncio
import base64
import binascii
import logging
from typing import Sequence

from repo_similarity.domain.entities import FetchedFile, FileContent
from repo_similarity.domain.exceptions import ContentExtractionError, RepoSimilarityError
from repo_similarity.domain.ports.repo_fetcher import RepoFetcher
from repo_similarity.domain.value_objects import RepositoryReference
from repo_similarity.services.concurrency import gather_or_cancel

logger = logging.getLogger(__name__)


def decode_content(payload: FileContent) -> str:
    """Turn a contents-API payload into text."""
    if payload.encoding == "base64":
        try:
            raw = base64.b64decode(payload.content)
            return raw.decode("utf-8")
        except (binascii.Error, UnicodeDecodeError) as exc:
            raise ContentExtractionError(f"Failed to decode '{payload.path}': {exc}") from exc

    if payload.encoding in (None, "", "utf-8"):
        return payload.content

    # "none" is what GitHub reports for files too large to inline.
    raise ContentExtractionError(
        f"Unsupported content encoding '{payload.encoding}' for '{payload.path}'"
    )


async def fetch_contents(
    fetcher: RepoFetcher,
    ref: RepositoryReference,
    paths: Sequence[str],
    sizes: dict[str, int] | None = None,
    max_concurrency: int = 20,
) -> list[FetchedFile]:
    """Fetch and decode every path concurrently.

    A path whose fetch or decode fails is left out; the remaining files keep
    the order of *paths*.
    """
    sem = asyncio.Semaphore(max(1, max_concurrency))
    sizes = sizes or {}

    async def _fetch_one(path: str) -> FetchedFile | None:
        async with sem:
            try:
                payload = await fetcher.fetch_file_content(ref, path)
                content = decode_content(payload)
            except RepoSimilarityError:
                logger.debug("Failed to fetch %s from %s — skipping", path, ref.full_name, exc_info=True)
                return None
        return FetchedFile(path=path, content=content, size=sizes.get(path, 0))

    results = await gather_or_cancel(*(_fetch_one(p) for p in paths))
    files = [r for r in results if r is not None]
    if len(files) < len(paths):
        logger.info(
            "Fetched %d of %d files from %s", len(files), len(paths), ref.full_name
        )
    return files
