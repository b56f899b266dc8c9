"""Domain exception hierarchy.

Errors raised from a GitHub response carry the originating HTTP status in
``status_code`` so callers can tell a missing repository from a rate limit.
The interface layer translates them to HTTP responses.
"""

from __future__ import annotations


class RepoSimilarityError(Exception):
    """Base exception for the entire application."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


# ── Input validation ────────────────────────────────────────────────────────


class InvalidReferenceFormatError(RepoSimilarityError):
    """The supplied string is neither a GitHub URL nor ``owner/repo``."""


# ── GitHub API errors ───────────────────────────────────────────────────────


class RepositoryNotFoundError(RepoSimilarityError):
    """The repository (or the requested branch) does not exist (404)."""

    def __init__(self, message: str, status_code: int | None = 404) -> None:
        super().__init__(message, status_code)


class RepositoryAccessDeniedError(RepoSimilarityError):
    """Access to the repository was denied (403)."""

    def __init__(self, message: str, status_code: int | None = 403) -> None:
        super().__init__(message, status_code)


class GitHubRateLimitError(RepoSimilarityError):
    """GitHub API rate limit exceeded (403 with rate-limit header, or 429)."""

    def __init__(self, message: str, status_code: int | None = 403) -> None:
        super().__init__(message, status_code)


class GitHubApiError(RepoSimilarityError):
    """Any other failed GitHub API call (unexpected status or transport error)."""


# ── Processing errors ───────────────────────────────────────────────────────


class ContentExtractionError(RepoSimilarityError):
    """A single file could not be fetched or decoded."""
