"""Domain entities — pure data structures with no external dependencies."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class TreeEntry:
    """A single node from the GitHub tree API (blob or sub-tree)."""

    path: str
    type: str  # "blob" or "tree"
    size: int | None = None


@dataclass(frozen=True, slots=True)
class RepositoryInfo:
    """Repository metadata as reported by GitHub (also used for search hits)."""

    name: str
    full_name: str
    owner: str
    default_branch: str = "main"
    description: str | None = None
    language: str | None = None
    stars: int = 0
    html_url: str = ""
    topics: list[str] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class FileContent:
    """Raw payload of the contents API, still in its transport encoding."""

    path: str
    content: str
    encoding: str | None


@dataclass(frozen=True, slots=True)
class FetchedFile:
    """A code file with its decoded text."""

    path: str
    content: str
    size: int = 0


@dataclass(frozen=True, slots=True)
class FilePairScore:
    file1: str
    file2: str
    similarity: float


@dataclass(frozen=True, slots=True)
class RepositorySimilarityResult:
    """Aggregate outcome of comparing two sets of files.

    ``matched_files`` counts every pair above the inclusion threshold, while
    ``file_pairs`` only keeps the best ten of them.
    """

    overall_similarity: float
    file_pairs: list[FilePairScore]
    matched_files: int
    total_files1: int
    total_files2: int


@dataclass(frozen=True, slots=True)
class RepoStats:
    """Code-file counts per extension for one repository tree."""

    total_files: int
    languages: dict[str, int]
    top_language: str


@dataclass(frozen=True, slots=True)
class FetchedRepository:
    info: RepositoryInfo
    files: list[FetchedFile]
    total_files: int
    stats: RepoStats


@dataclass(frozen=True, slots=True)
class ComparedRepository:
    """One side of a comparison: metadata plus how many files were fetched."""

    info: RepositoryInfo
    file_count: int


@dataclass(frozen=True, slots=True)
class ComparisonReport:
    repo1: ComparedRepository
    repo2: ComparedRepository
    similarity: RepositorySimilarityResult


@dataclass(frozen=True, slots=True)
class SimilarReposResult:
    original: RepositoryInfo
    query: str
    repositories: list[RepositoryInfo]
