"""Shared fixtures: an in-memory RepoFetcher standing in for GitHub."""

from __future__ import annotations

import base64

import pytest

from repo_similarity.domain.entities import FileContent, RepositoryInfo, TreeEntry
from repo_similarity.domain.exceptions import RepositoryNotFoundError
from repo_similarity.domain.value_objects import RepositoryReference


def make_info(full_name: str, **overrides) -> RepositoryInfo:
    owner, name = full_name.split("/")
    fields = {
        "name": name,
        "full_name": full_name,
        "owner": owner,
        "html_url": f"https://github.com/{full_name}",
    }
    fields.update(overrides)
    return RepositoryInfo(**fields)


def blobs(*paths: str, size: int = 10) -> list[TreeEntry]:
    return [TreeEntry(path=p, type="blob", size=size) for p in paths]


class FakeFetcher:
    """RepoFetcher backed by dictionaries; records every tree and search call."""

    def __init__(
        self,
        repos: dict[str, RepositoryInfo] | None = None,
        trees: dict[tuple[str, str], list[TreeEntry]] | None = None,
        files: dict[tuple[str, str], str] | None = None,
        search_results: list[RepositoryInfo] | None = None,
    ) -> None:
        self.repos = repos or {}
        self.trees = trees or {}
        self.files = files or {}
        self.search_results = search_results or []
        self.tree_calls: list[tuple[str, str]] = []
        self.content_calls: list[tuple[str, str]] = []
        self.search_calls: list[tuple[str, int]] = []

    async def fetch_repo_info(self, ref: RepositoryReference) -> RepositoryInfo:
        try:
            return self.repos[ref.full_name]
        except KeyError:
            raise RepositoryNotFoundError(f"Repository {ref.full_name} not found.") from None

    async def fetch_tree(self, ref: RepositoryReference, branch: str) -> list[TreeEntry]:
        self.tree_calls.append((ref.full_name, branch))
        try:
            return self.trees[(ref.full_name, branch)]
        except KeyError:
            raise RepositoryNotFoundError(f"Branch '{branch}' of {ref.full_name} not found.") from None

    async def fetch_file_content(self, ref: RepositoryReference, path: str) -> FileContent:
        self.content_calls.append((ref.full_name, path))
        try:
            text = self.files[(ref.full_name, path)]
        except KeyError:
            raise RepositoryNotFoundError(f"File '{path}' not found.") from None
        encoded = base64.b64encode(text.encode("utf-8")).decode("ascii")
        return FileContent(path=path, content=encoded, encoding="base64")

    async def search_repositories(self, query: str, limit: int) -> list[RepositoryInfo]:
        self.search_calls.append((query, limit))
        return self.search_results[:limit]


@pytest.fixture()
def fake_fetcher() -> FakeFetcher:
    """Two small repositories: ``alice/one`` on main, ``bob/two`` on master only."""
    return FakeFetcher(
        repos={
            "alice/one": make_info("alice/one", language="JavaScript", stars=42),
            "bob/two": make_info("bob/two", default_branch="master"),
        },
        trees={
            ("alice/one", "main"): [
                TreeEntry(path="src", type="tree"),
                *blobs("src/index.js", "src/util.js", "README.md", "node_modules/dep/index.js"),
            ],
            ("bob/two", "master"): blobs("lib/index.js", "lib/other.js"),
        },
        files={
            ("alice/one", "src/index.js"): "const a = 1; // entry point\n",
            ("bob/two", "lib/index.js"): "const   a = 1;",
            ("bob/two", "lib/other.js"): "module.exports = {};",
        },
    )
