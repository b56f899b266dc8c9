import asyncio

import pytest

from conftest import FakeFetcher, blobs
from repo_similarity.domain.exceptions import GitHubRateLimitError, RepositoryNotFoundError
from repo_similarity.domain.value_objects import RepositoryReference
from repo_similarity.services.tree_fetcher import BranchFallbackPolicy, fetch_tree

REF = RepositoryReference(owner="octo", name="cat")


def test_main_is_used_when_present():
    fetcher = FakeFetcher(trees={("octo/cat", "main"): blobs("a.py")})
    tree = asyncio.run(fetch_tree(fetcher, REF))
    assert [e.path for e in tree] == ["a.py"]
    assert fetcher.tree_calls == [("octo/cat", "main")]


def test_missing_main_falls_back_to_master_once():
    fetcher = FakeFetcher(trees={("octo/cat", "master"): blobs("b.py")})
    tree = asyncio.run(fetch_tree(fetcher, REF, "main"))
    assert [e.path for e in tree] == ["b.py"]
    assert fetcher.tree_calls == [("octo/cat", "main"), ("octo/cat", "master")]


def test_second_failure_propagates_master_error():
    fetcher = FakeFetcher()
    with pytest.raises(RepositoryNotFoundError, match="'master'") as excinfo:
        asyncio.run(fetch_tree(fetcher, REF, "main"))
    assert excinfo.value.status_code == 404
    assert fetcher.tree_calls == [("octo/cat", "main"), ("octo/cat", "master")]


def test_other_branches_are_not_retried():
    fetcher = FakeFetcher()
    with pytest.raises(RepositoryNotFoundError, match="'develop'"):
        asyncio.run(fetch_tree(fetcher, REF, "develop"))
    assert fetcher.tree_calls == [("octo/cat", "develop")]


def test_rate_limit_is_not_retried():
    class RateLimited(FakeFetcher):
        async def fetch_tree(self, ref, branch):
            self.tree_calls.append((ref.full_name, branch))
            raise GitHubRateLimitError("GitHub API rate limit exceeded.")

    fetcher = RateLimited()
    with pytest.raises(GitHubRateLimitError) as excinfo:
        asyncio.run(fetch_tree(fetcher, REF, "main"))
    assert excinfo.value.status_code == 403
    assert fetcher.tree_calls == [("octo/cat", "main")]


def test_custom_policy():
    fetcher = FakeFetcher(trees={("octo/cat", "trunk"): blobs("c.py")})
    policy = BranchFallbackPolicy(primary="default", fallback="trunk")
    tree = asyncio.run(fetch_tree(fetcher, REF, "default", policy))
    assert [e.path for e in tree] == ["c.py"]
