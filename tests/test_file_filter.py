from repo_similarity.domain.entities import TreeEntry
from repo_similarity.services.file_filter import filter_code_files, is_code_file, repo_stats


def _blob(path: str) -> TreeEntry:
    return TreeEntry(path=path, type="blob", size=1)


TREE = [
    TreeEntry(path="src", type="tree"),
    _blob("src/main.rs"),
    _blob("README.md"),
    _blob("node_modules/left-pad/index.js"),
    _blob("contracts/Token.sol"),
    _blob(".git/hooks/pre-commit.py"),
    _blob("dist/bundle.js"),
    _blob("packages/web/build/out.js"),
    _blob(".vscode/settings.ts"),
    _blob("app/models.py"),
    _blob("logo.png"),
]


def test_keeps_code_files_in_tree_order():
    kept = [e.path for e in filter_code_files(TREE)]
    assert kept == ["src/main.rs", "contracts/Token.sol", "app/models.py"]


def test_directories_are_never_code_files():
    assert not is_code_file(TreeEntry(path="lib.rs", type="tree"))


def test_excluded_directories_win_over_extension():
    assert not is_code_file(_blob("web/node_modules/react/index.js"))
    assert not is_code_file(_blob(".git/objects/x.py"))
    assert is_code_file(_blob("crates/core/lib.rs"))
    assert is_code_file(_blob("Vault.sol"))


def test_filter_is_idempotent():
    once = filter_code_files(TREE)
    assert filter_code_files(once) == once


def test_repo_stats_counts_extensions():
    stats = repo_stats([_blob("a.py"), _blob("b.py"), _blob("c.js"), _blob("notes.txt")])
    assert stats.total_files == 3
    assert stats.languages == {"py": 2, "js": 1}
    assert stats.top_language == "py"


def test_repo_stats_tie_keeps_last_seen():
    assert repo_stats([_blob("a.js"), _blob("b.py")]).top_language == "py"
    assert repo_stats([_blob("a.py"), _blob("b.js"), _blob("c.js"), _blob("d.py")]).top_language == "js"


def test_repo_stats_empty_tree():
    stats = repo_stats([])
    assert stats.total_files == 0
    assert stats.top_language == ""
