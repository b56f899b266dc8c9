"""Code-file filtering — decide which tree entries are worth comparing."""

from __future__ import annotations

import re
from collections import Counter

from repo_similarity.domain.entities import RepoStats, TreeEntry

CODE_EXTENSIONS: tuple[str, ...] = (
    ".js", ".ts", ".jsx", ".tsx", ".py", ".java", ".cpp", ".c", ".h",
    ".go", ".rs", ".rb", ".php",
    ".sol", ".vy", ".move", ".cairo",  # smart contracts
    ".cs", ".swift", ".kt", ".scala", ".r", ".m", ".mm",
)

# Matched anywhere in the path, so nested vendored directories are caught too.
IGNORE_PATTERNS: tuple[re.Pattern[str], ...] = (
    re.compile(r"node_modules"),
    re.compile(r"\.git/"),
    re.compile(r"dist/"),
    re.compile(r"build/"),
    re.compile(r"\.next/"),
    re.compile(r"coverage/"),
    re.compile(r"\.cache/"),
    re.compile(r"\.vscode/"),
    re.compile(r"\.idea/"),
)


def _is_ignored(path: str) -> bool:
    return any(pattern.search(path) for pattern in IGNORE_PATTERNS)


def _has_code_extension(path: str) -> bool:
    return path.endswith(CODE_EXTENSIONS)


def is_code_file(entry: TreeEntry) -> bool:
    """Return *True* if *entry* is a blob with a source extension outside ignored dirs."""
    if entry.type != "blob":
        return False
    if _is_ignored(entry.path):
        return False
    return _has_code_extension(entry.path)


def filter_code_files(entries: list[TreeEntry]) -> list[TreeEntry]:
    """Keep only code files, preserving the tree order."""
    return [entry for entry in entries if is_code_file(entry)]


def repo_stats(entries: list[TreeEntry]) -> RepoStats:
    """Count code files per extension and pick the most common one."""
    languages: Counter[str] = Counter()
    code_files = filter_code_files(entries)
    for entry in code_files:
        ext = entry.path.rsplit(".", maxsplit=1)[-1]
        if ext:
            languages[ext] += 1

    top_language = ""
    for ext, count in languages.items():
        if not top_language or count >= languages[top_language]:
            top_language = ext

    return RepoStats(
        total_files=len(code_files),
        languages=dict(languages),
        top_language=top_language,
    )
