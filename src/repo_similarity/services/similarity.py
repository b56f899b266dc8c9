"""Text similarity scoring — normalisation, edit distance and file-pair matching.

Files are only paired across repositories when their base filename or full
path is identical.  A renamed file with identical content is therefore never
compared; detecting renames would need content fingerprints over all pairs.
"""

from __future__ import annotations

import logging
import math
import re
from collections import Counter
from typing import Protocol, Sequence

from repo_similarity.domain.entities import FilePairScore, RepositorySimilarityResult

logger = logging.getLogger(__name__)

INCLUSION_THRESHOLD = 30.0
TOP_PAIRS = 10

# C-family comment markers only; string literals containing "//" or "/*" are
# stripped as well.
_LINE_COMMENT_RE = re.compile(r"//.*")
_BLOCK_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)
_WHITESPACE_RE = re.compile(r"\s+")


class SourceFile(Protocol):
    path: str
    content: str


def normalize_code(code: str) -> str:
    """Drop ``//`` and ``/* */`` comments and collapse whitespace runs."""
    code = _LINE_COMMENT_RE.sub("", code)
    code = _BLOCK_COMMENT_RE.sub("", code)
    code = _WHITESPACE_RE.sub(" ", code)
    return code.strip()


def levenshtein_distance(a: str, b: str) -> int:
    """Classic unit-cost edit distance over a full DP table."""
    rows, cols = len(a) + 1, len(b) + 1
    table = [[0] * cols for _ in range(rows)]
    for i in range(rows):
        table[i][0] = i
    for j in range(cols):
        table[0][j] = j

    for i in range(1, rows):
        for j in range(1, cols):
            if a[i - 1] == b[j - 1]:
                table[i][j] = table[i - 1][j - 1]
            else:
                table[i][j] = 1 + min(
                    table[i - 1][j - 1],  # substitution
                    table[i][j - 1],      # insertion
                    table[i - 1][j],      # deletion
                )
    return table[-1][-1]


def calculate_similarity(a: str, b: str) -> float:
    """Length-normalised similarity percentage in ``[0, 100]``."""
    if a == b:
        return 100.0
    if not a or not b:
        return 0.0

    distance = levenshtein_distance(a, b)
    longest = max(len(a), len(b))
    similarity = 100 * (longest - distance) / longest
    return max(0.0, min(100.0, similarity))


def compare_code_files(content1: str, content2: str, normalize: bool = True) -> float:
    if normalize:
        content1 = normalize_code(content1)
        content2 = normalize_code(content2)
    return calculate_similarity(content1, content2)


def _basename(path: str) -> str:
    return path.rsplit("/", maxsplit=1)[-1]


def calculate_repo_similarity(
    files1: Sequence[SourceFile],
    files2: Sequence[SourceFile],
) -> RepositorySimilarityResult:
    """Score every same-name (or same-path) file pair across two file sets.

    Pairs at or below :data:`INCLUSION_THRESHOLD` are discarded.  The overall
    score is the mean over *all* kept pairs, rounded to two decimals; only the
    best :data:`TOP_PAIRS` are returned for display.
    """
    pairs: list[FilePairScore] = []

    for f1 in files1:
        name1 = _basename(f1.path)
        for f2 in files2:
            if name1 != _basename(f2.path) and f1.path != f2.path:
                continue
            similarity = compare_code_files(f1.content, f2.content)
            if similarity > INCLUSION_THRESHOLD:
                pairs.append(FilePairScore(file1=f1.path, file2=f2.path, similarity=similarity))

    overall = sum(p.similarity for p in pairs) / len(pairs) if pairs else 0.0
    pairs.sort(key=lambda p: p.similarity, reverse=True)

    logger.debug(
        "Matched %d file pair(s) out of %d × %d files", len(pairs), len(files1), len(files2)
    )

    return RepositorySimilarityResult(
        overall_similarity=round(overall, 2),
        file_pairs=pairs[:TOP_PAIRS],
        matched_files=len(pairs),
        total_files1=len(files1),
        total_files2=len(files2),
    )


def cosine_similarity(text1: str, text2: str) -> float:
    """Bag-of-words cosine similarity as a percentage."""
    words1 = Counter(text1.lower().split())
    words2 = Counter(text2.lower().split())

    dot = sum(count * words2[word] for word, count in words1.items())
    magnitude1 = math.sqrt(sum(c * c for c in words1.values()))
    magnitude2 = math.sqrt(sum(c * c for c in words2.values()))

    if magnitude1 == 0 or magnitude2 == 0:
        return 0.0
    return dot / (magnitude1 * magnitude2) * 100
