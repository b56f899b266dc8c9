"""Value objects — self-validating domain primitives."""

from __future__ import annotations

import re
from dataclasses import dataclass

from repo_similarity.domain.exceptions import InvalidReferenceFormatError

_GITHUB_URL_RE = re.compile(r"github\.com/(?P<owner>[^/]+)/(?P<repo>[^/]+)")
_SHORT_FORM_RE = re.compile(r"^(?P<owner>[^/]+)/(?P<repo>[^/]+)$")


@dataclass(frozen=True, slots=True)
class RepositoryReference:
    """An ``owner/name`` pair identifying a GitHub repository.

    Accepts either a web URL containing ``github.com/<owner>/<repo>``
    (optionally ending in ``/`` or ``.git``) or the bare ``<owner>/<repo>``
    short form.  Segments are kept verbatim: no case folding and no
    percent-decoding.
    """

    owner: str
    name: str

    @classmethod
    def parse(cls, text: str) -> RepositoryReference | None:
        """Return the reference, or ``None`` when *text* matches neither form."""
        if not isinstance(text, str):
            return None

        cleaned = text.strip()
        if cleaned.endswith("/"):
            cleaned = cleaned[:-1]
        if cleaned.endswith(".git"):
            cleaned = cleaned[: -len(".git")]

        match = _GITHUB_URL_RE.search(cleaned) or _SHORT_FORM_RE.match(cleaned)
        if not match:
            return None
        return cls(owner=match["owner"], name=match["repo"])

    @classmethod
    def from_string(cls, text: str) -> RepositoryReference:
        """Parse *text* or raise :class:`InvalidReferenceFormatError`."""
        ref = cls.parse(text)
        if ref is None:
            raise InvalidReferenceFormatError(
                f"Invalid repository reference: '{text}'. "
                "Expected https://github.com/<owner>/<repo> or <owner>/<repo>"
            )
        return ref

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"
