"""Immutable dataclasses shared by the clients, sources and MCP tools.

Includes the repository tree models (RepositoryReference, TreeEntry,
BranchAttempt), the generation results (Citation, PreparedInfographic)
and the in-memory history record (HistoryItem).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Literal, Optional, Tuple


SourceKind = Literal["repo", "article"]
HistoryKind = Literal["repo", "article", "edit"]


@dataclass(frozen=True)
class ApiCredentials:
    """Credentials handed to the network clients by the caller."""

    github_token: Optional[str] = None
    gemini_api_key: Optional[str] = None


@dataclass(frozen=True, slots=True)
class RepositoryReference:
    owner: str
    repo: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"


@dataclass(frozen=True, slots=True)
class TreeEntry:
    # One item of the Git Trees API response ("blob", "tree", "commit", ...)
    path: str
    type: str


class BranchOutcome(str, Enum):
    SUCCESS = "success"
    NOT_FOUND = "not_found"
    RATE_LIMITED = "rate_limited"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class BranchAttempt:
    """Tagged result of requesting the tree of one candidate branch."""

    branch: str
    outcome: BranchOutcome
    entries: Tuple[TreeEntry, ...] = ()
    truncated: bool = False
    status_code: Optional[int] = None
    detail: str = ""
    retry_after: Optional[int] = None


@dataclass(frozen=True, slots=True)
class Citation:
    uri: str
    title: str = ""


@dataclass(frozen=True)
class PreparedInfographic:
    """Everything needed to request an image and record it afterwards.

    Field groups:
    - Common: kind, title, source, prompt, style, language
    - Repo: files (truncated copy kept for follow-up questions), is_3d
    - Article: citations
    """

    kind: SourceKind
    title: str
    source: str
    prompt: str
    style: str
    language: str

    files: Tuple[str, ...] = ()
    is_3d: bool = False

    citations: Tuple[Citation, ...] = ()


@dataclass(frozen=True)
class HistoryItem:
    id: str
    kind: HistoryKind
    title: str
    source: str
    image_png: bytes = field(repr=False)

    style: str = ""
    language: str = "English"
    is_3d: bool = False
    files: Tuple[str, ...] = ()
    citations: Tuple[Citation, ...] = ()
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def summary(self) -> dict:
        """JSON-friendly metadata (no image bytes)."""
        return {
            "id": self.id,
            "kind": self.kind,
            "title": self.title,
            "source": self.source,
            "style": self.style,
            "language": self.language,
            "is_3d": self.is_3d,
            "file_count": len(self.files),
            "citations": [{"uri": c.uri, "title": c.title} for c in self.citations],
            "created_at": self.created_at.isoformat(),
        }
