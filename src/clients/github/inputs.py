from __future__ import annotations

import re
from typing import Iterable, Optional, Tuple
from urllib.parse import urlparse

from core.errors import ValidationError
from core.models import RepositoryReference
from core.paths import normalize_posix_relpath, split_posix


INVALID_REPO_INPUT = 'Invalid format. Use "owner/repo" or a full GitHub URL.'

_GITHUB_HOSTS = frozenset({"github.com", "www.github.com"})
_NAME_RE = re.compile(r"^[A-Za-z0-9_.-]+$")


def _reference(owner: str, repo: str) -> RepositoryReference:
    owner = owner.strip()
    repo = repo.strip()
    if repo.endswith(".git"):
        repo = repo[: -len(".git")]
    if not owner or not repo or not _NAME_RE.match(owner) or not _NAME_RE.match(repo):
        raise ValidationError(INVALID_REPO_INPUT)
    return RepositoryReference(owner=owner, repo=repo)


def parse_repo_input(repo_input: str) -> RepositoryReference:
    """Parse a bare "owner/repo" token or a github.com URL.

    For URLs the first two non-empty path segments are used, so links to a
    blob or tree inside the repository are accepted as well.
    """
    raw = (repo_input or "").strip().rstrip("/")
    if not raw:
        raise ValidationError(INVALID_REPO_INPUT)

    if "://" in raw:
        parsed = urlparse(raw)
        if parsed.scheme not in ("http", "https") or (parsed.hostname or "").lower() not in _GITHUB_HOSTS:
            raise ValidationError(INVALID_REPO_INPUT)
        parts = split_posix(parsed.path)
        if len(parts) < 2:
            raise ValidationError(INVALID_REPO_INPUT)
        return _reference(parts[0], parts[1])

    # "github.com/owner/repo" without a scheme
    parts = split_posix(normalize_posix_relpath(raw))
    if parts and parts[0].lower() in _GITHUB_HOSTS:
        parts = parts[1:3] if len(parts) >= 3 else ()

    if len(parts) != 2:
        raise ValidationError(INVALID_REPO_INPUT)
    return _reference(parts[0], parts[1])


def try_parse_repo_input(repo_input: str) -> Optional[RepositoryReference]:
    try:
        return parse_repo_input(repo_input)
    except ValidationError:
        return None


def normalize_owner_repo(owner: str, repo: str) -> Tuple[str, str]:
    ref = _reference(owner or "", repo or "")
    return ref.owner, ref.repo


def normalize_branches(branches: Iterable[str]) -> Tuple[str, ...]:
    # Keep order, drop blanks and duplicates
    out = []
    for b in branches:
        name = (b or "").strip()
        if name and name not in out:
            out.append(name)
    if not out:
        raise ValidationError("At least one branch candidate is required")
    return tuple(out)
