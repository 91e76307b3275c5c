"""Factory for selecting the appropriate InfographicSource implementation.

Exposes get_infographic_source which returns either a RepoSource or an
ArticleSource based on the requested kind or the shape of the target.
"""

from __future__ import annotations

from typing import Optional
from urllib.parse import urlparse

from clients.github import GitHubClient, try_parse_repo_input
from clients.github.inputs import INVALID_REPO_INPUT
from core.errors import ValidationError
from core.interfaces import ImageModel, InfographicSource
from core.models import SourceKind
from sources.article_source import ArticleSource
from sources.repo_source import RepoSource


def get_infographic_source(
    target: str,
    *,
    kind: Optional[SourceKind] = None,
    github_client: GitHubClient,
    model: ImageModel,
) -> InfographicSource:
    """
    Factory that returns the correct InfographicSource implementation.

    Priority Logic:
    1. kind == "repo" -> RepoSource (target must parse as owner/repo or GitHub URL).
    2. kind == "article" -> ArticleSource.
    3. Target parses as a repository reference -> RepoSource. Every
       github.com/<a>/<b> URL counts, including non-repository pages such as
       github.com/features/copilot; pass kind="article" for those.
    4. Any other http(s) URL -> ArticleSource.
    """
    raw = (target or "").strip()
    if not raw:
        raise ValidationError("Missing target (owner/repo, GitHub URL or article URL)")

    if kind == "repo":
        return RepoSource(client=github_client, repo_input=raw)
    if kind == "article":
        return ArticleSource(model=model, url=raw)
    if kind is not None:
        raise ValidationError(f"Unknown source kind: {kind}")

    ref = try_parse_repo_input(raw)
    if ref is not None:
        return RepoSource(client=github_client, reference=ref)

    if urlparse(raw).scheme in ("http", "https"):
        return ArticleSource(model=model, url=raw)

    raise ValidationError(INVALID_REPO_INPUT)
