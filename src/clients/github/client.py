"""GitHub client module: resolve a repository's file tree for prompting.

This module provides a small async client focused on one operation used by
the server: listing the relevant source/config files of a repository via the
Git Trees API when the default branch is unknown. Branch probing lives in
`refs`, the relevance filter in `core.paths`, and throttling detection in
`core.rate_limiter`.
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional, Sequence

import httpx

from core.logging import get_logger
from core.models import TreeEntry
from core.paths import filter_tree
from core.rate_limiter import RateLimiter

from .inputs import normalize_branches, normalize_owner_repo
from .refs import DEFAULT_BRANCH_CANDIDATES, resolve_branch_tree

logger = get_logger("github.client")


class GitHubClient:
    """Async GitHub client for resolving filtered repository file trees.

    Purpose:
      - resolve(owner, repo) -> List[TreeEntry]

    Key behavior:
      - Candidate branches are tried strictly in order, one request each.
      - A rate-limit response stops the resolution immediately (no retry).
      - The token is passed in by the caller; nothing is read from the environment.
      - Every request carries an explicit timeout.
    """

    BASE_URL = "https://api.github.com"
    JSON_ACCEPT = "application/vnd.github+json"
    API_VERSION = "2022-11-28"

    def __init__(
        self,
        *,
        token: Optional[str] = None,
        timeout: float = 10.0,
        verify: bool = True,
        branch_candidates: Sequence[str] = DEFAULT_BRANCH_CANDIDATES,
        rate_limiter: Optional[RateLimiter] = None,
    ) -> None:
        self._timeout = float(timeout)
        self._verify = bool(verify)
        self._branches = normalize_branches(branch_candidates)
        self._rate_limiter = rate_limiter or RateLimiter()

        self._headers = self._build_headers(token)

    @property
    def branch_candidates(self) -> tuple:
        return self._branches

    async def resolve(self, owner: str, repo: str) -> List[TreeEntry]:
        """Return the filtered file list of the first candidate branch that exists."""
        owner_clean, repo_clean = normalize_owner_repo(owner, repo)

        async with self._create_client() as client:
            attempt = await resolve_branch_tree(
                self._request,
                client,
                owner=owner_clean,
                repo=repo_clean,
                branches=self._branches,
                rate_limiter=self._rate_limiter,
            )

        files = filter_tree(attempt.entries)
        logger.info(
            "Resolved %s/%s@%s: %d of %d tree entries kept",
            owner_clean, repo_clean, attempt.branch, len(files), len(attempt.entries),
        )
        return files

    # --- HTTP helpers ---

    def _build_headers(self, token: Optional[str]) -> dict[str, str]:
        headers = {
            "Accept": self.JSON_ACCEPT,
            "User-Agent": "repo-infographic-mcp",
            "X-GitHub-Api-Version": self.API_VERSION,
        }
        # A token raises the unauthenticated 60 req/h limit
        token_clean = (token or "").strip()
        if token_clean:
            headers["Authorization"] = f"Bearer {token_clean}"
        return headers

    def _create_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.BASE_URL,
            headers=self._headers,
            timeout=self._timeout,
            verify=self._verify,
        )

    async def _request(
        self,
        client: httpx.AsyncClient,
        url: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
    ) -> httpx.Response:
        """Single GET; transport errors propagate to the branch classifier."""
        return await client.get(url, params=dict(params or {}))
