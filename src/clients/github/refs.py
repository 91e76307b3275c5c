"""Default-branch probing for the Git Trees API.

Each candidate branch is requested once and classified into a tagged
`BranchAttempt`; the loop in `resolve_branch_tree` then decides per outcome
whether to stop (success, rate limit) or move on to the next candidate.
"""

from __future__ import annotations

from typing import Any, Awaitable, Callable, List, Mapping, Optional, Sequence, Tuple

import httpx

from core.errors import NotFoundError, RateLimitedError
from core.logging import get_logger
from core.models import BranchAttempt, BranchOutcome, TreeEntry
from core.rate_limiter import RateLimiter

RequestFn = Callable[..., Awaitable[httpx.Response]]

DEFAULT_BRANCH_CANDIDATES: Tuple[str, ...] = ("main", "master")
NOT_FOUND_STATUSES = frozenset({404, 422})

logger = get_logger("github.refs")

_rate_limiter = RateLimiter()


def _parse_tree(data: Any) -> Tuple[Tuple[TreeEntry, ...], bool]:
    if not isinstance(data, Mapping):
        raise ValueError("tree response is not a JSON object")
    tree = data.get("tree")
    if not isinstance(tree, list):
        raise ValueError("tree response has no 'tree' list")

    entries = tuple(
        TreeEntry(path=item["path"], type=str(item.get("type") or ""))
        for item in tree
        if isinstance(item, Mapping) and isinstance(item.get("path"), str)
    )
    return entries, bool(data.get("truncated"))


async def fetch_branch_tree(
    request: RequestFn,
    client: httpx.AsyncClient,
    *,
    owner: str,
    repo: str,
    branch: str,
    rate_limiter: Optional[RateLimiter] = None,
) -> BranchAttempt:
    """Request the recursive tree of one branch and classify the response."""
    limiter = rate_limiter or _rate_limiter
    url = f"/repos/{owner}/{repo}/git/trees/{branch}"

    try:
        resp = await request(client, url, params={"recursive": "1"})
    except httpx.HTTPError as e:
        return BranchAttempt(branch=branch, outcome=BranchOutcome.ERROR, detail=f"{type(e).__name__}: {e}")

    status = resp.status_code

    if limiter.is_rate_limited(resp):
        return BranchAttempt(
            branch=branch,
            outcome=BranchOutcome.RATE_LIMITED,
            status_code=status,
            retry_after=limiter.retry_after_seconds(resp),
        )

    if status in NOT_FOUND_STATUSES:
        return BranchAttempt(branch=branch, outcome=BranchOutcome.NOT_FOUND, status_code=status)

    if not resp.is_success:
        return BranchAttempt(branch=branch, outcome=BranchOutcome.ERROR, status_code=status, detail=f"HTTP {status}")

    try:
        entries, truncated = _parse_tree(resp.json())
    except ValueError as e:
        # json.JSONDecodeError is a ValueError too
        return BranchAttempt(branch=branch, outcome=BranchOutcome.ERROR, status_code=status, detail=f"malformed response: {e}")

    return BranchAttempt(
        branch=branch,
        outcome=BranchOutcome.SUCCESS,
        entries=entries,
        truncated=truncated,
        status_code=status,
    )


def not_found_message(owner: str, repo: str, attempts: Sequence[BranchAttempt]) -> str:
    checked = ", ".join(a.branch for a in attempts)
    message = (
        f"Failed to fetch repository {owner}/{repo}. It might be private, non-existent, "
        f"or using a non-standard default branch (checked: {checked})."
    )
    errors = [f"{a.branch}: {a.detail}" for a in attempts if a.outcome is BranchOutcome.ERROR]
    if errors:
        message += " Errors: " + "; ".join(errors) + "."
    return message


async def resolve_branch_tree(
    request: RequestFn,
    client: httpx.AsyncClient,
    *,
    owner: str,
    repo: str,
    branches: Sequence[str] = DEFAULT_BRANCH_CANDIDATES,
    rate_limiter: Optional[RateLimiter] = None,
) -> BranchAttempt:
    """Try candidate branches in order and return the first successful attempt.

    Raises RateLimitedError as soon as throttling is reported and
    NotFoundError once every candidate has been tried.
    """
    limiter = rate_limiter or _rate_limiter
    attempts: List[BranchAttempt] = []

    for branch in branches:
        attempt = await fetch_branch_tree(
            request, client, owner=owner, repo=repo, branch=branch, rate_limiter=limiter
        )
        attempts.append(attempt)

        if attempt.outcome is BranchOutcome.SUCCESS:
            if attempt.truncated:
                logger.warning(
                    "Tree for %s/%s@%s was truncated by the GitHub API; the file list is incomplete",
                    owner, repo, branch,
                )
            return attempt

        if attempt.outcome is BranchOutcome.RATE_LIMITED:
            # Not branch specific: the remaining candidates would fail the same way
            raise RateLimitedError(limiter.message(attempt.retry_after), retry_after=attempt.retry_after)

        if attempt.outcome is BranchOutcome.NOT_FOUND:
            logger.info("Branch %r not found for %s/%s (HTTP %s)", branch, owner, repo, attempt.status_code)
            continue

        logger.warning("Fetching tree for %s/%s@%s failed: %s", owner, repo, branch, attempt.detail)

    raise NotFoundError(not_found_message(owner, repo, attempts), attempts=attempts)
