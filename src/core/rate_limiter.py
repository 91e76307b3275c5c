"""Utility to interpret GitHub throttling signals.

This encapsulates simple GitHub-relevant logic:
- 403 and 429 responses mean the request was throttled (primary or
  secondary rate limit); they are never retried within a call.
- Retry-After (seconds) or X-RateLimit-Reset (epoch seconds) refine the
  user-facing "try again later" message when present.
"""

from __future__ import annotations

import time
from typing import Mapping, Optional

import httpx


RATE_LIMIT_STATUSES = frozenset({403, 429})

DEFAULT_RATE_LIMIT_MESSAGE = (
    "GitHub API rate limit exceeded. Please try again later (usually resets in an hour)."
)


class RateLimiter:
    # GitHub rate-limit / throttle inspection
    def is_rate_limited(self, response: httpx.Response) -> bool:
        return response.status_code in RATE_LIMIT_STATUSES

    def retry_after_seconds(self, response: httpx.Response) -> Optional[int]:
        # Seconds until the limit lifts, when the server says so
        retry_after = self._parse_int_header(response.headers, "Retry-After")
        if retry_after is not None:
            return retry_after

        if response.headers.get("X-RateLimit-Remaining") == "0":
            reset = self._parse_int_header(response.headers, "X-RateLimit-Reset")
            if reset is not None:
                return max(0, reset - int(time.time())) + 1

        return None

    def message(self, retry_after: Optional[int]) -> str:
        if retry_after is None:
            return DEFAULT_RATE_LIMIT_MESSAGE
        minutes = max(1, -(-int(retry_after) // 60))
        unit = "minute" if minutes == 1 else "minutes"
        return f"GitHub API rate limit exceeded. Please try again in about {minutes} {unit}."

    def _parse_int_header(self, headers: Mapping[str, str], name: str) -> Optional[int]:
        value = headers.get(name)
        if not value:
            return None
        value = value.strip()
        if not value.isdigit():
            return None
        try:
            return int(value)
        except ValueError:
            return None
