from __future__ import annotations

from typing import Optional, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from core.models import BranchAttempt


class InfographicError(Exception):
    """Base error for the infographic server."""


class ValidationError(InfographicError):
    """Raised when user input is invalid."""


class AccessDeniedError(InfographicError):
    """Raised when an operation tries to access data outside allowed scope."""


class ExternalServiceError(InfographicError):
    """Raised when an external service (GitHub/Gemini) fails."""


class GenerationError(InfographicError):
    """Raised when the generation API answers without the requested image."""


class NotFoundError(InfographicError):
    """Raised when a requested resource is not found.

    For tree resolution, `attempts` holds the outcome of every branch tried.
    """

    def __init__(self, message: str, *, attempts: Sequence["BranchAttempt"] = ()) -> None:
        super().__init__(message)
        self.attempts = tuple(attempts)


class RateLimitedError(InfographicError):
    """Raised when GitHub reports throttling; the caller must wait, not retry."""

    def __init__(self, message: str, *, retry_after: Optional[int] = None) -> None:
        super().__init__(message)
        self.retry_after = retry_after
