"""Configuration and environment helpers for the project.

Provides small helpers to read typed environment variables and exposes
project-level configuration constants used across the codebase (e.g.
PROJECT_ROOT, HTTP_VERIFY, GitHub/Gemini timeouts, model names and limits).
Credentials are not exposed as constants: `load_credentials()` builds them
once and the server hands them to the clients explicitly.
"""

from __future__ import annotations

import os
from pathlib import Path

from core.models import ApiCredentials


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return float(raw.strip())
    except ValueError:
        return default


def _env_str(*names: str) -> str:
    # First non-empty variable wins
    for name in names:
        value = (os.environ.get(name) or "").strip()
        if value:
            return value
    return ""


def load_credentials() -> ApiCredentials:
    """Read API credentials from the environment into an immutable value."""
    return ApiCredentials(
        github_token=_env_str("GITHUB_TOKEN") or None,
        gemini_api_key=_env_str("GEMINI_API_KEY", "GOOGLE_API_KEY", "API_KEY") or None,
    )


# Project root for the output directory boundary
PROJECT_ROOT = Path(os.environ.get("PROJECT_ROOT", ".")).resolve()

# Network / HTTP
HTTP_VERIFY = _env_bool("HTTP_VERIFY", True)

# GitHub
GITHUB_TIMEOUT = _env_float("GITHUB_TIMEOUT", 10.0)

# Gemini
GEMINI_IMAGE_MODEL = os.environ.get("GEMINI_IMAGE_MODEL", "gemini-3-pro-image-preview").strip()
GEMINI_TEXT_MODEL = os.environ.get("GEMINI_TEXT_MODEL", "gemini-3-pro-preview").strip()
GEMINI_TIMEOUT = _env_float("GEMINI_TIMEOUT", 120.0)

# Limits / output
HISTORY_MAX_ITEMS = _env_int("HISTORY_MAX_ITEMS", 50)
INFOGRAPHIC_OUT_DIR = os.environ.get("INFOGRAPHIC_OUT_DIR", "infographics").strip()
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO"
