"""Helpers for writing generated PNGs under the project root."""

from __future__ import annotations

import base64
import re
from pathlib import Path

from core.errors import AccessDeniedError, ValidationError


def sanitize_filename_stem(title: str, default: str = "infographic") -> str:
    # Safe filename: trim, remove unsafe chars, replace spaces, limit length
    s = (title or "").strip()
    if not s:
        return default
    s = re.sub(r"[^\w\s-]", "", s, flags=re.UNICODE)
    s = s.strip().replace(" ", "_")
    return s[:80] if s else default


def safe_out_dir(project_root: Path, out_dir: str) -> Path:
    # Resolve and enforce output dir is inside project_root
    raw = (out_dir or "").strip() or "infographics"
    p = Path(raw)
    root = project_root.resolve()
    resolved = (p if p.is_absolute() else (root / p)).resolve()

    try:
        resolved.relative_to(root)
    except ValueError as e:
        raise AccessDeniedError("INFOGRAPHIC_OUT_DIR must be within PROJECT_ROOT") from e

    return resolved


def save_png(png: bytes, *, project_root: Path, out_dir: str, stem: str) -> Path:
    target_dir = safe_out_dir(project_root, out_dir)
    target_dir.mkdir(parents=True, exist_ok=True)
    path = target_dir / f"{stem}.png"
    path.write_bytes(png)
    return path


def decode_base64_image(data: str) -> bytes:
    """Decode a base64 payload, tolerating a data: URL prefix."""
    raw = (data or "").strip()
    if raw.startswith("data:") and "," in raw:
        raw = raw.split(",", 1)[1]
    if not raw:
        raise ValidationError("Image data is empty")
    try:
        return base64.b64decode(raw, validate=True)
    except ValueError as e:
        raise ValidationError("Image data is not valid base64") from e
