from __future__ import annotations

from pathlib import PurePosixPath
from typing import Iterable, List, Tuple

from core.models import TreeEntry

"""
Path utilities used across the project.

Provides consistent POSIX-style normalization and the relevance filter that
reduces a raw repository tree to the source/config files worth describing
in a generation prompt.
"""


# General-purpose languages plus structured data / config / markup formats
SOURCE_EXTENSIONS = frozenset(
    {
        ".js", ".jsx", ".ts", ".tsx", ".py", ".go", ".rs", ".java",
        ".c", ".cpp", ".h", ".hpp", ".cs", ".php", ".rb", ".swift",
        ".kt", ".dart",
        ".json", ".yaml", ".yml", ".toml", ".xml", ".html", ".css",
    }
)

# Dependency vendor and compiled-output directories
EXCLUDED_DIR_SEGMENTS = frozenset({"node_modules", "dist", "build"})


def normalize_posix_relpath(p: str) -> str:
    """Normalize a user path to a clean POSIX relative path.

    Converts backslashes to '/', trims whitespace, removes leading '/'
    and repeated './' markers.
    """
    s = (p or "").strip()
    s = s.replace("\\", "/")        # Unify path separators across OSes.
    s = s.lstrip("/")               # Prevent accidental absolute paths.
    while s.startswith("./"):       # Drop repeated "./" prefixes.
        s = s[2:]
    return s


def split_posix(p: str) -> Tuple[str, ...]:
    """Split a POSIX path into non-empty segments."""
    s = (p or "").strip().replace("\\", "/").strip("/")
    if not s:
        return tuple()
    return tuple(seg for seg in s.split("/") if seg)


def has_source_extension(path: str) -> bool:
    return PurePosixPath(path).suffix.lower() in SOURCE_EXTENSIONS


def is_relevant_path(path: str) -> bool:
    """True for a source/config file outside vendor, build and hidden locations."""
    if not path or path.startswith("."):
        return False

    # Only directory segments are checked; a file may be called "build.py"
    dirs = split_posix(path)[:-1]
    if any(seg in EXCLUDED_DIR_SEGMENTS for seg in dirs):
        return False

    return has_source_extension(path)


def filter_tree(entries: Iterable[TreeEntry]) -> List[TreeEntry]:
    """Keep relevant blobs, preserving the order of the API response."""
    return [e for e in entries if e.type == "blob" and is_relevant_path(e.path)]
