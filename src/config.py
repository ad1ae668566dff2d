"""Configuration and environment helpers for the project.

Provides small helpers to read typed environment variables and exposes
project-level configuration constants used across the codebase (e.g.
GITHUB_API_URL, HTTP_VERIFY, timeouts and the default collector scope).
"""

from __future__ import annotations

import os
from typing import Tuple


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


def _env_list(name: str) -> Tuple[str, ...]:
    # Comma separated, blanks dropped: "a, b,,c" -> ("a", "b", "c")
    raw = os.environ.get(name) or ""
    return tuple(item.strip() for item in raw.split(",") if item.strip())


# Network / HTTP
HTTP_VERIFY = _env_bool("HTTP_VERIFY", True)

# GitHub
GITHUB_API_URL = os.environ.get("GITHUB_API_URL", "https://api.github.com").strip()
GITHUB_TIMEOUT = _env_float("GITHUB_TIMEOUT", 20.0)
COMMITS_PER_PAGE = _env_int("COMMITS_PER_PAGE", 100)

# Default collector scope (tools fall back to these)
DEFAULT_OWNER = os.environ.get("COCO_OWNER", "").strip()
DEFAULT_REPOSITORIES = _env_list("COCO_REPOSITORIES")
DEFAULT_BRANCH = os.environ.get("COCO_BRANCH", "main").strip()
DEFAULT_FILTER_PATH = os.environ.get("COCO_FILTER_PATH", "").strip()
DEFAULT_FILE_TYPES = _env_list("COCO_FILE_TYPES")
RENAME_POLICY = os.environ.get("COCO_RENAME_POLICY", "added").strip()

# Logging
LOG_LEVEL = os.environ.get("LOG_LEVEL", "WARNING").strip().upper()
