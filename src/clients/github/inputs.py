from __future__ import annotations

from typing import Iterable, Optional, Tuple

from core.errors import ValidationError
from core.models import RenamePolicy


_RENAME_POLICIES = ("added", "modified")


def normalize_name(value: Optional[str], *, field: str) -> str:
    # Owner / repository names: trimmed, non-empty, no path separators
    name = (value or "").strip()
    if not name:
        raise ValidationError(f"{field} must be non-empty")
    if "/" in name:
        raise ValidationError(f"{field} must not contain '/': {name}")
    return name


def normalize_repositories(repositories: Optional[Iterable[str]]) -> Tuple[str, ...]:
    repos = tuple(normalize_name(r, field="repository") for r in (repositories or ()))
    if not repos:
        raise ValidationError("At least one repository is required")
    return repos


def normalize_ref(ref: Optional[str]) -> str:
    ref_clean = (ref or "main").strip()
    if not ref_clean:
        raise ValidationError("ref must be non-empty")
    if ":" in ref_clean:
        raise ValidationError(f"ref must not contain ':': {ref_clean}")
    return ref_clean


def normalize_filter_path(path: Optional[str]) -> str:
    # Keep the prefix as GitHub reports file names:
    # - Convert "\" to "/"
    # - Drop leading "/" and repeated "./"
    # - "" and "." mean repository root
    p = (path or "").strip().replace("\\", "/").lstrip("/")
    while p.startswith("./"):
        p = p[2:]
    if p == ".":
        return ""
    return p


def normalize_file_types(file_types: Optional[Iterable[str]]) -> Tuple[str, ...]:
    return tuple(t.strip() for t in (file_types or ()) if t and t.strip())


def normalize_rename_policy(policy: Optional[str]) -> RenamePolicy:
    p = (policy or "added").strip().lower()
    if p not in _RENAME_POLICIES:
        raise ValidationError(f"rename_policy must be one of {_RENAME_POLICIES}, got: {policy}")
    return p  # type: ignore[return-value]


def normalize_hours(hours_since: int) -> int:
    # No coercion: 1.9 or "24" are rejected rather than truncated or parsed
    if isinstance(hours_since, bool) or not isinstance(hours_since, int):
        raise ValidationError(f"hours_since must be an integer: {hours_since!r}")
    if hours_since < 0:
        raise ValidationError("hours_since must not be negative")
    return hours_since
