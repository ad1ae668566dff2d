"""
Path utilities used by the collectors.

Provides the suffix filter applied to listed paths, the prefix test used
for changed files, and helpers to build GraphQL tree expressions.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence


def has_file_type(path: str, file_types: Iterable[str]) -> bool:
    """Return True if `path` ends with any of `file_types`."""
    return any(path.endswith(file_type) for file_type in file_types)


def filter_by_file_types(paths: Sequence[str], file_types: Sequence[str]) -> List[str]:
    """Keep paths ending with one of `file_types`, preserving order.

    An empty `file_types` means no filter is configured: every path is kept.
    """
    if not file_types:
        return list(paths)
    return [p for p in paths if has_file_type(p, file_types)]


def is_under_prefix(path: str, prefix: str) -> bool:
    # Plain string prefix; "" matches everything
    return path.startswith(prefix)


def tree_expression(branch: str, path: str) -> str:
    """Build a `<rev>:<path>` expression for GraphQL `object(expression:)`."""
    return f"{branch}:{path}"


def child_expression(expression: str, name: str) -> str:
    """Expression for child `name` of the tree at `expression`.

    `main:` (repository root) becomes `main:name`, not `main:/name`.
    """
    base = expression.rstrip("/")
    if base.endswith(":"):
        return f"{base}{name}"
    return f"{base}/{name}"
