"""Immutable dataclasses shared by the collectors and the GitHub adapter.

Includes the collector configuration (CollectorConfig, PathFilter), the
transient API records (TreeEntry, CommitFile, CommitDetail) and the
per-call change report (ChangedPaths).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Literal, Optional, Tuple


RenamePolicy = Literal["added", "modified"]


@dataclass(frozen=True)
class PathFilter:
    """Directory prefix plus allowed file suffixes.

    An empty `file_types` means "no suffix filter configured".
    """

    path: str = ""
    file_types: Tuple[str, ...] = ()


@dataclass(frozen=True)
class CollectorConfig:
    """Repositories and filters a ContentCollector works on.

    Field groups:
    - Scope: owner, repositories, default_branch
    - Filter: filter
    - Classification: rename_policy (list receiving renamed/copied targets)
    """

    owner: str
    repositories: Tuple[str, ...]
    default_branch: str = "main"
    filter: PathFilter = field(default_factory=PathFilter)

    rename_policy: RenamePolicy = "added"

    @property
    def tree_expression(self) -> str:
        return f"{self.default_branch}:{self.filter.path}"


@dataclass(frozen=True)
class TreeEntry:
    # One child of a GraphQL Tree object; type is "blob", "tree" or "commit"
    name: str
    path: str
    type: str


@dataclass(frozen=True)
class CommitFile:
    filename: str
    status: str
    previous_filename: Optional[str] = None


@dataclass(frozen=True)
class CommitDetail:
    sha: str
    files: Tuple[CommitFile, ...] = ()


@dataclass
class ChangedPaths:
    """Paths added, removed or modified within a time window.

    Entries are not deduplicated: a file touched by several commits is
    listed once per touching commit.
    """

    added: List[str] = field(default_factory=list)
    removed: List[str] = field(default_factory=list)
    modified: List[str] = field(default_factory=list)

    def extend(self, other: "ChangedPaths") -> None:
        self.added.extend(other.added)
        self.removed.extend(other.removed)
        self.modified.extend(other.modified)

    def as_dict(self) -> Dict[str, List[str]]:
        return {
            "added": list(self.added),
            "removed": list(self.removed),
            "modified": list(self.modified),
        }
