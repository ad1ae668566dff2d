"""Core protocol and interface definitions.

Defines the capabilities the collectors need from GitHub: a GraphQL
tree query and the REST commit history. A single adapter may provide
both (GitHubCapabilities) or two adapters may be combined.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, List, Mapping, Protocol

from core.models import CommitDetail


class TreeQueryCapability(Protocol):
    """Contract for running a GraphQL query and returning its `data` object."""
    async def query(
        self,
        query: str,
        variables: Mapping[str, Any],
    ) -> Mapping[str, Any]:
        ...


class CommitHistoryCapability(Protocol):
    """Contract for listing commits and fetching a commit's file-level diff."""
    async def list_commits(
        self,
        owner: str,
        repo: str,
        *,
        since: datetime,
        path: str,
        per_page: int,
    ) -> List[str]:
        ...

    async def get_commit(
        self,
        owner: str,
        repo: str,
        sha: str,
    ) -> CommitDetail:
        ...


class GitHubCapabilities(TreeQueryCapability, CommitHistoryCapability, Protocol):
    """Both capabilities behind one object."""
