from __future__ import annotations

from datetime import datetime
from typing import Any, List, Mapping

from core.interfaces import CommitHistoryCapability, TreeQueryCapability
from core.models import CommitDetail


class CombinedCapabilities:
    """Join a tree-query adapter and a commit-history adapter into one capability set."""

    def __init__(self, *, tree: TreeQueryCapability, commits: CommitHistoryCapability) -> None:
        self._tree = tree
        self._commits = commits

    async def query(self, query: str, variables: Mapping[str, Any]) -> Mapping[str, Any]:
        return await self._tree.query(query, variables)

    async def list_commits(
        self,
        owner: str,
        repo: str,
        *,
        since: datetime,
        path: str,
        per_page: int,
    ) -> List[str]:
        return await self._commits.list_commits(owner, repo, since=since, path=path, per_page=per_page)

    async def get_commit(self, owner: str, repo: str, sha: str) -> CommitDetail:
        return await self._commits.get_commit(owner, repo, sha)
