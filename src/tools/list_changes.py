"""MCP tool that reports files changed within a trailing time window.

Registers the 'list_changed_paths' tool which adapts
ContentCollector.list_changes_since to the MCP tool interface.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from mcp.server.fastmcp import FastMCP

from clients.github import GitHubClient
from config import (
    COMMITS_PER_PAGE,
    DEFAULT_BRANCH,
    DEFAULT_FILTER_PATH,
    DEFAULT_OWNER,
    DEFAULT_REPOSITORIES,
    GITHUB_API_URL,
    GITHUB_TIMEOUT,
    HTTP_VERIFY,
    RENAME_POLICY,
)
from collectors.factory import get_collector


def register(mcp: FastMCP, *, github_client: Optional[GitHubClient] = None) -> None:
    @mcp.tool(name="list_changed_paths")
    async def list_changed_paths(
        hours_since: int = 24,
        owner: Optional[str] = None,
        repositories: Optional[List[str]] = None,
        path: Optional[str] = None,
        rename_policy: Optional[str] = None,
    ) -> Dict[str, List[str]]:
        """Report files under a directory added, removed or modified recently.

        Params (all but hours_since default to the server's COCO_* environment):
          - hours_since: size of the trailing window in hours (default: 24).
          - owner: user or organization owning the repositories.
          - repositories: repository names, processed in order.
          - path: directory prefix inside each repository.
          - rename_policy: "added" (default) or "modified"; the list that
            receives the new name of renamed and copied files.

        Returns:
          {"added": [...], "removed": [...], "modified": [...]}. A file
          touched by several commits is listed once per commit.

        Raises:
          ValidationError for invalid inputs; QueryError if any repository
          or commit cannot be read (no partial result).
        """
        collector = get_collector(
            owner=owner if owner is not None else DEFAULT_OWNER,
            repositories=repositories if repositories is not None else DEFAULT_REPOSITORIES,
            branch=DEFAULT_BRANCH,
            path=path if path is not None else DEFAULT_FILTER_PATH,
            rename_policy=rename_policy if rename_policy is not None else RENAME_POLICY,
            github_base_url=GITHUB_API_URL,
            github_timeout=GITHUB_TIMEOUT,
            http_verify=HTTP_VERIFY,
            per_page=COMMITS_PER_PAGE,
            github_client=github_client,
        )

        changes = await collector.list_changes_since(hours_since)
        return changes.as_dict()
