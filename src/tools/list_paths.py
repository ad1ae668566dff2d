"""MCP tool that lists current file paths across configured repositories.

Registers the 'list_paths' tool which adapts ContentCollector.list_all_paths
to the MCP tool interface used by prompts and agents.
"""

from __future__ import annotations

from typing import List, Optional

from mcp.server.fastmcp import FastMCP

from clients.github import GitHubClient
from config import (
    COMMITS_PER_PAGE,
    DEFAULT_BRANCH,
    DEFAULT_FILE_TYPES,
    DEFAULT_FILTER_PATH,
    DEFAULT_OWNER,
    DEFAULT_REPOSITORIES,
    GITHUB_API_URL,
    GITHUB_TIMEOUT,
    HTTP_VERIFY,
)
from collectors.factory import get_collector


def register(mcp: FastMCP, *, github_client: Optional[GitHubClient] = None) -> None:
    @mcp.tool(name="list_paths")
    async def list_paths(
        owner: Optional[str] = None,
        repositories: Optional[List[str]] = None,
        branch: Optional[str] = None,
        path: Optional[str] = None,
        file_types: Optional[List[str]] = None,
    ) -> List[str]:
        """List file paths under a directory of one or more GitHub repositories.

        Walks `<branch>:<path>` of every repository in order and keeps files
        ending with one of `file_types` (all files when empty).

        Params (each defaults to the server's COCO_* environment):
          - owner: user or organization owning the repositories.
          - repositories: repository names, processed in order.
          - branch: branch to read (default: "main").
          - path: directory inside each repository (default: repository root).
          - file_types: suffixes to keep, e.g. [".md"].

        Returns:
          File paths in traversal order, repositories concatenated.

        Raises:
          ValidationError for invalid inputs; QueryError if any repository
          cannot be listed (no partial result).
        """
        collector = get_collector(
            owner=owner if owner is not None else DEFAULT_OWNER,
            repositories=repositories if repositories is not None else DEFAULT_REPOSITORIES,
            branch=branch if branch is not None else DEFAULT_BRANCH,
            path=path if path is not None else DEFAULT_FILTER_PATH,
            file_types=file_types if file_types is not None else DEFAULT_FILE_TYPES,
            github_base_url=GITHUB_API_URL,
            github_timeout=GITHUB_TIMEOUT,
            http_verify=HTTP_VERIFY,
            per_page=COMMITS_PER_PAGE,
            github_client=github_client,
        )

        return await collector.list_all_paths()
