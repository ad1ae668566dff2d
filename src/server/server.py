"""Server bootstrap for the GitHub content collector MCP service.

Creates the FastMCP instance, wires one shared GitHub client into the
tools, and starts the MCP server (stdio transport).
"""

import logging

from mcp.server.fastmcp import FastMCP

from clients.github import GitHubClient
from config import GITHUB_API_URL, GITHUB_TIMEOUT, HTTP_VERIFY, LOG_LEVEL

from tools.list_paths import register as register_list_paths
from tools.list_changes import register as register_list_changes

mcp = FastMCP("coco-gh")


def register_tools() -> None:
    github_client = GitHubClient(base_url=GITHUB_API_URL, timeout=GITHUB_TIMEOUT, verify=HTTP_VERIFY)

    register_list_paths(mcp, github_client=github_client)
    register_list_changes(mcp, github_client=github_client)


def register_all() -> None:
    register_tools()


register_all()


def main() -> None:
    # stdout carries the stdio transport; logs go to stderr
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
