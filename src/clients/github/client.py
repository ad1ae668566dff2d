"""GitHub client module: GraphQL tree queries and REST commit history.

This module provides a small async adapter implementing the collector
capabilities (`core.interfaces.GitHubCapabilities`): running GraphQL
queries, listing commits touching a path since an instant (following
Link-header pagination) and fetching a commit's changed files. Every
transport, status or payload failure is raised as `QueryError`.
"""

from __future__ import annotations

import logging
import os
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional

import httpx

from core.errors import QueryError
from core.models import CommitDetail, CommitFile


logger = logging.getLogger(__name__)


def format_since(since: datetime) -> str:
    # GitHub expects ISO 8601 in UTC: YYYY-MM-DDTHH:MM:SSZ
    if since.tzinfo is None:
        since = since.replace(tzinfo=timezone.utc)
    return since.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


class GitHubClient:
    """Async GitHub client backing the tree walker and change classifier.

    Purpose:
      - query(query, variables) -> GraphQL `data`
      - list_commits(owner, repo, since=, path=, per_page=) -> List[sha]
      - get_commit(owner, repo, sha) -> CommitDetail

    Key behavior:
      - One short-lived httpx.AsyncClient per call, requests issued sequentially.
      - Follows `Link: rel="next"` for commit lists and commit file lists.
      - No caching and no retries; the first failure is raised.
    """

    BASE_URL = "https://api.github.com"
    JSON_ACCEPT = "application/vnd.github+json"
    API_VERSION = "2022-11-28"

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        timeout: float = 20.0,
        verify: bool = True,
        token: Optional[str] = None,
    ) -> None:
        self._base_url = (base_url or self.BASE_URL).rstrip("/")
        self._timeout = float(timeout)
        self._verify = bool(verify)

        self._headers = self._build_headers(token)

    async def query(self, query: str, variables: Mapping[str, Any]) -> Mapping[str, Any]:
        """Run a GraphQL query and return its `data` object."""
        async with self._create_client() as client:
            try:
                resp = await client.post("/graphql", json={"query": query, "variables": dict(variables)})
            except httpx.HTTPError as e:
                raise self._external("POST /graphql", e) from e

            self._raise_for_status(resp, context="query")
            payload = self._json(resp, context="query")

        if not isinstance(payload, dict):
            raise QueryError("GitHub GraphQL response is not an object")

        errors = payload.get("errors")
        if errors:
            messages = "; ".join(str(err.get("message", err)) if isinstance(err, dict) else str(err) for err in errors)
            raise QueryError(f"GitHub GraphQL query failed: {messages}")

        data = payload.get("data")
        if not isinstance(data, dict):
            raise QueryError("GitHub GraphQL response has no data")
        return data

    async def list_commits(
        self,
        owner: str,
        repo: str,
        *,
        since: datetime,
        path: str,
        per_page: int = 100,
    ) -> List[str]:
        """List SHAs of commits touching `path` since `since`, newest first, all pages."""
        params: Optional[Dict[str, Any]] = {
            "since": format_since(since),
            "per_page": int(per_page),
        }
        if path:
            params["path"] = path

        shas: List[str] = []
        async with self._create_client() as client:
            url: Optional[str] = f"/repos/{owner}/{repo}/commits"
            while url:
                resp = await self._request(client, url, params=params)
                self._raise_for_status(resp, context=f"list_commits({owner}/{repo})")
                items = self._json(resp, context="list_commits")
                if not isinstance(items, list):
                    raise QueryError(f"Unexpected commit list payload for {owner}/{repo}")

                for item in items:
                    sha = item.get("sha") if isinstance(item, dict) else None
                    if not isinstance(sha, str):
                        raise QueryError(f"Commit without sha in {owner}/{repo}")
                    shas.append(sha)

                # The next link already carries the query string
                url = self._next_url(resp)
                params = None

        logger.debug("Listed %d commits for %s/%s since %s", len(shas), owner, repo, format_since(since))
        return shas

    async def get_commit(self, owner: str, repo: str, sha: str) -> CommitDetail:
        """Fetch a commit with its changed files (all pages)."""
        files: List[CommitFile] = []
        async with self._create_client() as client:
            url: Optional[str] = f"/repos/{owner}/{repo}/commits/{sha}"
            while url:
                resp = await self._request(client, url)
                self._raise_for_status(resp, context=f"get_commit({owner}/{repo}@{sha})")
                data = self._json(resp, context="get_commit")
                if not isinstance(data, dict):
                    raise QueryError(f"Unexpected commit payload for {owner}/{repo}@{sha}")

                for raw in data.get("files") or []:
                    files.append(self._parse_file(raw, sha=sha))

                url = self._next_url(resp)

        return CommitDetail(sha=sha, files=tuple(files))

    # --- HTTP helpers ---

    def _build_headers(self, token: Optional[str]) -> dict[str, str]:
        headers = {
            "Accept": self.JSON_ACCEPT,
            "User-Agent": "coco-gh-mcp",
            "X-GitHub-Api-Version": self.API_VERSION,
        }
        # Explicit token wins over GITHUB_TOKEN; both are optional
        token = (token or os.environ.get("GITHUB_TOKEN") or "").strip()
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def _create_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self._base_url,
            headers=self._headers,
            timeout=self._timeout,
            verify=self._verify,
        )

    def _external(self, context: str, err: BaseException) -> QueryError:
        return QueryError(f"GitHub request failed ({context}): {err}")

    def _raise_for_status(self, resp: httpx.Response, *, context: str) -> None:
        try:
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise self._external(context, e) from e

    def _json(self, resp: httpx.Response, *, context: str) -> Any:
        try:
            return resp.json()
        except ValueError as e:
            raise QueryError(f"GitHub returned invalid JSON ({context}): {e}") from e

    def _next_url(self, resp: httpx.Response) -> Optional[str]:
        return resp.links.get("next", {}).get("url")

    def _parse_file(self, raw: Any, *, sha: str) -> CommitFile:
        if not isinstance(raw, dict) or not isinstance(raw.get("filename"), str):
            raise QueryError(f"Malformed file entry in commit {sha}")
        previous = raw.get("previous_filename")
        return CommitFile(
            filename=raw["filename"],
            status=str(raw.get("status") or ""),
            previous_filename=previous if isinstance(previous, str) else None,
        )

    async def _request(
        self,
        client: httpx.AsyncClient,
        url: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
    ) -> httpx.Response:
        logger.debug("GET %s params=%s", url, dict(params or {}))
        try:
            return await client.get(url, params=dict(params) if params else None)
        except httpx.HTTPError as e:
            raise self._external(f"GET {url}", e) from e
