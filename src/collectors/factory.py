"""Factory building a validated ContentCollector.

Exposes get_collector which normalizes raw inputs (tool arguments or
environment defaults) into a CollectorConfig and wires it to a GitHub
capability adapter.
"""

from __future__ import annotations

from typing import Iterable, Optional

from clients.github import GitHubClient
from clients.github.inputs import (
    normalize_file_types,
    normalize_filter_path,
    normalize_name,
    normalize_ref,
    normalize_rename_policy,
    normalize_repositories,
)
from core.interfaces import GitHubCapabilities
from core.models import CollectorConfig, PathFilter
from collectors.collector import ContentCollector


def build_config(
    *,
    owner: Optional[str],
    repositories: Optional[Iterable[str]],
    branch: Optional[str] = "main",
    path: Optional[str] = "",
    file_types: Optional[Iterable[str]] = None,
    rename_policy: Optional[str] = "added",
) -> CollectorConfig:
    return CollectorConfig(
        owner=normalize_name(owner, field="owner"),
        repositories=normalize_repositories(repositories),
        default_branch=normalize_ref(branch),
        filter=PathFilter(
            path=normalize_filter_path(path),
            file_types=normalize_file_types(file_types),
        ),
        rename_policy=normalize_rename_policy(rename_policy),
    )


def get_collector(
    *,
    owner: Optional[str],
    repositories: Optional[Iterable[str]],
    branch: Optional[str] = "main",
    path: Optional[str] = "",
    file_types: Optional[Iterable[str]] = None,
    rename_policy: Optional[str] = "added",
    github_base_url: Optional[str] = None,
    github_timeout: float = 20.0,
    http_verify: bool = True,
    per_page: int = 100,
    github_client: Optional[GitHubCapabilities] = None,
) -> ContentCollector:
    """
    Factory that returns a ContentCollector for the given scope.

    Validation happens before any network call; an injected client is
    reused, otherwise a GitHubClient is created.
    """
    config = build_config(
        owner=owner,
        repositories=repositories,
        branch=branch,
        path=path,
        file_types=file_types,
        rename_policy=rename_policy,
    )

    client = github_client or GitHubClient(base_url=github_base_url, timeout=github_timeout, verify=http_verify)
    return ContentCollector(client, config, per_page=per_page)
