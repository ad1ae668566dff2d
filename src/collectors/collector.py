"""Collector facade: list current paths and recent changes across repositories.

Repositories are processed one at a time in configuration order. The
first failing repository aborts the call; nothing collected from earlier
repositories is returned.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Callable, List

from clients.github.inputs import normalize_hours
from core.errors import ValidationError
from core.interfaces import GitHubCapabilities
from core.models import ChangedPaths, CollectorConfig
from core.paths import filter_by_file_types

from .change_classifier import DEFAULT_PER_PAGE, ChangeClassifier
from .directory_walker import DirectoryWalker


logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ContentCollector:
    """Collects file paths for the repositories named in a CollectorConfig.

    Purpose:
      - list_all_paths() -> List[str]
      - list_changes_since(hours_since) -> ChangedPaths

    Example:
      config = CollectorConfig(
          owner="kubernetes",
          repositories=("website",),
          default_branch="main",
          filter=PathFilter(path="content/en/blog/_posts", file_types=(".md",)),
      )
      collector = ContentCollector(GitHubClient(), config)
      paths = await collector.list_all_paths()
      changes = await collector.list_changes_since(24)
    """

    def __init__(
        self,
        client: GitHubCapabilities,
        config: CollectorConfig,
        *,
        clock: Clock = _utcnow,
        per_page: int = DEFAULT_PER_PAGE,
    ) -> None:
        self._config = config
        self._clock = clock
        self._walker = DirectoryWalker(client)
        self._classifier = ChangeClassifier(
            client,
            rename_policy=config.rename_policy,
            per_page=per_page,
        )

    @property
    def config(self) -> CollectorConfig:
        return self._config

    async def list_all_paths(self) -> List[str]:
        """List files under the filter path of every repository, filtered by file type."""
        cfg = self._config
        expression = cfg.tree_expression

        files: List[str] = []
        for repo in cfg.repositories:
            logger.info("Listing %s/%s at %s", cfg.owner, repo, expression)
            files.extend(await self._walker.list_paths(cfg.owner, repo, expression))

        return filter_by_file_types(files, cfg.filter.file_types)

    async def list_changes_since(self, hours_since: int) -> ChangedPaths:
        """Classify files under the filter path changed in the last `hours_since` hours."""
        hours = normalize_hours(hours_since)
        cfg = self._config
        try:
            since = self._clock() - timedelta(hours=hours)
        except OverflowError as e:
            raise ValidationError(f"hours_since is too large: {hours}") from e

        changes = ChangedPaths()
        for repo in cfg.repositories:
            logger.info("Collecting changes for %s/%s since %s", cfg.owner, repo, since.isoformat())
            changes.extend(await self._classifier.changed_since(cfg.owner, repo, since, cfg.filter.path))

        return changes
