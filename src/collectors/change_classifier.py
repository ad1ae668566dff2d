"""Classify files touched by recent commits into added/removed/modified.

Classification is per commit and results are concatenated in commit
order, so a file touched by N commits in the window appears N times.
"""

from __future__ import annotations

import logging
from datetime import datetime

from core.interfaces import CommitHistoryCapability
from core.models import ChangedPaths, CommitFile, RenamePolicy
from core.paths import is_under_prefix


logger = logging.getLogger(__name__)

DEFAULT_PER_PAGE = 100


def classify_file(paths: ChangedPaths, file: CommitFile, *, rename_policy: RenamePolicy = "added") -> None:
    """Append `file` to the list(s) of `paths` matching its status.

    `rename_policy` picks the list receiving the new name of renamed and
    copied files. Unknown statuses (e.g. "unchanged") are ignored.
    """
    target = paths.added if rename_policy == "added" else paths.modified

    status = file.status
    if status == "removed":
        paths.removed.append(file.filename)
    elif status == "added":
        paths.added.append(file.filename)
    elif status in ("modified", "changed"):
        paths.modified.append(file.filename)
    elif status == "renamed":
        if file.previous_filename:
            paths.removed.append(file.previous_filename)
        target.append(file.filename)
    elif status == "copied":
        target.append(file.filename)


class ChangeClassifier:
    def __init__(
        self,
        client: CommitHistoryCapability,
        *,
        rename_policy: RenamePolicy = "added",
        per_page: int = DEFAULT_PER_PAGE,
    ) -> None:
        self._client = client
        self._rename_policy = rename_policy
        self._per_page = per_page

    async def changed_since(
        self,
        owner: str,
        repo: str,
        since: datetime,
        path_prefix: str,
    ) -> ChangedPaths:
        """Classify files under `path_prefix` changed in `owner/repo` since `since`.

        Raises QueryError if listing commits or fetching any commit fails.
        """
        shas = await self._client.list_commits(
            owner,
            repo,
            since=since,
            path=path_prefix,
            per_page=self._per_page,
        )

        paths = ChangedPaths()
        for sha in shas:
            commit = await self._client.get_commit(owner, repo, sha)
            for file in commit.files:
                if is_under_prefix(file.filename, path_prefix):
                    classify_file(paths, file, rename_policy=self._rename_policy)

        logger.debug(
            "%s/%s: %d commits, %d added, %d removed, %d modified",
            owner,
            repo,
            len(shas),
            len(paths.added),
            len(paths.removed),
            len(paths.modified),
        )
        return paths
