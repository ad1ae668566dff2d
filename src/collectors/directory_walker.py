"""Depth-first listing of every file below a GitHub tree expression.

The walk keeps an explicit stack of entry iterators instead of recursing,
so it emits exactly the recursive order (API order per level, each
subtree's files contiguous) without depending on the interpreter's
recursion limit.
"""

from __future__ import annotations

import logging
from typing import Iterator, List

from core.interfaces import TreeQueryCapability
from core.models import TreeEntry
from core.paths import child_expression

from .tree_query import LIST_TREE_ENTRIES_QUERY, parse_tree_entries, tree_query_variables


logger = logging.getLogger(__name__)

BLOB = "blob"
TREE = "tree"


class DirectoryWalker:
    def __init__(self, client: TreeQueryCapability) -> None:
        self._client = client

    async def list_paths(self, owner: str, repo: str, expression: str) -> List[str]:
        """Return the paths of all blobs reachable from `expression` (e.g. `main:docs`).

        Raises QueryError from the first failing tree query; nothing is
        returned for the part already walked.
        """
        files: List[str] = []
        queries = 1
        stack: List[tuple[str, Iterator[TreeEntry]]] = [
            (expression, iter(await self._entries(owner, repo, expression)))
        ]

        while stack:
            current, entries = stack[-1]
            entry = next(entries, None)
            if entry is None:
                stack.pop()
                continue

            if entry.type == BLOB:
                files.append(entry.path)
            elif entry.type == TREE:
                sub = child_expression(current, entry.name)
                stack.append((sub, iter(await self._entries(owner, repo, sub))))
                queries += 1
            # submodules ("commit") and anything else carry no files

        logger.debug("Walked %s/%s %s: %d files, %d tree queries", owner, repo, expression, len(files), queries)
        return files

    async def _entries(self, owner: str, repo: str, expression: str) -> List[TreeEntry]:
        data = await self._client.query(
            LIST_TREE_ENTRIES_QUERY,
            tree_query_variables(owner, repo, expression),
        )
        return parse_tree_entries(data, expression=expression)
