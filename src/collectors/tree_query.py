"""GraphQL query listing the entries of one tree object, and its parser."""

from __future__ import annotations

from typing import Any, List, Mapping

from core.errors import QueryError
from core.models import TreeEntry


LIST_TREE_ENTRIES_QUERY = """
query ($owner: String!, $name: String!, $expression: String!) {
  repository(owner: $owner, name: $name) {
    object(expression: $expression) {
      ... on Tree {
        entries {
          name
          path
          type
        }
      }
    }
  }
}
"""


def tree_query_variables(owner: str, name: str, expression: str) -> dict[str, str]:
    return {"owner": owner, "name": name, "expression": expression}


def parse_tree_entries(data: Mapping[str, Any], *, expression: str) -> List[TreeEntry]:
    """Extract entries from a LIST_TREE_ENTRIES_QUERY result.

    A missing object (unknown path) or a non-tree object yields no entries.
    A missing repository or malformed entries raise QueryError.
    """
    repository = data.get("repository") if isinstance(data, Mapping) else None
    if not isinstance(repository, Mapping):
        raise QueryError(f"Repository not found for expression: {expression}")

    obj = repository.get("object")
    if obj is None:
        return []
    if not isinstance(obj, Mapping):
        raise QueryError(f"Malformed tree object at {expression}")

    raw_entries = obj.get("entries")
    if raw_entries is None:
        return []
    if not isinstance(raw_entries, list):
        raise QueryError(f"Malformed tree entries at {expression}")

    entries: List[TreeEntry] = []
    for raw in raw_entries:
        if not isinstance(raw, Mapping):
            raise QueryError(f"Malformed tree entry at {expression}")
        name, path, kind = raw.get("name"), raw.get("path"), raw.get("type")
        if not (isinstance(name, str) and isinstance(path, str) and isinstance(kind, str)):
            raise QueryError(f"Malformed tree entry at {expression}: {dict(raw)}")
        entries.append(TreeEntry(name=name, path=path, type=kind))
    return entries
