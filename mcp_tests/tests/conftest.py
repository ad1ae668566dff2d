import pytest

from core.errors import QueryError
from core.models import CommitDetail


class DummyMCP:
    """Minimal FastMCP stand-in to capture tool registration."""

    def __init__(self) -> None:
        self.tools = {}

    def tool(self, *, name: str):
        def _decorator(fn):
            self.tools[name] = fn
            return fn
        return _decorator


def blob(path: str) -> dict:
    return {"name": path.rsplit("/", 1)[-1], "path": path, "type": "blob"}


def tree(path: str) -> dict:
    return {"name": path.rsplit("/", 1)[-1], "path": path, "type": "tree"}


class FakeGitHub:
    """In-memory capability set.

    - trees: (repo, expression) -> list of entry dicts (missing key -> null object)
    - commits: repo -> list of SHAs
    - details: sha -> list of CommitFile
    - fail_on: keys ("query", repo, expression) | ("list_commits", repo) | ("get_commit", sha)
    """

    def __init__(self, *, trees=None, commits=None, details=None, fail_on=None):
        self.trees = trees or {}
        self.commits = commits or {}
        self.details = details or {}
        self.fail_on = set(fail_on or ())
        self.calls = []

    async def query(self, query, variables):
        repo, expression = variables["name"], variables["expression"]
        self.calls.append(("query", variables["owner"], repo, expression))
        if ("query", repo, expression) in self.fail_on:
            raise QueryError(f"boom: {repo} {expression}")

        entries = self.trees.get((repo, expression))
        if entries is None:
            return {"repository": {"object": None}}
        return {"repository": {"object": {"entries": list(entries)}}}

    async def list_commits(self, owner, repo, *, since, path, per_page):
        self.calls.append(("list_commits", owner, repo, since, path, per_page))
        if ("list_commits", repo) in self.fail_on:
            raise QueryError(f"boom: list_commits {repo}")
        return list(self.commits.get(repo, []))

    async def get_commit(self, owner, repo, sha):
        self.calls.append(("get_commit", owner, repo, sha))
        if ("get_commit", sha) in self.fail_on:
            raise QueryError(f"boom: get_commit {sha}")
        return CommitDetail(sha=sha, files=tuple(self.details.get(sha, [])))


@pytest.fixture
def dummy_mcp():
    return DummyMCP()


@pytest.fixture
def fake_github():
    return FakeGitHub
