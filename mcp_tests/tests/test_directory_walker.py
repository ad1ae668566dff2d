import pytest

from collectors.directory_walker import DirectoryWalker
from core.errors import QueryError

from conftest import blob, tree


@pytest.mark.asyncio
async def test_list_paths_flat_tree(fake_github):
    fake = fake_github(trees={("website", "main:docs"): [blob("docs/a.md"), blob("docs/b.txt")]})

    out = await DirectoryWalker(fake).list_paths("kubernetes", "website", "main:docs")

    assert out == ["docs/a.md", "docs/b.txt"]
    assert fake.calls == [("query", "kubernetes", "website", "main:docs")]


@pytest.mark.asyncio
async def test_list_paths_depth_first_with_contiguous_subtrees(fake_github):
    fake = fake_github(trees={
        ("r", "main:"): [blob("a.md"), tree("x"), blob("b.md"), tree("y")],
        ("r", "main:x"): [tree("x/deep"), blob("x/1.md")],
        ("r", "main:x/deep"): [blob("x/deep/2.md")],
        ("r", "main:y"): [blob("y/3.md")],
    })

    out = await DirectoryWalker(fake).list_paths("o", "r", "main:")

    # API order per level, no sorting
    assert out == ["a.md", "x/deep/2.md", "x/1.md", "b.md", "y/3.md"]
    assert [c[3] for c in fake.calls] == ["main:", "main:x", "main:x/deep", "main:y"]


@pytest.mark.asyncio
async def test_list_paths_counts_every_blob_once_and_queries_each_tree_once(fake_github):
    # 3 levels, 2 trees per level below root, 2 blobs in every tree
    trees = {}

    def build(expr, path, depth):
        entries = [blob(f"{path}f{i}.md".lstrip("/")) for i in range(2)]
        if depth < 3:
            for i in range(2):
                sub_path = f"{path}d{i}"
                entries.append(tree(sub_path))
                build(f"{expr}/d{i}" if not expr.endswith(":") else f"{expr}d{i}", sub_path + "/", depth + 1)
        trees[("r", expr)] = entries

    build("main:", "", 0)
    fake = fake_github(trees=trees)

    out = await DirectoryWalker(fake).list_paths("o", "r", "main:")

    tree_nodes = len(trees)  # 1 + 2 + 4 + 8
    assert tree_nodes == 15
    assert len(out) == 2 * tree_nodes
    assert len(set(out)) == len(out)
    assert len(fake.calls) == tree_nodes


@pytest.mark.asyncio
async def test_list_paths_empty_tree_returns_empty_list(fake_github):
    fake = fake_github(trees={("r", "main:empty"): []})
    assert await DirectoryWalker(fake).list_paths("o", "r", "main:empty") == []


@pytest.mark.asyncio
async def test_list_paths_unknown_expression_returns_empty_list(fake_github):
    fake = fake_github()
    assert await DirectoryWalker(fake).list_paths("o", "r", "main:missing") == []


@pytest.mark.asyncio
async def test_list_paths_ignores_submodules(fake_github):
    fake = fake_github(trees={
        ("r", "main:"): [blob("a.md"), {"name": "vendor", "path": "vendor", "type": "commit"}],
    })
    assert await DirectoryWalker(fake).list_paths("o", "r", "main:") == ["a.md"]
    assert len(fake.calls) == 1


@pytest.mark.asyncio
async def test_list_paths_failure_at_depth_aborts_walk(fake_github):
    fake = fake_github(
        trees={
            ("r", "main:"): [blob("a.md"), tree("x"), blob("b.md")],
            ("r", "main:x"): [blob("x/1.md")],
        },
        fail_on={("query", "r", "main:x")},
    )

    with pytest.raises(QueryError):
        await DirectoryWalker(fake).list_paths("o", "r", "main:")


@pytest.mark.asyncio
async def test_list_paths_handles_trees_deeper_than_recursion_limit(fake_github):
    depth = 2000
    trees = {}
    expr, path = "main:", ""
    for i in range(depth):
        name = f"d{i}"
        child_path = f"{path}/{name}" if path else name
        trees[("r", expr)] = [tree(child_path)]
        expr = f"{expr}{name}" if expr.endswith(":") else f"{expr}/{name}"
        path = child_path
    trees[("r", expr)] = [blob(f"{path}/leaf.md")]

    fake = fake_github(trees=trees)
    out = await DirectoryWalker(fake).list_paths("o", "r", "main:")

    assert len(out) == 1
    assert out[0].endswith("/d1999/leaf.md")
    assert len(fake.calls) == depth + 1
