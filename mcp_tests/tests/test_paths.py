from core.paths import (
    child_expression,
    filter_by_file_types,
    has_file_type,
    is_under_prefix,
    tree_expression,
)


def test_has_file_type():
    assert has_file_type("docs/a.md", [".md", ".txt"])
    assert not has_file_type("docs/a.mdx", [".md"])
    assert not has_file_type("docs/a.md", [])


def test_filter_by_file_types_keeps_matching_in_order():
    assert filter_by_file_types(["a.md", "b.txt"], [".md"]) == ["a.md"]
    assert filter_by_file_types(["z.md", "b.txt", "a.md"], [".md", ".txt"]) == ["z.md", "b.txt", "a.md"]


def test_filter_by_file_types_empty_suffixes_is_identity():
    paths = ["b.txt", "a.md", "b.txt"]
    assert filter_by_file_types(paths, []) == paths
    assert filter_by_file_types(paths, ()) == paths


def test_filter_by_file_types_no_match_returns_empty():
    assert filter_by_file_types(["a.md"], [".rst"]) == []
    assert filter_by_file_types([], [".md"]) == []


def test_is_under_prefix():
    assert is_under_prefix("content/en/a.md", "content/en")
    assert is_under_prefix("anything", "")
    assert not is_under_prefix("static/a.md", "content")


def test_tree_expression():
    assert tree_expression("main", "content/en") == "main:content/en"
    assert tree_expression("main", "") == "main:"


def test_child_expression():
    assert child_expression("main:content", "blog") == "main:content/blog"
    assert child_expression("main:content/", "blog") == "main:content/blog"
    assert child_expression("main:", "docs") == "main:docs"
