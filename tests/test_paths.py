"""Tests for templates root and import path helpers."""

from etapack.paths import (
    absolute_root,
    is_under_root,
    normalize_root,
    resolve_partial,
    to_import_literal,
)


def test_normalize_root_appends_separator():
    assert normalize_root("/t", sep="/") == "/t/"


def test_normalize_root_is_idempotent():
    root = normalize_root("/t", sep="/")
    assert normalize_root(root, sep="/") == root


def test_normalize_root_windows_separator():
    assert normalize_root("C:\\templates", sep="\\") == "C:\\templates\\"


def test_normalize_root_collapses_dot_segments():
    assert normalize_root("/t/./", sep="/") == "/t/"
    assert normalize_root("/t/sub/..", sep="/") == "/t/"
    assert normalize_root("C:/t", sep="\\") == "C:\\t\\"


def test_absolute_root_resolves_against_working_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    root = absolute_root("src/templates", sep="/")
    assert root == f"{tmp_path.resolve().as_posix()}/src/templates/"
    assert resolve_partial(root, "greeting", sep="/").startswith("/")
    assert is_under_root("src/templates/page.eta", root, sep="/")


def test_resolve_partial_joins_and_normalizes():
    assert resolve_partial("/t/", "greeting", sep="/") == "/t/greeting"
    assert resolve_partial("/t/", "./layouts/../base", sep="/") == "/t/base"
    assert resolve_partial("/t/", "shared/header", sep="/") == "/t/shared/header"


def test_import_literal_escapes_windows_separators():
    path = resolve_partial("C:\\t\\", "greeting", sep="\\")
    assert path == "C:\\t\\greeting"
    assert to_import_literal(path) == "C:\\\\t\\\\greeting"


def test_import_literal_leaves_posix_paths_alone():
    assert to_import_literal("/t/greeting") == "/t/greeting"


def test_import_literal_escapes_quotes():
    assert to_import_literal("/t/it's") == "/t/it\\'s"


def test_is_under_root():
    assert is_under_root("/t/page.eta", "/t/", sep="/")
    assert is_under_root("/t/sub/page.eta", "/t/", sep="/")
    assert not is_under_root("/other/page.eta", "/t/", sep="/")
    # Sibling directory sharing the prefix is not inside the root
    assert not is_under_root("/tx/page.eta", "/t/", sep="/")


def test_is_under_root_collapses_parent_segments():
    assert not is_under_root("/t/../secret/page.eta", "/t/", sep="/")
    assert is_under_root("/t/a/../page.eta", "/t/", sep="/")


def test_is_under_unnormalized_root():
    assert is_under_root("/t/page.eta", normalize_root("/t/./", sep="/"), sep="/")
    root = normalize_root("C:/t", sep="\\")
    assert is_under_root("C:\\t\\page.eta", root, sep="\\")
