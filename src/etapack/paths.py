"""Path helpers for the templates root and generated import paths."""

from __future__ import annotations

import ntpath
import os
import posixpath


def _flavour(sep: str):
    return ntpath if sep == "\\" else posixpath


def normalize_root(root: str, sep: str = os.sep) -> str:
    """Return `root` normalized and terminated by exactly one trailing separator.

    Idempotent: normalizing an already normalized root returns it unchanged.
    """
    root = _flavour(sep).normpath(root)
    if root.endswith(sep):
        return root
    return f"{root}{sep}"


def absolute_root(root: str, sep: str = os.sep) -> str:
    """Make `root` absolute against the working directory, then normalize it."""
    return normalize_root(_flavour(sep).abspath(root), sep)


def resolve_partial(root: str, name: str, sep: str = os.sep) -> str:
    """Resolve a partial name against the templates root.

    The result is absolute whenever `root` is, see `absolute_root`.
    """
    path = _flavour(sep)
    return path.normpath(path.join(root, name))


def is_under_root(file_id: str, root: str, sep: str = os.sep) -> bool:
    """Check that `file_id` lies inside `root` once `..` segments are collapsed.

    A relative `file_id` is taken against the working directory. `root` must
    already be normalized with `absolute_root`.
    """
    return _flavour(sep).abspath(file_id).startswith(root)


def to_import_literal(path: str) -> str:
    """Escape a filesystem path for embedding in a single-quoted JS string.

    Backslashes are doubled so Windows separators survive, and single quotes
    are escaped so the literal is never terminated early.
    """
    return path.replace("\\", "\\\\").replace("'", "\\'")
