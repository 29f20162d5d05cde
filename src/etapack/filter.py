"""Include/exclude filtering of candidate file ids.

Patterns are globs (or compiled regular expressions) matched against
forward-slash normalized ids:

- `**/` matches zero or more directories, a bare `**` matches anything
- `*` matches within a single path segment, `?` a single character
- `{a,b}` matches either alternative
- `[abc]` / `[!abc]` character classes

Relative globs that do not start with `*` are anchored at the `resolve`
directory (the current working directory by default).
"""

from __future__ import annotations

import os
import posixpath
import re
from collections.abc import Callable, Sequence
from typing import Union

from etapack.exceptions import OptionsError

TEMPLATE_SUFFIX = ".eta"
DEFAULT_INCLUDE = f"**/*{TEMPLATE_SUFFIX}"

Pattern = Union[str, "re.Pattern[str]"]
FilterPattern = Union[Pattern, Sequence[Pattern], None]


def _to_posix(path: str) -> str:
    return path.replace("\\", "/")


def _translate(glob: str) -> str:
    """Translate a glob into a regular expression body."""
    out: list[str] = []
    i, n = 0, len(glob)
    while i < n:
        c = glob[i]
        if c == "*":
            if glob.startswith("**", i):
                i += 2
                if glob.startswith("/", i):
                    i += 1
                    out.append("(?:.*/)?")
                else:
                    out.append(".*")
                continue
            out.append("[^/]*")
        elif c == "?":
            out.append("[^/]")
        elif c == "{":
            end = glob.find("}", i + 1)
            if end == -1:
                out.append(re.escape(c))
            else:
                alternatives = glob[i + 1 : end].split(",")
                out.append("(?:" + "|".join(_translate(a) for a in alternatives) + ")")
                i = end
        elif c == "[":
            end = glob.find("]", i + 1)
            if end == -1:
                out.append(re.escape(c))
            else:
                body = glob[i + 1 : end]
                if body.startswith("!"):
                    body = "^" + body[1:]
                out.append(f"[{body}]")
                i = end
        else:
            out.append(re.escape(c))
        i += 1
    return "".join(out)


def _anchor(glob: str, resolve: str) -> str:
    if glob.startswith("*") or posixpath.isabs(glob) or re.match(r"^[A-Za-z]:/", glob):
        return glob
    return posixpath.join(_to_posix(resolve), glob)


def compile_pattern(pattern: Pattern, resolve: str) -> "re.Pattern[str]":
    """Compile a single glob or regex into a matcher over posix ids."""
    if isinstance(pattern, re.Pattern):
        return pattern
    if not isinstance(pattern, str):
        raise OptionsError(f"Invalid filter pattern: {pattern!r}")

    glob = _anchor(_to_posix(pattern), resolve)
    try:
        return re.compile(rf"\A(?s:{_translate(glob)})\Z")
    except re.error as exc:
        raise OptionsError(f"Invalid filter pattern {pattern!r}: {exc}") from exc


def _as_list(patterns: FilterPattern) -> list[Pattern]:
    if patterns is None:
        return []
    if isinstance(patterns, (str, re.Pattern)):
        return [patterns]
    return list(patterns)


def create_filter(
    include: FilterPattern = DEFAULT_INCLUDE,
    exclude: FilterPattern = None,
    resolve: str | None = None,
) -> Callable[[str], bool]:
    """Build a predicate accepting ids matched by `include` and not by `exclude`.

    An explicit `None` include accepts every id that is not excluded.
    Ids carrying a NUL byte belong to virtual modules and are never accepted.

    Raises:
        OptionsError: If any pattern is malformed.
    """
    base = resolve if resolve is not None else os.getcwd()
    includes = [compile_pattern(p, base) for p in _as_list(include)]
    excludes = [compile_pattern(p, base) for p in _as_list(exclude)]

    def accepts(file_id: str) -> bool:
        if "\0" in file_id:
            return False
        path = _to_posix(file_id)
        if any(m.search(path) for m in excludes):
            return False
        if not includes:
            return True
        return any(m.search(path) for m in includes)

    return accepts
