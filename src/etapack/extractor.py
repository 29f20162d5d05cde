"""Reference extraction - finds partials a template includes or extends.

Matching is best-effort and literal-argument-only: expression code is never
evaluated, only matched against two call shapes.

- raw output (`<%~ ... %>`): `include('name')` or `E.include('name', data)`
- interpolation or evaluation: the whole code is `layout('name'[, data])`

Anything else, including `include(someVariable)`, contributes nothing.
"""

from __future__ import annotations

import re
from typing import Iterable, List, Optional

from etapack.template.spec import (
    Evaluate,
    InterpolatedExpr,
    RawExpr,
    SyntaxNode,
)

INCLUDE_PATTERN = re.compile(
    r"""(?<![\w$.])(?:E\.)?include\(\s*(?:'([^'\r\n]*)'|"([^"\r\n]*)")\s*[,)]"""
)

LAYOUT_PATTERN = re.compile(
    r"""^layout\(\s*(?:'([^'\r\n]+)'|"([^"\r\n]+)")\s*(?:,[\s\S]+)?\)$"""
)


def _first_group(match: Optional[re.Match]) -> Optional[str]:
    if match is None:
        return None
    for group in match.groups():
        if group:
            return group
    return None


def match_include(code: str) -> Optional[str]:
    """Return the partial named by an include call in `code`, if any."""
    return _first_group(INCLUDE_PATTERN.search(code))


def match_layout(code: str) -> Optional[str]:
    """Return the partial named by a layout call spanning all of `code`."""
    return _first_group(LAYOUT_PATTERN.match(code.strip()))


def reference_of(node: SyntaxNode) -> Optional[str]:
    """Return the partial referenced by a single node, if any."""
    if isinstance(node, RawExpr):
        return match_include(node.code)
    if isinstance(node, (InterpolatedExpr, Evaluate)):
        return match_layout(node.code)
    return None


def extract_partials(nodes: Iterable[SyntaxNode]) -> List[str]:
    """Collect referenced partial names in first-occurrence order, deduplicated."""
    partials: dict[str, None] = {}
    for node in nodes:
        name = reference_of(node)
        if name:
            partials.setdefault(name, None)
    return list(partials)
