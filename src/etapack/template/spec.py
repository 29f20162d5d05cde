"""Template AST spec - syntax nodes and frontend configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True)
class Literal:
    """Plain template text, emitted verbatim."""

    text: str


@dataclass(frozen=True)
class RawExpr:
    """`<%~ code %>` - output inserted without escaping."""

    code: str


@dataclass(frozen=True)
class InterpolatedExpr:
    """`<%= code %>` - output inserted after escaping."""

    code: str


@dataclass(frozen=True)
class Evaluate:
    """`<% code %>` - statements executed, nothing output."""

    code: str


SyntaxNode = Union[Literal, RawExpr, InterpolatedExpr, Evaluate]

# False (keep), "nl" (drop one newline) or "slurp" (drop all whitespace)
TrimMode = Union[bool, str]

TRIM_MARKERS = {"-": "nl", "_": "slurp"}


@dataclass(frozen=True)
class TemplateConfig:
    """Template language configuration shared by every file in a build."""

    tags: Tuple[str, str] = ("<%", "%>")
    interpolate: str = "="
    raw: str = "~"
    var_name: str = "it"
    auto_escape: bool = True
    auto_trim: Tuple[TrimMode, TrimMode] = (False, "nl")
    filter: bool = False
    use_with: bool = False


DEFAULT_CONFIG = TemplateConfig()
