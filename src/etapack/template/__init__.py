"""Template frontend - parses and compiles Eta-style templates."""

from etapack.template.compiler import Compiler, compile, compile_to_string
from etapack.template.parser import Parser, parse
from etapack.template.spec import (
    DEFAULT_CONFIG,
    Evaluate,
    InterpolatedExpr,
    Literal,
    RawExpr,
    SyntaxNode,
    TemplateConfig,
)

__all__ = [
    "Compiler",
    "Parser",
    "compile",
    "compile_to_string",
    "parse",
    "DEFAULT_CONFIG",
    "TemplateConfig",
    "SyntaxNode",
    "Literal",
    "RawExpr",
    "InterpolatedExpr",
    "Evaluate",
]
