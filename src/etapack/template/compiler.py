"""Compiler - turns template source into a JS render function."""

from __future__ import annotations

from typing import List

from etapack.template.parser import Parser
from etapack.template.spec import (
    DEFAULT_CONFIG,
    Evaluate,
    InterpolatedExpr,
    Literal,
    RawExpr,
    SyntaxNode,
    TemplateConfig,
)

FUNCTION_NAME = "anonymous"

_JS_STRING_ESCAPES = {
    "\\": "\\\\",
    "'": "\\'",
    "\n": "\\n",
    "\r": "\\n",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def js_string(text: str) -> str:
    """Escape text for a single-quoted JS string literal (quotes excluded)."""
    text = text.replace("\r\n", "\n")
    return "".join(_JS_STRING_ESCAPES.get(char, char) for char in text)


class Compiler:
    """Compiles syntax nodes into the body of a render function.

    The generated function takes `(<var_name>, E, cb)` where `E` is the shared
    runtime configuration. A `layout(name, data)` call anywhere in the
    template defers to `include` once the body has rendered, passing the
    data merged with `{body: <rendered output>}` and the layout's own data.
    """

    def __init__(self, config: TemplateConfig = DEFAULT_CONFIG):
        self.config = config

    def compile_nodes(self, nodes: List[SyntaxNode]) -> str:
        """Compile parsed nodes to the function body."""
        config = self.config
        var = config.var_name

        lines = [
            "var tR='',__l,__lP,include=E.include.bind(E)",
            "function layout(p,d){__l=p;__lP=d}",
        ]
        if config.use_with:
            lines.append(f"with({var}||{{}}){{")

        for node in nodes:
            if isinstance(node, Literal):
                lines.append(f"tR+='{js_string(node.text)}'")
            elif isinstance(node, RawExpr):
                lines.append(f"tR+={self._output(node.code, escape=False)}")
            elif isinstance(node, InterpolatedExpr):
                lines.append(f"tR+={self._output(node.code, escape=True)}")
            elif isinstance(node, Evaluate):
                lines.append(node.code)

        lines.append(f"if(__l)tR=include(__l,Object.assign({var},{{body:tR}},__lP))")
        lines.append("if(cb){cb(null,tR)} return tR")
        if config.use_with:
            lines.append("}")

        return "\n".join(lines)

    def compile_function(self, nodes: List[SyntaxNode]) -> str:
        """Compile parsed nodes to a complete `function anonymous(...)` text."""
        body = self.compile_nodes(nodes)
        return f"function {FUNCTION_NAME}({self.config.var_name},E,cb) {{\n{body}\n}}"

    def _output(self, code: str, escape: bool) -> str:
        if self.config.filter:
            code = f"E.filter({code})"
        if escape and self.config.auto_escape:
            code = f"E.e({code})"
        return code


def compile_to_string(source: str, config: TemplateConfig = DEFAULT_CONFIG) -> str:
    """Compile template source to a render function body."""
    return Compiler(config).compile_nodes(Parser(config).parse(source))


def compile(source: str, config: TemplateConfig = DEFAULT_CONFIG) -> str:
    """Compile template source to `function anonymous(it,E,cb) {...}` text.

    Raises:
        TemplateSyntaxError: If the source cannot be parsed.
    """
    return Compiler(config).compile_function(Parser(config).parse(source))
