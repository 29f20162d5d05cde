"""Parser - splits template source into syntax nodes."""

from __future__ import annotations

import re
from typing import List

from etapack.exceptions import TemplateSyntaxError
from etapack.template.spec import (
    DEFAULT_CONFIG,
    TRIM_MARKERS,
    Evaluate,
    InterpolatedExpr,
    Literal,
    RawExpr,
    SyntaxNode,
    TemplateConfig,
    TrimMode,
)

_NEWLINE_END = re.compile(r"(?:\r\n|\n|\r)\Z")
_NEWLINE_START = re.compile(r"\A(?:\r\n|\n|\r)")


def _error(message: str, source: str, index: int) -> TemplateSyntaxError:
    line_start = source.rfind("\n", 0, index) + 1
    line_end = source.find("\n", index)
    if line_end == -1:
        line_end = len(source)
    lineno = source.count("\n", 0, index) + 1
    col = index - line_start + 1
    return TemplateSyntaxError(message, lineno, col, source[line_start:line_end])


def _trim_end(text: str, mode: TrimMode) -> str:
    if mode == "slurp":
        return text.rstrip()
    if mode == "nl":
        return _NEWLINE_END.sub("", text)
    return text


def _trim_start(text: str, mode: TrimMode) -> str:
    if mode == "slurp":
        return text.lstrip()
    if mode == "nl":
        return _NEWLINE_START.sub("", text)
    return text


class Parser:
    """Parses template source into a flat list of syntax nodes.

    Tag bodies are scanned with awareness of string literals and block
    comments, so a closing tag inside `'...'`, `"..."`, a backtick string or
    `/* ... */` does not end the tag.
    """

    def __init__(self, config: TemplateConfig = DEFAULT_CONFIG):
        self.config = config
        open_tag, close_tag = config.tags
        self._open_tag = open_tag
        self._close = re.compile(
            r"'|\"|`|/\*|(\s*([-_])?" + re.escape(close_tag) + ")"
        )
        # Longest prefix first so "=" never shadows a longer custom prefix
        self._prefixes = sorted(
            [(config.interpolate, InterpolatedExpr), (config.raw, RawExpr)],
            key=lambda item: len(item[0]),
            reverse=True,
        )

    def parse(self, source: str) -> List[SyntaxNode]:
        """Parse template source.

        Raises:
            TemplateSyntaxError: On an unclosed tag, string or comment.
        """
        nodes: List[SyntaxNode] = []
        left_default, right_default = self.config.auto_trim
        trim_next: TrimMode = False
        pos = 0

        while True:
            start = source.find(self._open_tag, pos)
            if start == -1:
                text = _trim_start(source[pos:], trim_next)
                if text:
                    nodes.append(Literal(text))
                return nodes

            index = start + len(self._open_tag)
            ws_left = None
            if source[index : index + 1] in TRIM_MARKERS:
                ws_left = TRIM_MARKERS[source[index]]
                index += 1

            text = _trim_start(source[pos:start], trim_next)
            text = _trim_end(text, ws_left if ws_left else left_default)
            if text:
                nodes.append(Literal(text))

            index = self._skip_space(source, index)
            node_type = Evaluate
            for prefix, kind in self._prefixes:
                if prefix and source.startswith(prefix, index):
                    node_type = kind
                    index += len(prefix)
                    break

            content_end, ws_right, pos = self._scan_tag(source, start, index)
            nodes.append(node_type(source[index:content_end].strip()))
            trim_next = TRIM_MARKERS[ws_right] if ws_right else right_default

    @staticmethod
    def _skip_space(source: str, index: int) -> int:
        while index < len(source) and source[index].isspace():
            index += 1
        return index

    def _scan_tag(self, source: str, tag_start: int, index: int):
        """Find the closing tag; return (content end, trim marker, resume index)."""
        while True:
            match = self._close.search(source, index)
            if match is None:
                raise _error("unclosed tag", source, tag_start)

            if match.group(1) is not None:
                return match.start(), match.group(2), match.end()

            token = match.group(0)
            if token == "/*":
                end = source.find("*/", match.end())
                if end == -1:
                    raise _error("unclosed comment", source, match.start())
                index = end + 2
            else:
                index = self._skip_string(source, match.start(), token)

    @staticmethod
    def _skip_string(source: str, start: int, quote: str) -> int:
        index = start + 1
        while index < len(source):
            char = source[index]
            if char == "\\":
                index += 2
                continue
            if char == quote:
                return index + 1
            if quote != "`" and char in "\r\n":
                break
            index += 1
        raise _error("unclosed string", source, start)


def parse(source: str, config: TemplateConfig = DEFAULT_CONFIG) -> List[SyntaxNode]:
    """Parse template source into syntax nodes."""
    return Parser(config).parse(source)
