"""Etapack Exceptions

Errors raised while transforming templates into modules.
"""

from __future__ import annotations


class EtapackError(Exception):
    """Base exception for all etapack errors."""

    pass


class OptionsError(EtapackError):
    """Raised when plugin options or filter patterns are invalid."""

    pass


class OutOfRootError(EtapackError):
    """Raised when a template lives outside the configured templates root."""

    def __init__(self, file_id: str, root: str):
        self.file_id = file_id
        self.root = root
        super().__init__(
            f"can not use template outside `templates_dir`: {file_id} (root: {root})"
        )


class TemplateSyntaxError(EtapackError):
    """Raised by the template frontend on malformed source."""

    def __init__(self, message: str, lineno: int, col: int, snippet: str = ""):
        self.message = message
        self.lineno = lineno
        self.col = col
        self.snippet = snippet
        text = f"{message} at line {lineno} col {col}"
        if snippet:
            text = f"{text}:\n\n  {snippet}\n  {' ' * (col - 1)}^"
        super().__init__(text)
