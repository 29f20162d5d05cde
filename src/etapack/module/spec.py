"""Synthesized module IR - the pieces of a generated template module."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from etapack.virtual import INTERNAL_CONFIG_MODULE_NAME

EXPORTED_TEMPLATE_NAME = "template"
ALIAS_PREFIX = "partialTemplate$"


@dataclass
class PartialImport:
    """A partial imported and registered by the module."""

    name: str  # e.g. "greeting"
    alias: str  # e.g. "partialTemplate$0"
    import_path: str  # escaped, ready for a single-quoted literal


@dataclass
class ModuleSource:
    """Complete generated module IR."""

    template_fn: str  # `export function template(...) {...}`
    imports: List[PartialImport] = field(default_factory=list)
    config_module: str = INTERNAL_CONFIG_MODULE_NAME
