"""Synthesizer - builds the module that wraps one compiled template."""

from __future__ import annotations

import os
from typing import List, Sequence

from etapack.module.renderer import Renderer
from etapack.module.spec import (
    ALIAS_PREFIX,
    EXPORTED_TEMPLATE_NAME,
    ModuleSource,
    PartialImport,
)
from etapack.paths import resolve_partial, to_import_literal
from etapack.template.compiler import FUNCTION_NAME


def export_template_function(function_text: str) -> str:
    """Rename the frontend's anonymous function to the exported `template`."""
    return function_text.replace(
        f"function {FUNCTION_NAME}",
        f"export function {EXPORTED_TEMPLATE_NAME}",
        1,
    )


def build_module(
    function_text: str,
    new_partials: Sequence[str],
    templates_root: str,
    sep: str = os.sep,
) -> ModuleSource:
    """Build the module IR for a compiled template.

    Args:
        function_text: Compiled render function (`function anonymous(...)`).
        new_partials: Partials this module must import and register, in order.
        templates_root: Normalized templates root the partial names resolve against.
        sep: Path separator of the host platform.

    Returns:
        ModuleSource ready for rendering.
    """
    imports: List[PartialImport] = []
    for index, name in enumerate(new_partials):
        path = resolve_partial(templates_root, name, sep)
        imports.append(
            PartialImport(
                name=name,
                alias=f"{ALIAS_PREFIX}{index}",
                import_path=to_import_literal(path),
            )
        )

    return ModuleSource(
        template_fn=export_template_function(function_text),
        imports=imports,
    )


def synthesize(
    function_text: str,
    new_partials: Sequence[str],
    templates_root: str,
    sep: str = os.sep,
    renderer: Renderer | None = None,
) -> str:
    """Emit the module source text for a compiled template."""
    module = build_module(function_text, new_partials, templates_root, sep)
    return (renderer or Renderer()).render(module)
