"""Module synthesis - wraps compiled templates in ES modules."""

from etapack.module.renderer import Renderer
from etapack.module.spec import ModuleSource, PartialImport
from etapack.module.synthesizer import build_module, export_template_function, synthesize

__all__ = [
    "Renderer",
    "ModuleSource",
    "PartialImport",
    "build_module",
    "export_template_function",
    "synthesize",
]
