"""Renderer - converts ModuleSource IR to final module text."""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from etapack.module.spec import ModuleSource
from etapack.template.compiler import js_string

TEMPLATES_DIR = Path(__file__).parent / "templates"


class Renderer:
    """Renders ModuleSource IR to ES module text."""

    template_name = "module.js.j2"

    def __init__(self, env: Environment | None = None):
        self.env = env or self._default_env()

    def render(self, module: ModuleSource) -> str:
        """Render a ModuleSource to module text.

        Args:
            module: The module IR to render.

        Returns:
            Complete module source as a string.
        """
        tmpl = self.env.get_template(self.template_name)
        return tmpl.render(module=module)

    @staticmethod
    def _default_env() -> Environment:
        env = Environment(
            loader=FileSystemLoader(str(TEMPLATES_DIR)),
            undefined=StrictUndefined,
            keep_trailing_newline=False,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        env.filters["js_string"] = js_string
        return env
