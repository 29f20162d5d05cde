"""Eta plugin - the transform entry point used by the host bundler.

The host calls three hooks:

- `resolve_id(source)`: claims the virtual config module id
- `load(module_id)`: serves the virtual config module source
- `transform(code, file_id)`: turns a template into a module

For every template passing the include/exclude filter, `transform` parses
and compiles the source, extracts referenced partials, keeps only partials no
earlier module has claimed, and emits a module importing and registering
those partials.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Optional

from etapack.exceptions import OptionsError, OutOfRootError
from etapack.extractor import extract_partials
from etapack.filter import create_filter
from etapack.module import Renderer, synthesize
from etapack.options import PluginOptions, make_options
from etapack.paths import absolute_root, is_under_root
from etapack.registry import DependencyRegistry
from etapack.template import Compiler, Parser
from etapack.virtual import (
    INTERNAL_CONFIG_MODULE_NAME,
    internal_config_source,
    is_config_module,
)

log = logging.getLogger(__name__)


class EtaPlugin:
    """Transforms template files into ES modules for one build.

    Args:
        options: Validated plugin options.
        registry: Registry of already-imported partials. Share one instance
            across every transform of a build; a fresh one is created when
            omitted.
        sep: Path separator of the host platform.
    """

    name = "eta"

    def __init__(
        self,
        options: PluginOptions,
        registry: Optional[DependencyRegistry] = None,
        sep: str = os.sep,
    ):
        self.options = options
        self.registry = registry if registry is not None else DependencyRegistry()
        self.sep = sep
        self.templates_root = absolute_root(options.templates_dir, sep)
        self.filter = create_filter(options.include, options.exclude)

        template_config = options.template.to_config()
        self._parser = Parser(template_config)
        self._compiler = Compiler(template_config)
        self._renderer = Renderer()

    def resolve_id(self, source: str) -> Optional[str]:
        if is_config_module(source):
            return source
        return None

    def load(self, module_id: str) -> Optional[str]:
        if is_config_module(module_id):
            return internal_config_source()
        return None

    def transform(self, code: str, file_id: str) -> Optional[str]:
        """Transform a template into module source.

        Returns:
            The module source, or None when the file is not a template.

        Raises:
            OutOfRootError: If the template lives outside the templates root.
            TemplateSyntaxError: If the template source is malformed.
        """
        if not self.filter(file_id):
            return None

        if not is_under_root(file_id, self.templates_root, self.sep):
            raise OutOfRootError(file_id, self.templates_root)

        nodes = self._parser.parse(code)
        function_text = self._compiler.compile_function(nodes)

        partials = extract_partials(nodes)
        new_partials = self.registry.claim(partials)
        log.debug(
            "Transformed %s (partials: %s, new: %s)",
            file_id,
            partials,
            new_partials,
        )

        return synthesize(
            function_text,
            new_partials,
            self.templates_root,
            sep=self.sep,
            renderer=self._renderer,
        )


def eta_plugin(
    options: Optional[PluginOptions | dict[str, Any]] = None,
    registry: Optional[DependencyRegistry] = None,
    **kwargs: Any,
) -> EtaPlugin:
    """Create an EtaPlugin from options, a mapping or keyword arguments.

    Example:
        plugin = eta_plugin(templates_dir="src/templates", exclude="**/drafts/**")

    A relative `templates_dir` is taken against the working directory.

    Raises:
        OptionsError: If the options are invalid, or keyword arguments are
            given alongside a `PluginOptions` instance.
    """
    if isinstance(options, PluginOptions):
        if kwargs:
            raise OptionsError(
                f"Keyword options {sorted(kwargs)} can not be combined with a PluginOptions instance"
            )
    else:
        options = make_options(options, **kwargs)
    return EtaPlugin(options, registry=registry)


__all__ = ["EtaPlugin", "eta_plugin", "INTERNAL_CONFIG_MODULE_NAME"]
