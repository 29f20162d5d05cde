"""etapack - compile Eta templates into bundler-ready ES modules.

Templates become modules exporting a `template` render function and a
default wrapper bound to one shared runtime configuration. Partials named by
`include('...')` and `layout('...')` calls turn into imports, each emitted by
the first module of the build that references it.
"""

from etapack._version import __version__
from etapack.exceptions import (
    EtapackError,
    OptionsError,
    OutOfRootError,
    TemplateSyntaxError,
)
from etapack.extractor import extract_partials
from etapack.filter import DEFAULT_INCLUDE, create_filter
from etapack.options import PluginOptions, load_options, make_options
from etapack.plugin import INTERNAL_CONFIG_MODULE_NAME, EtaPlugin, eta_plugin
from etapack.registry import DependencyRegistry

__all__ = [
    "__version__",
    # Plugin
    "EtaPlugin",
    "eta_plugin",
    "INTERNAL_CONFIG_MODULE_NAME",
    # Building blocks
    "DependencyRegistry",
    "create_filter",
    "extract_partials",
    "DEFAULT_INCLUDE",
    # Options
    "PluginOptions",
    "load_options",
    "make_options",
    # Errors
    "EtapackError",
    "OptionsError",
    "OutOfRootError",
    "TemplateSyntaxError",
]
