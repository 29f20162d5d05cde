"""Virtual configuration module shared by every synthesized module."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

INTERNAL_CONFIG_MODULE_NAME = "@@@eta-config"

RUNTIME_DIR = Path(__file__).parent / "runtime"


@lru_cache(maxsize=None)
def internal_config_source() -> str:
    """Source of the virtual config module, read from the package once."""
    return (RUNTIME_DIR / "internal_config.js").read_text(encoding="utf-8")


def is_config_module(module_id: str) -> bool:
    return module_id == INTERNAL_CONFIG_MODULE_NAME
