"""Plugin options.

Options can be given directly as keyword arguments or loaded from a YAML
file (`etapack.yaml`):

    templatesDir: src/templates
    include: "**/*.eta"
    exclude: ["**/drafts/**"]
    template:
      autoEscape: true
      autoTrim: [false, nl]
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Literal, Optional, Tuple, Union

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from etapack.exceptions import OptionsError
from etapack.filter import DEFAULT_INCLUDE
from etapack.template.spec import TemplateConfig

TrimOption = Union[Literal[False], Literal["nl", "slurp"]]


def _check_patterns(value: Any) -> Any:
    if value is None or isinstance(value, (str, re.Pattern)):
        return value
    if isinstance(value, (list, tuple)):
        for item in value:
            if not isinstance(item, (str, re.Pattern)):
                raise ValueError(f"pattern must be a string or regex, got {item!r}")
        return tuple(value)
    raise ValueError(f"pattern must be a string, regex or list, got {value!r}")


class TemplateOptions(BaseModel):
    """Template language settings shared by every file in the build."""

    model_config = {"populate_by_name": True, "frozen": True, "extra": "forbid"}

    tags: Tuple[str, str] = Field(default=("<%", "%>"), description="Open/close tags")
    var_name: str = Field(default="it", alias="varName")
    auto_escape: bool = Field(default=True, alias="autoEscape")
    auto_trim: Tuple[TrimOption, TrimOption] = Field(default=(False, "nl"), alias="autoTrim")
    filter: bool = Field(default=False, description="Wrap outputs in E.filter()")
    use_with: bool = Field(default=False, alias="useWith")

    @field_validator("tags")
    @classmethod
    def tags_not_empty(cls, value: Tuple[str, str]) -> Tuple[str, str]:
        if not value[0] or not value[1]:
            raise ValueError("tags must be non-empty strings")
        return value

    def to_config(self) -> TemplateConfig:
        return TemplateConfig(
            tags=self.tags,
            var_name=self.var_name,
            auto_escape=self.auto_escape,
            auto_trim=self.auto_trim,
            filter=self.filter,
            use_with=self.use_with,
        )


class PluginOptions(BaseModel):
    """Setup-time configuration of the transform."""

    model_config = {
        "populate_by_name": True,
        "frozen": True,
        "extra": "forbid",
    }

    templates_dir: str = Field(alias="templatesDir", description="Root of all templates")
    include: Any = Field(default=DEFAULT_INCLUDE, description="Glob(s) or regex(es) to transform")
    exclude: Any = Field(default=None, description="Glob(s) or regex(es) to skip")
    template: TemplateOptions = Field(default_factory=TemplateOptions)

    @field_validator("templates_dir")
    @classmethod
    def templates_dir_not_empty(cls, value: str) -> str:
        if not value:
            raise ValueError("templates_dir must not be empty")
        return value

    @field_validator("include", "exclude")
    @classmethod
    def valid_patterns(cls, value: Any) -> Any:
        return _check_patterns(value)


def make_options(data: Optional[dict[str, Any]] = None, **kwargs: Any) -> PluginOptions:
    """Validate options from a mapping and/or keyword arguments.

    Raises:
        OptionsError: If validation fails.
    """
    merged = {**(data or {}), **kwargs}
    try:
        return PluginOptions.model_validate(merged)
    except ValidationError as exc:
        raise OptionsError(f"Invalid plugin options: {exc}") from exc


def load_options(path: Path) -> PluginOptions:
    """Load options from a YAML file.

    A relative `templatesDir` is resolved against the file's directory.
    """
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise OptionsError(f"Config file must contain a mapping: {path}")

    for key in ("templatesDir", "templates_dir"):
        if isinstance(data.get(key), str) and data[key]:
            templates_dir = Path(data[key])
            if not templates_dir.is_absolute():
                data[key] = str((path.parent / templates_dir).resolve())

    return make_options(data)
