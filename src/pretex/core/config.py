"""Configuration models consumed by the conversion pipeline.

DocumentTemplate

`header` (`str`)
: Static LaTeX emitted before the body. The default loads the article class
  with the AMS packages and opens the document.

`footer` (`str`)
: Static LaTeX emitted after the body. It must close whatever the header
  left open.

`flow_environment` (`str`)
: Name of the text-flow environment wrapped around the rendered blocks,
  between header and footer. Level-4 headings close it transiently to typeset a
  centered title.

PretexConfig

`header_marker` (`str`)
: Single character introducing a heading line. Repeating it raises the level.

`align_marker` (`str`)
: Single character introducing a line of an alignment (equation) block.

`line_break_sentinel` (`str`)
: Prose line content which, once stripped, is replaced with a paragraph break.

`comment_sentinel` (`str`)
: Substring splitting an alignment line into a formula and an inline comment.

`max_header_level` (`int`)
: Deepest heading level accepted by the renderer, between 1 and 5.

`numbered_equations` (`bool`)
: Render alignment blocks with ``align`` instead of ``align*``.

`document` (`DocumentTemplate`)
: Header and footer wrapped around the rendered blocks.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

try:  # Python >=3.11
    import tomllib  # type: ignore[attr-defined]
except ModuleNotFoundError:  # Python 3.10
    import tomli as tomllib
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator
import yaml

from .exceptions import ConfigError


SUPPORTED_HEADER_LEVELS = 5

DEFAULT_HEADER = r"""\documentclass[12pt, a4paper]{article}
\usepackage{amsmath}
\usepackage{amsfonts}
\usepackage{amssymb}
\begin{document}
"""

DEFAULT_FOOTER = r"""\end{document}
"""


class DocumentTemplate(BaseModel):
    """Static strings wrapped around the rendered fragments."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    header: str = DEFAULT_HEADER
    footer: str = DEFAULT_FOOTER
    flow_environment: str = Field(default="flushleft", min_length=1)


class PretexConfig(BaseModel):
    """Markers, sentinels and document wrapper driving a conversion."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    header_marker: str = Field(default="#", min_length=1, max_length=1)
    align_marker: str = Field(default=">", min_length=1, max_length=1)
    line_break_sentinel: str = Field(default="~~", min_length=1)
    comment_sentinel: str = Field(default="~~", min_length=1)
    max_header_level: int = Field(default=SUPPORTED_HEADER_LEVELS, ge=1, le=SUPPORTED_HEADER_LEVELS)
    numbered_equations: bool = False
    document: DocumentTemplate = Field(default_factory=DocumentTemplate)

    @model_validator(mode="after")
    def check_markers(self) -> PretexConfig:
        """Reject configurations where both markers collide."""
        if self.header_marker == self.align_marker:
            raise ValueError("header_marker and align_marker must differ")
        return self

    @property
    def align_environment(self) -> str:
        """Return the amsmath environment used for alignment blocks."""
        return "align" if self.numbered_equations else "align*"


def _read_mapping(path: Path) -> Mapping[str, Any]:
    suffix = path.suffix.lower()
    try:
        payload = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read configuration '{path}': {exc}") from exc

    if suffix == ".toml":
        try:
            data: Any = tomllib.loads(payload)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Invalid TOML configuration '{path}': {exc}") from exc
    elif suffix in {".yml", ".yaml"}:
        try:
            data = yaml.safe_load(payload)
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML configuration '{path}': {exc}") from exc
    else:
        raise ConfigError(f"Unsupported configuration format '{suffix or path.name}'.")

    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ConfigError(f"Configuration '{path}' must contain a mapping.")
    return data


def load_config(path: Path | str) -> PretexConfig:
    """Load a YAML or TOML configuration file into a :class:`PretexConfig`."""
    source = Path(path)
    data = _read_mapping(source)
    try:
        return PretexConfig.model_validate(dict(data))
    except ValidationError as exc:
        raise ConfigError(f"Configuration validation failed for '{source}': {exc}") from exc


__all__ = [
    "DEFAULT_FOOTER",
    "DEFAULT_HEADER",
    "SUPPORTED_HEADER_LEVELS",
    "DocumentTemplate",
    "PretexConfig",
    "load_config",
]
