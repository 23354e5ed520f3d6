"""Converter options and ``.html2md.toml`` loading.

Config format::

    [converter]
    wrap_width = 100         # 0 disables soft wrapping
    code_fence = "```"
    ignored_tags = ["script", "style"]
"""

from __future__ import annotations

import sys
import tomllib
from dataclasses import dataclass, field, fields
from pathlib import Path

from .context import IGNORED_TAGS

CONFIG_FILENAME = ".html2md.toml"
DEFAULT_CODE_FENCE = "````"


@dataclass(frozen=True)
class ConverterOptions:
    """Tunable constants of the conversion engine."""

    wrap_width: int = 80
    code_fence: str = DEFAULT_CODE_FENCE
    ignored_tags: frozenset[str] = field(default=IGNORED_TAGS)


def default_config_path() -> Path:
    return Path.cwd() / CONFIG_FILENAME


def read_config(config_path: str | Path | None = None) -> dict:
    """Parse the config file, returning ``{}`` when it does not exist."""
    path = default_config_path() if config_path is None else Path(config_path)
    if not path.exists():
        return {}
    with open(path, "rb") as f:
        return tomllib.load(f)


def options_from_mapping(table: dict) -> ConverterOptions:
    """Build options from a ``[converter]`` table.

    Raises:
        ValueError: If a known key holds a value of the wrong type.
    """
    known = {f.name for f in fields(ConverterOptions)}
    kwargs: dict = {}
    for key, value in table.items():
        if key not in known:
            print(f"Warning: unknown converter option '{key}' ignored", file=sys.stderr)
            continue
        kwargs[key] = _coerce(key, value)
    return ConverterOptions(**kwargs)


def load_options_from_config(config_path: str | Path | None = None) -> ConverterOptions:
    """Load ``ConverterOptions`` from the ``[converter]`` table of the config file."""
    config = read_config(config_path)
    return options_from_mapping(config.get("converter", {}))


def _coerce(key: str, value):
    if key == "wrap_width":
        # bool is an int subclass; reject it explicitly
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ValueError(f"converter.wrap_width must be a non-negative integer, got {value!r}")
        return value
    if key == "code_fence":
        if not isinstance(value, str) or not value:
            raise ValueError(f"converter.code_fence must be a non-empty string, got {value!r}")
        return value
    if key == "ignored_tags":
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise ValueError(f"converter.ignored_tags must be a list of tag names, got {value!r}")
        return frozenset(v.lower() for v in value)
    return value
