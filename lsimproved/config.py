"""Reading the TOML configuration file."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass
from pathlib import Path

COLOR_KEYS = (
    "red",
    "blue",
    "green",
    "white",
    "purple",
    "yellow",
    "cyan",
    "underline",
    "end",
    "dir",
    "current_dir",
    "file",
    "description",
)


@dataclass
class ColorConf:
    """Colour overrides: each entry is a list of escape-sequence tails."""

    red: list[str] | None = None
    blue: list[str] | None = None
    green: list[str] | None = None
    white: list[str] | None = None
    purple: list[str] | None = None
    yellow: list[str] | None = None
    cyan: list[str] | None = None
    underline: list[str] | None = None
    end: list[str] | None = None
    dir: list[str] | None = None
    current_dir: list[str] | None = None
    file: list[str] | None = None
    description: list[str] | None = None

    def get(self, key: str) -> list[str] | None:
        """Return the override for ``key``, or None if unset or unknown."""
        if key in COLOR_KEYS:
            return getattr(self, key)
        return None


@dataclass
class Config:
    """The whole application configuration."""

    colors: ColorConf | None = None


def _parse_colors(table: object) -> ColorConf | None:
    if not isinstance(table, dict):
        return None
    values: dict[str, list[str]] = {}
    for key in COLOR_KEYS:
        value = table.get(key)
        if value is None:
            continue
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            return None
        values[key] = list(value)
    return ColorConf(**values)


def parse_config(text: str) -> Config | None:
    """Parse configuration text; return None if it is invalid."""
    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError:
        return None
    if "colors" not in data:
        return Config()
    colors = _parse_colors(data["colors"])
    if colors is None:
        return None
    return Config(colors=colors)


def read_config(path: str | Path) -> Config | None:
    """Read and parse a configuration file; an unreadable file counts as empty."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        text = ""
    return parse_config(text)