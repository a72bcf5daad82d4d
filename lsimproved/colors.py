"""ANSI colour codes used when rendering a listing."""

from __future__ import annotations

from dataclasses import dataclass

from lsimproved.config import COLOR_KEYS, ColorConf

_DEFAULTS = {
    "red": "\x1b[1;31m",
    "green": "\x1b[1;32m",
    "yellow": "\x1b[33m",
    "blue": "\x1b[1;34m",
    "purple": "\x1b[1;35m",
    "cyan": "\x1b[36m",
    "white": "\x1b[37m",
    "underline": "\x1b[4m",
    "end": "\x1b[0m",
    "dir": "\x1b[36m\x1b[4m",
    "current_dir": "\x1b[1;36m\x1b[4m",
    "file": "\x1b[37m",
    "description": "\x1b[33m",
}


def default_code(term: str) -> str:
    """Return the built-in escape sequence for ``term``, or "" if unknown."""
    return _DEFAULTS.get(term, "")


@dataclass(frozen=True)
class Colors:
    """Escape sequences for each colour and each kind of UI element."""

    red: str = _DEFAULTS["red"]
    blue: str = _DEFAULTS["blue"]
    green: str = _DEFAULTS["green"]
    white: str = _DEFAULTS["white"]
    purple: str = _DEFAULTS["purple"]
    yellow: str = _DEFAULTS["yellow"]
    cyan: str = _DEFAULTS["cyan"]
    underline: str = _DEFAULTS["underline"]
    end: str = _DEFAULTS["end"]
    dir: str = _DEFAULTS["dir"]
    current_dir: str = _DEFAULTS["current_dir"]
    file: str = _DEFAULTS["file"]
    description: str = _DEFAULTS["description"]


def build_colors(conf: ColorConf | None) -> Colors:
    """Build colours from a configuration, falling back to defaults."""
    if conf is None:
        return Colors()
    codes = {}
    for term in COLOR_KEYS:
        parts = conf.get(term)
        if parts is None:
            codes[term] = default_code(term)
        else:
            codes[term] = "".join(f"\x1b{part}" for part in parts)
    return Colors(**codes)