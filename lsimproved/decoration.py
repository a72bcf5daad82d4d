"""Colouring and multi-line layout of entry descriptions."""

from __future__ import annotations

from lsimproved.colors import Colors
from lsimproved.path import LsiPath

_ESCAPED_ESC = "\\033"


def replace_lsi_color_codes(text: str, colors: Colors) -> str:
    """Replace ``;r;``-style colour markers with escape sequences."""
    replacements = (
        (";r;", colors.red),
        (";g;", colors.green),
        (";y;", colors.yellow),
        (";b;", colors.blue),
        (";p;", colors.purple),
        (";c;", colors.cyan),
        (";w;", colors.white),
        (";_;", colors.underline),
        (";e;", colors.end + colors.description),
    )
    for marker, code in replacements:
        text = text.replace(marker, code)
    return text


def replace_ansi_escapes(text: str) -> str:
    """Turn a literal backslash-033 into a real escape character."""
    return text.replace(_ESCAPED_ESC, "\x1b")


def _encolor(text: str, colors: Colors) -> str:
    return f"{colors.description}{text}{colors.end}"


def format_multiline(
    text: str,
    colors: Colors,
    width: int,
    line_num: int | None,
    is_last: bool,
) -> str:
    """Colour each description line and indent continuation lines under the tree."""
    lines = text.split("\n")
    count = len(lines) if line_num is None else min(line_num, len(lines))
    first = _encolor(lines[0], colors)
    if count == 1:
        return first
    tree_prefix = " " if is_last else "│"
    indent = f"\n{tree_prefix}   {' ' * width}\t  "
    rest = (indent + _encolor(line, colors) for line in lines[1:count])
    return first + "".join(rest)


def decorate(
    path: LsiPath, colors: Colors, desc_num: int | None, is_last: bool
) -> None:
    """Rewrite the entry's description in place for display; no-op if it has none."""
    if path.description is None:
        return
    text = replace_lsi_color_codes(path.description, colors)
    text = replace_ansi_escapes(text)
    path.description = format_multiline(text, colors, path.width(), desc_num, is_last)