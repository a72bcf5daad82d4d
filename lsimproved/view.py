"""Rendering a directory listing as a coloured tree."""

from __future__ import annotations

from pathlib import Path

from lsimproved.colors import Colors
from lsimproved.decoration import decorate
from lsimproved.path import LsiPath, LsiPathKind


def format_cwd(cwd: str | Path, colors: Colors) -> str:
    """Render the header line naming the listed directory and its parent."""
    absolute = Path(cwd).resolve(strict=True)
    name = absolute.name
    if name:
        current = f"{colors.current_dir}{name}/{colors.end}"
    else:
        current = f"{colors.current_dir}/{colors.end}"
    parent = absolute.parent
    if parent == absolute:
        return current
    parent_text = "" if str(parent) == "/" else str(parent)
    return f"{colors.dir}{parent_text}/{colors.end}{current}"


def format_line(
    path: LsiPath, is_last: bool, colors: Colors, desc_num: int | None
) -> str:
    """Render one entry of the tree; decorates the entry's description in place."""
    decorate(path, colors, desc_num, is_last)
    prefix = "└──" if is_last else "├──"
    if path.kind is LsiPathKind.DIR:
        color, fallback = colors.dir, "Dir"
    else:
        color, fallback = colors.file, "File"
    description = fallback if path.description is None else path.description
    return f"{prefix} {color}{path.file_name}{colors.end}\t/ {description}"


def display(
    paths: list[LsiPath], colors: Colors, cwd: str | Path, desc_num: int | None
) -> None:
    """Print the header and every entry, sorting ``paths`` in place first."""
    print(format_cwd(cwd, colors))
    paths.sort()
    last = len(paths) - 1
    for index, path in enumerate(paths):
        print(format_line(path, index == last, colors, desc_num))