"""Gathering directory entries and reading and writing their descriptions."""

from __future__ import annotations

import os
from pathlib import Path

from lsimproved.errors import FileOperationFailed, InvalidPath, PathNotFound
from lsimproved.path import LsiPath, LsiPathKind, is_hidden

DIR_DESCRIPTION = ".description.lsi"
FILE_DESCRIPTION_DIR = ".file_description_lsi"


def path_filter(
    path: str | Path, is_only: LsiPathKind | None, show_hidden: bool
) -> bool:
    """Return True if ``path`` should appear in the listing."""
    path = Path(path)
    if is_hidden(path) and not show_hidden:
        return False
    if is_only is LsiPathKind.DIR:
        return path.is_dir()
    if is_only is LsiPathKind.FILE:
        return path.is_file()
    return True


def get_paths(
    path: str | Path,
    is_only: LsiPathKind | None,
    show_hidden: bool,
    sort_mode: str,
) -> list[LsiPath]:
    """List the entries of directory ``path``, filtered and sorted."""
    try:
        with os.scandir(path) as entries:
            children = [Path(entry.path) for entry in entries]
    except FileNotFoundError as exc:
        raise PathNotFound() from exc
    except OSError as exc:
        raise FileOperationFailed(f"Failed to read directory: {path}") from exc
    return sorted(
        LsiPath(child, sort_mode)
        for child in children
        if path_filter(child, is_only, show_hidden)
    )


def read_description_file(path: str | Path) -> str:
    """Read a description file, normalise line endings and trim whitespace."""
    try:
        with open(path, encoding="utf-8", newline="") as handle:
            text = handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise FileOperationFailed(
            f"Failed to open description file: {path}"
        ) from exc
    lines = (line.removesuffix("\r") for line in text.split("\n"))
    return "\n".join(lines).strip()


def read_dir_description(path: LsiPath) -> str:
    """Read the description stored inside a directory."""
    return read_description_file(os.path.join(path.absolute_path(), DIR_DESCRIPTION))


def read_file_description(path: LsiPath) -> str:
    """Read the description stored beside a file."""
    absolute = path.absolute_path()
    parent, name = os.path.split(absolute)
    if not name:
        raise InvalidPath()
    return read_description_file(
        os.path.join(parent, FILE_DESCRIPTION_DIR, f".{name}.lsi")
    )


def description_file_for(path: str | Path) -> str:
    """Return where the description of ``path`` lives, creating its folder if needed."""
    try:
        canonical = Path(path).resolve(strict=True)
    except FileNotFoundError as exc:
        raise PathNotFound() from exc
    except OSError as exc:
        raise FileOperationFailed(f"Failed to canonicalize path: {path}") from exc
    if canonical.is_dir():
        return str(canonical / DIR_DESCRIPTION)
    name = canonical.name
    if not name:
        raise InvalidPath()
    folder = canonical.parent / FILE_DESCRIPTION_DIR
    if not folder.is_dir():
        try:
            folder.mkdir()
        except OSError as exc:
            raise FileOperationFailed(f"Failed to create directory: {folder}") from exc
    return str(folder / f".{name}.lsi")


def write_description(path: str | Path, content: str) -> str:
    """Store ``content`` as the description of ``path`` and return the file written."""
    content = content.replace("\\n", "\n")
    filename = description_file_for(path)
    try:
        with open(filename, "w", encoding="utf-8", newline="") as handle:
            handle.write(content)
    except OSError as exc:
        raise FileOperationFailed(
            f"Failed to write to description file: {filename}"
        ) from exc
    print(f"Success: Write description to {filename}")
    return filename