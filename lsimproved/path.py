"""Directory entries with their descriptions and ordering."""

from __future__ import annotations

import enum
import re
from functools import total_ordering
from pathlib import Path

from wcwidth import wcwidth

_LSI_CODE = re.compile(r";.;")
_ESCAPED_ESC = "\\033"


class LsiPathKind(enum.Enum):
    """Whether an entry is a directory or a file."""

    DIR = "dir"
    FILE = "file"


def _file_name(path: Path) -> str:
    name = path.name
    return "" if name == ".." else name


def is_hidden(path: str | Path) -> bool:
    """Return True if the final component of ``path`` starts with a dot."""
    return _file_name(Path(path)).startswith(".")


@total_ordering
class LsiPath:
    """A listed entry: its path, kind, optional description and sort mode."""

    def __init__(self, path: str | Path, sort_mode: str) -> None:
        self.path = Path(path)
        self.kind = LsiPathKind.DIR if self.path.is_dir() else LsiPathKind.FILE
        self.description: str | None = None
        self.sort_mode = sort_mode

    def __repr__(self) -> str:
        return (
            f"LsiPath({str(self.path)!r}, kind={self.kind.name}, "
            f"sort_mode={self.sort_mode!r})"
        )

    @property
    def file_name(self) -> str:
        """The last path component, or "" if there is none."""
        return _file_name(self.path)

    def absolute_path(self) -> str:
        """Return the canonical absolute path; raise if it does not exist."""
        return str(self.path.resolve(strict=True))

    def plain_description(self) -> str | None:
        """Return the description with colour markers removed."""
        if self.description is None:
            return None
        return _LSI_CODE.sub("", self.description).replace(_ESCAPED_ESC, "")

    def width(self) -> int:
        """Display width of the file name in terminal columns."""
        return sum(max(wcwidth(ch), 0) for ch in self.file_name)

    def _key(self, mode: str) -> str:
        kind = "0" if self.kind is LsiPathKind.DIR else "1"
        if mode == "d":
            plain = self.plain_description()
            if plain is None:
                return f"{kind}_1_{self.file_name}"
            return f"{kind}_0_{plain}{self.file_name}"
        return f"{kind}_{self.file_name}"

    def sort_key(self) -> str:
        """Key used for ordering under this entry's sort mode."""
        return self._key(self.sort_mode)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, LsiPath):
            return NotImplemented
        return self._key(self.sort_mode) < other._key(self.sort_mode)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LsiPath):
            return NotImplemented
        return self._key(self.sort_mode) == other._key(self.sort_mode)

    __hash__ = None  # type: ignore[assignment]