"""Settings gathered from the command line for a run."""

from __future__ import annotations

from dataclasses import dataclass

from lsimproved.path import LsiPathKind


@dataclass(frozen=True)
class LsiArgs:
    """Options controlling a listing or a description update."""

    path: str = "."
    show_hidden: bool = False
    is_only: LsiPathKind | None = None
    config_path: str | None = None
    desc_num: int | None = None
    is_mkdiri_mode: bool = False
    set_description: str | None = None
    edit_description: str | None = None
    sort_mode: str = "p"