"""Listing a directory together with the descriptions of its entries."""

from __future__ import annotations

from lsimproved.args import LsiArgs
from lsimproved.colors import build_colors
from lsimproved.config import read_config
from lsimproved.errors import FailedDisplay, LsiError
from lsimproved.fs import get_paths, read_dir_description, read_file_description
from lsimproved.path import LsiPath, LsiPathKind
from lsimproved.view import display


def load_descriptions(paths: list[LsiPath]) -> None:
    """Attach each entry's stored description; entries without one are left alone."""
    for path in paths:
        reader = (
            read_dir_description
            if path.kind is LsiPathKind.DIR
            else read_file_description
        )
        try:
            path.description = reader(path)
        except (LsiError, OSError):
            continue


def run(args: LsiArgs) -> None:
    """List ``args.path`` with descriptions and print the tree."""
    paths = get_paths(args.path, args.is_only, args.show_hidden, args.sort_mode)

    config = read_config(args.config_path) if args.config_path else None
    colors = build_colors(config.colors if config is not None else None)

    load_descriptions(paths)

    try:
        display(paths, colors, args.path, args.desc_num)
    except (LsiError, OSError) as exc:
        raise FailedDisplay(str(exc)) from exc