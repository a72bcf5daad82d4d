"""Command-line entry point."""

from __future__ import annotations

import argparse
import select
import sys

from lsimproved.args import LsiArgs
from lsimproved.errors import LsiError
from lsimproved.lsi import run as run_lsi
from lsimproved.mkdiri import run as run_mkdiri
from lsimproved.path import LsiPathKind

_PIPE_TIMEOUT = 0.001


def parse_args(argv: list[str] | None) -> argparse.Namespace:
    """Parse command-line options."""
    parser = argparse.ArgumentParser(
        prog="lsi",
        description="List a directory structure along with descriptions.",
    )
    parser.add_argument("path", nargs="?", default=".", metavar="PATH")
    parser.add_argument("-a", "--all", dest="show_all", action="store_true",
                        help="show hidden entries")
    parser.add_argument("-F", "--only-files", dest="only_files",
                        action="store_true", help="list only files")
    parser.add_argument("-D", "--only-directories", dest="only_directories",
                        action="store_true", help="list only directories")
    parser.add_argument("-c", "--config", dest="config_path",
                        help="path of the configuration file")
    parser.add_argument("-n", "--desc-num", dest="desc_num",
                        help="number of description lines to show")
    parser.add_argument("-s", "--set-description", dest="set_description",
                        help="set the description of PATH")
    parser.add_argument("-e", "--edit-description", dest="edit_description",
                        nargs="?", const="", default=None, metavar="EDITOR",
                        help="edit the description of PATH with EDITOR")
    parser.add_argument("-S", "--sort", dest="sort_mode", default="p",
                        help="sort mode: p (by name) or d (by description)")
    return parser.parse_args(argv)


def read_piped_path() -> str | None:
    """Return a line piped on standard input, or None if nothing arrives at once."""
    stdin = sys.stdin
    try:
        ready, _, _ = select.select([stdin], [], [], _PIPE_TIMEOUT)
    except (OSError, ValueError, TypeError):
        return None
    if not ready:
        return None
    try:
        line = stdin.readline()
    except (OSError, ValueError):
        return None
    return line.replace("\n", "")


def _desc_num(value: str | None) -> int | None:
    if value is None:
        return None
    try:
        number = int(value)
    except ValueError:
        return None
    return number if number >= 0 else None


def build_args(namespace: argparse.Namespace, piped: str | None) -> LsiArgs:
    """Combine parsed options and piped input into run settings."""
    if namespace.only_files:
        is_only = LsiPathKind.FILE
    elif namespace.only_directories:
        is_only = LsiPathKind.DIR
    else:
        is_only = None
    is_edit = namespace.edit_description is not None
    return LsiArgs(
        path=piped if piped is not None else namespace.path,
        show_hidden=namespace.show_all,
        is_only=is_only,
        config_path=namespace.config_path,
        desc_num=_desc_num(namespace.desc_num),
        is_mkdiri_mode=namespace.set_description is not None or is_edit,
        set_description=namespace.set_description,
        edit_description=namespace.edit_description or None,
        sort_mode=namespace.sort_mode,
    )


def main(argv: list[str] | None = None) -> int:
    """Run the listing or the description update; return the exit status."""
    namespace = parse_args(argv)
    args = build_args(namespace, read_piped_path())
    try:
        if args.is_mkdiri_mode:
            run_mkdiri(args)
        else:
            run_lsi(args)
    except LsiError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())