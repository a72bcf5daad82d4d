"""Setting or editing the description of a file or directory."""

from __future__ import annotations

import os
from pathlib import Path

from lsimproved.args import LsiArgs
from lsimproved.errors import FailedLaunchEditor
from lsimproved.fs import description_file_for, write_description


def launch_editor(path: str | Path, editor: str) -> None:
    """Replace the current process with ``editor`` opened on the description file."""
    filepath = description_file_for(path)
    print(f"Exec: {editor} {filepath}", flush=True)
    try:
        os.execvp(editor, [editor, filepath])
    except OSError as exc:
        raise FailedLaunchEditor(f"Failed to launch editor: {exc}") from exc


def run(args: LsiArgs) -> None:
    """Write the given description, or open an editor on it."""
    if args.set_description is not None:
        write_description(args.path, args.set_description)
    elif args.edit_description is not None:
        launch_editor(args.path, args.edit_description)
    else:
        raise FailedLaunchEditor("No editor specified")