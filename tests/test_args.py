import dataclasses

import pytest

from lsimproved.args import LsiArgs
from lsimproved.path import LsiPathKind


def test_defaults():
    args = LsiArgs()
    assert args.path == "."
    assert args.sort_mode == "p"
    assert args.is_only is None
    assert args.is_mkdiri_mode is False
    assert args.desc_num is None


def test_fields_are_kept():
    args = LsiArgs(
        path="data",
        show_hidden=True,
        is_only=LsiPathKind.DIR,
        desc_num=2,
        sort_mode="d",
    )
    assert args.path == "data"
    assert args.show_hidden is True
    assert args.is_only is LsiPathKind.DIR
    assert args.desc_num == 2
    assert args.sort_mode == "d"


def test_replace_produces_new_value():
    base = LsiArgs(path="x")
    changed = dataclasses.replace(base, set_description="hello")
    assert changed.set_description == "hello"
    assert base.set_description is None


def test_is_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        LsiArgs().path = "y"