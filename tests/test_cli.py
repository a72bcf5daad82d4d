import io
import os

import pytest

from lsimproved.cli import build_args, main, parse_args, read_piped_path
from lsimproved.fs import read_description_file
from lsimproved.path import LsiPathKind


@pytest.fixture
def no_stdin(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))


def test_defaults():
    args = build_args(parse_args([]), None)
    assert args.path == "."
    assert args.show_hidden is False
    assert args.is_only is None
    assert args.desc_num is None
    assert args.is_mkdiri_mode is False
    assert args.sort_mode == "p"


def test_only_files_wins_over_dirs():
    args = build_args(parse_args(["-F", "-D"]), None)
    assert args.is_only is LsiPathKind.FILE
    args = build_args(parse_args(["-D"]), None)
    assert args.is_only is LsiPathKind.DIR


def test_desc_num_parsing():
    assert build_args(parse_args(["-n", "2"]), None).desc_num == 2
    assert build_args(parse_args(["-n", "abc"]), None).desc_num is None
    assert build_args(parse_args(["-n", "-1"]), None).desc_num is None


def test_piped_path_overrides_argument():
    args = build_args(parse_args(["given"]), "piped")
    assert args.path == "piped"


def test_mkdiri_mode_flags():
    args = build_args(parse_args(["-s", "text", "dir"]), None)
    assert args.is_mkdiri_mode is True
    assert args.set_description == "text"
    assert args.path == "dir"
    bare = build_args(parse_args(["-e"]), None)
    assert bare.is_mkdiri_mode is True
    assert bare.edit_description is None
    with_editor = build_args(parse_args(["-e", "vim"]), None)
    assert with_editor.edit_description == "vim"


def test_read_piped_path_from_pipe(monkeypatch):
    read_fd, write_fd = os.pipe()
    os.write(write_fd, b"some/dir\n")
    os.close(write_fd)
    with os.fdopen(read_fd) as reader:
        monkeypatch.setattr("sys.stdin", reader)
        assert read_piped_path() == "some/dir"


def test_read_piped_path_without_data(monkeypatch):
    read_fd, write_fd = os.pipe()
    try:
        with os.fdopen(read_fd) as reader:
            monkeypatch.setattr("sys.stdin", reader)
            assert read_piped_path() is None
    finally:
        os.close(write_fd)


def test_read_piped_path_unselectable_stdin(no_stdin):
    assert read_piped_path() is None


def test_main_lists_directory(tmp_path, capsys, no_stdin):
    (tmp_path / "child").mkdir()
    assert main([str(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert "child" in out
    assert "/ Dir" in out


def test_main_sets_description(tmp_path, no_stdin):
    assert main(["-s", "described", str(tmp_path)]) == 0
    assert read_description_file(tmp_path / ".description.lsi") == "described"


def test_main_missing_path_fails(tmp_path, capsys, no_stdin):
    assert main([str(tmp_path / "missing")]) == 1
    assert "Error:" in capsys.readouterr().err