"""Tests for 'dirban board' commands."""

import json
from argparse import Namespace

import pytest

from dirban.cli.board import board_dump, board_summary
from tests.helpers import make_board


def test_board_summary(anchor, capsys):
    args = Namespace(anchor=str(anchor), json=False)
    assert board_summary(args) == 0

    out = capsys.readouterr().out
    assert out.splitlines()[0] == "board"
    assert "Done" in out
    assert "0 cards" in out
    assert "2 cards" in out


def test_board_summary_json(anchor, capsys):
    anchor.write_text("title: Release\n")
    args = Namespace(anchor=str(anchor.parent), json=True)
    assert board_summary(args) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["title"] == "Release"
    assert data["root"] == str(anchor.parent)
    assert data["columns"] == [{"name": "Done", "cards": 0}, {"name": "Todo", "cards": 2}]


def test_board_summary_no_columns(tmp_path, capsys):
    anchor = make_board(tmp_path / "bare", {})
    args = Namespace(anchor=str(anchor), json=False)
    assert board_summary(args) == 0
    assert "no columns" in capsys.readouterr().out


def test_board_summary_missing_folder(tmp_path, capsys):
    args = Namespace(anchor=str(tmp_path / "nope"), json=True)
    with pytest.raises(SystemExit, match="1"):
        board_summary(args)
    assert "error" in json.loads(capsys.readouterr().err)


def test_board_dump(anchor, capsys):
    args = Namespace(anchor=str(anchor), json=False)
    assert board_dump(args) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["type"] == "boardData"
    todo = data["board"]["columns"][1]
    assert todo["name"] == "Todo"
    assert todo["cards"][0]["fileName"] == "first.md"
    assert todo["cards"][0]["tags"] == ["urgent"]


def test_board_dump_missing_folder_plain_error(tmp_path, capsys):
    args = Namespace(anchor=str(tmp_path / "nope"), json=False)
    with pytest.raises(SystemExit, match="1"):
        board_dump(args)
    assert capsys.readouterr().err.startswith("error: ")
