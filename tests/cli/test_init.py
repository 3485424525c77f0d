"""Tests for 'dirban init'."""

import json
from argparse import Namespace

from dirban.cli.init import init_board
from dirban.config import ANCHOR_NAME, read_config


def test_init_new_board(tmp_path, capsys):
    root = tmp_path / "plans"
    args = Namespace(anchor=str(root), json=False, title=None)
    assert init_board(args) == 0

    out = capsys.readouterr().out
    assert "Initialized board 'plans'" in out
    assert "Doing, Done, Todo" in out
    assert (root / ANCHOR_NAME).exists()
    assert sorted(p.name for p in root.iterdir() if p.is_dir()) == ["Doing", "Done", "Todo"]


def test_init_with_title(tmp_path, capsys):
    args = Namespace(anchor=str(tmp_path), json=True, title="Garden")
    assert init_board(args) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["title"] == "Garden"
    assert data["created"] is True
    assert read_config(tmp_path / ANCHOR_NAME)["title"] == "Garden"


def test_init_keeps_existing_columns(tmp_path, capsys):
    (tmp_path / "Inbox").mkdir()
    args = Namespace(anchor=str(tmp_path), json=True, title=None)
    assert init_board(args) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["columns"] == ["Inbox"]
    assert data["created"] is True


def test_init_twice(tmp_path, capsys):
    args = Namespace(anchor=str(tmp_path), json=False, title=None)
    init_board(args)
    capsys.readouterr()

    assert init_board(args) == 0
    assert "already initialized" in capsys.readouterr().out


def test_init_does_not_overwrite_anchor(tmp_path, capsys):
    anchor = tmp_path / ANCHOR_NAME
    anchor.write_text("title: Mine\n")
    args = Namespace(anchor=str(anchor), json=True, title="Other")
    init_board(args)

    assert anchor.read_text() == "title: Mine\n"
    assert json.loads(capsys.readouterr().out)["title"] == "Mine"
