"""Tests for 'dirban watch'."""

import asyncio
import json
import signal
import sys

import pytest

from dirban.cli.watch import _publisher, _watch
from tests.helpers import FakeWatcher


def test_publisher_writes_json_lines(tmp_path, capsys):
    publish = _publisher(tmp_path / "board.kanban")
    publish({"type": "boardData", "board": {"columns": []}})
    publish({"type": "boardData", "board": {"columns": [{"name": "Todo", "cards": []}]}})

    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    first = json.loads(lines[0])
    assert first["anchor"] == str(tmp_path / "board.kanban")
    assert first["type"] == "boardData"
    assert json.loads(lines[1])["board"]["columns"][0]["name"] == "Todo"


@pytest.mark.skipif(sys.platform == "win32", reason="needs unix signals")
@pytest.mark.asyncio
async def test_watch_until_signalled(anchor, tmp_path, capsys, monkeypatch):
    monkeypatch.setattr("dirban.sync.Watcher", FakeWatcher)
    missing = tmp_path / "gone" / "board.kanban"

    task = asyncio.create_task(_watch([anchor, missing]))
    await asyncio.sleep(0.1)
    signal.raise_signal(signal.SIGTERM)
    code = await asyncio.wait_for(task, 2)

    # The unreadable board still counts against the exit code
    assert code == 1
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 1
    assert json.loads(lines[0])["anchor"] == str(anchor)
