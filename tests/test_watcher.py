"""Tests for the watchdog-backed watcher."""

import threading

import pytest
from watchdog.events import DirCreatedEvent, FileModifiedEvent, FileOpenedEvent

from dirban.watcher import Watcher, _Forwarder


def test_forwarder_passes_changes():
    seen = []
    forwarder = _Forwarder(lambda kind, path: seen.append((kind, path)))
    forwarder.dispatch(FileModifiedEvent("/b/Todo/a.md"))
    forwarder.dispatch(DirCreatedEvent("/b/Doing"))
    assert seen == [("modified", "/b/Todo/a.md"), ("created", "/b/Doing")]


def test_forwarder_ignores_opened():
    seen = []
    forwarder = _Forwarder(lambda kind, path: seen.append(kind))
    forwarder.dispatch(FileOpenedEvent("/b/Todo/a.md"))
    assert seen == []


def test_watcher_reports_nested_change(tmp_path):
    (tmp_path / "Todo").mkdir()
    changed = threading.Event()
    watcher = Watcher()
    watcher.start(tmp_path, lambda kind, path: changed.set())
    try:
        assert watcher.running
        (tmp_path / "Todo" / "a.md").write_text("# A")
        assert changed.wait(5)
    finally:
        watcher.stop()
    assert not watcher.running


def test_watcher_start_twice_raises(tmp_path):
    watcher = Watcher()
    watcher.start(tmp_path, lambda kind, path: None)
    try:
        with pytest.raises(RuntimeError):
            watcher.start(tmp_path, lambda kind, path: None)
    finally:
        watcher.stop()


def test_stop_without_start():
    Watcher().stop()


def test_stop_returns_before_join(tmp_path):
    watcher = Watcher()
    watcher.start(tmp_path, lambda kind, path: None)
    observer = watcher._observer

    watcher.stop()
    assert not watcher.running
    watcher.join(5)
    assert not observer.is_alive()


def test_join_without_stop_is_noop():
    Watcher().join()
