"""Recursive filesystem change notifications via watchdog."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

logger = logging.getLogger(__name__)

# Called from the observer thread with (event_type, src_path)
ChangeCallback = Callable[[str, str], None]

NOTIFY_EVENTS = {"created", "modified", "deleted", "moved"}


class _Forwarder(FileSystemEventHandler):
    def __init__(self, callback: ChangeCallback) -> None:
        self.callback = callback

    def on_any_event(self, event: FileSystemEvent) -> None:
        if event.event_type not in NOTIFY_EVENTS:
            return
        self.callback(event.event_type, str(event.src_path))


class Watcher:
    """Watches a directory tree and forwards every change to a callback."""

    def __init__(self) -> None:
        self._observer: Observer | None = None
        self._stopped: Observer | None = None

    @property
    def running(self) -> bool:
        return self._observer is not None

    def start(self, root: str | Path, callback: ChangeCallback) -> None:
        if self._observer is not None:
            raise RuntimeError("watcher already started")
        observer = Observer()
        observer.schedule(_Forwarder(callback), str(root), recursive=True)
        observer.start()
        self._observer = observer
        logger.debug("watching %s", root)

    def stop(self) -> None:
        """Ask the observer to stop. Returns without waiting for its thread."""
        if self._observer is None:
            return
        self._observer.stop()
        self._stopped = self._observer
        self._observer = None

    def join(self, timeout: float | None = None) -> None:
        """Block until a stopped observer's thread has exited."""
        observer, self._stopped = self._stopped, None
        if observer is not None:
            observer.join(timeout)
