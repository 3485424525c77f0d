"""Live board sync: watch the board root, rebuild, push to the view.

One SyncController per open board. Filesystem notifications arrive on
the watcher's thread, are queued onto the event loop, and a single
consumer task turns each one into a full rebuild-and-push. Intents from
the view are dispatched through ``handle``.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Callable
from enum import Enum
from pathlib import Path
from typing import Any

from dirban.board import Renderer, board_root, build_board
from dirban.fs import FileSystem, uri_to_path
from dirban.intents import Intent, MoveCard, OpenFile, Ready, board_data, parse_intent
from dirban.models import Board
from dirban.move import move_card
from dirban.render import render
from dirban.watcher import Watcher

logger = logging.getLogger(__name__)

# Receives outbound messages; may be sync or async
Publisher = Callable[[dict[str, Any]], Any]
# Receives the path of a card to open; may be sync or async
Opener = Callable[[Path], Any]


class State(Enum):
    IDLE = "idle"
    WATCHING = "watching"
    DISPOSED = "disposed"


async def _maybe_await(result: Any) -> None:
    if inspect.isawaitable(result):
        await result


class SyncController:
    """Owns one board's watch subscription, current Board and intent dispatch."""

    def __init__(
        self,
        anchor: str | Path,
        publish: Publisher,
        open_file: Opener | None = None,
        fs: FileSystem | None = None,
        watcher: Watcher | None = None,
        renderer: Renderer = render,
    ) -> None:
        self.anchor = Path(anchor).absolute()
        self.root = board_root(self.anchor)
        self.board: Board | None = None
        self.state = State.IDLE
        self._publish = publish
        self._open_file = open_file
        self._fs = fs or FileSystem()
        self._watcher = watcher if watcher is not None else Watcher()
        self._renderer = renderer
        self._changes: asyncio.Queue[tuple[str, str]] = asyncio.Queue()
        self._loop: asyncio.AbstractEventLoop | None = None
        self._consumer: asyncio.Task | None = None

    async def open(self) -> Board:
        """Start watching and push the initial board.

        The watch stays up even if the initial build fails; the error
        propagates so the caller can report it.
        """
        if self.state is not State.IDLE:
            raise RuntimeError(f"controller for {self.anchor} is {self.state.value}")
        self._loop = asyncio.get_running_loop()
        self._watcher.start(self.root, self._on_change)
        self._consumer = asyncio.create_task(self._consume())
        self.state = State.WATCHING
        logger.info("watching board %s", self.root)
        return await self.refresh()

    def dispose(self) -> None:
        """Stop watching. In-flight rebuilds finish but push nothing.

        Does not block; await ``wait_closed`` to join the watcher thread.
        """
        if self.state is State.DISPOSED:
            return
        self.state = State.DISPOSED
        self._watcher.stop()
        if self._consumer is not None:
            self._consumer.cancel()
            self._consumer = None
        logger.info("closed board %s", self.root)

    async def wait_closed(self) -> None:
        """Wait for the stopped watcher's thread to exit, off the event loop."""
        await asyncio.to_thread(self._watcher.join)

    def _on_change(self, event_type: str, path: str) -> None:
        """Watcher callback; runs on the observer thread."""
        loop = self._loop
        if loop is None or loop.is_closed():
            return
        loop.call_soon_threadsafe(self.notify, event_type, path)

    def notify(self, event_type: str, path: str) -> None:
        """Queue a change notification. Must be called on the event loop."""
        if self.state is not State.WATCHING:
            return
        self._changes.put_nowait((event_type, path))

    async def _consume(self) -> None:
        while True:
            event_type, path = await self._changes.get()
            logger.debug("%s %s", event_type, path)
            try:
                await self.refresh()
            except Exception:
                logger.exception("rebuild of %s failed", self.root)

    async def refresh(self) -> Board:
        """Rebuild the board from disk and push it. Errors propagate."""
        board = await build_board(self.anchor, self._fs, self._renderer)
        self.board = board
        if self.state is State.DISPOSED:
            logger.debug("dropping push for closed board %s", self.root)
            return board
        await _maybe_await(self._publish(board_data(board)))
        return board

    async def handle(self, intent: Intent | None) -> None:
        """Dispatch one intent from the view."""
        match intent:
            case Ready():
                await self.refresh()
            case MoveCard(card_uri=card_uri, target_column=target_column):
                try:
                    await move_card(self.anchor, card_uri, target_column, self._fs)
                except Exception:
                    # Caller sees the move's error, never the rebuild's
                    try:
                        await self.refresh()
                    except Exception:
                        logger.exception("rebuild after failed move of %s failed", card_uri)
                    raise
                await self.refresh()
            case OpenFile(card_uri=card_uri):
                await self._open(card_uri)
            case _:
                logger.debug("ignoring intent %r", intent)

    async def handle_message(self, message: Any) -> None:
        """Parse a raw inbound message and dispatch it."""
        await self.handle(parse_intent(message))

    async def _open(self, card_uri: str) -> None:
        if not card_uri:
            return
        if self._open_file is None:
            logger.warning("no editor available to open %s", card_uri)
            return
        await _maybe_await(self._open_file(uri_to_path(card_uri)))


class SyncRegistry:
    """Open controllers keyed by anchor path. Boards share nothing."""

    def __init__(self) -> None:
        self._controllers: dict[Path, SyncController] = {}

    def __len__(self) -> int:
        return len(self._controllers)

    def __contains__(self, anchor: str | Path) -> bool:
        return Path(anchor).absolute() in self._controllers

    def get(self, anchor: str | Path) -> SyncController | None:
        return self._controllers.get(Path(anchor).absolute())

    async def open(self, anchor: str | Path, publish: Publisher, **kwargs: Any) -> SyncController:
        """Open a board, or return the controller already open for it."""
        key = Path(anchor).absolute()
        existing = self._controllers.get(key)
        if existing is not None:
            return existing
        controller = SyncController(key, publish, **kwargs)
        self._controllers[key] = controller
        await controller.open()
        return controller

    def close(self, anchor: str | Path) -> None:
        controller = self._controllers.pop(Path(anchor).absolute(), None)
        if controller is not None:
            controller.dispose()

    def close_all(self) -> None:
        for key in list(self._controllers):
            self.close(key)

    async def shutdown(self) -> None:
        """Close every board and wait for their watchers to finish."""
        controllers = list(self._controllers.values())
        self.close_all()
        for controller in controllers:
            await controller.wait_closed()
