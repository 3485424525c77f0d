"""Main Textual application for dirban."""

from pathlib import Path
from typing import Any

from textual.app import App, SuspendNotSupported

from dirban.config import read_config
from dirban.editor import open_in_editor
from dirban.fs import FileSystem
from dirban.sync import Opener, State, SyncController
from dirban.ui.board import BoardScreen
from dirban.watcher import Watcher


class DirbanApp(App):
    """Directory-backed kanban board TUI."""

    CSS = """
    Tooltip {
        padding: 0 1;
        margin: 0;
    }
    """

    TITLE = "dirban"
    BINDINGS = [("ctrl+q", "quit", "Quit")]

    def __init__(
        self,
        anchor: Path,
        fs: FileSystem | None = None,
        watcher: Watcher | None = None,
        open_file: Opener | None = None,
    ):
        super().__init__()
        self.anchor = anchor
        self.config = read_config(anchor)
        self.board_screen = BoardScreen(self.config["title"])
        self.controller = SyncController(
            anchor,
            self._publish,
            open_file=open_file or self._open_in_editor,
            fs=fs,
            watcher=watcher,
        )

    async def on_mount(self) -> None:
        await self.push_screen(self.board_screen)
        try:
            await self.controller.open()
        except (OSError, UnicodeDecodeError) as exc:
            self.notify(f"Could not read board: {exc}", severity="error")

    def _publish(self, message: dict[str, Any]) -> None:
        """Forward a boardData message to the screen, if it's still there."""
        if message.get("type") != "boardData" or not self.board_screen.is_mounted:
            return
        self.board_screen.post_message(BoardScreen.BoardData(message["board"]))

    async def on_board_screen_intent_requested(self, event: BoardScreen.IntentRequested) -> None:
        event.stop()
        if self.controller.state is State.IDLE:
            return  # still opening; the initial push is on its way
        try:
            await self.controller.handle(event.intent)
        except FileExistsError as exc:
            self.notify(f"A card with that file name is already there: {exc}", severity="error")
        except (OSError, UnicodeDecodeError) as exc:
            self.notify(str(exc), severity="error")

    def _open_in_editor(self, path: Path) -> None:
        try:
            with self.suspend():
                open_in_editor(path, self.config["editor"])
        except SuspendNotSupported:
            self.notify(f"Can't start an editor here; open {path} yourself", severity="warning")

    def action_quit(self) -> None:
        """Stop watching and quit."""
        self.controller.dispose()
        self.exit()

    async def on_unmount(self) -> None:
        self.controller.dispose()
        await self.controller.wait_closed()
