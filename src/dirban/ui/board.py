"""Board screen showing columns, cards and the detail pane."""

from typing import Any

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.message import Message
from textual.screen import Screen
from textual.widgets import Footer, Static

from dirban.intents import Intent, MoveCard, OpenFile, Ready
from dirban.ui.card import CardWidget
from dirban.ui.column import ColumnWidget
from dirban.ui.detail import CardDetail, MoveToScreen

EMPTY_BOARD = "No columns found. Create folders next to the anchor file."


class BoardScreen(Screen):
    """Renders boardData snapshots and turns key presses into intents."""

    DEFAULT_CSS = """
    BoardScreen #board-title {
        width: 100%;
        height: 1;
        background: $primary;
        text-style: bold;
        padding: 0 1;
    }
    BoardScreen #board-body {
        height: 1fr;
    }
    BoardScreen #columns {
        width: 2fr;
        height: 100%;
        overflow-x: auto;
    }
    BoardScreen .board-empty {
        padding: 1 2;
        color: $text-muted;
    }
    """

    BINDINGS = [
        ("left", "focus_column(-1)", "Prev column"),
        ("right", "focus_column(1)", "Next column"),
        ("up", "focus_card(-1)"),
        ("down", "focus_card(1)"),
        ("shift+left", "move_card(-1)", "Move left"),
        ("shift+right", "move_card(1)", "Move right"),
        ("m", "move_menu", "Move to"),
        ("o", "open_card", "Open"),
        ("r", "refresh", "Refresh"),
    ]

    class IntentRequested(Message):
        """An intent for the sync controller."""

        def __init__(self, intent: Intent) -> None:
            super().__init__()
            self.intent = intent

    class BoardData(Message):
        """A fresh board snapshot to render."""

        def __init__(self, board: dict[str, Any]) -> None:
            super().__init__()
            self.board = board

    def __init__(self, title: str) -> None:
        super().__init__()
        self.board_title = title
        self.board: dict[str, Any] | None = None
        self._focus_file: str | None = None

    def compose(self) -> ComposeResult:
        yield Static(self.board_title, id="board-title")
        with Horizontal(id="board-body"):
            yield Horizontal(id="columns")
            yield CardDetail(id="detail")
        yield Footer()

    def on_screen_resume(self) -> None:
        self.request(Ready())

    def request(self, intent: Intent) -> None:
        self.post_message(self.IntentRequested(intent))

    # -- rendering --

    async def on_board_screen_board_data(self, event: BoardData) -> None:
        event.stop()
        await self.show_board(event.board)

    async def show_board(self, board: dict[str, Any]) -> None:
        """Replace every column with the snapshot's, keeping focus on the same file."""
        focused = self.focused
        if self._focus_file is None and isinstance(focused, CardWidget):
            self._focus_file = focused.file_name

        self.board = board
        columns = self.query_one("#columns", Horizontal)
        await columns.remove_children()
        if board["columns"]:
            await columns.mount_all([ColumnWidget(col) for col in board["columns"]])
        else:
            await columns.mount(Static(EMPTY_BOARD, classes="board-empty"))

        target = self._focus_file
        self._focus_file = None
        cards = list(self.query(CardWidget))
        match = next((c for c in cards if c.file_name == target), None)
        if match is None and target is not None and cards:
            match = cards[0]
        if match is not None:
            match.focus()
        else:
            await self.query_one(CardDetail).show(None)

    async def on_card_widget_selected(self, event: CardWidget.Selected) -> None:
        event.stop()
        await self.query_one(CardDetail).show(event.card_widget.card)

    def on_card_widget_open_requested(self, event: CardWidget.OpenRequested) -> None:
        event.stop()
        self.request(OpenFile(event.card_widget.uri))

    # -- navigation --

    def _columns(self) -> list[ColumnWidget]:
        return list(self.query(ColumnWidget))

    def _focused_card(self) -> CardWidget | None:
        focused = self.focused
        return focused if isinstance(focused, CardWidget) else None

    def action_focus_column(self, step: int) -> None:
        columns = self._columns()
        if not columns:
            return
        card = self._focused_card()
        names = [c.column_name for c in columns]
        index = names.index(card.column) + step if card else 0
        # Skip empty columns in the direction of travel
        while 0 <= index < len(columns):
            cards = columns[index].cards
            if cards:
                cards[0].focus()
                return
            index += step if card else 1

    def action_focus_card(self, step: int) -> None:
        card = self._focused_card()
        if card is None:
            self.action_focus_column(1)
            return
        siblings = list(card.parent.query(CardWidget))
        index = siblings.index(card) + step
        if 0 <= index < len(siblings):
            siblings[index].focus()

    # -- intents --

    def _move(self, card: CardWidget, target_column: str) -> None:
        self._focus_file = card.file_name
        self.request(MoveCard(card.uri, target_column))

    def action_move_card(self, step: int) -> None:
        card = self._focused_card()
        if card is None:
            return
        names = [c.column_name for c in self._columns()]
        index = names.index(card.column) + step
        if 0 <= index < len(names):
            self._move(card, names[index])

    def action_move_menu(self) -> None:
        card = self._focused_card()
        if card is None:
            return
        names = [c.column_name for c in self._columns()]

        def on_picked(target: str | None) -> None:
            if target and target != card.column:
                self._move(card, target)

        self.app.push_screen(MoveToScreen(card.card["title"], names, card.column), on_picked)

    def action_open_card(self) -> None:
        card = self._focused_card()
        if card is not None:
            self.request(OpenFile(card.uri))

    def action_refresh(self) -> None:
        self.request(Ready())
