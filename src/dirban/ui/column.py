"""Column widget for dirban UI."""

from typing import Any

from textual.app import ComposeResult
from textual.containers import VerticalScroll
from textual.widgets import Rule, Static

from dirban.ui.card import CardWidget


class ColumnWidget(VerticalScroll, can_focus=False, inherit_bindings=False):
    """A single column on the board. ``column`` is its boardData dict."""

    DEFAULT_CSS = """
    ColumnWidget {
        width: 1fr;
        height: 100%;
        min-width: 25;
        max-width: 40;
        padding: 0 1;
        border-right: tall $surface-lighten-1;
    }
    ColumnWidget > .column-title {
        width: 100%;
        text-align: center;
        text-style: bold;
    }
    ColumnWidget > Rule.-horizontal {
        margin: 0;
    }
    ColumnWidget > .column-empty {
        color: $text-muted;
        text-align: center;
    }
    """

    def __init__(self, column: dict[str, Any]) -> None:
        super().__init__()
        self.column = column

    @property
    def column_name(self) -> str:
        return self.column["name"]

    def compose(self) -> ComposeResult:
        count = len(self.column["cards"])
        yield Static(f"{self.column_name} ({count})", classes="column-title")
        yield Rule()
        for card in self.column["cards"]:
            yield CardWidget(card, self.column_name)
        if not count:
            yield Static("empty", classes="column-empty")

    @property
    def cards(self) -> list[CardWidget]:
        return list(self.query(CardWidget))
