"""Card widgets for dirban UI."""

from datetime import datetime
from typing import Any

from rich.text import Text
from textual.app import ComposeResult
from textual.message import Message
from textual.widgets import Static

from dirban.palette import color_for_tag


class PlainStatic(Static):
    """Static that doesn't allow text selection."""

    ALLOW_SELECT = False


def format_created(created_at: float, fmt: str = "%Y-%m-%d") -> str:
    """Format a millisecond timestamp in local time."""
    return datetime.fromtimestamp(created_at / 1000).strftime(fmt)


def tags_text(tags: list[str]) -> Text:
    """Tags as coloured chips separated by spaces."""
    text = Text()
    for i, tag in enumerate(tags):
        if i:
            text.append(" ")
        text.append(f" {tag} ", style=f"bold #ffffff on {color_for_tag(tag)}")
    return text


class CardWidget(Static, can_focus=True):
    """A single card in a column. ``card`` is the card's boardData dict."""

    BINDINGS = [
        ("enter", "open_card", "Open"),
    ]

    class Selected(Message):
        """Posted when the card gains focus."""

        def __init__(self, card_widget: "CardWidget") -> None:
            super().__init__()
            self.card_widget = card_widget

    class OpenRequested(Message):
        """Posted when the card should be opened in the editor."""

        def __init__(self, card_widget: "CardWidget") -> None:
            super().__init__()
            self.card_widget = card_widget

    DEFAULT_CSS = """
    CardWidget {
        width: 100%;
        height: auto;
        padding: 0 1;
        margin-bottom: 1;
        background: $surface;
        border-left: tall $accent;
    }
    CardWidget:focus {
        background: $primary;
    }
    CardWidget #card-title {
        text-style: bold;
    }
    CardWidget #card-footer {
        color: $text-muted;
    }
    """

    def __init__(self, card: dict[str, Any], column: str) -> None:
        super().__init__()
        self.card = card
        self.column = column

    @property
    def uri(self) -> str:
        return self.card["uri"]

    @property
    def file_name(self) -> str:
        return self.card["fileName"]

    def compose(self) -> ComposeResult:
        yield PlainStatic(self.card["title"], id="card-title")
        if self.card["tags"]:
            yield PlainStatic(tags_text(self.card["tags"]), id="card-tags")
        yield PlainStatic(format_created(self.card["createdAt"]), id="card-footer")

    def on_focus(self) -> None:
        self.post_message(self.Selected(self))

    def action_open_card(self) -> None:
        self.post_message(self.OpenRequested(self))
