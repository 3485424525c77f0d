"""Side pane showing the selected card, and the move-to picker."""

from typing import Any

from textual.app import ComposeResult
from textual.containers import Vertical, VerticalScroll
from textual.screen import ModalScreen
from textual.widgets import Markdown, OptionList, Static
from textual.widgets.option_list import Option

from dirban.ui.card import format_created, tags_text

EMPTY_DETAIL = "Select a card to view details."


class CardDetail(VerticalScroll, can_focus=False):
    """Read-only view of one card: title, created date, tags, body."""

    DEFAULT_CSS = """
    CardDetail {
        width: 1fr;
        min-width: 30;
        height: 100%;
        padding: 0 1;
        background: $panel;
    }
    CardDetail #detail-title {
        text-style: bold;
        padding: 1 0 0 0;
    }
    CardDetail #detail-meta {
        color: $text-muted;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.card: dict[str, Any] | None = None

    def compose(self) -> ComposeResult:
        yield Static(EMPTY_DETAIL, id="detail-title")
        yield Static("", id="detail-meta")
        yield Static("", id="detail-tags")
        yield Markdown("", id="detail-body")

    async def show(self, card: dict[str, Any] | None) -> None:
        """Display card, or the empty prompt when None."""
        self.card = card
        title = self.query_one("#detail-title", Static)
        meta = self.query_one("#detail-meta", Static)
        tags = self.query_one("#detail-tags", Static)
        body = self.query_one("#detail-body", Markdown)
        if card is None:
            title.update(EMPTY_DETAIL)
            meta.update("")
            tags.update("")
            await body.update("")
            return
        title.update(card["title"])
        meta.update(f"{card['fileName']}  ·  created {format_created(card['createdAt'], '%Y-%m-%d %H:%M')}")
        tags.update(tags_text(card["tags"]))
        await body.update(card["body"])


class MoveToScreen(ModalScreen[str | None]):
    """Pick a target column. Dismisses with its name, or None."""

    DEFAULT_CSS = """
    MoveToScreen {
        align: center middle;
        background: rgba(0, 0, 0, 0.6);
    }
    #move-dialog {
        width: 40;
        height: auto;
        max-height: 80%;
        border: thick $primary;
        background: $surface;
        padding: 0 1;
    }
    #move-dialog > Static {
        text-style: bold;
    }
    """

    BINDINGS = [("escape", "cancel", "Cancel")]

    def __init__(self, title: str, columns: list[str], current: str) -> None:
        super().__init__()
        self.card_title = title
        self.columns = columns
        self.current = current

    def compose(self) -> ComposeResult:
        options = [Option(name, id=name, disabled=(name == self.current)) for name in self.columns]
        with Vertical(id="move-dialog"):
            yield Static(f"Move '{self.card_title}' to")
            yield OptionList(*options, id="move-options")

    def on_mount(self) -> None:
        self.query_one("#move-options", OptionList).focus()

    def on_option_list_option_selected(self, event: OptionList.OptionSelected) -> None:
        event.stop()
        self.dismiss(event.option.id)

    def action_cancel(self) -> None:
        self.dismiss(None)
