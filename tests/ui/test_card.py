"""Tests for CardWidget."""

import pytest
from textual.app import App, ComposeResult

from dirban.ui.card import CardWidget, PlainStatic, format_created, tags_text

CREATED = 1_700_000_000_000.0


def _card(tags=None):
    return {
        "uri": "file:///board/Todo/a.md",
        "fileName": "a.md",
        "title": "Write docs",
        "body": "",
        "bodyHtml": "",
        "tags": tags or [],
        "createdAt": CREATED,
    }


class CardTestApp(App):
    """Minimal app for testing CardWidget."""

    def __init__(self, card):
        super().__init__()
        self.card = card
        self.opened = []
        self.selected = []

    def compose(self) -> ComposeResult:
        yield CardWidget(self.card, "Todo")

    def on_card_widget_open_requested(self, event):
        self.opened.append(event.card_widget.uri)

    def on_card_widget_selected(self, event):
        self.selected.append(event.card_widget.file_name)


@pytest.mark.asyncio
async def test_card_shows_title_and_date():
    app = CardTestApp(_card())
    async with app.run_test():
        title = app.query_one("#card-title", PlainStatic)
        footer = app.query_one("#card-footer", PlainStatic)
        assert str(title.content) == "Write docs"
        assert str(footer.content) == format_created(CREATED)
        assert not app.query("#card-tags")


@pytest.mark.asyncio
async def test_card_with_tags():
    app = CardTestApp(_card(["bug", "ui"]))
    async with app.run_test():
        tags = app.query_one("#card-tags", PlainStatic)
        assert "bug" in str(tags.content)


@pytest.mark.asyncio
async def test_focus_selects_and_enter_opens():
    app = CardTestApp(_card())
    async with app.run_test() as pilot:
        app.query_one(CardWidget).focus()
        await pilot.pause()
        assert app.selected == ["a.md"]

        await pilot.press("enter")
        await pilot.pause()
        assert app.opened == ["file:///board/Todo/a.md"]


def test_tags_text_chips():
    text = tags_text(["bug", "ui"])
    assert text.plain == " bug   ui "
    assert len(text.spans) == 2


def test_tags_text_empty():
    assert tags_text([]).plain == ""
