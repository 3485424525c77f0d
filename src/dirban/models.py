"""Data models for dirban boards."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Card:
    """A markdown file inside a column directory."""

    uri: str
    file_name: str
    title: str = ""
    body: str = ""
    body_html: str = ""
    tags: list[str] = field(default_factory=list)
    created_at: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "uri": self.uri,
            "fileName": self.file_name,
            "title": self.title,
            "body": self.body,
            "bodyHtml": self.body_html,
            "tags": list(self.tags),
            "createdAt": self.created_at,
        }


@dataclass
class Column:
    """A directory directly under the board root."""

    name: str
    cards: list[Card] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"name": self.name, "cards": [card.to_dict() for card in self.cards]}


@dataclass
class Board:
    """The full board state, rebuilt from disk on every change."""

    columns: list[Column] = field(default_factory=list)

    def column(self, name: str) -> Column | None:
        """Find a column by directory name."""
        return next((c for c in self.columns if c.name == name), None)

    def find_card(self, uri: str) -> tuple[Column, Card] | None:
        """Find a card and the column holding it by uri."""
        for col in self.columns:
            for card in col.cards:
                if card.uri == uri:
                    return col, card
        return None

    def to_dict(self) -> dict[str, Any]:
        return {"columns": [col.to_dict() for col in self.columns]}
