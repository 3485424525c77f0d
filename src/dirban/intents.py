"""Messages exchanged with the presentation layer."""

from dataclasses import dataclass
from typing import Any

from dirban.models import Board


@dataclass(frozen=True)
class Ready:
    """The view is (re)attached and wants the current board."""


@dataclass(frozen=True)
class MoveCard:
    card_uri: str
    target_column: str


@dataclass(frozen=True)
class OpenFile:
    card_uri: str


Intent = Ready | MoveCard | OpenFile


def parse_intent(message: Any) -> Intent | None:
    """Turn an inbound ``{"type": ...}`` message into an Intent.

    Returns None for anything unrecognised. Missing move fields become
    empty strings so the move is a no-op rather than an error.
    """
    if not isinstance(message, dict):
        return None
    match message.get("type"):
        case "ready":
            return Ready()
        case "moveCard":
            return MoveCard(
                card_uri=message.get("cardUri") or "",
                target_column=message.get("targetColumn") or "",
            )
        case "openFile":
            return OpenFile(card_uri=message.get("cardUri") or "")
        case _:
            return None


def board_data(board: Board) -> dict[str, Any]:
    """Outbound snapshot sent after every rebuild."""
    return {"type": "boardData", "board": board.to_dict()}
