"""Shared helpers for CLI command handlers."""

import asyncio
import json
import sys
from pathlib import Path

from dirban.board import build_board
from dirban.config import resolve_anchor
from dirban.models import Board, Card, Column


def anchor_path(args) -> Path:
    return resolve_anchor(args.anchor)


def build_board_or_die(anchor: Path, json_mode: bool) -> Board:
    """Build the board. Exit 1 with message if the folder can't be read."""
    try:
        return asyncio.run(build_board(anchor))
    except (OSError, UnicodeDecodeError) as e:
        error(str(e), json_mode)


def find_column(board: Board, name: str, json_mode: bool) -> Column:
    """Lookup column by directory name. Exit 1 listing available columns if not found."""
    col = board.column(name)
    if col is not None:
        return col
    available = [f"  {c.name}" for c in board.columns]
    msg = f"Column '{name}' not found. Available:\n" + "\n".join(available)
    error(msg, json_mode)


def find_card(board: Board, ref: str, json_mode: bool) -> tuple[Column, Card]:
    """Lookup a card by file name, or ``column/file`` when names clash.

    The .md suffix may be left off.
    """
    col_name, _, file_name = ref.rpartition("/")
    wanted = file_name.lower()
    matches = [
        (col, card)
        for col in board.columns
        if not col_name or col.name == col_name
        for card in col.cards
        if card.file_name.lower() in (wanted, f"{wanted}.md")
    ]
    if len(matches) == 1:
        return matches[0]
    if not matches:
        error(f"Card '{ref}' not found.", json_mode)
    options = "\n".join(f"  {col.name}/{card.file_name}" for col, card in matches)
    error(f"Card '{ref}' is ambiguous. Use one of:\n{options}", json_mode)


def output_json(data: dict | list) -> None:
    """Write JSON to stdout."""
    print(json.dumps(data, indent=2))


def output_result(data: dict, text: str, json_mode: bool) -> None:
    """Output mutation result as JSON or plain text."""
    if json_mode:
        output_json(data)
    else:
        print(text)


def error(message: str, json_mode: bool) -> None:
    """Print error to stderr and exit 1."""
    if json_mode:
        print(json.dumps({"error": message}), file=sys.stderr)
    else:
        print(f"error: {message}", file=sys.stderr)
    sys.exit(1)


def build_column_summaries(board: Board) -> list[dict]:
    """Build column summary dicts from board."""
    return [{"name": col.name, "cards": len(col.cards)} for col in board.columns]


def format_column_line(c: dict, indent: str = "") -> str:
    """Format a column summary dict as a text line."""
    cards = "card" if c["cards"] == 1 else "cards"
    return f"{indent}{c['name']:<16} {c['cards']} {cards}"
