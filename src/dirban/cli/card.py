"""Handlers for 'dirban card' commands."""

import asyncio
import sys

from dirban.cli._common import (
    anchor_path,
    build_board_or_die,
    error,
    find_card,
    find_column,
    output_json,
    output_result,
)
from dirban.fs import uri_to_path
from dirban.move import move_card


def card_list(args) -> int:
    """List cards grouped by column."""
    board = build_board_or_die(anchor_path(args), args.json)

    columns = [col for col in board.columns if not args.column or col.name == args.column]

    if args.json:
        items = [
            {
                "file": card.file_name,
                "title": card.title,
                "tags": card.tags,
                "column": col.name,
            }
            for col in columns
            for card in col.cards
        ]
        output_json(items)
    else:
        for col in columns:
            print(col.name)
            for card in col.cards:
                tags = f"  [{', '.join(card.tags)}]" if card.tags else ""
                print(f"  {card.file_name:<24} {card.title}{tags}")

    return 0


def card_get(args) -> int:
    """Dump card markdown content."""
    board = build_board_or_die(anchor_path(args), args.json)
    col, card = find_card(board, args.card, args.json)

    if args.json:
        data = card.to_dict()
        data["column"] = col.name
        output_json(data)
    else:
        sys.stdout.write(uri_to_path(card.uri).read_text(encoding="utf-8"))

    return 0


def card_move(args) -> int:
    """Move a card file into another column."""
    anchor = anchor_path(args)
    board = build_board_or_die(anchor, args.json)
    source, card = find_card(board, args.card, args.json)
    target = find_column(board, args.column, args.json)

    if source is target:
        output_result(
            {"file": card.file_name, "column": target.name, "moved": False},
            f"{card.file_name} is already in {target.name}",
            args.json,
        )
        return 0

    try:
        asyncio.run(move_card(anchor, card.uri, target.name))
    except FileExistsError:
        error(f"{target.name}/{card.file_name} already exists", args.json)
    except OSError as e:
        error(str(e), args.json)

    output_result(
        {"file": card.file_name, "column": target.name, "moved": True},
        f"Moved {card.file_name} from {source.name} to {target.name}",
        args.json,
    )

    return 0
