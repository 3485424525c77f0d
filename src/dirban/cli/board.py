"""Handlers for 'dirban board' commands."""

from dirban.cli._common import (
    anchor_path,
    build_board_or_die,
    build_column_summaries,
    format_column_line,
    output_json,
)
from dirban.config import read_config


def board_summary(args) -> int:
    """Show board summary: title, columns, card counts."""
    anchor = anchor_path(args)
    board = build_board_or_die(anchor, args.json)
    title = read_config(anchor)["title"]
    columns = build_column_summaries(board)

    if args.json:
        output_json({"title": title, "root": str(anchor.parent), "columns": columns})
    else:
        print(title)
        for c in columns:
            print(format_column_line(c, indent="  "))
        if not columns:
            print("  no columns; create directories next to the anchor file")

    return 0


def board_dump(args) -> int:
    """Print the full boardData snapshot as JSON."""
    from dirban.intents import board_data

    board = build_board_or_die(anchor_path(args), args.json)
    output_json(board_data(board))
    return 0
