"""CLI argument parser and dispatch for dirban."""

import argparse

from dirban.cli.board import board_dump, board_summary
from dirban.cli.card import card_get, card_list, card_move
from dirban.cli.init import init_board
from dirban.cli.watch import watch


def _web(args) -> int:
    # textual-serve is only imported when serving
    from dirban.cli.web import web

    return web(args)


def build_parser() -> argparse.ArgumentParser:
    """Build the full CLI argument parser."""
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--anchor",
        default=".",
        help="Anchor file, or the board directory holding board.kanban (default: .)",
    )
    common.add_argument("--json", action="store_true", help="Machine-readable JSON output")

    parser = argparse.ArgumentParser(
        prog="dirban",
        description="Directory-based kanban board",
        parents=[common],
    )

    nouns = parser.add_subparsers(dest="noun")

    # --- init ---
    init_p = nouns.add_parser("init", help="Create a board here", parents=[common])
    init_p.add_argument("--title", help="Board title (default: directory name)")
    init_p.set_defaults(func=init_board)

    # --- board ---
    board_p = nouns.add_parser("board", help="Board operations", parents=[common])
    board_verbs = board_p.add_subparsers(dest="verb")

    board_summary_p = board_verbs.add_parser("summary", help="Show board summary", parents=[common])
    board_summary_p.set_defaults(func=board_summary)

    board_dump_p = board_verbs.add_parser("dump", help="Print the full board as JSON", parents=[common])
    board_dump_p.set_defaults(func=board_dump)

    # board with no verb = summary
    board_p.set_defaults(func=board_summary)

    # --- card ---
    card_p = nouns.add_parser("card", help="Card operations", parents=[common])
    card_verbs = card_p.add_subparsers(dest="verb")

    card_list_p = card_verbs.add_parser("list", help="List cards", parents=[common])
    card_list_p.add_argument("--column", dest="column", help="Filter by column name")
    card_list_p.set_defaults(func=card_list)

    card_get_p = card_verbs.add_parser("get", help="Dump card markdown", parents=[common])
    card_get_p.add_argument("card", help="Card file name, or column/file")
    card_get_p.set_defaults(func=card_get)

    card_move_p = card_verbs.add_parser("move", help="Move a card to another column", parents=[common])
    card_move_p.add_argument("card", help="Card file name, or column/file")
    card_move_p.add_argument("--column", dest="column", required=True, help="Target column name")
    card_move_p.set_defaults(func=card_move)

    # card with no verb = list
    card_p.set_defaults(func=card_list, column=None)

    # --- watch ---
    watch_p = nouns.add_parser("watch", help="Print board snapshots as files change", parents=[common])
    watch_p.add_argument("paths", nargs="*", help="Boards to watch (default: --anchor)")
    watch_p.add_argument("-v", "--verbose", action="store_true", help="Log every change notification")
    watch_p.set_defaults(func=watch)

    # --- web ---
    web_p = nouns.add_parser("web", help="Serve board in browser", parents=[common])
    web_p.add_argument("--host", default="localhost", help="Bind address (default: localhost)")
    web_p.add_argument("--port", type=int, default=8618, help="Port (default: 8618)")
    web_p.set_defaults(func=_web)

    return parser
