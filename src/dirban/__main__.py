"""Entry point for dirban CLI."""

import sys

NOUNS = {"init", "board", "card", "watch", "web"}


def main():
    # No subcommand or non-noun argument = TUI mode
    if len(sys.argv) < 2 or (sys.argv[1] not in NOUNS and not sys.argv[1].startswith("-")):
        from dirban.config import resolve_anchor
        from dirban.ui import DirbanApp

        path = sys.argv[1] if len(sys.argv) > 1 else "."
        app = DirbanApp(resolve_anchor(path))
        app.run()
        return

    from dirban.cli import build_parser

    parser = build_parser()
    args = parser.parse_args()

    if not hasattr(args, "func"):
        parser.print_help()
        sys.exit(1)

    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
