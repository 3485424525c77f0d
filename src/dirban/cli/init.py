"""Handler for 'dirban init'."""

from dirban.cli._common import anchor_path, output_json
from dirban.config import read_config, write_config

DEFAULT_COLUMNS = ("Todo", "Doing", "Done")


def init_board(args) -> int:
    """Create the anchor file and starter columns if the board is new."""
    anchor = anchor_path(args)
    root = anchor.parent
    root.mkdir(parents=True, exist_ok=True)

    created_anchor = not anchor.exists()
    if created_anchor:
        write_config(anchor, {"title": args.title})

    created_columns = []
    if not any(child.is_dir() for child in root.iterdir()):
        for name in DEFAULT_COLUMNS:
            (root / name).mkdir()
            created_columns.append(name)

    columns = sorted(child.name for child in root.iterdir() if child.is_dir())
    title = read_config(anchor)["title"]

    if args.json:
        output_json(
            {
                "anchor": str(anchor),
                "title": title,
                "columns": columns,
                "created": created_anchor or bool(created_columns),
            }
        )
    elif created_anchor or created_columns:
        print(f"Initialized board '{title}' at {root}")
        print(f"Columns: {', '.join(columns)}")
    else:
        print(f"Board already initialized at {root}")

    return 0
