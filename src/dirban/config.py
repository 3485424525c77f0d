"""Board settings stored as YAML in the anchor file."""

from pathlib import Path
from typing import Any

import yaml

ANCHOR_NAME = "board.kanban"

DEFAULTS: dict[str, Any] = {
    "title": None,
    "editor": None,
}


def resolve_anchor(path: str | Path) -> Path:
    """Anchor file for a path.

    A directory means its board.kanban. A path that doesn't exist yet is
    taken as a directory unless it ends in .kanban.
    """
    path = Path(path).absolute()
    if path.is_dir():
        return path / ANCHOR_NAME
    if not path.exists() and path.suffix != Path(ANCHOR_NAME).suffix:
        return path / ANCHOR_NAME
    return path


def read_config(anchor: str | Path) -> dict[str, Any]:
    """Read anchor settings, filling in defaults.

    An unreadable or undecodable file, invalid YAML or a non-mapping
    yields the defaults. Unknown keys are kept. Title defaults to the
    board directory's name.
    """
    anchor = Path(anchor)
    config = dict(DEFAULTS)
    try:
        loaded = yaml.safe_load(anchor.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, yaml.YAMLError):
        loaded = None
    if isinstance(loaded, dict):
        config.update({str(k): v for k, v in loaded.items() if v is not None})
    if not config["title"]:
        config["title"] = anchor.absolute().parent.name
    config["title"] = str(config["title"])
    return config


def write_config(anchor: str | Path, config: dict[str, Any]) -> None:
    """Write non-default settings back to the anchor file."""
    data = {k: v for k, v in config.items() if v is not None and DEFAULTS.get(k, object()) != v}
    text = yaml.dump(data, default_flow_style=False, sort_keys=False) if data else ""
    Path(anchor).write_text(text, encoding="utf-8")
