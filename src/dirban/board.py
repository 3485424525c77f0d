"""Build a board from the directory tree around an anchor file."""

import unicodedata
from collections.abc import Callable
from pathlib import Path

from dirban.fs import EntryType, FileSystem, path_to_uri
from dirban.models import Board, Card, Column
from dirban.parser import parse_card
from dirban.render import render

Renderer = Callable[[str], str]


def is_card_name(name: str) -> bool:
    return name.lower().endswith(".md")


def board_root(anchor: str | Path) -> Path:
    """The directory holding the anchor file."""
    return Path(anchor).absolute().parent


def collation_key(text: str) -> tuple[str, str, str]:
    """Sort key that orders case and accents the way people expect.

    Compares letters first ignoring case and accents, then accents, then
    case, so "apple" < "Banana" < "cherry" and "e" < "é" < "f".
    """
    decomposed = unicodedata.normalize("NFD", text)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    # Lowercase before uppercase on a case-only tie
    return base.casefold(), decomposed.casefold(), decomposed.swapcase()


async def build_board(
    anchor: str | Path,
    fs: FileSystem | None = None,
    renderer: Renderer = render,
) -> Board:
    """Walk the board root and return a freshly built, sorted Board.

    Any I/O error aborts the build and propagates; nothing partial is
    returned.
    """
    fs = fs or FileSystem()
    root = board_root(anchor)

    columns = []
    for entry in await fs.list_dir(root):
        if entry.type is not EntryType.DIRECTORY:
            continue
        cards = await _load_cards(root / entry.name, fs, renderer)
        columns.append(Column(name=entry.name, cards=cards))

    columns.sort(key=lambda c: collation_key(c.name))
    return Board(columns=columns)


async def _load_cards(column_dir: Path, fs: FileSystem, renderer: Renderer) -> list[Card]:
    """Load every markdown file directly inside a column directory."""
    cards = []
    for entry in await fs.list_dir(column_dir):
        if entry.type is not EntryType.FILE or not is_card_name(entry.name):
            continue
        cards.append(await _load_card(column_dir / entry.name, fs, renderer))
    cards.sort(key=lambda c: collation_key(c.title))
    return cards


async def _load_card(path: Path, fs: FileSystem, renderer: Renderer) -> Card:
    text = await fs.read_text(path)
    parsed = parse_card(text, path.name)
    created_at = await fs.created_at(path)
    return Card(
        uri=path_to_uri(path),
        file_name=path.name,
        title=parsed.title,
        body=parsed.body,
        body_html=renderer(parsed.body),
        tags=parsed.tags,
        created_at=created_at,
    )
