"""Move a card to another column by renaming its file."""

import logging
from pathlib import Path

from dirban.board import board_root
from dirban.fs import FileSystem, uri_to_path

logger = logging.getLogger(__name__)


async def move_card(
    anchor: str | Path,
    card_uri: str | None,
    target_column: str | None,
    fs: FileSystem | None = None,
) -> None:
    """Rename the card file into the target column's directory.

    Missing arguments or a drop onto the card's own column do nothing.
    An occupied destination raises FileExistsError and a missing column
    directory raises whatever the rename raises; nothing is overwritten.
    """
    if not card_uri or not target_column:
        return

    source = uri_to_path(card_uri).absolute()
    file_name = source.name
    if not file_name:
        return

    target = board_root(anchor) / target_column / file_name
    if source == target:
        return

    fs = fs or FileSystem()
    await fs.rename(source, target)
    logger.info("moved %s to %s", file_name, target_column)
