"""Open card files in the user's editor."""

import logging
import os
import shlex
import subprocess
from pathlib import Path

logger = logging.getLogger(__name__)

FALLBACK_EDITOR = "vi"


def editor_command(configured: str | None = None) -> list[str]:
    """Editor argv: configured command, then $VISUAL, $EDITOR, vi."""
    command = configured or os.environ.get("VISUAL") or os.environ.get("EDITOR") or FALLBACK_EDITOR
    return shlex.split(command)


def open_in_editor(path: str | Path, command: str | None = None) -> int:
    """Run the editor on path and wait for it. Returns its exit code."""
    args = [*editor_command(command), str(path)]
    logger.info("opening %s with %s", path, args[0])
    return subprocess.run(args).returncode
