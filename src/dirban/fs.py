"""File primitives the board engine reads and writes through.

Async wrappers around blocking calls, run via asyncio.to_thread so the
UI loop never stalls on disk I/O.
"""

import asyncio
import errno
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from urllib.parse import urlparse
from urllib.request import url2pathname

# errnos meaning the filesystem can't hard-link at all
_NO_HARD_LINKS = {errno.EPERM, errno.EXDEV, errno.ENOTSUP, errno.EOPNOTSUPP, errno.ENOSYS}
# Move a symlinked card as the link itself where the platform allows
_LINK_KWARGS = {"follow_symlinks": False} if os.link in os.supports_follow_symlinks else {}


class EntryType(Enum):
    FILE = "file"
    DIRECTORY = "directory"
    OTHER = "other"


@dataclass(frozen=True)
class Entry:
    """One name returned by a directory listing."""

    name: str
    type: EntryType


def path_to_uri(path: str | Path) -> str:
    """File URI for an absolute or relative path."""
    return Path(path).absolute().as_uri()


def uri_to_path(locator: str) -> Path:
    """Path for a ``file:`` URI or a plain filesystem path."""
    parsed = urlparse(locator)
    if parsed.scheme == "file":
        return Path(url2pathname(parsed.path))
    return Path(locator)


def _entry_type(path: Path) -> EntryType:
    if path.is_dir():
        return EntryType.DIRECTORY
    if path.is_file():
        return EntryType.FILE
    return EntryType.OTHER


def list_dir_sync(path: str | Path) -> list[Entry]:
    """List a directory. Symlinks are classified by what they point to."""
    path = Path(path)
    return [Entry(child.name, _entry_type(child)) for child in path.iterdir()]


def read_text_sync(path: str | Path) -> str:
    return Path(path).read_text(encoding="utf-8")


def created_at_sync(path: str | Path) -> float:
    """Creation time in milliseconds since the epoch.

    Uses st_birthtime where the platform records it, st_ctime otherwise.
    """
    st = os.stat(path)
    seconds = getattr(st, "st_birthtime", None) or st.st_ctime
    return seconds * 1000.0


def rename_sync(source: str | Path, target: str | Path) -> None:
    """Rename source to target, refusing to overwrite an existing file.

    Hard-links then unlinks, so a file that appears at target at any
    point makes this fail with FileExistsError. Filesystems without hard
    links fall back to check-then-rename. A missing target directory
    raises whatever the OS raises.
    """
    source = Path(source)
    target = Path(target)
    try:
        os.link(source, target, **_LINK_KWARGS)
    except FileExistsError:
        raise FileExistsError(f"{target} already exists") from None
    except OSError as e:
        if e.errno not in _NO_HARD_LINKS:
            raise
        if target.exists() or target.is_symlink():
            raise FileExistsError(f"{target} already exists") from None
        source.rename(target)
        return
    try:
        source.unlink()
    except OSError:
        target.unlink()
        raise


class FileSystem:
    """Local disk implementation of the board's I/O primitives."""

    async def list_dir(self, path: str | Path) -> list[Entry]:
        return await asyncio.to_thread(list_dir_sync, path)

    async def read_text(self, path: str | Path) -> str:
        return await asyncio.to_thread(read_text_sync, path)

    async def created_at(self, path: str | Path) -> float:
        return await asyncio.to_thread(created_at_sync, path)

    async def rename(self, source: str | Path, target: str | Path) -> None:
        await asyncio.to_thread(rename_sync, source, target)
