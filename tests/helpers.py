"""Test helpers: boards on disk and a stand-in for the watcher."""

from dirban.config import ANCHOR_NAME


class FakeWatcher:
    """Watcher stand-in; tests fire changes through ``emit``."""

    def __init__(self):
        self.root = None
        self.callback = None
        self.stopped = False
        self.joined = False

    @property
    def running(self):
        return self.callback is not None and not self.stopped

    def start(self, root, callback):
        self.root = root
        self.callback = callback

    def stop(self):
        self.stopped = True

    def join(self, timeout=None):
        self.joined = self.stopped

    def emit(self, event_type="modified", path=""):
        self.callback(event_type, path)


def make_board(root, columns):
    """Create column directories and card files under root.

    columns maps column name to {file name: content}.
    Returns the anchor path.
    """
    root.mkdir(parents=True, exist_ok=True)
    anchor = root / ANCHOR_NAME
    anchor.write_text("")
    for name, cards in columns.items():
        col = root / name
        col.mkdir()
        for file_name, content in cards.items():
            (col / file_name).write_text(content, encoding="utf-8")
    return anchor
