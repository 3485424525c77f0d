"""Shared fixtures."""

import pytest

from tests.helpers import FakeWatcher, make_board


@pytest.fixture
def anchor(tmp_path):
    """A board with Todo (two cards) and Done (empty)."""
    return make_board(
        tmp_path / "board",
        {
            "Todo": {
                "first.md": "# First\ntags: urgent\nbody text",
                "second.md": "# Second\n\nMore words.",
            },
            "Done": {},
        },
    )


@pytest.fixture
def fake_watcher():
    return FakeWatcher()
