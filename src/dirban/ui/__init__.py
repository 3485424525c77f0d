"""Textual UI for dirban."""

from dirban.ui.app import DirbanApp

__all__ = ["DirbanApp"]
