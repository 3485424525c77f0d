"""Markdown to HTML rendering for card bodies."""

from markdown_it import MarkdownIt

_md = MarkdownIt("commonmark", {"html": False, "linkify": True}).enable(["linkify", "table", "strikethrough"])


def render(markdown: str) -> str:
    """Render markdown to HTML. Raw HTML in the source is escaped."""
    return _md.render(markdown or "")
