"""Parse card markdown into title, body and tags."""

import re
from dataclasses import dataclass, field

_TAGS_LINE = re.compile(r"^\s*tags:(.*)$", re.IGNORECASE)
_H1_MARKER = re.compile(r"^#\s+")
_MD_SUFFIX = re.compile(r"\.md$", re.IGNORECASE)


@dataclass
class ParsedCard:
    """Fields extracted from a card file's text."""

    title: str = ""
    body: str = ""
    tags: list[str] = field(default_factory=list)


def strip_md_suffix(name: str) -> str:
    """Drop a trailing .md extension, any case.

    "notes.md" -> "notes", "NOTES.MD" -> "NOTES", "notes.txt" -> "notes.txt"
    """
    return _MD_SUFFIX.sub("", name)


def _split_tags(line: str) -> list[str] | None:
    """Return the tags on a ``tags:`` line, or None if it isn't one."""
    match = _TAGS_LINE.match(line)
    if not match:
        return None
    return [t.strip() for t in match.group(1).split(",") if t.strip()]


def parse_card(content: str, fallback_name: str) -> ParsedCard:
    """Parse card text. Never raises.

    The first line that starts with ``# `` once trimmed is the title and
    everything after it is body. Tags lines anywhere in the file are
    collected in order and never end up in the body.
    """
    lines = re.split(r"\r?\n", content)
    title = strip_md_suffix(fallback_name)
    body_start = 0

    for i, line in enumerate(lines):
        stripped = line.strip()
        if stripped.startswith("# "):
            title = _H1_MARKER.sub("", stripped).strip() or title
            body_start = i + 1
            break

    tags: list[str] = []
    # Metadata block above the heading
    for line in lines[:body_start]:
        found = _split_tags(line)
        if found is not None:
            tags.extend(found)

    body_lines = []
    for line in lines[body_start:]:
        found = _split_tags(line)
        if found is None:
            body_lines.append(line)
        else:
            tags.extend(found)

    return ParsedCard(title=title, body="\n".join(body_lines).strip(), tags=tags)
