"""Deterministic tag colours."""

import colorsys
import hashlib

LIGHTNESS = 0.42
SATURATION = 0.65


def hue_for_tag(tag: str) -> int:
    """Hue in degrees from the md5 of the normalised tag text."""
    h = hashlib.md5(tag.strip().lower().encode()).hexdigest()
    return int(h[:8], 16) % 360


def color_for_tag(tag: str) -> str:
    """Hex colour for a tag. Same text, same colour, every run.

    "Urgent" and " urgent" share a colour.
    """
    r, g, b = colorsys.hls_to_rgb(hue_for_tag(tag) / 360, LIGHTNESS, SATURATION)
    return f"#{round(r * 255):02x}{round(g * 255):02x}{round(b * 255):02x}"
