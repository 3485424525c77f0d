"""Tests for tag colours."""

import re

from dirban.palette import color_for_tag, hue_for_tag


def test_colour_is_hex():
    assert re.fullmatch(r"#[0-9a-f]{6}", color_for_tag("urgent"))


def test_colour_is_stable():
    assert color_for_tag("bug") == color_for_tag("bug")
    assert hue_for_tag("bug") == hue_for_tag("bug")


def test_colour_ignores_case_and_padding():
    assert color_for_tag("Urgent") == color_for_tag(" urgent ")


def test_hue_in_range():
    for tag in ("a", "b", "frontend", "backend", "ops", ""):
        assert 0 <= hue_for_tag(tag) < 360


def test_different_tags_usually_differ():
    colours = {color_for_tag(t) for t in ("bug", "feature", "docs", "ops", "ux")}
    assert len(colours) > 1
