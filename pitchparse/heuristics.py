"""
Line-level heuristics: slide titles, bullet items, chart/image hints.
"""

import re
from typing import List, Optional

BULLET_GLYPHS = "-•*▪▫◦‣⁃"

TITLE_MIN_LENGTH = 3
TITLE_MAX_LENGTH = 80
TITLE_SCAN_LINES = 3

_BULLET_LINE = re.compile(r"^\s*[" + re.escape(BULLET_GLYPHS) + r"]")
_NUMBERED_LINE = re.compile(r"^\s*\d+[.)]")
_END_PUNCTUATION = re.compile(r"[.!?]$")

_BULLET_ITEM = re.compile(r"^\s*[" + re.escape(BULLET_GLYPHS) + r"]\s*(.*)$")
_NUMBERED_ITEM = re.compile(r"^\s*\d+[.)]?\s+(.*)$")

_IMAGE_HINT = re.compile(r"image|figure|chart|graph", re.IGNORECASE)
_CHART_HINT = re.compile(r"chart|graph|data|revenue|growth|market size", re.IGNORECASE)


def looks_like_title(line: str) -> bool:
    """
    Decide whether a single trimmed line can serve as a slide title.

    Accepts short lines that are neither bullet nor numbered items and
    carry no sentence punctuation at the end. Upper-case headers longer
    than three characters are accepted even with trailing punctuation
    ("MARKET SIZE.").
    """
    if not line:
        return False
    if not TITLE_MIN_LENGTH <= len(line) <= TITLE_MAX_LENGTH:
        return False
    if _BULLET_LINE.match(line) or _NUMBERED_LINE.match(line):
        return False

    is_all_caps = line == line.upper() and len(line) > 3
    has_end_punctuation = _END_PUNCTUATION.search(line) is not None
    return not has_end_punctuation or is_all_caps


def non_empty_lines(content: str) -> List[str]:
    """Split into trimmed lines, dropping blank ones."""
    return [line.strip() for line in content.split("\n") if line.strip()]


def extract_title(content: str) -> Optional[str]:
    """Return the first of the leading non-empty lines that looks like a title."""
    for line in non_empty_lines(content)[:TITLE_SCAN_LINES]:
        if looks_like_title(line):
            return line
    return None


def extract_bullet_points(content: str) -> List[str]:
    """
    Extract bullet and numbered-list items in source order.

    Glyph bullets take priority over numbered items; lines matching
    neither are ignored, as are markers with nothing after them.
    """
    bullet_points = []
    for line in content.split("\n"):
        match = _BULLET_ITEM.match(line) or _NUMBERED_ITEM.match(line)
        if match:
            item = match.group(1).strip()
            if item:
                bullet_points.append(item)
    return bullet_points


def mentions_images(content: str) -> bool:
    return _IMAGE_HINT.search(content) is not None


def mentions_charts(content: str) -> bool:
    return _CHART_HINT.search(content) is not None
