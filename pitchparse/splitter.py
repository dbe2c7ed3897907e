"""
Split extracted document text into per-slide segments.

Extracted PDF text rarely carries reliable slide boundaries, so several
strategies are tried in order:

1. Form feeds (page breaks emitted by most PDF text extractors)
2. Runs of two or more blank lines
3. Lines that look like slide titles
4. Fallback: equal-sized word chunks, one per page

A strategy is only consulted when the previous one produced too few
segments for the page count. Any result it returns replaces the previous
one; a strategy that does not apply returns None and keeps it.
"""

import logging
import math
import re
from typing import Callable, List, Optional

from pitchparse.heuristics import looks_like_title

logger = logging.getLogger(__name__)

_BLANK_LINE_RUN = re.compile(r"\n\s*\n\s*\n")

Strategy = Callable[[str, int], Optional[List[str]]]


def _clean(sections: List[str]) -> List[str]:
    return [section.strip() for section in sections if section.strip()]


def is_sufficient(segments: List[str], total_pages: int) -> bool:
    """
    Whether a split has enough segments to stop trying further strategies.

    Needs at least half as many segments as pages; a single segment only
    counts for a single-page document.
    """
    if not segments:
        return False
    if len(segments) < total_pages / 2:
        return False
    return len(segments) > 1 or total_pages <= 1


def split_on_form_feeds(text: str, total_pages: int) -> Optional[List[str]]:
    return _clean(text.split("\f"))


def split_on_blank_lines(text: str, total_pages: int) -> Optional[List[str]]:
    sections = _clean(_BLANK_LINE_RUN.split(text))
    return sections or None


def split_on_title_lines(text: str, total_pages: int) -> Optional[List[str]]:
    """Cut the text at every title-like line; needs at least two of them."""
    lines = text.split("\n")
    title_indices = [i for i, line in enumerate(lines) if looks_like_title(line.strip())]
    if len(title_indices) < 2:
        return None

    bounds = title_indices + [len(lines)]
    sections = ["\n".join(lines[start:end]) for start, end in zip(bounds, bounds[1:])]
    return _clean(sections) or None


def split_into_word_chunks(text: str, total_pages: int) -> List[str]:
    """Partition the word sequence into total_pages contiguous chunks."""
    words = text.split()
    if not words:
        return []
    per_page = math.ceil(len(words) / total_pages)
    chunks = [
        " ".join(words[i * per_page:(i + 1) * per_page]) for i in range(total_pages)
    ]
    return _clean(chunks)


STRATEGIES: List[Strategy] = [
    split_on_form_feeds,
    split_on_blank_lines,
    split_on_title_lines,
]


def split_into_sections(text: str, total_pages: int) -> List[str]:
    """
    Divide full document text into ordered, trimmed, non-empty segments.

    Args:
        text: Full extracted text of the document
        total_pages: Page count reported by the extractor (>= 1)

    Returns:
        Segments in source order; empty only when the text has no words
    """
    if total_pages < 1:
        raise ValueError(f"total_pages must be at least 1, got {total_pages}")

    text = text.replace("\r\n", "\n").replace("\r", "\n")

    segments: List[str] = []
    for strategy in STRATEGIES:
        candidate = strategy(text, total_pages)
        if candidate is None:
            continue
        segments = candidate
        logger.debug("%s produced %d segments", strategy.__name__, len(segments))
        if is_sufficient(segments, total_pages):
            return segments

    if not segments or (len(segments) <= 1 and total_pages > 1):
        chunks = split_into_word_chunks(text, total_pages)
        if chunks:
            logger.debug("Falling back to %d word chunks", len(chunks))
            segments = chunks

    return segments
