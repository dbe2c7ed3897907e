"""
Document parser: turns extracted deck text into typed, scored slides.

parse_document() is the package's entry point. It never raises; every
failure comes back as a ParseResult with success=False.
"""

import logging
import math
import time
from typing import List, Optional

from pitchparse.classifier import classify_slide_type
from pitchparse.confidence import calculate_confidence
from pitchparse.heuristics import (
    extract_bullet_points,
    extract_title,
    mentions_charts,
    mentions_images,
    non_empty_lines,
)
from pitchparse.models import ExtractedText, ParseMetadata, ParseResult, Slide, SlideMetadata
from pitchparse.splitter import split_into_sections

logger = logging.getLogger(__name__)

NO_TEXT_ERROR = "No text content found in PDF. The file might be image-based or corrupted."


def build_slide(segment: str, slide_number: int) -> Slide:
    """Build one Slide from a text segment."""
    content = segment.strip()
    lines = non_empty_lines(content)

    title = extract_title(content)
    bullet_points = extract_bullet_points(content)
    slide_type = classify_slide_type(content, title)
    confidence = calculate_confidence(lines, title, bullet_points, slide_type)

    return Slide(
        id=f"slide-{slide_number}",
        slide_number=slide_number,
        type=slide_type,
        title=title,
        content=content,
        bullet_points=bullet_points or None,
        metadata=SlideMetadata(
            word_count=len(content.split()),
            has_images=mentions_images(content),
            has_charts=mentions_charts(content),
            confidence=confidence,
        ),
    )


def average_confidence(slides: List[Slide]) -> int:
    """Mean slide confidence, rounded half up; 0 for no slides."""
    if not slides:
        return 0
    mean = sum(slide.metadata.confidence for slide in slides) / len(slides)
    return int(math.floor(mean + 0.5))


class DocumentParser:
    """
    Segment, classify and score the slides of a pitch deck.

    Stateless: one instance can parse any number of documents, from any
    number of threads.
    """

    def parse(
        self,
        text: str,
        page_count: int,
        file_size: int = 0,
        title: Optional[str] = None,
        author: Optional[str] = None,
    ) -> ParseResult:
        """
        Parse extracted document text.

        Args:
            text: Full text of the document, pages ideally separated by form feeds
            page_count: Number of pages reported by the extractor
            file_size: Size of the source file in bytes, echoed in metadata
            title: Document title from the file's metadata, if any
            author: Document author from the file's metadata, if any

        Returns:
            ParseResult; success=False with an error message on any failure
        """
        start = time.perf_counter()

        def elapsed_ms() -> float:
            return (time.perf_counter() - start) * 1000.0

        if not text or not text.strip():
            return ParseResult.failure(
                NO_TEXT_ERROR,
                total_pages=page_count,
                processing_time=elapsed_ms(),
                file_size=file_size,
            )

        try:
            sections = split_into_sections(text, page_count)
            slides = [build_slide(section, index + 1) for index, section in enumerate(sections)]

            logger.info("Parsed %d slides from %d pages", len(slides), page_count)
            return ParseResult(
                success=True,
                slides=slides,
                metadata=ParseMetadata(
                    total_pages=page_count,
                    total_slides=len(slides),
                    processing_time=elapsed_ms(),
                    confidence=average_confidence(slides),
                    file_size=file_size,
                    total_words=len(text.split()),
                    title=title or None,
                    author=author or None,
                ),
            )
        except Exception as e:
            logger.exception("Document parsing failed")
            return ParseResult.failure(
                str(e) or e.__class__.__name__,
                total_pages=page_count,
                processing_time=elapsed_ms(),
                file_size=file_size,
            )

    def parse_extracted(self, extracted: ExtractedText) -> ParseResult:
        """Parse the output of a text-extraction engine."""
        return self.parse(
            extracted.text,
            extracted.page_count,
            file_size=extracted.file_size,
            title=extracted.title,
            author=extracted.author,
        )


def parse_document(
    text: str,
    page_count: int,
    file_size: int = 0,
    title: Optional[str] = None,
    author: Optional[str] = None,
) -> ParseResult:
    """Parse extracted deck text with a default DocumentParser."""
    return DocumentParser().parse(
        text, page_count, file_size=file_size, title=title, author=author
    )
