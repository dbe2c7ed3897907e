"""
pitchparse: Recover slide structure from pitch deck PDFs.

Splits extracted deck text into slides, then titles, bullets, a slide
type and a confidence score for each one.
"""

__version__ = "0.1.0"
__author__ = "pitchparse Team"

from pitchparse.models import ParseResult, ParseMetadata, Slide, SlideMetadata, SlideType
from pitchparse.parser import DocumentParser, parse_document
from pitchparse.pipeline import DeckParsingPipeline

__all__ = [
    "ParseResult",
    "ParseMetadata",
    "Slide",
    "SlideMetadata",
    "SlideType",
    "DocumentParser",
    "parse_document",
    "DeckParsingPipeline",
]
