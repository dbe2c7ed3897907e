"""
Text-extraction engines feeding the document parser.

Supports:
- PyMuPDF (PDF files)
- Plain text (pre-extracted, form-feed separated pages)
"""

from pitchparse.errors import ConfigurationError
from pitchparse.extractors.base import BaseExtractor
from pitchparse.extractors.pymupdf_extractor import PyMuPDFExtractor
from pitchparse.extractors.text_extractor import TextExtractor

EXTRACTORS = {
    "pymupdf": PyMuPDFExtractor,
    "text": TextExtractor,
}


def get_extractor(name: str, **kwargs) -> BaseExtractor:
    """Instantiate an extractor by name."""
    try:
        extractor_cls = EXTRACTORS[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown extractor: {name} (choose from {', '.join(EXTRACTORS)})"
        ) from None
    return extractor_cls(**kwargs)


__all__ = [
    "BaseExtractor",
    "PyMuPDFExtractor",
    "TextExtractor",
    "EXTRACTORS",
    "get_extractor",
]
