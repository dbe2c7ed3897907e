"""
PDF text extraction with PyMuPDF.
"""

import logging
from pathlib import Path

from pitchparse.errors import ExtractionError
from pitchparse.extractors.base import BaseExtractor
from pitchparse.models import ExtractedText

logger = logging.getLogger(__name__)


class PyMuPDFExtractor(BaseExtractor):
    """
    Extract plain text from a PDF, one form-feed separated chunk per page.

    Text comes from PyMuPDF's "text" mode in reading order; images and
    vector graphics are ignored.
    """

    def __init__(self, sort: bool = True):
        super().__init__()
        self.sort = sort

    def extract(self, path: Path) -> ExtractedText:
        import fitz  # PyMuPDF

        path = Path(path)
        try:
            with fitz.open(str(path)) as doc:
                if not doc.is_pdf:
                    raise ExtractionError(f"Not a PDF document: {path.name}")
                pages = [page.get_text("text", sort=self.sort) for page in doc]
                info = doc.metadata or {}
        except ExtractionError:
            raise
        except Exception as e:
            raise ExtractionError(f"Failed to read PDF {path.name}: {e}") from e

        logger.debug("Extracted %d pages from %s", len(pages), path.name)
        return ExtractedText(
            text="\f".join(pages),
            page_count=len(pages),
            file_size=path.stat().st_size,
            title=info.get("title") or None,
            author=info.get("author") or None,
        )
