"""
Plain-text input, e.g. the output of pdftotext.
"""

from pathlib import Path
from typing import Optional

from pitchparse.errors import ConfigurationError, ExtractionError
from pitchparse.extractors.base import BaseExtractor
from pitchparse.models import ExtractedText


class TextExtractor(BaseExtractor):
    """
    Read an already-extracted text file.

    Pages are expected to be separated by form feeds; the page count is
    derived from them unless given explicitly.
    """

    def __init__(self, page_count: Optional[int] = None, encoding: str = "utf-8"):
        super().__init__()
        if page_count is not None and page_count < 1:
            raise ConfigurationError(f"Page count must be at least 1, got {page_count}")
        self.page_count = page_count
        self.encoding = encoding

    def extract(self, path: Path) -> ExtractedText:
        path = Path(path)
        try:
            data = path.read_bytes()
            text = data.decode(self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            raise ExtractionError(f"Failed to read text file {path.name}: {e}") from e

        if self.page_count is not None:
            page_count = self.page_count
        else:
            page_count = text.count("\f") + 1
        return ExtractedText(text=text, page_count=page_count, file_size=len(data))
