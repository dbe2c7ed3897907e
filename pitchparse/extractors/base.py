"""
Base extractor interface.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from pitchparse.models import ExtractedText


class BaseExtractor(ABC):
    """Abstract base class for text-extraction engines."""

    def __init__(self):
        self.name = self.__class__.__name__.replace("Extractor", "").lower()

    @abstractmethod
    def extract(self, path: Path) -> ExtractedText:
        """
        Extract the full text of a document.

        Pages must be separated by form feed characters so the splitter
        can recover page boundaries.

        Args:
            path: Path to the input file

        Returns:
            ExtractedText with text, page count and file size

        Raises:
            ExtractionError: If the file cannot be read as a document
        """
        pass
