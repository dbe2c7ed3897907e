"""
End-to-end pipeline: file -> text extraction -> slide parsing -> JSON.
"""

import json
from pathlib import Path
from typing import Optional

from pitchparse.errors import ConfigurationError, ExtractionError
from pitchparse.extractors import get_extractor
from pitchparse.models import ParseResult
from pitchparse.parser import DocumentParser


class DeckParsingPipeline:
    """
    Parse a pitch deck file into classified slides.

    Pipeline stages:
    1. Extraction: PyMuPDF (PDF) or plain text
    2. Parsing: segmentation, classification, confidence scoring
    3. (Optional) Save the ParseResult as JSON
    """

    def __init__(
        self,
        extractor: str = "pymupdf",
        save_json: bool = True,
        verbose: bool = True,
        page_count: Optional[int] = None,
    ):
        """
        Initialize pipeline.

        Args:
            extractor: "pymupdf" or "text"
            save_json: Save the ParseResult JSON next to the other outputs
            verbose: Print stage progress
            page_count: Page count override, text extractor only
        """
        self.extractor_name = extractor
        self.save_json = save_json
        self.verbose = verbose

        kwargs = {}
        if page_count is not None:
            if extractor != "text":
                raise ConfigurationError(
                    f"A page count can only be given for text input, not {extractor}"
                )
            kwargs["page_count"] = page_count
        self.extractor = get_extractor(extractor, **kwargs)
        self.parser = DocumentParser()

    def _log(self, message: str) -> None:
        if self.verbose:
            print(message)

    def process(self, input_path: Path, output_dir: Optional[Path] = None) -> ParseResult:
        """
        Process a file through the full pipeline.

        Args:
            input_path: Path to the input file
            output_dir: Output directory (default: ./output/<file_name>)

        Returns:
            ParseResult; extraction failures come back as success=False

        Raises:
            FileNotFoundError: If the input file does not exist
        """
        input_path = Path(input_path)

        if not input_path.exists():
            raise FileNotFoundError(f"Input not found: {input_path}")

        self._log(f"\n{'='*60}")
        self._log("pitchparse Pipeline")
        self._log(f"{'='*60}")
        self._log(f"Input: {input_path}")
        self._log(f"Extractor: {self.extractor_name}")
        self._log(f"{'='*60}\n")

        # Stage 1: Extract text
        self._log(f"[Stage 1/2] Extraction with {self.extractor_name}")
        try:
            extracted = self.extractor.extract(input_path)
        except ExtractionError as e:
            self._log(f"[Stage 1/2] Failed: {e}")
            return ParseResult.failure(str(e), file_size=input_path.stat().st_size)
        self._log(
            f"[Stage 1/2] {extracted.page_count} pages, {len(extracted.text)} characters"
        )

        # Stage 2: Segment and classify
        self._log("\n[Stage 2/2] Segmenting and classifying slides")
        result = self.parser.parse_extracted(extracted)
        if result.success:
            self._log(
                f"[Stage 2/2] {result.metadata.total_slides} slides, "
                f"confidence {result.metadata.confidence}"
            )
        else:
            self._log(f"[Stage 2/2] Failed: {result.error}")

        if self.save_json:
            if output_dir is None:
                output_dir = Path("output") / input_path.stem
            output_dir = Path(output_dir)
            output_dir.mkdir(parents=True, exist_ok=True)

            json_path = output_dir / f"{input_path.stem}.slides.json"
            with open(json_path, "w", encoding="utf-8") as f:
                json.dump(result.to_dict(), f, indent=2, ensure_ascii=False)
            self._log(f"\nSaved slides to {json_path}")

        return result
