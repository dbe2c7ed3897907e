"""
Basic usage example for pitchparse.

Parses a pitch deck PDF with the pipeline, then parses raw text
directly with parse_document().
"""

from pathlib import Path
from pitchparse import DeckParsingPipeline, parse_document
from pitchparse.classifier import SLIDE_TYPE_LABELS


def main():
    # Parse a PDF (requires PyMuPDF)
    pipeline = DeckParsingPipeline(
        extractor="pymupdf",  # Read the PDF text layer
        save_json=True,  # Write output/sample_deck/sample_deck.slides.json
    )
    result = pipeline.process(Path("examples/sample_deck.pdf"))

    # Or parse text that was extracted elsewhere
    text = "Problem\nOur users struggle with X\fSolution\nWe built Y to fix it"
    result = parse_document(text, page_count=2)

    for slide in result.slides:
        print(f"{slide.slide_number}. {SLIDE_TYPE_LABELS[slide.type]}: {slide.title}")
    print(f"Overall confidence: {result.metadata.confidence}")


if __name__ == "__main__":
    main()
