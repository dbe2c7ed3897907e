"""
Command-line interface for pitchparse.
"""

import sys
import json
import logging
import argparse
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from pitchparse import __version__
from pitchparse.classifier import SLIDE_TYPE_LABELS
from pitchparse.config import PipelineSettings
from pitchparse.extractors import EXTRACTORS
from pitchparse.models import ParseResult
from pitchparse.pipeline import DeckParsingPipeline


def print_summary(result: ParseResult) -> None:
    """Print a one-line-per-slide overview."""
    meta = result.metadata
    print(f"\n{'#':>3}  {'Type':<20} {'Conf':>4}  Title")
    print(f"{'-'*60}")
    for slide in result.slides:
        title = slide.title or "(untitled)"
        label = SLIDE_TYPE_LABELS[slide.type]
        print(f"{slide.slide_number:>3}  {label:<20} {slide.metadata.confidence:>4}  {title}")
    print(f"{'-'*60}")
    print(
        f"{meta.total_slides} slides from {meta.total_pages} pages, "
        f"confidence {meta.confidence}, {meta.processing_time:.1f} ms"
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    load_dotenv()  # Load .env file if present

    parser = argparse.ArgumentParser(
        description="pitchparse: Split a pitch deck into classified slides",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Parse a PDF deck
  pitchparse deck.pdf

  # Parse pre-extracted text with form-feed page breaks
  pitchparse deck.txt --extractor text

  # Print JSON to stdout without writing files
  pitchparse deck.pdf --json --no-save

Environment Variables:
  PITCHPARSE_EXTRACTOR   Default extractor (pymupdf or text)
  PITCHPARSE_SAVE_JSON   Write <name>.slides.json (default: true)
  PITCHPARSE_OUTPUT_DIR  Default output directory
  PITCHPARSE_LOG_LEVEL   Logging level (default: WARNING)
        """,
    )

    parser.add_argument(
        "input",
        nargs="?",
        type=Path,
        help="Input PDF or text file",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"pitchparse {__version__}",
    )

    parser.add_argument(
        "--extractor",
        choices=sorted(EXTRACTORS),
        default=None,
        help="Extraction engine (default: pymupdf)",
    )

    parser.add_argument(
        "--pages",
        type=int,
        help="Page count for text input (default: form feeds + 1)",
    )

    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        help="Output directory (default: ./output/<file_name>)",
    )

    parser.add_argument(
        "--no-save",
        action="store_true",
        help="Don't write the slides JSON file",
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON instead of a summary",
    )

    parser.add_argument(
        "--quiet",
        "-q",
        action="store_true",
        help="Suppress stage progress output",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging and tracebacks",
    )

    args = parser.parse_args(argv)

    # Validate input
    if not args.input:
        parser.print_help()
        return 1

    if not args.input.exists():
        print(f"Error: Input file not found: {args.input}", file=sys.stderr)
        return 1

    try:
        settings = PipelineSettings.from_env()
        logging.basicConfig(
            level=logging.DEBUG if args.debug else settings.log_level,
            format="%(levelname)s %(name)s: %(message)s",
        )

        pipeline = DeckParsingPipeline(
            extractor=args.extractor or settings.extractor,
            save_json=settings.save_json and not args.no_save,
            verbose=not (args.quiet or args.json),
            page_count=args.pages,
        )
        result = pipeline.process(
            input_path=args.input,
            output_dir=args.output or settings.output_dir,
        )

        if args.json:
            print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
        elif result.success:
            print_summary(result)

        if not result.success:
            print(f"\nError: {result.error}", file=sys.stderr)
            return 1

        return 0

    except KeyboardInterrupt:
        print("\n\nInterrupted by user", file=sys.stderr)
        return 130

    except Exception as e:
        print(f"\nError: {e}", file=sys.stderr)
        if args.debug:
            import traceback
            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
