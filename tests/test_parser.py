"""
Tests for slide building and document parsing.
"""

import pytest

import pitchparse.parser as parser_module
from pitchparse import DocumentParser, parse_document
from pitchparse.models import ExtractedText, Slide, SlideMetadata
from pitchparse.parser import NO_TEXT_ERROR, average_confidence, build_slide


def test_problem_solution_deck():
    """Test a two-page problem/solution deck."""
    text = "Problem\nOur users struggle with X\f Solution\nWe built Y to fix it"
    result = parse_document(text, 2)

    assert result.success is True
    assert result.error is None
    assert len(result.slides) == 2

    problem, solution = result.slides
    assert problem.type == "problem"
    assert problem.title == "Problem"
    assert solution.type == "solution"
    assert solution.title == "Solution"
    assert solution.content == "Solution\nWe built Y to fix it"
    assert problem.metadata.confidence == 85
    assert result.metadata.confidence == 85


def test_deck_slides(deck_text):
    """Test types, titles and metadata of a deck."""
    result = parse_document(deck_text, 4, file_size=2048)

    assert result.success
    assert [slide.type for slide in result.slides] == ["title", "problem", "team", "funding"]
    assert [slide.title for slide in result.slides] == [
        "Acme Robotics",
        "The Problem",
        "Team",
        "Funding",
    ]
    assert result.slides[1].bullet_points == [
        "Pickers walk 12 miles per shift",
        "Labor shortage is a major challenge",
    ]
    assert result.slides[0].bullet_points is None
    assert result.slides[2].metadata.confidence == 100

    meta = result.metadata
    assert meta.total_pages == 4
    assert meta.total_slides == 4
    assert meta.file_size == 2048
    assert meta.total_words == len(deck_text.split())
    assert meta.processing_time >= 0


def test_slide_numbering(deck_text):
    """Test slide numbers and ids."""
    result = parse_document(deck_text, 4)

    assert len(result.slides) == result.metadata.total_slides
    for index, slide in enumerate(result.slides, start=1):
        assert slide.slide_number == index
        assert slide.id == f"slide-{index}"


def test_document_confidence_is_mean(deck_text):
    """Test document confidence aggregation."""
    result = parse_document(deck_text, 4)
    assert result.metadata.confidence == average_confidence(result.slides)


def test_parse_is_idempotent(deck_text):
    """Test repeated parses agree."""
    first = parse_document(deck_text, 4)
    second = parse_document(deck_text, 4)

    assert first.slides == second.slides
    assert first.metadata.confidence == second.metadata.confidence


@pytest.mark.parametrize("text", ["", "   ", "\n\t\f \n"])
def test_empty_text_fails(text):
    """Test empty text failure."""
    result = parse_document(text, 3, file_size=100)

    assert result.success is False
    assert result.slides == []
    assert result.error == NO_TEXT_ERROR
    assert result.metadata.total_slides == 0
    assert result.metadata.total_pages == 3
    assert result.metadata.confidence == 0
    assert result.metadata.file_size == 100


def test_invalid_page_count_fails():
    """Test page count below one failure."""
    result = parse_document("Problem\nSome text", 0)

    assert result.success is False
    assert "at least 1" in result.error
    assert result.metadata.total_pages == 0


def test_internal_failure_is_reported(monkeypatch):
    """Test unexpected errors become failed results."""
    def explode(content, title=None):
        raise RuntimeError("classifier exploded")

    monkeypatch.setattr(parser_module, "classify_slide_type", explode)
    result = parse_document("Problem\nSome text", 1)

    assert result.success is False
    assert result.error == "classifier exploded"
    assert result.slides == []


def test_document_info_is_echoed():
    """Test document title and author."""
    result = parse_document("Problem\nSome text", 1, title="Acme Deck", author="")
    assert result.metadata.title == "Acme Deck"
    assert result.metadata.author is None


def test_parse_extracted():
    """Test parsing ExtractedText."""
    extracted = ExtractedText(
        text="Problem\nUsers struggle\fSolution\nWe fix it",
        page_count=2,
        file_size=512,
        author="Jane Doe",
    )
    result = DocumentParser().parse_extracted(extracted)

    assert result.success
    assert result.metadata.total_slides == 2
    assert result.metadata.file_size == 512
    assert result.metadata.author == "Jane Doe"


def test_build_slide():
    """Test building a structured slide."""
    slide = build_slide("\n  Traction\n• 10k users\n• Revenue growth 30% MoM\n", 3)

    assert slide.id == "slide-3"
    assert slide.slide_number == 3
    assert slide.type == "traction"
    assert slide.title == "Traction"
    assert slide.content == "Traction\n• 10k users\n• Revenue growth 30% MoM"
    assert slide.bullet_points == ["10k users", "Revenue growth 30% MoM"]
    assert slide.metadata.word_count == 9
    assert slide.metadata.has_charts is True
    assert slide.metadata.has_images is False
    assert slide.metadata.confidence == 100


def test_build_slide_without_structure():
    """Test building an unstructured slide."""
    slide = build_slide("lorem ipsum dolor", 1)

    assert slide.type == "other"
    assert slide.title == "lorem ipsum dolor"
    assert slide.bullet_points is None
    assert slide.metadata.confidence == 50


def test_average_confidence_rounds_half_up():
    """Test half-up rounding."""
    slides = [
        Slide(id="slide-1", slide_number=1, content="a", metadata=SlideMetadata(confidence=85)),
        Slide(id="slide-2", slide_number=2, content="b", metadata=SlideMetadata(confidence=90)),
    ]
    assert average_confidence(slides) == 88
    assert average_confidence([]) == 0
